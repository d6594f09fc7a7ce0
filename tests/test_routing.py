"""Tests for router collection and the application factory."""

import pytest

from author_service import application


@pytest.fixture
def openapi_paths() -> dict:
    return application().openapi()["paths"]


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/health"),
        ("post", "/authors"),
        ("put", "/authors"),
        ("get", "/authors"),
        ("get", "/authors/total"),
        ("get", "/authors/nomeOrSobrenome"),
        ("get", "/authors/{author_id}"),
        ("delete", "/authors/{author_id}"),
    ],
)
def test_every_http_module_is_registered(openapi_paths, method, path):
    assert method in openapi_paths[path]


def test_search_term_is_optional_query_parameter(openapi_paths):
    params = openapi_paths["/authors/nomeOrSobrenome"]["get"]["parameters"]

    assert [(p["name"], p["in"], p["required"]) for p in params] == [
        ("termo", "query", False)
    ]


def test_application_registers_middlewares():
    app = application()
    middleware_classes = [m.cls.__name__ for m in app.user_middleware]

    # Last added runs first
    assert middleware_classes == [
        "CorrelationIDMiddleware",
        "LoggingContextMiddleware",
    ]

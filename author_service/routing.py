import pkgutil
from importlib import import_module
from pathlib import Path

from fastapi import APIRouter

from author_service.logging import logger

HTTP_PACKAGE = "author_service.api.http"
_logged_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Build one router out of every module in ``api/http``.

    Each module there must expose ``router``. Registration is logged once
    per module even when several apps are built in one process.
    """
    collected = APIRouter()
    http_dir = Path(__file__).parent / "api" / "http"

    for module_info in pkgutil.iter_modules([str(http_dir)]):
        module = import_module(f"{HTTP_PACKAGE}.{module_info.name}")
        collected.include_router(module.router)

        if module_info.name not in _logged_modules:
            logger.info(f"Routes from {module_info.name!r} registered")
            _logged_modules.add(module_info.name)

    return collected

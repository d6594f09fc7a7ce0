"""
Author endpoints using Repository + Dependency Injection.

Each endpoint decodes its input, makes a single repository call and returns
the result as JSON. Repository errors are translated to HTTP status codes by
``handle_http_errors``.

Static paths (``/total``, ``/nomeOrSobrenome``) are declared before
``/{author_id}`` so they are not captured by the id route.
"""

from fastapi import APIRouter

from author_service.dependencies import AuthorRepoDep
from author_service.models.author import Author
from author_service.schemas.author import AuthorCreate, AuthorUpdate
from author_service.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/authors", tags=["authors"])


@router.post(
    "",
    response_model=Author,
    summary="Create a new author",
)
@handle_http_errors
async def create_author(
    author_data: AuthorCreate,
    repo: AuthorRepoDep,
) -> Author:
    """
    Create a new author.

    Example:
        POST /authors
        {
            "name": "Machado",
            "surname": "de Assis"
        }
    """
    return await repo.insert(Author(**author_data.model_dump()))


@router.put(
    "",
    response_model=Author,
    summary="Update an author",
)
@handle_http_errors
async def update_author(
    author_data: AuthorUpdate,
    repo: AuthorRepoDep,
) -> Author:
    """
    Replace every field of an existing author.

    Raises:
        HTTPException: 404 if no author has the given id.

    Example:
        PUT /authors
        {
            "id": 1,
            "name": "Joaquim Maria",
            "surname": "Machado de Assis"
        }
    """
    return await repo.update(Author(**author_data.model_dump()))


@router.get(
    "",
    response_model=list[Author],
    summary="Get all authors",
)
@handle_http_errors
async def list_authors(repo: AuthorRepoDep) -> list[Author]:
    return await repo.list_all()


@router.get(
    "/total",
    response_model=int,
    summary="Count authors",
)
@handle_http_errors
async def count_authors(repo: AuthorRepoDep) -> int:
    return await repo.count()


@router.get(
    "/nomeOrSobrenome",
    response_model=list[Author],
    summary="Search authors by name or surname",
)
@handle_http_errors
async def search_authors(
    repo: AuthorRepoDep,
    termo: str = "",
) -> list[Author]:
    """
    Search authors whose name or surname contains ``termo``.

    Example:
        GET /authors/nomeOrSobrenome?termo=Mach
    """
    return await repo.find_by_term(termo)


@router.get(
    "/{author_id}",
    response_model=Author | None,
    summary="Get an author by id",
)
@handle_http_errors
async def get_author(
    author_id: int,
    repo: AuthorRepoDep,
) -> Author | None:
    """
    Get a single author.

    Returns a ``null`` body when no author has the given id.
    """
    return await repo.find_by_id(author_id)


@router.delete(
    "/{author_id}",
    response_model=str,
    summary="Delete an author",
)
@handle_http_errors
async def delete_author(
    author_id: int,
    repo: AuthorRepoDep,
) -> str:
    """
    Delete an author.

    Raises:
        HTTPException: 404 if no author has the given id.
    """
    await repo.delete(author_id)
    return f"Author {author_id} deleted"

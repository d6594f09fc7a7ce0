"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from author_service.repositories.author_repository import AuthorRepository
    from author_service.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.list_all()
        matches = await repo.find_by_term("Mach")
    ```
"""

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from author_service.models.author import Author
from author_service.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    the name/surname term search.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def find_by_term(self, term: str) -> list[Author]:
        """
        Search authors whose name or surname contains ``term``.

        The term is bound as a parameter and LIKE wildcards in it are
        escaped, so it is matched literally. Case is respected on every
        backend (see ``build_engine`` for SQLite). An empty term matches
        every author.

        Args:
            term: Substring to look for.

        Returns:
            List of matching authors.
        """
        stmt = select(Author).where(
            or_(
                Author.name.contains(term, autoescape=True),  # type: ignore[attr-defined]
                Author.surname.contains(term, autoescape=True),  # type: ignore[attr-defined]
            )
        )
        result = await self.session.exec(stmt)
        return list(result.all())

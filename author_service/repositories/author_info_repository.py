from sqlmodel.ext.asyncio.session import AsyncSession

from author_service.models.author_info import AuthorInfo
from author_service.repositories.base import BaseRepository


class AuthorInfoRepository(BaseRepository[AuthorInfo]):
    """Repository for AuthorInfo records; only the generic operations apply."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, AuthorInfo)

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from author_service.models.base import BaseModel


class AuthorInfo(BaseModel, table=True):
    """
    Role and biography record stored in the ``info_autores`` table.

    Not linked to Author; the two tables are independent.

    Attributes:
        id: Primary key, generated by the database on insert
        role: Role of the author (e.g. "novelist"), never empty
        bio: Optional short biography
    """

    __tablename__ = "info_autores"  # type: ignore[assignment]
    __table_args__ = (
        CheckConstraint("role <> ''", name="ck_info_autores_role_not_empty"),
        {"extend_existing": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    role: str = Field(max_length=45)
    bio: str | None = Field(default=None, max_length=255)

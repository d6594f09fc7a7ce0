from sqlalchemy import CheckConstraint
from sqlmodel import Field

from author_service.models.base import BaseModel


class Author(BaseModel, table=True):
    """
    SQLModel representing an author stored in the ``autores`` table.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key, generated by the database on insert
        name: First name of the author, never empty
        surname: Surname of the author, never empty
    """

    __tablename__ = "autores"  # type: ignore[assignment]
    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_autores_name_not_empty"),
        CheckConstraint("surname <> ''", name="ck_autores_surname_not_empty"),
        {"extend_existing": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=45)
    surname: str = Field(max_length=45)

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    """Request body for creating an author."""

    name: str = Field(min_length=1, max_length=45)
    surname: str = Field(min_length=1, max_length=45)


class AuthorUpdate(AuthorCreate):
    """Request body for a full-record author update."""

    id: int

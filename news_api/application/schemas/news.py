"""Pydantic DTOs (Data Transfer Objects) for the News feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from news_api.domain.entities import NewsPage


class NewsCreate(BaseModel):
    """Schema for creating a new news article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Markets rally"])
    content: str = Field(..., min_length=1, examples=["Stocks closed higher on Friday."])
    author: str | None = Field(None, min_length=1, max_length=100)
    category: str | None = Field(None, min_length=1, max_length=50, examples=["business"])

    model_config = {"extra": "forbid"}


class NewsUpdate(BaseModel):
    """Schema for updating an existing news article — all fields optional.

    Only fields present in the body are applied. An explicit null clears
    ``author`` or ``category``; ``title`` and ``content`` cannot be null.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1, max_length=100)
    category: str | None = Field(None, min_length=1, max_length=50)

    model_config = {"extra": "forbid"}

    @field_validator("title", "content", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("must not be null")
        return value


class NewsResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    author: str | None
    category: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class NewsPageResponse(BaseModel):
    """Paginated listing envelope."""

    data: list[NewsResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_page(cls, page: NewsPage) -> "NewsPageResponse":
        return cls(
            data=[NewsResponse.model_validate(n, from_attributes=True) for n in page.data],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )

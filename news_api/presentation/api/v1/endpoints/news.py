"""News CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from news_api.application.schemas import (
    NewsCreate,
    NewsPageResponse,
    NewsResponse,
    NewsUpdate,
)
from news_api.application.services import NewsService
from news_api.domain.exceptions import EntityNotFoundError
from news_api.infrastructure.dependencies import get_news_service

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=NewsPageResponse)
async def list_news(
    page: int | None = None,
    limit: int | None = None,
    search: str | None = None,
    author: str | None = None,
    category: str | None = None,
    service: NewsService = Depends(get_news_service),
) -> NewsPageResponse:
    """Retrieve a page of news. Out-of-range page/limit values are clamped."""
    result = await service.list_news(
        page=page, limit=limit, search=search, author=author, category=category
    )
    return NewsPageResponse.from_page(result)


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(
    news_id: int,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Retrieve a single news article by ID."""
    try:
        news = await service.get_news(news_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return NewsResponse.model_validate(news, from_attributes=True)


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_news(
    data: NewsCreate,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Create a news article."""
    news = await service.create_news(data)
    return NewsResponse.model_validate(news, from_attributes=True)


@router.patch("/{news_id}", response_model=NewsResponse)
@router.put("/{news_id}", response_model=NewsResponse)
async def update_news(
    news_id: int,
    data: NewsUpdate,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Update an existing news article. Only provided fields change."""
    try:
        news = await service.update_news(news_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return NewsResponse.model_validate(news, from_attributes=True)


@router.delete("/{news_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news(
    news_id: int,
    service: NewsService = Depends(get_news_service),
) -> None:
    """Delete a news article by ID."""
    try:
        await service.delete_news(news_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

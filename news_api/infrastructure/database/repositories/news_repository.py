"""Concrete repository implementation backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.application.interfaces import NewsRepository
from news_api.domain.entities import News, NewsFilter
from news_api.infrastructure.database.models import NewsModel

_UPDATABLE_FIELDS = frozenset({"title", "content", "author", "category"})


class SQLAlchemyNewsRepository(NewsRepository):
    """Implements the NewsRepository port using SQLAlchemy async sessions.

    Mutations commit before returning so the service only invalidates
    cached listings once the change is visible to other sessions.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: NewsModel) -> News:
        """Map ORM model → domain entity."""
        return News(
            id=model.id,
            title=model.title,
            content=model.content,
            author=model.author,
            category=model.category,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: News) -> NewsModel:
        """Map domain entity → ORM model (for creation)."""
        return NewsModel(
            title=entity.title,
            content=entity.content,
            author=entity.author,
            category=entity.category,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def _apply_filter(stmt: Select, news_filter: NewsFilter) -> Select:
        if news_filter.search is not None:
            # autoescape keeps % and _ in user input literal
            stmt = stmt.where(
                or_(
                    NewsModel.title.icontains(news_filter.search, autoescape=True),
                    NewsModel.content.icontains(news_filter.search, autoescape=True),
                )
            )
        if news_filter.author is not None:
            stmt = stmt.where(NewsModel.author == news_filter.author)
        if news_filter.category is not None:
            stmt = stmt.where(NewsModel.category == news_filter.category)
        return stmt

    async def find_page(
        self, offset: int, limit: int, news_filter: NewsFilter
    ) -> tuple[list[News], int]:
        count_stmt = self._apply_filter(select(func.count(NewsModel.id)), news_filter)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = self._apply_filter(select(NewsModel), news_filter)
        stmt = stmt.order_by(NewsModel.created_at.desc(), NewsModel.id.desc())
        stmt = stmt.offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total

    async def get_by_id(self, news_id: int) -> News | None:
        result = await self._session.get(NewsModel, news_id)
        return self._to_entity(result) if result else None

    async def insert(self, news: News) -> News:
        model = self._to_model(news)
        self._session.add(model)
        await self._session.commit()
        return self._to_entity(model)

    async def update_by_id(self, news_id: int, patch: dict[str, Any]) -> News | None:
        model = await self._session.get(NewsModel, news_id)
        if model is None:
            return None
        for name, value in patch.items():
            if name in _UPDATABLE_FIELDS:
                setattr(model, name, value)
        await self._session.commit()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete_by_id(self, news_id: int) -> bool:
        model = await self._session.get(NewsModel, news_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.commit()
        return True

from .news_repository import SQLAlchemyNewsRepository

__all__ = [
    "SQLAlchemyNewsRepository",
]

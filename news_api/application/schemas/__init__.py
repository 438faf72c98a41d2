from .news import NewsCreate, NewsUpdate, NewsResponse, NewsPageResponse

__all__ = [
    "NewsCreate",
    "NewsUpdate",
    "NewsResponse",
    "NewsPageResponse",
]

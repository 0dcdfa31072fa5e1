# app/core/achievements/__init__.py

"""
Achievements package.

Exposes the main entry points so callers can write
`from app.core.achievements import AchievementsService`.
"""

from .errors import AchievementsError, DecodeError, QueryError, ValidationError  # noqa: F401
from .schemas import AchievementProgress, CategoryProgress  # noqa: F401
from .service import AchievementsService  # noqa: F401

__all__: list[str] = [
    "AchievementsService",
    "AchievementsError",
    "ValidationError",
    "QueryError",
    "DecodeError",
    "AchievementProgress",
    "CategoryProgress",
]

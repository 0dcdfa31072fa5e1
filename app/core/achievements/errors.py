# app/core/achievements/errors.py

"""Errors raised by the achievement progress reader."""

from __future__ import annotations

from fastapi import status


class AchievementsError(Exception):
    """Base error. ``message`` is safe to show to the user."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AchievementsError):
    """The wallet address is missing (zero)."""

    status_code = status.HTTP_400_BAD_REQUEST


class QueryError(AchievementsError):
    """The aggregation query could not be executed."""


class DecodeError(AchievementsError):
    """A grouped result document does not match ``CategoryProgress``."""

# /app/app/core/achievements/service.py

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import DecodeError, QueryError, ValidationError
from .pipeline import build_progress_query, group_rows
from .schemas import CategoryProgress

log = logging.getLogger(__name__)

CONNECT_WALLET_MESSAGE = "Please connect your wallet first"


def canonical_address(addr: int) -> str:
    """Decimal form of the address, as stored in ``achieved.addr``."""
    return str(addr)


def decode_category(document: Dict[str, Any]) -> CategoryProgress:
    try:
        return CategoryProgress.model_validate(document)
    except PydanticValidationError as exc:
        raise DecodeError(f"Malformed category document: {exc.error_count()} error(s)") from exc


class AchievementsService:
    """
    Reads a wallet's achievement progress, grouped by category.
    Never writes to the database.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Args:
            db_session (AsyncSession): Async DB session owned by the caller.
        """
        self.db: AsyncSession = db_session

    async def get_progress(self, addr: int) -> List[CategoryProgress]:
        """
        Returns every category that has achievements, each achievement
        flagged as completed or not for ``addr``.

        Args:
            addr (int): Wallet address as a field element.

        Raises:
            ValidationError: ``addr`` is zero; the database is not queried.
            QueryError: the query failed to execute.
        """
        if addr == 0:
            log.info("AchievementsService: rejected zero wallet address")
            raise ValidationError(CONNECT_WALLET_MESSAGE)

        canonical = canonical_address(addr)
        log.debug("AchievementsService: fetching progress for addr=%s", canonical)
        stmt = build_progress_query(canonical)
        try:
            result = await self.db.execute(stmt)
            rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as exc:
            # Driver-level connect failures (refused, timeout) are not wrapped by SQLAlchemy
            log.exception("AchievementsService: query failed for addr=%s", canonical)
            raise QueryError(f"Error fetching user achievements: {exc}") from exc

        categories: List[CategoryProgress] = []
        for document in group_rows(rows):
            try:
                categories.append(decode_category(document))
            except DecodeError as exc:
                log.warning(
                    "AchievementsService: skipping category %r for addr=%s: %s",
                    document.get("category_name"), canonical, exc.message,
                )
        log.info(
            "AchievementsService: %d categories (%d rows) for addr=%s",
            len(categories), len(rows), canonical,
        )
        return categories

# /app/app/api/v1/achievements.py

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.achievements.schemas import CategoryProgress, Felt
from app.core.achievements.service import AchievementsService
from app.db.base import get_async_db_session

router = APIRouter(prefix="/v1/achievements", tags=["Achievements"])
log = logging.getLogger(__name__)


@router.get(
    "/fetch",
    response_model=List[CategoryProgress],
    summary="Get achievement progress for a wallet",
    description="Lists achievement categories with every achievement marked completed or not for the given wallet.",
)
async def fetch_achievements(
    addr: Felt = Query(..., description="Wallet address, hex (0x...) or decimal"),
    db: AsyncSession = Depends(get_async_db_session),
) -> List[CategoryProgress]:
    # ValidationError / QueryError are turned into {"message": ...} by the app handler
    log.info("API: achievement progress requested for addr=%#x", addr)
    return await AchievementsService(db_session=db).get_progress(addr)

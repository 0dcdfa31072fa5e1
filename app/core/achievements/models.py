# /app/app/core/achievements/models.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class AchievementCategory(Base):
    __tablename__ = "achievement_categories"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    desc: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<AchievementCategory id={self.id!r} name={self.name!r}>"


class Achievement(Base):
    """
    Achievement definition with two display variants: ``todo_*`` is shown
    while the wallet has not completed it, ``done_*`` afterwards.

    Display columns are nullable since documents imported from the legacy
    store do not always carry every field.
    """
    __tablename__ = "achievements"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    category_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("achievement_categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    short_desc: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    todo_title: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    todo_desc: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    done_title: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    done_desc: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Opaque tag telling the verifier how completion is checked
    verify_type: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Achievement id={self.id!r} category={self.category_id!r} verify_type={self.verify_type!r}>"


class Achieved(Base):
    """Completion record: existence means ``addr`` completed ``achievement_id``."""
    __tablename__ = "achieved"
    # No uniqueness on (achievement_id, addr): duplicates count as a single completion
    __table_args__ = (Index("ix_achieved_achievement_addr", "achievement_id", "addr"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    achievement_id: Mapped[str] = mapped_column(String(64), nullable=False)
    # Canonical (decimal) form of the wallet address
    addr: Mapped[str] = mapped_column(String(80), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Achieved achievement={self.achievement_id!r} addr={self.addr!r}>"

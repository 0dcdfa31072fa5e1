# app/core/achievements/pipeline.py

"""
Stages of the achievement progress query.

The query is assembled from small functions so each step can be checked on
its own:

* ``expand_stage``    - categories joined to their achievements, one row each
* ``correlate_stage`` - number of completion records for (achievement, addr)
* ``derive_stage``    - ``completed`` flag and the title/desc variant it selects
* ``project_stage``   - the view columns, internal ids left out
* ``group_rows``      - rows folded back into one document per category
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from sqlalchemy import ColumnElement, Join, Select, case, func, join, select

from .models import Achieved, Achievement, AchievementCategory

ACHIEVEMENT_FIELDS: Tuple[str, ...] = (
    "name", "short_desc", "title", "desc", "completed", "verify_type",
)


def expand_stage() -> Join:
    # Inner join: categories without achievements produce no rows
    return join(AchievementCategory, Achievement, Achievement.category_id == AchievementCategory.id)


def correlate_stage(addr: str) -> ColumnElement[int]:
    return (
        select(func.count(Achieved.id))
        .where(Achieved.achievement_id == Achievement.id, Achieved.addr == addr)
        .correlate(Achievement)
        .scalar_subquery()
    )


def derive_stage(achieved_count: ColumnElement[int]) -> List[ColumnElement[Any]]:
    not_done = achieved_count == 0
    return [
        case((not_done, Achievement.todo_title), else_=Achievement.done_title).label("title"),
        case((not_done, Achievement.todo_desc), else_=Achievement.done_desc).label("desc"),
        (achieved_count != 0).label("completed"),
    ]


def project_stage(derived: Sequence[ColumnElement[Any]]) -> Select:
    title, desc, completed = derived
    return select(
        AchievementCategory.name.label("category_name"),
        AchievementCategory.desc.label("category_desc"),
        Achievement.name.label("name"),
        Achievement.short_desc.label("short_desc"),
        title,
        desc,
        completed,
        Achievement.verify_type.label("verify_type"),
    )


def build_progress_query(addr: str) -> Select:
    """Full query for the canonical address string ``addr``. No ORDER BY."""
    return project_stage(derive_stage(correlate_stage(addr))).select_from(expand_stage())


def group_rows(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Groups flat rows by ``(category_name, category_desc)``.

    Categories and their achievements keep the order in which they were first
    seen in ``rows``.
    """
    grouped: Dict[Tuple[Any, Any], Dict[str, Any]] = {}
    for row in rows:
        key = (row["category_name"], row["category_desc"])
        document = grouped.get(key)
        if document is None:
            document = grouped[key] = {
                "category_name": key[0],
                "category_desc": key[1],
                "achievements": [],
            }
        document["achievements"].append({field: row[field] for field in ACHIEVEMENT_FIELDS})
    return list(grouped.values())

# app/core/achievements/schemas.py

from __future__ import annotations

import re
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, Field

# Order of the Stark curve base field
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

# ASCII only: int() would also take "_", a sign, "0X" and non-ASCII digits
_FELT_HEX = re.compile(r"0x[0-9a-fA-F]+")
_FELT_DEC = re.compile(r"[0-9]+")


def parse_felt(value: int | str) -> int:
    """
    Parses a Starknet field element from ``0x`` hex, decimal string or int.

    Raises:
        ValueError: if the value is not a number or lies outside ``[0, P)``.
    """
    if isinstance(value, bool):
        raise ValueError("field element must be a number")
    if isinstance(value, int):
        felt = value
    elif isinstance(value, str):
        if _FELT_HEX.fullmatch(value):
            felt = int(value[2:], 16)
        elif _FELT_DEC.fullmatch(value):
            felt = int(value, 10)
        else:
            raise ValueError(f"invalid field element: {value!r}")
    else:
        raise ValueError("field element must be a hex or decimal string")
    if not 0 <= felt < FIELD_PRIME:
        raise ValueError("field element out of range")
    return felt


Felt = Annotated[int, BeforeValidator(parse_felt)]


class AchievementProgress(BaseModel):
    name: str
    short_desc: str
    title: str = Field(..., description="done_title when completed, todo_title otherwise")
    desc: str = Field(..., description="done_desc when completed, todo_desc otherwise")
    completed: bool
    verify_type: str


class CategoryProgress(BaseModel):
    category_name: str
    category_desc: str
    achievements: List[AchievementProgress]

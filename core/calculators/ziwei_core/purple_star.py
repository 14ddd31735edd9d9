#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
安紫微星、天府星

紫微按五行局与农历生日查表；天府与紫微以寅申为轴对称。
"""

from typing import Tuple

from .cycle import lookup, normalize12
from .errors import ZiweiInputError, ZiweiTableLookupError

# 局数 -> 初一至三十紫微所在地支
PURPLE_STAR_TABLE = {
    2: (1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 8, 8, 9, 9, 10, 10, 11, 11, 0, 0, 1, 1, 2, 2, 3, 3, 4),
    3: (4, 1, 5, 2, 5, 3, 8, 4, 9, 5, 10, 6, 11, 7, 0, 8, 1, 9, 2, 10, 5, 11, 6, 0, 7, 1, 8, 2, 9, 3),
    4: (11, 4, 0, 1, 5, 2, 8, 3, 9, 4, 10, 5, 11, 6, 0, 7, 1, 8, 2, 9, 3, 10, 4, 11, 5, 0, 6, 1, 7, 2),
    5: (6, 11, 0, 5, 1, 8, 2, 9, 3, 10, 4, 11, 5, 0, 6, 1, 7, 2, 8, 3, 9, 4, 10, 5, 11, 6, 0, 7, 1, 8),
    6: (9, 4, 10, 5, 11, 6, 0, 7, 1, 8, 2, 9, 3, 10, 4, 11, 5, 0, 6, 1, 7, 2, 8, 3, 9, 4, 10, 5, 11, 6),
}


def purple_star_branch(bureau: int, lunar_day: int) -> int:
    """
    紫微星所在地支

    Args:
        bureau: 五行局数（2-6）
        lunar_day: 农历日（1-30）

    Raises:
        ZiweiInputError: 农历日不在 1-30
        ZiweiTableLookupError: 局数不在表内
    """
    if not 1 <= lunar_day <= 30:
        raise ZiweiInputError(f"农历日超出范围: {lunar_day}")
    if bureau not in PURPLE_STAR_TABLE:
        raise ZiweiTableLookupError(f"紫微表无此局数: {bureau}")
    return lookup(PURPLE_STAR_TABLE[bureau], lunar_day - 1, 'PURPLE_STAR_TABLE')


def tianfu_branch(purple_branch: int) -> int:
    return normalize12(16 - purple_branch)


def locate_anchor_stars(bureau: int, lunar_day: int) -> Tuple[int, int]:
    """(紫微地支, 天府地支)"""
    purple = purple_star_branch(bureau, lunar_day)
    return purple, tianfu_branch(purple)

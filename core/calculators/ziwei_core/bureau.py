#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
定五行局

以命宫干支查纳音五行：天干两两一组（甲乙、丙丁…），
地支两两一组再按三组循环（子丑/午未、寅卯/申酉、辰巳/戌亥）。
"""

from core.data.ziwei_constants import BUREAU_NAMES

from .cycle import lookup
from .errors import ZiweiTableLookupError

# [天干组][地支组] -> 局数
BUREAU_TABLE = (
    (4, 2, 6),
    (2, 6, 5),
    (6, 5, 3),
    (5, 3, 4),
    (3, 4, 2),
)


def bureau_number(life_stem: int, life_branch: int) -> int:
    row = lookup(BUREAU_TABLE, life_stem // 2, 'BUREAU_TABLE')
    return lookup(row, (life_branch // 2) % 3, 'BUREAU_TABLE[row]')


def bureau_name(number: int) -> str:
    """局数 -> 局名（水二局 … 火六局）"""
    if number not in BUREAU_NAMES:
        raise ZiweiTableLookupError(f"未知五行局数: {number}")
    return BUREAU_NAMES[number]

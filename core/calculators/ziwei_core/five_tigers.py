#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五虎遁：由年干定十二宫天干

甲己之年丙作首，乙庚之岁戊为头，丙辛便向庚寅起，
丁壬壬寅顺水流，若问戊癸何处起，甲寅之上好追求。
"""

from typing import Tuple

from .cycle import lookup, normalize10, normalize12

# 年干序号 -> 寅宫天干序号
TIGER_START_STEM = (2, 4, 6, 8, 0, 2, 4, 6, 8, 0)

YIN_BRANCH = 2


def tiger_start_stem(year_stem: int) -> int:
    """寅宫起始天干"""
    return lookup(TIGER_START_STEM, year_stem, 'TIGER_START_STEM')


def palace_stem(year_stem: int, branch: int) -> int:
    """单个地支宫位的天干序号"""
    return normalize10(tiger_start_stem(year_stem) + normalize12(branch - YIN_BRANCH))


def assign_palace_stems(year_stem: int) -> Tuple[int, ...]:
    """十二宫天干，下标为地支序号"""
    start = tiger_start_stem(year_stem)
    return tuple(normalize10(start + normalize12(i - YIN_BRANCH)) for i in range(12))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
安命身宫与十二宫命名

寅宫起正月顺数至生月，再由生月宫起子时：
命宫逆数至生时，身宫顺数至生时。
"""

from core.data.ziwei_constants import PALACE_NAMES

from .cycle import lookup, normalize12
from .errors import ZiweiInputError


def _check_month_hour(month: int, hour_index: int) -> None:
    if not 1 <= month <= 12:
        raise ZiweiInputError(f"农历月份超出范围: {month}")
    if not 0 <= hour_index <= 11:
        raise ZiweiInputError(f"时辰序号超出范围: {hour_index}")


def life_palace_branch(month: int, hour_index: int) -> int:
    """命宫地支序号，month 为已做闰月修正的月份"""
    _check_month_hour(month, hour_index)
    return normalize12(2 + (month - 1) - hour_index)


def body_palace_branch(month: int, hour_index: int) -> int:
    """身宫地支序号"""
    _check_month_hour(month, hour_index)
    return normalize12(2 + (month - 1) + hour_index)


def palace_name(life_branch: int, branch: int) -> str:
    """某地支宫位的宫名，自命宫起逆时针排列"""
    return lookup(PALACE_NAMES, normalize12(life_branch - branch), 'PALACE_NAMES')

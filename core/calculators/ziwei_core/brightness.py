#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星曜庙旺利陷

十四主星与文昌、文曲有亮度表，其余辅星不标亮度。
"""

from typing import Dict, Optional, Tuple

from .cycle import lookup

_BASE_BRIGHTNESS = {
    '紫微': ('平', '旺', '廟', '旺', '得', '陷', '旺', '廟', '旺', '旺', '得', '旺'),
    '天機': ('廟', '陷', '陷', '旺', '利', '平', '廟', '陷', '得', '旺', '廟', '平'),
    '太陽': ('陷', '陷', '陷', '旺', '旺', '旺', '廟', '得', '得', '平', '陷', '陷'),
    '武曲': ('旺', '廟', '平', '旺', '廟', '平', '旺', '廟', '平', '旺', '廟', '平'),
    '天同': ('旺', '陷', '陷', '平', '平', '廟', '陷', '陷', '旺', '平', '平', '廟'),
    '廉貞': ('平', '利', '廟', '平', '旺', '陷', '平', '利', '廟', '平', '旺', '陷'),
    '天府': ('廟', '廟', '廟', '平', '廟', '得', '旺', '廟', '得', '旺', '廟', '得'),
    '太陰': ('廟', '廟', '陷', '陷', '陷', '陷', '陷', '平', '利', '旺', '旺', '廟'),
    '貪狼': ('旺', '廟', '平', '平', '廟', '陷', '旺', '廟', '平', '平', '廟', '陷'),
    '巨門': ('旺', '陷', '廟', '廟', '平', '陷', '旺', '陷', '廟', '廟', '平', '陷'),
    '天相': ('廟', '廟', '廟', '陷', '旺', '平', '廟', '得', '廟', '陷', '旺', '平'),
    '天梁': ('廟', '旺', '廟', '廟', '旺', '陷', '廟', '旺', '廟', '廟', '旺', '陷'),
    '七殺': ('旺', '廟', '廟', '陷', '旺', '平', '旺', '廟', '廟', '陷', '旺', '平'),
    '破軍': ('廟', '旺', '陷', '平', '旺', '陷', '廟', '旺', '陷', '平', '旺', '陷'),
    '文昌': ('陷', '陷', '利', '利', '廟', '廟', '陷', '陷', '利', '利', '廟', '廟'),
    '文曲': ('廟', '廟', '陷', '陷', '利', '利', '廟', '廟', '陷', '陷', '利', '利'),
}

# 表外修订：紫微在申为旺
BRIGHTNESS_OVERRIDES = {
    ('紫微', 8): '旺',
}


def _build_table() -> Dict[str, Tuple[str, ...]]:
    table = {name: list(levels) for name, levels in _BASE_BRIGHTNESS.items()}
    for (name, branch), level in BRIGHTNESS_OVERRIDES.items():
        table[name][branch] = level
    return {name: tuple(levels) for name, levels in table.items()}


BRIGHTNESS_TABLE = _build_table()


def get_brightness(star_name: str, branch: int) -> Optional[str]:
    """星曜在某地支的亮度，无亮度表的星返回 None"""
    levels = BRIGHTNESS_TABLE.get(star_name)
    if levels is None:
        return None
    return lookup(levels, branch, f'BRIGHTNESS_TABLE[{star_name}]')


def format_star_label(star_name: str, brightness: Optional[str]) -> str:
    """显示标签，如 紫微(廟)；无亮度时仅星名"""
    return f"{star_name}({brightness})" if brightness else star_name

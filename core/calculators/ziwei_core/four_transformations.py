#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
生年四化

年干定化祿、化權、化科、化忌四星，再到已安好的命盘中找星所在宫位。
主星优先；主星中没有才找辅星；都没有则记为未显示（不算错误）。
"""

from typing import Dict, List, Tuple

from core.data.ziwei_constants import FOUR_TRANSFORMATION_TAGS

from .cycle import lookup
from .models import FourTransformations, TransformationResult
from .star_placement import StarPlacement

# 年干 -> (祿, 權, 科, 忌)
FOUR_TRANSFORMATIONS_TABLE = (
    ('廉貞', '破軍', '武曲', '太陽'),  # 甲
    ('天機', '天梁', '紫微', '太陰'),  # 乙
    ('天同', '天機', '文昌', '廉貞'),  # 丙
    ('太陰', '天同', '天機', '巨門'),  # 丁
    ('貪狼', '太陰', '右弼', '天機'),  # 戊
    ('武曲', '貪狼', '天梁', '文曲'),  # 己
    ('太陽', '武曲', '太陰', '天同'),  # 庚
    ('巨門', '太陽', '文曲', '文昌'),  # 辛
    ('天梁', '紫微', '左輔', '武曲'),  # 壬
    ('破軍', '巨門', '太陰', '貪狼'),  # 癸
)


def transformation_stars(year_stem: int) -> Tuple[str, str, str, str]:
    return lookup(FOUR_TRANSFORMATIONS_TABLE, year_stem, 'FOUR_TRANSFORMATIONS_TABLE')


def resolve_four_transformations(
    year_stem: int,
    placement: StarPlacement,
) -> Tuple[FourTransformations, Dict[int, List[str]]]:
    """
    解析四化

    Returns:
        (四化结果, {地支序号: [四化标签, ...]})，标签按 祿權科忌 顺序追加
    """
    results = []
    markers: Dict[int, List[str]] = {}
    for tag, star_name in zip(FOUR_TRANSFORMATION_TAGS, transformation_stars(year_stem)):
        star = placement.find(star_name)
        if star is None:
            results.append(TransformationResult(tag=tag, star=star_name))
            continue
        results.append(TransformationResult(tag=tag, star=star_name, branch=star.branch))
        markers.setdefault(star.branch, []).append(tag)
    return FourTransformations(results=tuple(results)), markers

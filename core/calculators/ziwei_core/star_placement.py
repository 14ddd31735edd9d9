#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
安星

- 主星：紫微星系自紫微逆布，天府星系自天府顺布
- 辅星：昌曲（时）、辅弼（月）、魁钺与禄存羊陀（年干）、火铃（年支+时）、空劫（时）

StarPlacement 在安星时同时建立 星名 -> 落点 索引，供四化直接查找。
"""

from typing import Dict, List, Optional, Tuple

from core.data.ziwei_constants import TIANFU_GROUP_NAMES, ZIWEI_GROUP_NAMES

from .brightness import get_brightness
from .cycle import lookup, normalize12
from .errors import ZiweiTableLookupError
from .models import MAJOR, MINOR, PlacedStar

ZIWEI_GROUP_OFFSETS = (0, -1, -3, -4, -5, -8)
TIANFU_GROUP_OFFSETS = (0, 1, 2, 3, 4, 5, 6, 10)

# 年干 -> (天魁, 天鉞)
KUI_YUE_TABLE = (
    (1, 7), (0, 8), (11, 9), (11, 9), (1, 7),
    (0, 8), (1, 7), (6, 2), (5, 3), (5, 3),
)

# 年干 -> 祿存
LUCUN_TABLE = (2, 3, 5, 6, 5, 6, 8, 9, 11, 0)

# 年支三合 -> (火星起点, 鈴星起点)
HUO_LING_GROUPS = (
    ((2, 6, 10), (1, 3)),
    ((5, 9, 1), (3, 10)),
    ((11, 3, 7), (9, 10)),
)
HUO_LING_DEFAULT = (2, 10)


class StarPlacement:
    """十二宫主星/辅星的可变暂存区，排盘结束后冻结进 Palace"""

    def __init__(self) -> None:
        self.major: List[List[PlacedStar]] = [[] for _ in range(12)]
        self.minor: List[List[PlacedStar]] = [[] for _ in range(12)]
        self._major_index: Dict[str, PlacedStar] = {}
        self._minor_index: Dict[str, PlacedStar] = {}

    def add(self, name: str, branch: int, tier: str) -> PlacedStar:
        if name in self._major_index or name in self._minor_index:
            raise ZiweiTableLookupError(f"星曜重复安放: {name}")
        star = PlacedStar(name=name, branch=branch, tier=tier, brightness=get_brightness(name, branch))
        if tier == MAJOR:
            lookup(self.major, branch, 'major_stars').append(star)
            self._major_index[name] = star
        else:
            lookup(self.minor, branch, 'minor_stars').append(star)
            self._minor_index[name] = star
        return star

    def find(self, name: str) -> Optional[PlacedStar]:
        """按星名查落点，主星优先于辅星"""
        return self._major_index.get(name) or self._minor_index.get(name)

    def stars_at(self, branch: int) -> Tuple[Tuple[PlacedStar, ...], Tuple[PlacedStar, ...]]:
        return tuple(self.major[branch]), tuple(self.minor[branch])

    @property
    def star_names(self) -> List[str]:
        return list(self._major_index) + list(self._minor_index)


# === 主星 ======================================================================================

def place_major_stars(placement: StarPlacement, purple_branch: int, tianfu_branch: int) -> None:
    for name, offset in zip(ZIWEI_GROUP_NAMES, ZIWEI_GROUP_OFFSETS):
        placement.add(name, normalize12(purple_branch + offset), MAJOR)
    for name, offset in zip(TIANFU_GROUP_NAMES, TIANFU_GROUP_OFFSETS):
        placement.add(name, normalize12(tianfu_branch + offset), MAJOR)


# === 辅星落点 ==================================================================================

def wenchang_wenqu(hour_index: int) -> Tuple[int, int]:
    """文昌戌宫逆数、文曲辰宫顺数至生时"""
    return normalize12(10 - hour_index), normalize12(4 + hour_index)


def zuofu_youbi(month: int) -> Tuple[int, int]:
    """左輔辰宫顺数、右弼戌宫逆数至生月"""
    return normalize12(4 + (month - 1)), normalize12(10 - (month - 1))


def kui_yue(year_stem: int) -> Tuple[int, int]:
    return lookup(KUI_YUE_TABLE, year_stem, 'KUI_YUE_TABLE')


def lucun_yang_tuo(year_stem: int) -> Tuple[int, int, int]:
    """祿存及其前后的擎羊、陀羅"""
    lucun = lookup(LUCUN_TABLE, year_stem, 'LUCUN_TABLE')
    return lucun, normalize12(lucun + 1), normalize12(lucun - 1)


def huo_ling(year_branch: int, hour_index: int) -> Tuple[int, int]:
    start_huo, start_ling = HUO_LING_DEFAULT
    for branches, starts in HUO_LING_GROUPS:
        if year_branch in branches:
            start_huo, start_ling = starts
            break
    return normalize12(start_huo + hour_index), normalize12(start_ling - hour_index)


def dikong_dijie(hour_index: int) -> Tuple[int, int]:
    """地空亥宫逆数、地劫亥宫顺数至生时"""
    return normalize12(11 - hour_index), normalize12(11 + hour_index)


def place_minor_stars(
    placement: StarPlacement,
    hour_index: int,
    month: int,
    year_stem: int,
    year_branch: int,
) -> None:
    wenchang, wenqu = wenchang_wenqu(hour_index)
    placement.add('文昌', wenchang, MINOR)
    placement.add('文曲', wenqu, MINOR)

    zuofu, youbi = zuofu_youbi(month)
    placement.add('左輔', zuofu, MINOR)
    placement.add('右弼', youbi, MINOR)

    kui, yue = kui_yue(year_stem)
    placement.add('天魁', kui, MINOR)
    placement.add('天鉞', yue, MINOR)

    lucun, yang, tuo = lucun_yang_tuo(year_stem)
    placement.add('祿存', lucun, MINOR)
    placement.add('擎羊', yang, MINOR)
    placement.add('陀羅', tuo, MINOR)

    huo, ling = huo_ling(year_branch, hour_index)
    placement.add('火星', huo, MINOR)
    placement.add('鈴星', ling, MINOR)

    kong, jie = dikong_dijie(hour_index)
    placement.add('地空', kong, MINOR)
    placement.add('地劫', jie, MINOR)

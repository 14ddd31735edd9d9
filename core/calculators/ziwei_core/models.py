#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘数据结构

Chart / Profile 每次排盘新建，构建完成后不可变；
to_dict() 输出无环的普通嵌套字典，供服务接口与解读服务使用。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from core.data.ziwei_constants import (
    EARTHLY_BRANCHES,
    FOUR_TRANSFORMATION_KEYS,
    HEAVENLY_STEMS,
    NO_TRANSFORMATION_MARK,
    TRANSFORMATION_NOT_FOUND,
)

from .brightness import format_star_label

MAJOR = 'major'
MINOR = 'minor'


@dataclass(frozen=True)
class PlacedStar:
    name: str
    branch: int
    tier: str  # MAJOR / MINOR
    brightness: Optional[str] = None

    @property
    def label(self) -> str:
        return format_star_label(self.name, self.brightness)


@dataclass(frozen=True)
class Palace:
    branch: int
    stem: int
    name: str
    major_stars: Tuple[PlacedStar, ...] = ()
    minor_stars: Tuple[PlacedStar, ...] = ()
    transformation_tags: Tuple[str, ...] = ()

    @property
    def branch_label(self) -> str:
        return EARTHLY_BRANCHES[self.branch]

    @property
    def stem_label(self) -> str:
        return HEAVENLY_STEMS[self.stem]

    @property
    def four_transformation_marker(self) -> str:
        if not self.transformation_tags:
            return NO_TRANSFORMATION_MARK
        return ' '.join(self.transformation_tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'branch': self.branch_label,
            'branch_index': self.branch,
            'stem': self.stem_label,
            'stem_index': self.stem,
            'name': self.name,
            'major_stars': [star.label for star in self.major_stars],
            'minor_stars': [star.label for star in self.minor_stars],
            'is_four_transformed': self.four_transformation_marker,
        }


@dataclass(frozen=True)
class TransformationResult:
    """单个四化的落点；branch 为 None 表示该星未落入命盘"""
    tag: str
    star: str
    branch: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.branch is not None

    @property
    def label(self) -> str:
        if self.branch is None:
            return f"{self.star} ({TRANSFORMATION_NOT_FOUND})"
        return f"{self.star} ({EARTHLY_BRANCHES[self.branch]})"


@dataclass(frozen=True)
class FourTransformations:
    """化祿、化權、化科、化忌，固定四项且顺序不变"""
    results: Tuple[TransformationResult, ...]

    def __post_init__(self) -> None:
        if len(self.results) != len(FOUR_TRANSFORMATION_KEYS):
            raise ValueError(f"四化结果必须为 4 项，实际 {len(self.results)} 项")

    @property
    def found_count(self) -> int:
        return sum(1 for result in self.results if result.found)

    def to_dict(self) -> Dict[str, str]:
        return {key: result.label for key, result in zip(FOUR_TRANSFORMATION_KEYS, self.results)}


@dataclass(frozen=True)
class Chart:
    life_palace_branch: int
    body_palace_branch: int
    four_transformations: FourTransformations
    palaces: Tuple[Palace, ...] = field(default_factory=tuple)

    @property
    def life_palace(self) -> Palace:
        return self.palaces[self.life_palace_branch]

    @property
    def body_palace(self) -> Palace:
        return self.palaces[self.body_palace_branch]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'life_palace_location': EARTHLY_BRANCHES[self.life_palace_branch],
            'body_palace_location': EARTHLY_BRANCHES[self.body_palace_branch],
            'life_palace_branch': self.life_palace_branch,
            'body_palace_branch': self.body_palace_branch,
            'four_transformations': self.four_transformations.to_dict(),
            'all_palaces': [palace.to_dict() for palace in self.palaces],
        }


@dataclass(frozen=True)
class Profile:
    name: str
    gender: str
    lunar_date_time: str
    five_elements_bureau: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'name': self.name,
            'gender': self.gender,
            'lunar_date_time': self.lunar_date_time,
            'five_elements_bureau': self.five_elements_bureau,
        }


@dataclass(frozen=True)
class ZiweiResult:
    profile: Profile
    chart: Chart

    def to_dict(self) -> Dict[str, Any]:
        return {
            'profile': self.profile.to_dict(),
            'chart': self.chart.to_dict(),
        }

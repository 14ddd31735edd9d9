#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数核心计算模块

提供排盘各步骤的纯函数：
- 干支循环运算
- 五虎遁定宫干
- 安命身宫、定五行局
- 安紫微天府、安主星辅星、庙旺利陷
- 生年四化
"""

from .birth_input import (
    apply_leap_month_correction,
    parse_birth_date,
    resolve_calendar_type,
    resolve_gender,
    resolve_hour_index,
)
from .brightness import BRIGHTNESS_TABLE, format_star_label, get_brightness
from .bureau import BUREAU_TABLE, bureau_name, bureau_number
from .cycle import lookup, normalize10, normalize12
from .errors import ZiweiInputError, ZiweiTableLookupError
from .five_tigers import TIGER_START_STEM, assign_palace_stems, palace_stem, tiger_start_stem
from .four_transformations import (
    FOUR_TRANSFORMATIONS_TABLE,
    resolve_four_transformations,
    transformation_stars,
)
from .models import (
    Chart,
    FourTransformations,
    Palace,
    PlacedStar,
    Profile,
    TransformationResult,
    ZiweiResult,
)
from .palace_position import body_palace_branch, life_palace_branch, palace_name
from .purple_star import PURPLE_STAR_TABLE, locate_anchor_stars, purple_star_branch, tianfu_branch
from .star_placement import StarPlacement, place_major_stars, place_minor_stars

__all__ = [
    'normalize12',
    'normalize10',
    'lookup',
    'ZiweiInputError',
    'ZiweiTableLookupError',
    'TIGER_START_STEM',
    'tiger_start_stem',
    'palace_stem',
    'assign_palace_stems',
    'life_palace_branch',
    'body_palace_branch',
    'palace_name',
    'BUREAU_TABLE',
    'bureau_number',
    'bureau_name',
    'PURPLE_STAR_TABLE',
    'purple_star_branch',
    'tianfu_branch',
    'locate_anchor_stars',
    'StarPlacement',
    'place_major_stars',
    'place_minor_stars',
    'BRIGHTNESS_TABLE',
    'get_brightness',
    'format_star_label',
    'FOUR_TRANSFORMATIONS_TABLE',
    'transformation_stars',
    'resolve_four_transformations',
    'apply_leap_month_correction',
    'parse_birth_date',
    'resolve_calendar_type',
    'resolve_gender',
    'resolve_hour_index',
    'PlacedStar',
    'Palace',
    'TransformationResult',
    'FourTransformations',
    'Chart',
    'Profile',
    'ZiweiResult',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数排盘计算，供微服务与本地调用共享使用。

流程：农历转换 -> 闰月修正 -> 命身宫 -> 五虎遁定宫干 -> 五行局
      -> 紫微天府 -> 主星 -> 辅星 -> 生年四化

该模块只负责排盘，不做任何解读；同一输入必得同一命盘，不保留进程级状态。
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from core.calculators.LunarConverter import LunarBirthInfo, LunarConverter
from core.calculators.ziwei_core import (
    Chart,
    Palace,
    Profile,
    StarPlacement,
    ZiweiInputError,
    ZiweiResult,
    apply_leap_month_correction,
    assign_palace_stems,
    body_palace_branch,
    bureau_name,
    bureau_number,
    life_palace_branch,
    locate_anchor_stars,
    palace_name,
    place_major_stars,
    place_minor_stars,
    resolve_calendar_type,
    resolve_four_transformations,
    resolve_gender,
    resolve_hour_index,
)
from core.calculators.ziwei_logging import logger
from core.data.ziwei_constants import (
    CALENDAR_LUNAR,
    CALENDAR_SOLAR,
    EARTHLY_BRANCHES,
    LEAP_MONTH_CORRECTION_NOTE,
)


def build_chart(
    lunar_info: LunarBirthInfo,
    hour_index: int,
    name: str = '',
    gender: str = '男',
) -> ZiweiResult:
    """
    由农历信息排出完整命盘

    lunar_info 只需具备 LunarBirthInfo 的属性，便于替换农历来源。
    """
    if not 1 <= lunar_info.lunar_day <= 30:
        raise ZiweiInputError(f"农历日超出范围: {lunar_info.lunar_day}")
    if not 0 <= hour_index <= 11:
        raise ZiweiInputError(f"时辰序号超出范围: {hour_index}")

    month, leap_corrected = apply_leap_month_correction(
        lunar_info.lunar_month, lunar_info.lunar_day, lunar_info.is_leap_month
    )
    if leap_corrected:
        logger.debug(f"闰{lunar_info.lunar_month}月{lunar_info.lunar_day}日，按{month}月排盘")

    life_branch = life_palace_branch(month, hour_index)
    body_branch = body_palace_branch(month, hour_index)
    stems = assign_palace_stems(lunar_info.year_stem)

    bureau = bureau_number(stems[life_branch], life_branch)
    purple, tianfu = locate_anchor_stars(bureau, lunar_info.lunar_day)
    logger.debug(f"五行局={bureau} 紫微={EARTHLY_BRANCHES[purple]} 天府={EARTHLY_BRANCHES[tianfu]}")

    placement = StarPlacement()
    place_major_stars(placement, purple, tianfu)
    place_minor_stars(placement, hour_index, month, lunar_info.year_stem, lunar_info.year_branch)

    four_transformations, markers = resolve_four_transformations(lunar_info.year_stem, placement)

    palaces = []
    for branch in range(12):
        major_stars, minor_stars = placement.stars_at(branch)
        palaces.append(Palace(
            branch=branch,
            stem=stems[branch],
            name=palace_name(life_branch, branch),
            major_stars=major_stars,
            minor_stars=minor_stars,
            transformation_tags=tuple(markers.get(branch, ())),
        ))

    chart = Chart(
        life_palace_branch=life_branch,
        body_palace_branch=body_branch,
        four_transformations=four_transformations,
        palaces=tuple(palaces),
    )

    label = lunar_info.label
    if leap_corrected:
        label = f"{label} {LEAP_MONTH_CORRECTION_NOTE}"
    profile = Profile(
        name=name,
        gender=gender,
        lunar_date_time=label,
        five_elements_bureau=bureau_name(bureau),
    )

    logger.info(
        f"紫微排盘完成: {profile.five_elements_bureau} "
        f"命宫={chart.life_palace.branch_label} 身宫={chart.body_palace.branch_label}"
    )
    return ZiweiResult(profile=profile, chart=chart)


class ZiweiCalculator:
    """紫微排盘计算器 - 校验出生资料、转换农历后排盘"""

    def __init__(
        self,
        birth_date: str,
        birth_hour: Union[int, str],
        calendar_type: str = CALENDAR_SOLAR,
        gender: str = 'male',
        name: str = '',
        is_leap_month: bool = False,
        converter: Any = LunarConverter,
    ) -> None:
        self.birth_date = birth_date
        self.birth_hour = birth_hour
        self.calendar_type = calendar_type
        self.gender = gender
        self.name = name
        self.is_leap_month = is_leap_month
        self.converter = converter
        self.lunar_info: Optional[LunarBirthInfo] = None
        self.last_result: Optional[ZiweiResult] = None

    def calculate(self) -> ZiweiResult:
        """执行排盘；输入不合法时抛 ZiweiInputError"""
        calendar_type = resolve_calendar_type(self.calendar_type)
        hour_index = resolve_hour_index(self.birth_hour)
        gender_label = resolve_gender(self.gender)
        if self.is_leap_month and calendar_type != CALENDAR_LUNAR:
            raise ZiweiInputError("闰月标记只适用于农历输入")

        self.lunar_info = self.converter.to_ziwei_lunar(
            self.birth_date, hour_index, calendar_type, self.is_leap_month
        )
        result = build_chart(self.lunar_info, hour_index, name=self.name, gender=gender_label)
        self.last_result = result
        return result

    def calculate_dict(self) -> Dict[str, Any]:
        return self.calculate().to_dict()


def calculate_ziwei_chart(
    birth_date: str,
    birth_hour: Union[int, str],
    calendar_type: str = CALENDAR_SOLAR,
    gender: str = 'male',
    name: str = '',
    is_leap_month: bool = False,
) -> ZiweiResult:
    """便捷函数：一次性排盘"""
    return ZiweiCalculator(
        birth_date,
        birth_hour,
        calendar_type=calendar_type,
        gender=gender,
        name=name,
        is_leap_month=is_leap_month,
    ).calculate()

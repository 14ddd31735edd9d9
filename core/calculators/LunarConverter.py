#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
from dataclasses import dataclass

from lunar_python import Lunar, Solar

from core.data.ziwei_constants import (
    BIRTH_HOURS,
    CALENDAR_LUNAR,
    CALENDAR_SOLAR,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
)
from core.calculators.ziwei_core.birth_input import parse_birth_date
from core.calculators.ziwei_core.errors import ZiweiInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LunarBirthInfo:
    """排盘所需的农历出生信息"""
    lunar_year: int
    lunar_month: int  # 1-12，闰月也取本月数字
    lunar_day: int  # 1-30
    is_leap_month: bool
    year_stem: int  # 0-9
    year_branch: int  # 0-11
    label: str

    def to_dict(self):
        return {
            'lunar_year': self.lunar_year,
            'lunar_month': self.lunar_month,
            'lunar_day': self.lunar_day,
            'is_leap_month': self.is_leap_month,
            'year_stem': self.year_stem,
            'year_branch': self.year_branch,
            'label': self.label,
        }


class LunarConverter:
    """农历转换工具类 - 将阳历/农历出生资料统一转换为紫微排盘所需的农历信息"""

    @staticmethod
    def to_ziwei_lunar(date_str, hour_index, calendar_type=CALENDAR_SOLAR, is_leap_month=False):
        """
        出生资料 -> 农历信息

        时辰按 序号*2 点换算为钟点（子时 0 点，亥时 22 点），不做跨日调整。

        Args:
            date_str: 日期 'YYYY-MM-DD'（阳历，或农历年月日）
            hour_index: 时辰序号 0-11
            calendar_type: 'solar' / 'lunar'
            is_leap_month: 农历输入时是否为闰月

        Returns:
            LunarBirthInfo
        """
        if not 0 <= hour_index <= 11:
            raise ZiweiInputError(f"时辰序号超出范围: {hour_index}")
        year, month, day = parse_birth_date(date_str, calendar_type)
        hour = hour_index * 2

        if calendar_type == CALENDAR_SOLAR:
            lunar = Solar.fromYmdHms(year, month, day, hour, 0, 0).getLunar()
        elif calendar_type == CALENDAR_LUNAR:
            lunar_month = -month if is_leap_month else month
            try:
                lunar = Lunar.fromYmdHms(year, lunar_month, day, hour, 0, 0)
            except Exception as e:
                raise ZiweiInputError(f"无效的农历日期: {date_str}{' (闰月)' if is_leap_month else ''}: {e}") from e
        else:
            raise ZiweiInputError(f"不支持的历法类型: {calendar_type}")

        return LunarConverter.from_lunar(lunar, hour_index)

    @staticmethod
    def from_lunar(lunar, hour_index):
        """lunar_python 的 Lunar 对象 -> LunarBirthInfo（闰月以负数月份表示）"""
        raw_month = lunar.getMonth()
        info = LunarBirthInfo(
            lunar_year=lunar.getYear(),
            lunar_month=abs(raw_month),
            lunar_day=lunar.getDay(),
            is_leap_month=raw_month < 0,
            year_stem=HEAVENLY_STEMS.index(lunar.getYearGan()),
            year_branch=EARTHLY_BRANCHES.index(lunar.getYearZhi()),
            label=LunarConverter.format_label(lunar, hour_index),
        )
        logger.debug(f"农历转换结果: {info}")
        return info

    @staticmethod
    def format_label(lunar, hour_index):
        """如 '甲子年 正月 初一 子時 (23:00-01:00)'"""
        return (
            f"{lunar.getYearInGanZhi()}年 {lunar.getMonthInChinese()}月 "
            f"{lunar.getDayInChinese()} {BIRTH_HOURS[hour_index]}"
        )

    @staticmethod
    def lunar_to_solar(lunar_year, lunar_month, lunar_day, is_leap_month=False):
        """
        农历 -> 阳历日期字符串 'YYYY-MM-DD'

        Raises:
            ZiweiInputError: 农历日期不存在（如该年无此闰月、小月三十）
        """
        try:
            lunar = Lunar.fromYmd(lunar_year, -lunar_month if is_leap_month else lunar_month, lunar_day)
        except Exception as e:
            raise ZiweiInputError(f"农历转阳历失败: {e}") from e
        solar = lunar.getSolar()
        return f"{solar.getYear():04d}-{solar.getMonth():02d}-{solar.getDay():02d}"

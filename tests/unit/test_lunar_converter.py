#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LunarConverter 单元测试

测试范围：
- 阳历转农历（含闰月）
- 农历输入（含闰月）
- 不存在的农历日期
"""

import pytest

from core.calculators.LunarConverter import LunarConverter
from core.calculators.ziwei_core import ZiweiInputError


class TestSolarInput:
    def test_lunar_new_year(self):
        info = LunarConverter.to_ziwei_lunar('2024-02-10', 0)
        assert (info.lunar_year, info.lunar_month, info.lunar_day) == (2024, 1, 1)
        assert info.is_leap_month is False
        assert info.year_stem == 0   # 甲
        assert info.year_branch == 4  # 辰
        assert info.label.startswith('甲辰年')
        assert info.label.endswith('子時 (23:00-01:00)')

    def test_year_follows_lunar_new_year(self):
        # 2024-02-09 仍属癸卯年腊月
        info = LunarConverter.to_ziwei_lunar('2024-02-09', 6)
        assert info.lunar_month == 12
        assert info.year_stem == 9
        assert info.year_branch == 3

    def test_leap_month(self):
        # 2023 年闰二月初一为 2023-03-22
        info = LunarConverter.to_ziwei_lunar('2023-04-06', 6)
        assert info.lunar_month == 2
        assert info.lunar_day == 16
        assert info.is_leap_month is True

    def test_hour_out_of_range(self):
        with pytest.raises(ZiweiInputError):
            LunarConverter.to_ziwei_lunar('2024-02-10', 12)


class TestLunarInput:
    def test_plain_month(self):
        info = LunarConverter.to_ziwei_lunar('2024-01-01', 0, 'lunar')
        assert (info.lunar_year, info.lunar_month, info.lunar_day) == (2024, 1, 1)
        assert info.is_leap_month is False

    def test_leap_month(self):
        info = LunarConverter.to_ziwei_lunar('2023-02-16', 0, 'lunar', is_leap_month=True)
        assert info.lunar_month == 2
        assert info.is_leap_month is True

    def test_missing_leap_month(self):
        # 2024 年无闰二月
        with pytest.raises(ZiweiInputError):
            LunarConverter.to_ziwei_lunar('2024-02-01', 0, 'lunar', is_leap_month=True)

    def test_lunar_to_solar(self):
        assert LunarConverter.lunar_to_solar(2024, 1, 1) == '2024-02-10'
        assert LunarConverter.lunar_to_solar(2023, 2, 1, is_leap_month=True) == '2023-03-22'

    def test_to_dict(self):
        data = LunarConverter.to_ziwei_lunar('2024-02-10', 0).to_dict()
        assert set(data) == {
            'lunar_year', 'lunar_month', 'lunar_day', 'is_leap_month', 'year_stem', 'year_branch', 'label',
        }

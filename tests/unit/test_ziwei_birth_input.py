#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""出生资料校验单元测试"""

import pytest

from core.calculators.ziwei_core import (
    ZiweiInputError,
    apply_leap_month_correction,
    parse_birth_date,
    resolve_calendar_type,
    resolve_gender,
    resolve_hour_index,
)


class TestHourIndex:
    @pytest.mark.parametrize("value, expected", [
        (0, 0),
        (11, 11),
        ('子時 (23:00-01:00)', 0),
        ('午時 (11:00-13:00)', 6),
        ('亥時', 11),
        ('卯', 3),
        ('7', 7),
    ])
    def test_accepted(self, value, expected):
        assert resolve_hour_index(value) == expected

    @pytest.mark.parametrize("value", [12, -1, '', '子时', 'noon', True])
    def test_rejected(self, value):
        with pytest.raises(ZiweiInputError):
            resolve_hour_index(value)


class TestCalendarAndGender:
    def test_calendar_labels(self):
        assert resolve_calendar_type('solar') == 'solar'
        assert resolve_calendar_type('農曆') == 'lunar'
        with pytest.raises(ZiweiInputError):
            resolve_calendar_type('islamic')

    def test_gender(self):
        assert resolve_gender('male') == '男'
        assert resolve_gender('女') == '女'
        with pytest.raises(ZiweiInputError):
            resolve_gender('unknown')


class TestBirthDate:
    def test_solar(self):
        assert parse_birth_date('1990-5-15') == (1990, 5, 15)

    def test_solar_not_a_date(self):
        with pytest.raises(ZiweiInputError):
            parse_birth_date('2023-02-29')

    def test_lunar_day_30_allowed(self):
        assert parse_birth_date('2023-02-30', 'lunar') == (2023, 2, 30)

    @pytest.mark.parametrize("value", ['2023-00-10', '2023-13-01', '2023-01-00', '2023-01-31'])
    def test_lunar_out_of_range(self, value):
        with pytest.raises(ZiweiInputError):
            parse_birth_date(value, 'lunar')

    @pytest.mark.parametrize("value", ['', '20230101', '2023-01-01T00:00', None])
    def test_malformed(self, value):
        with pytest.raises(ZiweiInputError):
            parse_birth_date(value)


class TestLeapCorrection:
    def test_boundary(self):
        assert apply_leap_month_correction(6, 15, True) == (6, False)
        assert apply_leap_month_correction(6, 16, True) == (7, True)

    def test_wrap(self):
        assert apply_leap_month_correction(12, 30, True) == (1, True)

    def test_not_leap(self):
        assert apply_leap_month_correction(6, 29, False) == (6, False)

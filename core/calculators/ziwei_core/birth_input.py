#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生资料校验与归一

日期、时辰、历法、性别在进入查表计算之前统一校验，
不合法时抛 ZiweiInputError，不返回任何部分结果。
"""

import re
from datetime import datetime
from typing import Tuple, Union

from core.data.ziwei_constants import (
    BIRTH_HOURS,
    CALENDAR_LABELS,
    CALENDAR_LUNAR,
    CALENDAR_SOLAR,
    EARTHLY_BRANCHES,
    GENDER_LABELS,
)

from .errors import ZiweiInputError

_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{1,2})-(\d{1,2})$')


def resolve_calendar_type(value: str) -> str:
    """solar / lunar，也接受 國曆 / 農曆"""
    if value in CALENDAR_LABELS:
        return value
    for key, label in CALENDAR_LABELS.items():
        if value == label:
            return key
    raise ZiweiInputError(f"不支持的历法类型: {value}")


def parse_birth_date(date_str: str, calendar_type: str = CALENDAR_SOLAR) -> Tuple[int, int, int]:
    """
    解析 YYYY-MM-DD

    阳历须为真实存在的日期；农历只校验月 1-12、日 1-30，
    具体某月是否有三十日由农历转换时再判断。
    """
    match = _DATE_PATTERN.match(date_str or '')
    if not match:
        raise ZiweiInputError(f"日期格式错误，应为 YYYY-MM-DD: {date_str}")
    year, month, day = (int(part) for part in match.groups())

    if calendar_type == CALENDAR_SOLAR:
        try:
            datetime(year, month, day)
        except ValueError as exc:
            raise ZiweiInputError(f"无效的阳历日期: {date_str}") from exc
    elif calendar_type == CALENDAR_LUNAR:
        if not 1 <= month <= 12:
            raise ZiweiInputError(f"农历月份超出范围: {month}")
        if not 1 <= day <= 30:
            raise ZiweiInputError(f"农历日超出范围: {day}")
    else:
        raise ZiweiInputError(f"不支持的历法类型: {calendar_type}")
    return year, month, day


def resolve_hour_index(value: Union[int, str]) -> int:
    """
    时辰 -> 序号（子=0 … 亥=11）

    接受 0-11、完整标签 "子時 (23:00-01:00)"、"子時" 或单字 "子"。
    """
    if isinstance(value, bool):
        raise ZiweiInputError(f"无法识别的时辰: {value}")
    if isinstance(value, int):
        if 0 <= value <= 11:
            return value
        raise ZiweiInputError(f"时辰序号超出范围: {value}")

    text = (value or '').strip()
    if text in BIRTH_HOURS:
        return BIRTH_HOURS.index(text)
    if text.isdigit() and 0 <= int(text) <= 11:
        return int(text)
    for index, label in enumerate(BIRTH_HOURS):
        if text == label.split(' ')[0]:
            return index
    if text in EARTHLY_BRANCHES:
        return EARTHLY_BRANCHES.index(text)
    raise ZiweiInputError(f"无法识别的时辰: {value}")


def resolve_gender(value: str) -> str:
    """male / female / 男 / 女 -> 显示用的 男 / 女"""
    if value in GENDER_LABELS:
        return GENDER_LABELS[value]
    if value in GENDER_LABELS.values():
        return value
    raise ZiweiInputError(f"无法识别的性别: {value}")


def apply_leap_month_correction(month: int, day: int, is_leap_month: bool) -> Tuple[int, bool]:
    """
    闰月修正：闰月十五日以前按本月，十六日起按下月（十二月闰则进正月）

    Returns:
        (排盘用月份, 是否发生了修正)
    """
    if is_leap_month and day > 15:
        return (month % 12) + 1, True
    return month, False

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
干支循环运算

所有宫位偏移都经过 normalize12，保证结果落在 0-11。
"""

from typing import Sequence, TypeVar

from .errors import ZiweiTableLookupError

T = TypeVar('T')


def normalize12(n: int) -> int:
    """任意整数（含负数）归一到地支序号 0-11"""
    return ((n % 12) + 12) % 12


def normalize10(n: int) -> int:
    """任意整数（含负数）归一到天干序号 0-9"""
    return ((n % 10) + 10) % 10


def lookup(table: Sequence[T], index: int, table_name: str) -> T:
    """
    按下标取固定表项

    下标越界（包括负数）直接抛 ZiweiTableLookupError，不做截断。
    """
    if not 0 <= index < len(table):
        raise ZiweiTableLookupError(f"{table_name} 索引越界: {index} (表长 {len(table)})")
    return table[index]

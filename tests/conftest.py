#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 项目根目录路径
- 共享的出生资料 / 农历信息 fixtures
"""

import pytest
import sys
import os
from typing import Dict, Any

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from core.calculators.LunarConverter import LunarBirthInfo  # noqa: E402


def make_lunar_info(
    year_stem: int = 0,
    year_branch: int = 0,
    month: int = 1,
    day: int = 1,
    is_leap_month: bool = False,
    label: str = '測試年 正月 初一',
) -> LunarBirthInfo:
    """构造不依赖 lunar_python 的农历信息"""
    return LunarBirthInfo(
        lunar_year=1984,
        lunar_month=month,
        lunar_day=day,
        is_leap_month=is_leap_month,
        year_stem=year_stem,
        year_branch=year_branch,
        label=label,
    )


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def jia_zi_lunar_info() -> LunarBirthInfo:
    """
    甲子年正月初一

    Returns:
        LunarBirthInfo
    """
    return make_lunar_info()


@pytest.fixture(scope="function")
def sample_ziwei_request() -> Dict[str, Any]:
    """
    示例紫微排盘请求

    Returns:
        请求字典
    """
    return {
        "name": "測試",
        "gender": "female",
        "calendar_type": "solar",
        "birth_date": "2024-02-10",
        "birth_hour": "子時 (23:00-01:00)",
    }


@pytest.fixture(scope="function")
def lunar_info_factory():
    """
    农历信息工厂

    Returns:
        make_lunar_info
    """
    return make_lunar_info

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Pydantic schema definitions for ziwei-core-service."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ZiweiCoreRequest(BaseModel):
    name: str = Field('', description="姓名")
    gender: str = Field('male', description="性别，male/female 或 男/女")
    calendar_type: str = Field('solar', description="历法，solar/lunar 或 國曆/農曆")
    birth_date: str = Field(..., description="出生日期，格式 YYYY-MM-DD（阳历或农历）")
    birth_hour: Union[int, str] = Field(..., description="时辰，0-11 或 '子時 (23:00-01:00)' / '子時' / '子'")
    is_leap_month: bool = Field(False, description="农历输入时是否为闰月")


class PalaceSchema(BaseModel):
    branch: str
    branch_index: int
    stem: str
    stem_index: int
    name: str
    major_stars: List[str]
    minor_stars: List[str]
    is_four_transformed: str


class ChartSchema(BaseModel):
    life_palace_location: str
    body_palace_location: str
    life_palace_branch: int
    body_palace_branch: int
    four_transformations: Dict[str, str]
    all_palaces: List[PalaceSchema]


class ProfileSchema(BaseModel):
    name: str
    gender: str
    lunar_date_time: str
    five_elements_bureau: str


class ZiweiCoreResponse(BaseModel):
    profile: ProfileSchema
    chart: ChartSchema
    metadata: Optional[Dict[str, Any]] = None

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微命盘解读结果模型 - 外部解读服务返回的结构化数据
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class StarInfluence(BaseModel):
    """单颗星曜在本宫的影响"""
    name: str = Field(..., description="星曜名称")
    brightness: Optional[str] = Field(None, description="亮度（廟旺得利平不陷）")
    influence: str = Field(..., description="该星在本宫的具体影响")


class PalaceAnalysis(BaseModel):
    """单宫解读"""
    palace_name: str = Field(..., description="宫名")
    summary: str = Field(..., description="本宫状态摘要")
    stars_detail: List[StarInfluence] = Field(default_factory=list, description="逐星分析")


class AnalysisInterpretation(BaseModel):
    """命盘整体解读"""
    overall_destiny: str = Field(..., description="本命特点与格局分析")
    palaces: List[PalaceAnalysis] = Field(default_factory=list, description="各宫解读")

# -*- coding: utf-8 -*-
"""
数据模型模块
"""

from server.models.ziwei_interpretation import AnalysisInterpretation, PalaceAnalysis, StarInfluence

__all__ = ['AnalysisInterpretation', 'PalaceAnalysis', 'StarInfluence']

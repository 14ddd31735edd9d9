# -*- coding: utf-8 -*-
"""
服务器工具模块
"""

from .prompt_builders import (
    EMPTY_PALACE_INSTRUCTION,
    ZIWEI_SYSTEM_INSTRUCTION,
    build_ziwei_interpretation_prompt,
    opposite_palace,
)

__all__ = [
    'EMPTY_PALACE_INSTRUCTION',
    'ZIWEI_SYSTEM_INSTRUCTION',
    'build_ziwei_interpretation_prompt',
    'opposite_palace',
]

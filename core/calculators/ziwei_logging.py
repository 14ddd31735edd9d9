#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘模块共享日志工具

提供不会因 Broken pipe 中断排盘的日志处理器，供 ziwei_calculator 使用。
日志级别由环境变量 ZIWEI_LOG_LEVEL 控制，默认 INFO。
"""

import logging

from server.config.env_config import ZIWEI_LOG_LEVEL, get_env_config


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def _resolve_level(name):
    level = logging.getLevelName((name or 'INFO').upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("core.calculators.ziwei_calculator")
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(get_env_config().get_config(ZIWEI_LOG_LEVEL, "INFO")))

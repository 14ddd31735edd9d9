#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

环境判断与紫微服务相关配置项的读取都集中在这里。
"""

import logging
import os
from typing import Literal, Optional

logger = logging.getLogger(__name__)

# 环境类型定义
Environment = Literal["local", "staging", "production"]

# 配置键
ZIWEI_LOG_LEVEL = "ZIWEI_LOG_LEVEL"
ZIWEI_CORE_SERVICE_URL = "ZIWEI_CORE_SERVICE_URL"
ZIWEI_INTERPRETATION_URL = "ZIWEI_INTERPRETATION_URL"
ZIWEI_INTERPRETATION_API_KEY = "ZIWEI_INTERPRETATION_API_KEY"
ZIWEI_INTERPRETATION_MODEL = "ZIWEI_INTERPRETATION_MODEL"
ZIWEI_INTERPRETATION_TIMEOUT = "ZIWEI_INTERPRETATION_TIMEOUT"
ZIWEI_INTERPRETATION_MAX_RETRIES = "ZIWEI_INTERPRETATION_MAX_RETRIES"


class EnvConfig:
    """
    统一环境配置管理器

    提供统一的环境判断和配置读取接口
    """

    # 生产环境必需的环境变量列表
    PRODUCTION_REQUIRED_VARS = [
        ZIWEI_INTERPRETATION_URL,
        ZIWEI_INTERPRETATION_API_KEY,
    ]

    def __init__(self):
        self._env: Environment = "local"
        self._detect_environment()

    def _detect_environment(self):
        """检测当前环境：优先读取 ENV，其次 APP_ENV，默认 local"""
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()

        if env_value in ["staging", "stage"]:
            self._env = "staging"
        elif env_value in ["prod", "production"]:
            self._env = "production"
        else:
            self._env = "local"

        if self.is_production:
            self._validate_production_vars()

    def _validate_production_vars(self):
        missing = [var for var in self.PRODUCTION_REQUIRED_VARS if not os.getenv(var)]
        if missing:
            # 不抛异常，解读服务在实际调用时给出具体错误
            logger.error(f"生产环境缺少必需环境变量: {', '.join(missing)}")

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def is_local_dev(self) -> bool:
        return self._env == "local"

    @property
    def is_staging(self) -> bool:
        return self._env == "staging"

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    def get_config(self, key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
        """
        获取配置值（从环境变量）

        Raises:
            ValueError: 如果 required=True 且配置不存在
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            logger.warning(f"环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
            return default

    def get_float_config(self, key: str, default: float = 0.0) -> float:
        value = os.getenv(key, str(default))
        try:
            return float(value)
        except ValueError:
            logger.warning(f"环境变量 {key}={value!r} 不是数字，使用默认值 {default}")
            return default


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config() -> None:
    """丢弃缓存的单例，环境变量变更后重新读取（测试用）"""
    global _env_config
    _env_config = None


def is_production() -> bool:
    return get_env_config().is_production

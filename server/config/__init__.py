# -*- coding: utf-8 -*-
"""
配置模块
"""

from .env_config import EnvConfig, get_env_config, is_production, reset_env_config

__all__ = ['EnvConfig', 'get_env_config', 'reset_env_config', 'is_production']

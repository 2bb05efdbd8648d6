# -*- coding: utf-8 -*-
"""
fluentfilter logs - 日志配置

支持 glog、text、json 三种格式，输出到标准输出。
"""

from .config import (
    LogConfig,
    LogFormatter,
    LogLevel,
    install_logs,
    get_logger,
    parse_level,
)
from .formatter import GlogFormatter, JsonFormatter, TextFormatter

__all__ = [
    # 配置类
    "LogConfig",
    "LogFormatter",
    "LogLevel",
    # 核心函数
    "install_logs",
    "get_logger",
    "parse_level",
    # 格式化器
    "GlogFormatter",
    "TextFormatter",
    "JsonFormatter",
]

# -*- coding: utf-8 -*-
"""
日志配置模块

支持：
- 多种日志格式（glog、text、json）
- 多种日志级别
- 输出到标准输出
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .formatter import GlogFormatter, JsonFormatter, TextFormatter


class LogFormatter(str, Enum):
    """日志格式枚举"""
    GLOG = "glog"
    TEXT = "text"
    JSON = "json"


class LogLevel(str, Enum):
    """日志级别枚举"""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    CRITICAL = "critical"


# 日志级别映射
LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.CRITICAL: logging.CRITICAL,
}


def parse_level(level: str) -> int:
    """将级别字符串转换为 logging 级别，未知级别按 INFO 处理"""
    try:
        return LEVEL_MAP[LogLevel(level.lower())]
    except ValueError:
        return logging.INFO


@dataclass
class LogConfig:
    """日志配置

    Attributes:
        formatter: 日志格式（glog、text、json）
        level: 日志级别，未知级别按 info 处理
        report_caller: 是否报告调用者信息
        enable_colors: 是否启用颜色输出（仅 glog）
    """
    formatter: str = "glog"
    level: str = "info"
    report_caller: bool = True
    enable_colors: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """从字典创建配置"""
        return cls(
            formatter=data.get("formatter", "glog"),
            level=data.get("level", "info"),
            report_caller=data.get("report_caller", True),
            enable_colors=data.get("enable_colors", False),
        )


def _make_formatter(config: LogConfig) -> logging.Formatter:
    name = config.formatter.lower()
    if name == LogFormatter.GLOG.value:
        return GlogFormatter(
            enable_colors=config.enable_colors,
            report_caller=config.report_caller,
        )
    if name == LogFormatter.JSON.value:
        return JsonFormatter(report_caller=config.report_caller)
    return TextFormatter(report_caller=config.report_caller)


def install_logs(config: Optional[LogConfig] = None) -> None:
    """安装日志配置

    替换根日志记录器的处理器，输出到标准输出。

    Args:
        config: 日志配置，如果为 None 则使用默认配置
    """
    if config is None:
        config = LogConfig()

    level = parse_level(config.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_make_formatter(config))
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"日志初始化完成: level={config.level}, formatter={config.formatter}")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取日志记录器

    Args:
        name: 日志记录器名称，None 时返回根日志记录器
    """
    return logging.getLogger(name)

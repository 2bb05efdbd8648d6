# -*- coding: utf-8 -*-
"""滤镜注册与格式化工具

- register_filter: 在命令构建器上注册滤镜方法
- add_filter: 向命令构建器追加滤镜描述
- format_filter / format_filters: 将滤镜描述渲染为 ffmpeg filter 字符串
"""

from typing import Any, Callable, Dict, Iterable, TypedDict


class FilterSpec(TypedDict):
    """滤镜描述

    Attributes:
        name: ffmpeg 滤镜名称，如 "vaguedenoiser"
        options: 滤镜参数，key 为参数名
    """

    name: str
    options: Dict[str, Any]


# 第一层：滤镜参数值中需要转义的字符
_OPTION_SPECIAL = "\\':"
# 第二层：filtergraph 中需要转义的字符
_GRAPH_SPECIAL = "\\'[],;"


def register_filter(command, name: str, factory: Callable):
    """在命令构建器上注册滤镜方法

    注册后 command 的实例可以通过 command.<name>() 调用 factory，
    factory 的第一个参数为调用它的实例。

    Args:
        command: 命令构建器（类或实例），需提供 register_filter 方法
        name: 方法名
        factory: 工厂函数
    """
    command.register_filter(name, factory)


def add_filter(command, spec: FilterSpec):
    """向命令构建器追加一个滤镜描述

    Args:
        command: 命令构建器实例，需提供 add_filter 方法
        spec: 滤镜描述

    Returns:
        command: 原命令构建器
    """
    command.add_filter(spec)
    return command


def render_value(value: Any) -> str:
    """将参数值渲染为字符串（不加引号）

    布尔值渲染为 1/0，列表和元组用 | 连接。
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return "|".join(render_value(v) for v in value)
    return str(value)


def _escape(text: str, special: str) -> str:
    return "".join("\\" + c if c in special else c for c in text)


def _escape_edge(c: str) -> str:
    # 首尾空白两层都要转义，否则会被 ffmpeg 去掉
    return "\\\\\\" + c


def escape_value(text: str) -> str:
    """按 ffmpeg filtergraph 的两层转义规则转义参数值

    第一层是滤镜参数解析（转义 \\ ' :，以及首尾空白），
    第二层是 filtergraph 解析（转义 \\ ' [ ] , ;）。
    例如 it's 转义为 it\\\\\\'s。
    """
    stripped = text.strip()
    if not stripped:
        return "".join(_escape_edge(c) for c in text)

    start = text.index(stripped)
    end = start + len(stripped)
    return (
        "".join(_escape_edge(c) for c in text[:start])
        + _escape(_escape(stripped, _OPTION_SPECIAL), _GRAPH_SPECIAL)
        + "".join(_escape_edge(c) for c in text[end:])
    )


def format_filter(spec: FilterSpec) -> str:
    """构建单个滤镜的 ffmpeg filter 字符串

    Args:
        spec: 滤镜描述

    Returns:
        str: 如 "vaguedenoiser=threshold=2:nsteps=6"，无参数时只返回滤镜名
    """
    options = spec.get("options") or {}
    if not options:
        return spec["name"]

    parts = [f"{key}={escape_value(render_value(value))}" for key, value in options.items()]
    return f"{spec['name']}=" + ":".join(parts)


def format_filters(specs: Iterable[FilterSpec]) -> str:
    """将多个滤镜描述用逗号连接为 filter chain"""
    return ",".join(format_filter(spec) for spec in specs)

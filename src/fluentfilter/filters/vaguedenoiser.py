# -*- coding: utf-8 -*-
"""VaguedenoiserFilter - 小波去噪滤镜

为 FfmpegCommand 注册 vaguedenoiser() 方法，以构建器方式配置
ffmpeg 的 vaguedenoiser 滤镜，参数说明见
http://ffmpeg.org/ffmpeg-filters.html#vaguedenoiser

用法示例::

    vaguedenoiser(FfmpegCommand)

    FfmpegCommand("input.mp4") \\
        .vaguedenoiser() \\
            .threshold(2) \\
            .method(1) \\
            .nsteps(6) \\
            .build() \\
        .output("output.mp4")

注意：build() 按真值判断参数是否设置，0、""、False、None 都会被
当作未设置而不输出（例如 percent(0) 不会出现在 options 中）。
需要保留这些值时使用 build(keep_falsy=True)。
"""

import logging
from typing import Any, Dict

from ..utils import FilterSpec, add_filter, register_filter

logger = logging.getLogger(__name__)

FILTER_NAME = "vaguedenoiser"


def vaguedenoiser(command):
    """为命令构建器注册 vaguedenoiser 方法

    Args:
        command: 命令构建器（FfmpegCommand 类或实例）

    Returns:
        command: 原命令构建器，注册后增加了 vaguedenoiser 方法
    """

    def factory(self):
        return VaguedenoiserFilter(self)

    register_filter(command, FILTER_NAME, factory)
    return command


class VaguedenoiserFilter:
    """vaguedenoiser 滤镜配置

    每个 setter 都返回 self，最后调用 build() 把滤镜注册到命令中。
    每个 setter 还有一个 with_ 前缀的别名，行为完全一致。
    """

    # 参数名，同时决定 options 中的 key 顺序
    PARAMS = ("threshold", "method", "nsteps", "percent", "planes")

    # 别名 -> setter 名
    ALIASES = {
        "with_threshold": "threshold",
        "with_method": "method",
        "with_nsteps": "nsteps",
        "with_percent": "percent",
        "with_planes": "planes",
    }

    def __init__(self, command):
        """
        Args:
            command: 命令构建器实例
        """
        self.command = command
        # 只记录调用过 setter 的参数
        self._values: Dict[str, Any] = {}

    def threshold(self, val) -> "VaguedenoiserFilter":
        """去噪强度，越大越平滑

        硬阈值比软阈值可以使用更大的值，画面才会开始显得过度滤波。
        """
        self._values["threshold"] = val
        return self

    def method(self, val) -> "VaguedenoiserFilter":
        """阈值方法：hard / soft / garrote"""
        self._values["method"] = val
        return self

    def nsteps(self, val) -> "VaguedenoiserFilter":
        """小波分解次数

        画面分解有上限，640x480 一般最多 8 次（2^9 = 512 > 480）。
        """
        self._values["nsteps"] = val
        return self

    def percent(self, val) -> "VaguedenoiserFilter":
        """部分或完全去噪（限制系数收缩），0 ~ 100"""
        self._values["percent"] = val
        return self

    def planes(self, val) -> "VaguedenoiserFilter":
        """需要处理的平面，默认处理全部平面"""
        self._values["planes"] = val
        return self

    def options(self, keep_falsy: bool = False) -> Dict[str, Any]:
        """构建 options 字典（不修改命令）

        Args:
            keep_falsy: False 时只保留真值参数；True 时保留所有调用过 setter 的参数

        Returns:
            Dict[str, Any]: 参数字典，值原样透传
        """
        opt = {}
        for name in self.PARAMS:
            if name not in self._values:
                continue
            value = self._values[name]
            if value or keep_falsy:
                opt[name] = value
        return opt

    def build(self, keep_falsy: bool = False):
        """生成滤镜描述并注册到命令中

        Args:
            keep_falsy: 是否保留 0、"" 等假值参数，默认不保留

        Returns:
            command: 命令构建器，支持继续链式调用
        """
        spec: FilterSpec = {
            "name": FILTER_NAME,
            "options": self.options(keep_falsy=keep_falsy),
        }
        logger.debug(f"构建滤镜: {spec}")
        add_filter(self.command, spec)
        return self.command


for _alias, _name in VaguedenoiserFilter.ALIASES.items():
    setattr(VaguedenoiserFilter, _alias, getattr(VaguedenoiserFilter, _name))
del _alias, _name

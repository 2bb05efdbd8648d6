# -*- coding: utf-8 -*-
"""Filter package - 滤镜集合

每个滤镜模块提供一个注册函数和一个配置类：
- vaguedenoiser / VaguedenoiserFilter: 小波去噪
"""

from .vaguedenoiser import VaguedenoiserFilter, vaguedenoiser

# 导入 fluentfilter 时注册到 FfmpegCommand 的滤镜
REGISTRARS = [
    vaguedenoiser,
]

__all__ = [
    "REGISTRARS",
    "VaguedenoiserFilter",
    "vaguedenoiser",
]

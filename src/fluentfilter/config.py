# -*- coding: utf-8 -*-
"""命令配置

FfmpegCommand 执行 ffmpeg 时使用的默认参数，
output() 的单次调用参数优先级高于此配置。
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class CommandConfig:
    """ffmpeg 命令配置

    Attributes:
        cmd: ffmpeg 可执行文件名或路径
        overwrite: 是否覆盖输出文件（-y）
        quiet: 是否静默执行（捕获 stdout/stderr）
        audio_codec: 音频编码器，默认直接复制
        video_codec: 视频编码器，None 时由 ffmpeg 自动选择
        error_lines: 执行失败时保留的 stderr 末尾行数
    """

    cmd: str = "ffmpeg"
    overwrite: bool = True
    quiet: bool = True
    audio_codec: Optional[str] = "copy"
    video_codec: Optional[str] = None
    error_lines: int = 5

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommandConfig":
        """从字典创建配置，忽略未知字段

        Args:
            data: 配置字典

        Returns:
            CommandConfig: 配置实例
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

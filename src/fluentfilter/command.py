# -*- coding: utf-8 -*-
"""FfmpegCommand - ffmpeg 命令构建器

滤镜以"能力"的形式注册到 FfmpegCommand 上，每个滤镜方法返回一个
配置对象，配置对象的 build() 会把滤镜描述追加到命令的滤镜列表中，
并返回命令本身以继续链式调用。

底层使用 ffmpeg-python API 实现。

用法示例::

    FfmpegCommand("input.mp4") \\
        .vaguedenoiser() \\
            .threshold(2) \\
            .nsteps(6) \\
            .build() \\
        .output("output.mp4")
"""

import copy
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import CommandConfig
from .utils import FilterSpec, format_filters, render_value

logger = logging.getLogger(__name__)


def _ensure_ffmpeg():
    """确保 ffmpeg-python 已安装"""
    try:
        import ffmpeg
        return ffmpeg
    except ImportError:
        raise ImportError("需要安装 ffmpeg-python: pip install ffmpeg-python")


class FfmpegCommand:
    """ffmpeg 命令构建器

    持有输入路径和有序的滤镜描述列表，所有滤镜最终合并为
    一个 ffmpeg -vf filter chain，一次性处理。
    """

    def __init__(self, source: Optional[str] = None, config: Optional[CommandConfig] = None):
        """初始化 FfmpegCommand

        Args:
            source: 输入视频路径
            config: 命令配置，None 时使用默认配置
        """
        self._source = source
        self._config = config or CommandConfig()
        self._filters: List[FilterSpec] = []

    @classmethod
    def register_filter(cls, name: str, factory: Callable) -> None:
        """注册滤镜方法

        factory 作为方法安装到类上，所有实例都可以调用，
        调用时第一个参数为实例本身。

        Args:
            name: 方法名
            factory: 工厂函数

        Raises:
            ValueError: 方法名为空
        """
        if not name:
            raise ValueError("滤镜名称不能为空")
        setattr(cls, name, factory)
        logger.debug(f"注册滤镜: {cls.__name__}.{name}")

    def add_filter(self, spec: FilterSpec) -> "FfmpegCommand":
        """追加一个滤镜描述

        Args:
            spec: 滤镜描述，必须包含 name

        Returns:
            self: 支持链式调用

        Raises:
            ValueError: 滤镜描述缺少 name
        """
        name = spec.get("name")
        if not name:
            raise ValueError(f"滤镜描述缺少 name: {spec!r}")

        # 深拷贝，调用方之后修改原字典或其中的列表不影响已保存的描述
        stored: FilterSpec = {"name": name, "options": copy.deepcopy(dict(spec.get("options") or {}))}
        self._filters.append(stored)
        logger.debug(f"添加滤镜: {name}, options={stored['options']}")
        return self

    @property
    def filters(self) -> Tuple[FilterSpec, ...]:
        """已添加的滤镜描述（按添加顺序）

        返回深拷贝，修改返回值不影响命令内部的滤镜列表。
        """
        return tuple(copy.deepcopy(self._filters))

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def config(self) -> CommandConfig:
        return self._config

    def input(self, source: str) -> "FfmpegCommand":
        """设置输入视频路径

        Returns:
            self: 支持链式调用
        """
        self._source = source
        return self

    def build(self) -> str:
        """构建最终的 filter chain 字符串

        Returns:
            str: 所有滤镜用逗号连接的 ffmpeg filter 字符串
        """
        return format_filters(self._filters)

    def apply_filters(self, stream=None):
        """将滤镜描述依次应用到 ffmpeg-python 的流上

        Args:
            stream: ffmpeg-python 流，None 时使用输入文件的视频流

        Returns:
            应用了全部滤镜的 ffmpeg-python 流

        Raises:
            ValueError: 未设置输入且未传入 stream
            ImportError: 未安装 ffmpeg-python
        """
        if stream is None:
            ffmpeg = _ensure_ffmpeg()
            if not self._source:
                raise ValueError("没有设置输入视频，请先调用 input()")
            stream = ffmpeg.input(self._source).video

        for spec in self._filters:
            # ffmpeg-python 会自行转义参数值
            kwargs = {key: render_value(value) for key, value in spec["options"].items()}
            stream = stream.filter(spec["name"], **kwargs)
        return stream

    def _output_stream(
        self,
        output_path: str,
        video_codec: Optional[str] = None,
        audio_codec: Optional[str] = None,
    ):
        ffmpeg = _ensure_ffmpeg()

        if not self._source:
            raise ValueError("没有设置输入视频，请先调用 input()")
        if not self._filters:
            raise ValueError("没有添加任何滤镜，请先调用 vaguedenoiser() 等滤镜方法")

        # 构建输出参数
        output_kwargs = {"vf": self.build()}

        # 传入空字符串可以关闭配置中的默认值
        if audio_codec is None:
            audio_codec = self._config.audio_codec
        if audio_codec:
            output_kwargs["acodec"] = audio_codec

        if video_codec is None:
            video_codec = self._config.video_codec
        if video_codec:
            output_kwargs["vcodec"] = video_codec

        return ffmpeg.input(self._source).output(output_path, **output_kwargs)

    def compile(
        self,
        output_path: str,
        video_codec: Optional[str] = None,
        audio_codec: Optional[str] = None,
        overwrite: Optional[bool] = None,
    ) -> List[str]:
        """构建 ffmpeg 命令行参数（不执行）

        Returns:
            List[str]: 完整的命令行参数列表，第一个元素为 ffmpeg 可执行文件

        Raises:
            ValueError: 未设置输入或没有添加任何滤镜
        """
        if overwrite is None:
            overwrite = self._config.overwrite
        out = self._output_stream(output_path, video_codec, audio_codec)
        return out.compile(cmd=self._config.cmd, overwrite_output=overwrite)

    def output(
        self,
        output_path: str,
        video_codec: Optional[str] = None,
        audio_codec: Optional[str] = None,
        overwrite: Optional[bool] = None,
    ) -> str:
        """执行滤镜链并输出视频

        Args:
            output_path: 输出视频路径
            video_codec: 视频编码器，None 时使用配置
            audio_codec: 音频编码器，None 时使用配置
            overwrite: 是否覆盖输出文件，None 时使用配置

        Returns:
            str: 输出文件路径

        Raises:
            ValueError: 未设置输入或没有添加任何滤镜
            ImportError: 未安装 ffmpeg-python
            RuntimeError: ffmpeg 执行失败
        """
        ffmpeg = _ensure_ffmpeg()

        if overwrite is None:
            overwrite = self._config.overwrite
        out = self._output_stream(output_path, video_codec, audio_codec)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"执行滤镜链: {self._source} -> {output_path}")
        logger.info(f"滤镜: {self.build()}")

        try:
            out.run(cmd=self._config.cmd, overwrite_output=overwrite, quiet=self._config.quiet)
        except ffmpeg.Error as e:
            stderr = e.stderr.decode("utf-8", errors="replace") if e.stderr else "未知错误"
            error_lines = stderr.strip().split("\n")[-self._config.error_lines:]
            raise RuntimeError(
                f"滤镜执行失败:\n" + "\n".join(error_lines)
            ) from e

        logger.info(f"滤镜链执行完成: {output_path}")
        return output_path

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
pytest 配置文件

提供测试夹具和配置
"""

import logging
import subprocess
import sys
from pathlib import Path

import pytest

# 将 src 目录添加到 Python 路径
ROOT_DIR = Path(__file__).parent.parent
SRC_DIR = ROOT_DIR / "src"
sys.path.insert(0, str(SRC_DIR))


def _has_cli(cmd: str) -> bool:
    """检测 CLI 可执行文件是否可用"""
    try:
        subprocess.run([cmd, "-version"], capture_output=True, timeout=5)
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


# 依赖可用性标志
HAS_FFMPEG_CLI = _has_cli("ffmpeg")
HAS_FFPROBE_CLI = _has_cli("ffprobe")

# 通用 skip 标记
skip_no_ffmpeg_cli = pytest.mark.skipif(not HAS_FFMPEG_CLI, reason="ffmpeg CLI 未安装")
skip_no_ffprobe = pytest.mark.skipif(not HAS_FFPROBE_CLI, reason="ffprobe CLI 未安装")

# 自定义 integration 标记
integration = pytest.mark.integration


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: 需要 ffmpeg CLI 的集成测试")


@pytest.fixture
def restore_root_logger():
    """测试后恢复根日志记录器的处理器和级别"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_video(tmp_path: Path) -> str:
    """用 ffmpeg testsrc 生成 1 秒的测试视频"""
    if not HAS_FFMPEG_CLI:
        pytest.skip("ffmpeg CLI 未安装")
    path = tmp_path / "testsrc.mp4"
    subprocess.run(
        [
            "ffmpeg", "-y", "-loglevel", "error",
            "-f", "lavfi", "-i", "testsrc=size=320x240:rate=10",
            "-t", "1", "-pix_fmt", "yuv420p", str(path),
        ],
        check=True,
        capture_output=True,
    )
    return str(path)

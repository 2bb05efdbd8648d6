"""
fluentfilter is a fluent ffmpeg command builder.
Each video filter is registered on the command as a method returning
a chained configuration object.

Modules:
- fluentfilter.command: FfmpegCommand, the command builder
- fluentfilter.filters: filter registrars and configuration objects
- fluentfilter.utils: filter registration and formatting helpers
- fluentfilter.logs: logging setup
"""

from typing import Optional

from fluentfilter.__version__ import __version__
from fluentfilter.command import FfmpegCommand
from fluentfilter.config import CommandConfig
from fluentfilter.filters import REGISTRARS, VaguedenoiserFilter, vaguedenoiser
from fluentfilter.utils import FilterSpec, add_filter, format_filter, format_filters, register_filter

for _registrar in REGISTRARS:
    _registrar(FfmpegCommand)


def ffmpeg(source: Optional[str] = None, config: Optional[CommandConfig] = None) -> FfmpegCommand:
    """创建一个 FfmpegCommand"""
    return FfmpegCommand(source, config)


__all__ = [
    "__version__",
    "CommandConfig",
    "FfmpegCommand",
    "FilterSpec",
    "VaguedenoiserFilter",
    "add_filter",
    "ffmpeg",
    "format_filter",
    "format_filters",
    "register_filter",
    "vaguedenoiser",
]

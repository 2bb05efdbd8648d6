# -*- coding: utf-8 -*-

__title__ = "fluentfilter"
__description__ = "Fluent ffmpeg filter builder, one chained configuration object per filter."
__url__ = "https://github.com/kaydxh/fluentfilter"
__version__ = "0.1.0"
__author__ = "kaydxh"
__author_email__ = "kaydxh@users.noreply.github.com"
__license__ = "MIT"

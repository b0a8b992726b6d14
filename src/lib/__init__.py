"""
clansi - ANSI escape markup for terminal output

Compose plain strings and directive references into styled terminal text.
"""

__version__ = "1.0.0"

from .codes import ANSI_CODES, ESC, ansi, ansi_enabled, ansi_set, with_ansi, without_ansi, codes_bind, codes_get, codes_register
from .styles import DEFAULT_STYLES, style_resolve, styles_bind, styles_extend, styles_get, styles_set
from .markup import clansify, clansify_helper, style, style_wrap
from .docs import DocLookupError, doc_print, doc_render, doc_resolve, styleTestPage_print, styleTestPage_render
from .stylesheet import StyleSheet, StyleSheetError
from .log import LOG, logger_configure, state_connectToLogger

__all__ = [
    "ANSI_CODES",
    "ESC",
    "ansi",
    "ansi_enabled",
    "ansi_set",
    "with_ansi",
    "without_ansi",
    "codes_bind",
    "codes_get",
    "codes_register",
    "DEFAULT_STYLES",
    "style_resolve",
    "styles_bind",
    "styles_extend",
    "styles_get",
    "styles_set",
    "clansify",
    "clansify_helper",
    "style",
    "style_wrap",
    "DocLookupError",
    "doc_print",
    "doc_render",
    "doc_resolve",
    "styleTestPage_print",
    "styleTestPage_render",
    "StyleSheet",
    "StyleSheetError",
    "LOG",
    "logger_configure",
    "state_connectToLogger",
    "__version__",
]

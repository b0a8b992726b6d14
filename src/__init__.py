"""
clansi - ANSI escape markup for terminal output

Decorates sequences of strings with terminal escape directives (color,
weight, underline, ...) and degrades to plain text when styling is off.

    from clansi import clansify, k
    print(clansify("this is ", k.red, "red", k.reset, ", while this is ",
                   k.bright, k.green, k.underline, "bold&green&underlined."))
"""

__version__ = "1.0.0"

from .lib import (
    ANSI_CODES,
    ansi,
    with_ansi,
    without_ansi,
    clansify,
    style,
    style_wrap,
    styles_bind,
    styles_set,
    doc_print,
    styleTestPage_print,
    StyleSheet,
    LOG,
    state_connectToLogger,
)
from .models import Directive, Tagged, k, tag

__all__ = [
    "ANSI_CODES",
    "ansi",
    "with_ansi",
    "without_ansi",
    "clansify",
    "style",
    "style_wrap",
    "styles_bind",
    "styles_set",
    "doc_print",
    "styleTestPage_print",
    "StyleSheet",
    "LOG",
    "state_connectToLogger",
    "Directive",
    "Tagged",
    "k",
    "tag",
    "__version__",
]

"""
ANSI directive table and escape emitter

Maps symbolic directive names to SGR escape fragments and turns a single
directive name into the escape sequence to print.

A call like ansi("blue") returns the escape string that turns blue printing
on. When styling is switched off for the current context, ansi() returns an
empty string for every directive, so one version of marked-up text serves
both styled and plain output.

Example:
    >>> with with_ansi():
    ...     ansi("red")
    '\\x1b[31m'
    >>> with without_ansi():
    ...     ansi("red")
    ''
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Mapping

from ..config import appsettings
from ..models.markup import Directive
from .log import LOG


# Escape introducer byte that starts every terminal escape sequence
ESC: str = "\x1b"

ANSI_CODES: Dict[str, str] = {
    "reset":             "[0m",
    "bright":            "[1m",
    "blink-slow":        "[5m",
    "underline":         "[4m",
    "underline-off":     "[24m",
    "inverse":           "[7m",
    "inverse-off":       "[27m",
    "strikethrough":     "[9m",
    "strikethrough-off": "[29m",

    "default": "[39m",
    "white":   "[37m",
    "black":   "[30m",
    "red":     "[31m",
    "green":   "[32m",
    "blue":    "[34m",
    "yellow":  "[33m",
    "magenta": "[35m",
    "cyan":    "[36m",

    "bg-default": "[49m",
    "bg-white":   "[47m",
    "bg-black":   "[40m",
    "bg-red":     "[41m",
    "bg-green":   "[42m",
    "bg-blue":    "[44m",
    "bg-yellow":  "[43m",
    "bg-magenta": "[45m",
    "bg-cyan":    "[46m",
}

# Root value of the styling switch, shared by every thread and task
_use_ansi_root: bool = appsettings.ansiDefault_resolve()

# Scoped override, one binding per thread / asyncio task; UNBOUND falls back to the root
UNBOUND: Any = object()
_use_ansi: ContextVar[Any] = ContextVar("use_ansi", default=UNBOUND)

# Directives added for the extent of a codes_bind() block
_bound_codes: ContextVar[Mapping[str, str]] = ContextVar("bound_codes", default={})


def ansi_enabled() -> bool:
    """Check whether ansi() currently produces real escape codes"""
    flag = _use_ansi.get()
    return _use_ansi_root if flag is UNBOUND else flag


def ansi_set(flag: bool) -> None:
    """
    Set the root value of the styling switch.

    The root value is seen by every thread and task that has no
    with_ansi() / without_ansi() binding of its own, including threads
    started later. Inside such a binding the bound value still wins.
    """
    global _use_ansi_root
    _use_ansi_root = bool(flag)


@contextmanager
def ansi_bind(flag: bool) -> Iterator[None]:
    """
    Force the styling switch to ``flag`` for the extent of a with-block.

    The previous value is restored on exit, also when the block raises.
    Nested bindings unwind in stack order.
    """
    token = _use_ansi.set(bool(flag))
    try:
        yield
    finally:
        _use_ansi.reset(token)


def without_ansi():
    """
    Run a block (or decorated function) with ANSI codes suppressed.

    Example:
        with without_ansi():
            print(clansify(k.red, "printed plain"))
    """
    return ansi_bind(False)


def with_ansi():
    """Run a block (or decorated function) with ANSI codes enabled"""
    return ansi_bind(True)


def codes_get() -> Dict[str, str]:
    """Directive table in effect: ANSI_CODES plus any codes_bind() additions"""
    return {**ANSI_CODES, **_bound_codes.get()}


@contextmanager
def codes_bind(codes: Mapping[str, str]) -> Iterator[None]:
    """
    Add directives for the extent of a with-block only.

    ANSI_CODES itself is left untouched, so other threads and tasks never
    see the added names.
    """
    token = _bound_codes.set({**_bound_codes.get(), **codes})
    try:
        yield
    finally:
        _bound_codes.reset(token)


def code_fragment(code: Any) -> str:
    """
    Look up the escape fragment for a directive name.

    Unknown names degrade to the reset fragment; nothing is raised.
    """
    if isinstance(code, Directive):
        code = code.name
    if not isinstance(code, str):
        code = str(code)
    fragment = _bound_codes.get().get(code, ANSI_CODES.get(code))
    if fragment is None:
        LOG(f"Unknown directive '{code}', substituting {appsettings.reset_directive}", level=3)
        fragment = ANSI_CODES.get(appsettings.reset_directive, ANSI_CODES["reset"])
    return fragment


def ansi(code: Any) -> str:
    """
    Output an ANSI escape code for a directive name.

        ansi("blue")
        ansi(k.underline)

    Try styleTestPage_print() to see all available directives.

    Args:
        code: Directive name from ANSI_CODES, or a Directive

    Returns:
        ESC followed by the directive fragment, or "" when styling is off
    """
    if not ansi_enabled():
        return ""
    return ESC + code_fragment(code)


def codes_register(**fragments: str) -> None:
    """
    Add or override raw directives in the table.

    Keyword names use underscores for hyphens, so
    codes_register(bg_bright_black="[100m") adds "bg-bright-black".
    """
    for name, fragment in fragments.items():
        ANSI_CODES[name.replace("_", "-")] = fragment

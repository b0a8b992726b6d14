"""
Style table: named aliases for one or more directives

A style maps a domain-meaningful name ("protected") to a directive name or
an ordered list of directive names (["green", "bright"]). Styles and raw
directives can be mixed freely in clansify() markup.

The table has a root value shared by all threads, changed with styles_set()
and styles_extend(). styles_bind() overrides it for a with-block in the
current thread or task only.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

from ..models.markup import Directive

StyleValue = Union[str, Directive, Sequence[Union[str, Directive]]]

DEFAULT_STYLES: Dict[str, StyleValue] = {
    "white-on-black": ["white", "bg-black"],
    "protected":      ["green", "bright"],
    "unprotected":    ["red", "bright"],
    "line":  "blue",
    "title": "bright",
    "args":  "red",
    "macro": "blue",
    "doc":   "green",
}

_ansi_styles_root: Mapping[str, StyleValue] = dict(DEFAULT_STYLES)

# Scoped override; None falls back to the root table
_ansi_styles: ContextVar[Optional[Mapping[str, StyleValue]]] = ContextVar(
    "ansi_styles", default=None
)


def styles_get() -> Mapping[str, StyleValue]:
    """Return the style table in effect for the current context"""
    bound = _ansi_styles.get()
    return _ansi_styles_root if bound is None else bound


def styles_set(styles: Mapping[str, StyleValue]) -> None:
    """
    Replace the root style table.

    Every thread and task without a styles_bind() of its own sees the new
    table, including threads started later.
    """
    global _ansi_styles_root
    _ansi_styles_root = dict(styles)


def styles_extend(styles: Optional[Mapping[str, StyleValue]] = None, **named: StyleValue) -> None:
    """
    Overlay extra styles on the root table.

    Mapping keys are taken verbatim; keyword names use underscores for
    hyphens:
        styles_extend(warning=["yellow", "bright"], error_line=k.red)
        styles_extend({"my_style": "cyan"})
    """
    merged = dict(_ansi_styles_root)
    merged.update(styles or {})
    merged.update({name.replace("_", "-"): value for name, value in named.items()})
    styles_set(merged)


@contextmanager
def styles_bind(
    styles: Mapping[str, StyleValue], merge: bool = False
) -> Iterator[Mapping[str, StyleValue]]:
    """
    Use a different style table for the extent of a with-block.

    Args:
        styles: Style table to bind
        merge: Overlay ``styles`` on the current table instead of replacing it

    Yields:
        The table now in effect

    Example:
        with styles_bind({"warning": ["yellow", "bright"]}, merge=True):
            print(clansify(k.warning, "careful"))
    """
    table: Dict[str, StyleValue] = dict(styles_get()) if merge else {}
    table.update(styles)
    token = _ansi_styles.set(table)
    try:
        yield table
    finally:
        _ansi_styles.reset(token)


def directive_name(value: Any) -> str:
    """Name of a directive given as a str, a Directive or anything else"""
    if isinstance(value, Directive):
        return value.name
    return value if isinstance(value, str) else str(value)


def style_resolve(name: str, styles: Optional[Mapping[str, StyleValue]] = None) -> List[str]:
    """
    Expand a style name to the ordered list of directive names it stands for.

    Names that are not styles are returned as a single directive name, so
    "red" resolves to ["red"] and "protected" to ["green", "bright"]. Style
    values may use Directive objects (k.red) as well as plain names; any
    other scalar counts as a single name.

    Args:
        name: Style or directive name
        styles: Table to consult (default: table of the current context)

    Returns:
        List of directive names
    """
    table = styles_get() if styles is None else styles
    value = table.get(name)
    if value is None:
        return [name]
    if isinstance(value, (list, tuple)):
        return [directive_name(v) for v in value]
    return [directive_name(value)]

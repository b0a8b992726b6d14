"""
Markup compositor

Turns a mixed sequence of text and directive references into one string
with ANSI codes embedded.

Directives only affect the text that follows them:

    clansify("this is ", k.red, "red", k.reset, ", while this is ",
             k.bright, k.green, k.underline, "bold&green&underlined.")

Style names from the style table work the same way as raw directives:

    clansify(k.protected, "protected text", k.reset, " and ",
             k.unprotected, "an unprotected string.")

A list or tuple is a sub-sequence. It inherits the directives in effect
and may add its own, but those are forgotten once the sub-sequence ends:

    clansify("this is ", k.red, "red, ", ["still red, ", k.blue, "blue, "],
             "and red again.")

Composition never raises: unknown directives render as reset and unknown
item types are stringified.
"""

from typing import Any, List, Sequence

from ..models.markup import Directive, ItemKind, Tagged, item_classify, item_text
from .codes import ansi
from .styles import style_resolve


def directive_render(name: str) -> str:
    """Escape codes for one directive or style name"""
    return "".join(ansi(code) for code in style_resolve(name))


def clansify_helper(*items: Any) -> str:
    """
    Render one flat run of directives and text as a reset-wrapped segment.

    Directives are rendered in order through the style table; text items are
    appended as is. No nesting is handled here.

    Returns:
        reset + rendered items + reset
    """
    parts: List[str] = [ansi("reset")]
    for item in items:
        if isinstance(item, Directive):
            parts.append(directive_render(item.name))
        else:
            parts.append(item_text(item))
    parts.append(ansi("reset"))
    return "".join(parts)


def tagged_expand(item: Tagged) -> List[Any]:
    """
    Items a Tagged reference contributes to a sub-sequence.

    Its attached codes (names or Directive objects) come first, then the
    dereferenced value; a list or tuple value is spliced in, anything else
    is a single text item.
    """
    value = item.deref()
    expanded: List[Any] = [
        code if isinstance(code, Directive) else Directive(code) for code in item.codes
    ]
    if isinstance(value, (list, tuple)):
        expanded.extend(value)
    else:
        expanded.append(value)
    return expanded


def clansify(*items: Any) -> str:
    """
    Compose markup items into a single styled string.

    Items are folded left to right while collecting the active directives:
    - Directive: added to the active directives, nothing emitted
    - list/tuple: composed recursively with the active directives in front;
      the active directives of this level are left as they were
    - Tagged: composed like a sub-sequence of its codes and its value
    - anything else: emitted as reset + active directives + text + reset

    Directives at the end with no text after them have no effect.

    Args:
        *items: Markup items

    Returns:
        Concatenated segments, "" for no items
    """
    segments: List[str] = []
    active: List[Directive] = []

    for item in items:
        kind = item_classify(item)
        if kind is ItemKind.DIRECTIVE:
            active.append(item)
        elif kind is ItemKind.GROUP:
            segments.append(clansify(*active, *item))
        elif kind is ItemKind.TAGGED:
            segments.append(clansify(*active, *tagged_expand(item)))
        else:
            segments.append(clansify_helper(*active, item))

    return "".join(segments)


def style(s: Any, *codes: str) -> str:
    """
    Apply raw directives to a single string.

        style("foo", "red")
        style("foo", "red", "bg-blue", "underline")

    Codes are looked up in the directive table only, not in the style table.
    """
    return "".join(ansi(code) for code in codes) + item_text(s) + ansi("reset")


def style_wrap(base: str, wrapper: Any, *styles: str) -> str:
    """
    Wrap a base string with a styled wrapper.

    If the wrapper is a string it is placed on both sides of the base; a
    sequence supplies the left and right parts as its first two items.

    Example (red brackets around "debug"):
        style_wrap("debug", ["[", "]"], "red")
    """
    if isinstance(wrapper, str):
        left = right = wrapper
    else:
        pair: Sequence[Any] = list(wrapper)
        left = pair[0] if len(pair) > 0 else ""
        right = pair[1] if len(pair) > 1 else ""
    return style(left, *styles) + base + style(right, *styles)

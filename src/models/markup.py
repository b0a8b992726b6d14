"""
Markup item models

Types for the items accepted by clansify():
- Directive: a style or directive name, built with the ``k`` namespace
- Tagged: a reference carrying its own directive list
- plain text: any str (other values are stringified)
- group: any list or tuple of items, composed as a nested sub-sequence
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Union


class ItemKind(Enum):
    """
    The four kinds of markup item

    Used by clansify() to dispatch each item of a markup sequence.
    """
    DIRECTIVE = "directive"    # k.red, k.protected
    GROUP = "group"            # ["inner ", k.blue, "text"]
    TAGGED = "tagged"          # Tagged(ref, ["bright"])
    TEXT = "text"              # "plain", 42


@dataclass(frozen=True)
class Directive:
    """
    Reference to a directive or style by name

    Attributes:
        name: Directive name (e.g., "red", "bg-blue") or style name
              (e.g., "protected")

    Example:
        >>> Directive("bg-red") == k.bg_red
        True
    """
    name: str

    def __str__(self) -> str:
        return f":{self.name}"


class _DirectiveNamespace:
    """
    Attribute shorthand for Directive objects

    ``k.red`` is ``Directive("red")``; underscores become hyphens, so
    ``k.bg_red`` is ``Directive("bg-red")``. Calling ``k("bg-red")`` takes
    the name verbatim.
    """

    def __getattr__(self, name: str) -> Directive:
        if name.startswith("__"):
            raise AttributeError(name)
        return Directive(name.replace("_", "-"))

    def __call__(self, name: str) -> Directive:
        return Directive(name)


k = _DirectiveNamespace()


@dataclass
class Tagged:
    """
    A dereferenceable value paired with the directives to apply to it

    Composing a Tagged item styles its current value with ``codes`` on top
    of whatever directives are active at that point.

    Attributes:
        ref: The referenced value. A zero-argument callable is called on
             every deref; an object with a ``value`` attribute yields that
             attribute; anything else is used as is.
        codes: Directive or style names (or Directive objects) attached
               to the value

    Example:
        status = Tagged(lambda: job.state, ["protected"])
        print(clansify("job is ", status))
    """
    ref: Any
    codes: List[Union[str, Directive]] = field(default_factory=list)

    def deref(self) -> Any:
        """Return the current value behind the reference"""
        if callable(self.ref):
            return self.ref()
        if hasattr(self.ref, "value"):
            return self.ref.value
        return self.ref


def tag(ref: Any, *codes: Union[str, Directive]) -> Tagged:
    """Shorthand for Tagged(ref, list(codes))"""
    return Tagged(ref, list(codes))


def item_classify(item: Any) -> ItemKind:
    """
    Determine which kind of markup item a value is.

    Anything that is not a Directive, Tagged or list/tuple counts as text.
    """
    if isinstance(item, Directive):
        return ItemKind.DIRECTIVE
    if isinstance(item, (list, tuple)):
        return ItemKind.GROUP
    if isinstance(item, Tagged):
        return ItemKind.TAGGED
    return ItemKind.TEXT


def item_text(item: Any) -> str:
    """Stringify a text item; None renders as an empty string"""
    if item is None:
        return ""
    return item if isinstance(item, str) else str(item)


def item_parse(token: str) -> Any:
    """
    Turn a command-line token into a markup item.

    ``:red`` becomes a Directive, ``::text`` is the literal text ``:text``,
    everything else is plain text.

    Example:
        >>> item_parse(":bg-red")
        Directive(name='bg-red')
        >>> item_parse("::not a directive")
        ':not a directive'
    """
    if token.startswith("::"):
        return token[1:]
    if token.startswith(":") and len(token) > 1:
        return Directive(token[1:])
    return token

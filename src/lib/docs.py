"""
Colorized reference output built on clansify()

- styleTestPage_print(): every directive and style, each shown in itself
- doc_print(): colorized documentation for a Python object, a styled
  counterpart to help()

Both only use the public composition API; the layout colors come from the
"line", "title", "args", "macro" and "doc" styles, so rebinding those styles
restyles the output.
"""

import builtins
import importlib
import inspect
import sys
from typing import Any, List, Optional, TextIO

from ..models.markup import Directive, k
from .codes import codes_get
from .markup import clansify
from .styles import styles_get


class DocLookupError(Exception):
    """Raised when a dotted name cannot be resolved to a Python object"""
    pass


def styleTestPage_render() -> str:
    """
    Render the list of supported directives and styles.

    Each name is shown in its own style.

    Returns:
        Multi-line report text
    """
    lines: List[str] = ["", "ANSI-CODES:", ""]
    for name in sorted(codes_get()):
        lines.append(clansify(Directive(name), name))
    lines.extend(["", "ANSI-STYLES:", ""])
    for name in sorted(styles_get()):
        lines.append(clansify(Directive(name), name))
    return "\n".join(lines)


def styleTestPage_print(file: Optional[TextIO] = None) -> None:
    """Print the style test page (to stdout by default)"""
    print(styleTestPage_render(), file=file or sys.stdout)


def doc_resolve(dotted_name: str) -> Any:
    """
    Import the object named by a dotted path.

    Resolves the longest importable module prefix, then walks attributes.
    Bare names fall back to builtins, so "len" resolves to builtins.len.

    Args:
        dotted_name: e.g. "os.path.join", "collections.OrderedDict", "json"

    Returns:
        The resolved object

    Raises:
        DocLookupError: If no object matches the name
    """
    parts = dotted_name.split(".")
    if not all(parts):
        raise DocLookupError(f"Invalid name: '{dotted_name}'")

    for split in range(len(parts), 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        try:
            for attr in parts[split:]:
                obj = getattr(obj, attr)
        except AttributeError:
            raise DocLookupError(f"'{module_name}' has no attribute path '{dotted_name}'")
        return obj

    obj = builtins
    try:
        for attr in parts:
            obj = getattr(obj, attr)
    except AttributeError:
        raise DocLookupError(f"Cannot resolve '{dotted_name}'")
    return obj


def qualifiedName_get(obj: Any) -> str:
    """Qualified name of an object, prefixed with its module when known"""
    if inspect.ismodule(obj):
        return obj.__name__
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if name is None:
        return type(obj).__name__
    module = getattr(obj, "__module__", None)
    if module and module != "builtins":
        return f"{module}.{name}"
    return name


def signatureArgs_get(obj: Any) -> Optional[str]:
    """Argument list of a callable without the parentheses, or None"""
    if not callable(obj):
        return None
    try:
        signature = inspect.signature(obj)
    except (TypeError, ValueError):
        return None
    return str(signature.replace(return_annotation=inspect.Signature.empty))[1:-1]


def doc_render(obj: Any) -> str:
    """
    Render colorized documentation for an object.

    Layout:
        -------------------------     (line)
        package.module.name           (title)
        (arg, *, kwarg=None)          (args)
        Class / Module / Builtin      (macro, when applicable)
           docstring                  (doc)

    Args:
        obj: Module, class, function or any other object

    Returns:
        Multi-line colorized text
    """
    doc = inspect.getdoc(obj) or ""
    lines: List[str] = [
        clansify(k.line, "-" * 25),
        clansify(k.title, qualifiedName_get(obj)),
    ]

    if inspect.ismodule(obj):
        lines.append(clansify(k.macro, "Module"))
        lines.append(clansify(k.doc, " " + doc))
        return "\n".join(lines)

    args = signatureArgs_get(obj)
    if args is not None:
        lines.append("(" + clansify(k.args, args) + ")")
    if inspect.isclass(obj):
        lines.append(clansify(k.macro, "Class"))
    elif inspect.isbuiltin(obj):
        lines.append(clansify(k.macro, "Builtin"))
    lines.append("   " + clansify(k.doc, doc))
    return "\n".join(lines)


def doc_print(obj: Any, file: Optional[TextIO] = None) -> None:
    """
    Print colorized documentation for an object or dotted name.

    Example:
        doc_print("json.dumps")
        doc_print(clansify)
    """
    if isinstance(obj, str):
        obj = doc_resolve(obj)
    print(doc_render(obj), file=file or sys.stdout)

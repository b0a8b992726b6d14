"""
Models package for clansi

Contains markup item types and the CLI program state.
"""

from .state import ProgramState, pipeline
from .markup import Directive, ItemKind, Tagged, k, tag, item_classify, item_parse

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "ItemKind",
    "Tagged",
    "k",
    "tag",
    "item_classify",
    "item_parse",
]

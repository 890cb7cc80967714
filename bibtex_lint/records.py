"""Record model shared by the parser, linter and serializer.

A record is exactly one of:
    Entry     @article{key, title = {...}}
    Preamble  @preamble{...}
    Comment   @comment{...}

`selected` and `is_open` belong to whatever UI holds the records; the
pipeline copies them along and never looks at them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Entry:
    type: str
    cite_key: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    selected: bool = False
    is_open: bool = False


@dataclass
class Preamble:
    value: str = ""
    selected: bool = False
    is_open: bool = False

    @property
    def type(self) -> str:
        return "preamble"


@dataclass
class Comment:
    value: str = ""
    selected: bool = False
    is_open: bool = False

    @property
    def type(self) -> str:
        return "comment"


Record = Union[Entry, Preamble, Comment]


def is_record(value: Any) -> bool:
    return isinstance(value, (Entry, Preamble, Comment))


def new_entry() -> Entry:
    return Entry(type="article", cite_key="", fields={})

"""Operations a host application performs around the parse/lint/serialize pipeline.

`Bibliography` is the ordered record list an editor keeps in memory; every
record that enters it, or is edited in place, goes back through `lint`.
"""

from __future__ import annotations

import dataclasses
import re
from datetime import datetime
from typing import Iterable, Iterator, Optional, Sequence

from .errors import BibTeXSyntaxError, EmptyBibliographyError, InvalidRecordError
from .linter import lint, lint_all
from .parser import parse
from .records import Comment, Entry, Preamble, Record, is_record, new_entry
from .serializer import serialize, serialize_one

EXPORT_MIME_TYPE = "application/x-bibtex"

LEADING_TYPE_RE = re.compile(r"^@[a-zA-Z]+")


def load_bibliography(text: str) -> list[Record]:
    records = parse(text)
    if not records:
        raise EmptyBibliographyError("no BibTeX records found")
    return lint_all(records)


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"export_{now:%Y%m%d_%H%M%S}.bib"


def _with_flags(record: Record, source: Record) -> Record:
    return dataclasses.replace(record, selected=source.selected, is_open=source.is_open)


def retype(record: Record, new_type: str) -> Record:
    """Reinterpret `record` as `new_type` and lint the result.

    Text records moving to an entry type are re-parsed with their leading
    `@word` swapped for the new type; entries moving to preamble/comment
    keep their serialized text as the value.
    """
    if not is_record(record):
        raise InvalidRecordError(f"not a BibTeX record: {record!r}")
    if record.type == new_type:
        return record

    new_record: Record
    if isinstance(record, (Preamble, Comment)):
        if new_type == "preamble":
            new_record = Preamble(value=record.value)
        elif new_type == "comment":
            new_record = Comment(value=record.value)
        else:
            rewritten = LEADING_TYPE_RE.sub(f"@{new_type}", record.value, count=1)
            try:
                parsed = [item for item in parse(rewritten) if isinstance(item, Entry)]
            except BibTeXSyntaxError:
                # Free text with a stray "@" is not an entry; start from an empty one.
                parsed = []
            new_record = parsed[0] if parsed else Entry(type=new_type)
    elif new_type == "preamble":
        new_record = Preamble(value=serialize_one(record))
    elif new_type == "comment":
        new_record = Comment(value=serialize_one(record))
    else:
        new_record = dataclasses.replace(record, type=new_type, fields=dict(record.fields), warnings=[])

    return lint(_with_flags(new_record, record))


class Bibliography:
    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = lint_all(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    def load_text(self, text: str) -> list[Record]:
        records = load_bibliography(text)
        self.add(records)
        return records

    def add(self, records: Iterable[Record]) -> None:
        # New records go in front, in the order given.
        self._records = lint_all(records) + self._records

    def add_empty_entry(self) -> Record:
        record = lint(new_entry())
        self._records.insert(0, record)
        return record

    def update(self, index: int, record: Record) -> Record:
        if isinstance(record, Entry):
            record = dataclasses.replace(record, warnings=[])
        linted = lint(record)
        self._records[index] = linted
        return linted

    def change_type(self, index: int, new_type: str) -> Record:
        updated = retype(self._records[index], new_type)
        self._records[index] = updated
        return updated

    def remove(self, indices: Iterable[int]) -> None:
        doomed = set(indices)
        self._records = [record for i, record in enumerate(self._records) if i not in doomed]

    def clear(self) -> None:
        self._records = []

    def selected(self) -> list[int]:
        return [i for i, record in enumerate(self._records) if record.selected]

    def export(self, indices: Optional[Sequence[int]] = None) -> str:
        if indices is None:
            return serialize(self._records)
        chosen = [self._records[i] for i in indices if 0 <= i < len(self._records)]
        return serialize(chosen)

"""Convert records back to BibTeX text."""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidRecordError
from .records import Comment, Entry, Preamble, Record


def _strip_wrapper(value: str, keyword: str) -> str:
    # Values carried over from a raw parse may already hold "@keyword{...}".
    prefix = f"@{keyword}{{"
    if value.startswith(prefix):
        return value[len(prefix) : -1]
    return value


def serialize_one(record: Record) -> str:
    if isinstance(record, Preamble):
        return f"@preamble{{{_strip_wrapper(record.value, 'preamble')}}}"
    if isinstance(record, Comment):
        return f"@comment{{{_strip_wrapper(record.value, 'comment')}}}"
    if isinstance(record, Entry):
        field_lines = [f"{name} = {{{value}}}" for name, value in record.fields.items()]
        return f"@{record.type}{{{record.cite_key},\n" + ",\n".join(field_lines) + "\n}"
    raise InvalidRecordError(f"not a BibTeX record: {record!r}")


def serialize(records: Iterable[Record]) -> str:
    return "\n".join(serialize_one(record) for record in records)

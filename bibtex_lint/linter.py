"""Normalization pass for parsed records.

Schema problems are never raised. The linter repairs what it can and
leaves a warning on the entry for the rest:
- unknown entry types are corrected to the closest known type, or `unknown`
- fields are rebuilt as required, recommended, well-known optional, others
- empty fields that no schema knows about are dropped
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidRecordError
from .records import Comment, Entry, Preamble, Record
from .schema import (
    ENTRY_TYPE_NAMES,
    OPTIONAL_FIELDS,
    UNKNOWN_TYPE,
    is_entry_type,
    schema_for,
)

TYPE_DISTANCE_LIMIT = 3


def edit_distance(a: str, b: str) -> int:
    if not a:
        return len(b)
    if not b:
        return len(a)

    # dp[i][j]: distance between a[:i] and b[:j]
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        dp[i][0] = i
    for j in range(len(b) + 1):
        dp[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + (0 if a[i - 1] == b[j - 1] else 1),
            )
    return dp[len(a)][len(b)]


def closest_entry_type(type_name: str) -> str:
    """Return the known entry type nearest to `type_name`, or `unknown`.

    Candidates are tried in schema order and only a strictly smaller
    distance replaces the current best, so the earliest name wins a tie.
    """
    best_name = UNKNOWN_TYPE
    best_distance: int | None = None
    for candidate in ENTRY_TYPE_NAMES:
        distance = edit_distance(type_name, candidate)
        if best_distance is None or distance < best_distance:
            best_name = candidate
            best_distance = distance

    if best_distance is None or best_distance >= TYPE_DISTANCE_LIMIT:
        return UNKNOWN_TYPE
    return best_name


def resolve_entry_type(type_name: str) -> str:
    if type_name == UNKNOWN_TYPE or is_entry_type(type_name):
        return type_name
    return closest_entry_type(type_name)


def _join(names: list[str]) -> str:
    return ", ".join(names)


def lint_entry(entry: Entry) -> Entry:
    old_type = entry.type
    new_type = resolve_entry_type(old_type)

    warnings: list[str] = []
    if entry.cite_key == "":
        warnings.append("missing citation key")
    if new_type != old_type:
        warnings.append(f"type changed: {old_type} -> {new_type}")

    if new_type == UNKNOWN_TYPE:
        return Entry(
            type=new_type,
            cite_key=entry.cite_key,
            fields=dict(entry.fields),
            warnings=warnings,
            selected=entry.selected,
            is_open=entry.is_open,
        )

    entry_schema = schema_for(new_type)
    source = entry.fields
    fields: dict[str, str] = {}

    for name in entry_schema.required + entry_schema.recommended + OPTIONAL_FIELDS:
        if name not in fields:
            fields[name] = source.get(name, "")

    unknown_fields = [name for name in source if name not in fields]
    deleted_fields: list[str] = []
    for name in unknown_fields:
        if source[name] == "":
            deleted_fields.append(name)
        else:
            fields[name] = source[name]

    empty_required = [name for name in entry_schema.required if fields[name] == ""]
    empty_recommended = [
        name
        for name in entry_schema.recommended
        if name not in entry_schema.required and fields[name] == ""
    ]

    if empty_required:
        warnings.append(f"empty required fields: {_join(empty_required)}")
    if unknown_fields:
        warnings.append(f"unknown fields present: {_join(unknown_fields)}")
    if deleted_fields:
        warnings.append(f"deleted empty unknown fields: {_join(deleted_fields)}")
    if empty_recommended:
        warnings.append(f"empty recommended fields: {_join(empty_recommended)}")

    return Entry(
        type=new_type,
        cite_key=entry.cite_key,
        fields=fields,
        warnings=warnings,
        selected=entry.selected,
        is_open=entry.is_open,
    )


def lint(record: Record) -> Record:
    if isinstance(record, Entry):
        return lint_entry(record)
    if isinstance(record, (Preamble, Comment)):
        return record
    raise InvalidRecordError(f"not a BibTeX record: {record!r}")


def lint_all(records: Iterable[Record]) -> list[Record]:
    return [lint(record) for record in records]

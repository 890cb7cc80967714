"""Markdown and terminal reports for linted records."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from rapidfuzz import fuzz, process

from .records import Comment, Entry, Preamble, Record
from .schema import OPTIONAL_FIELDS, UNKNOWN_TYPE, known_field_names, schema_for

SUGGESTION_CUTOFF = 80


def unknown_field_names(entry: Entry) -> list[str]:
    if entry.type == UNKNOWN_TYPE:
        return []
    entry_schema = schema_for(entry.type)
    known = set(entry_schema.required) | set(entry_schema.recommended) | set(OPTIONAL_FIELDS)
    return [name for name in entry.fields if name not in known]


def suggest_field_name(name: str, choices: Optional[Sequence[str]] = None) -> Optional[str]:
    candidates = list(choices) if choices is not None else known_field_names()
    match = process.extractOne(
        name.lower(),
        candidates,
        scorer=fuzz.ratio,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    if match is None:
        return None
    suggestion = match[0]
    return None if suggestion == name else suggestion


def field_suggestions(entry: Entry) -> dict[str, str]:
    suggestions: dict[str, str] = {}
    for name in unknown_field_names(entry):
        suggestion = suggest_field_name(name)
        if suggestion:
            suggestions[name] = suggestion
    return suggestions


def _entry_label(entry: Entry) -> str:
    key = entry.cite_key or "<no key>"
    return f"`{key}` (`{entry.type}`)"


def markdown_report(input_path: Path, records: Sequence[Record]) -> str:
    entries = [r for r in records if isinstance(r, Entry)]
    warned = [e for e in entries if e.warnings]
    clean = [e for e in entries if not e.warnings]
    preambles = sum(1 for r in records if isinstance(r, Preamble))
    comments = sum(1 for r in records if isinstance(r, Comment))

    lines: list[str] = []
    lines.append("# BibTeX Lint Report")
    lines.append("")
    lines.append(f"Generated: {datetime.now(timezone.utc).isoformat()}")
    lines.append(f"Input file: `{input_path}`")
    lines.append("")
    lines.append("## Summary")
    lines.append(f"- Total records: {len(records)}")
    lines.append(f"- Entries: {len(entries)}")
    lines.append(f"- Clean entries: {len(clean)}")
    lines.append(f"- Entries with warnings: {len(warned)}")
    lines.append(f"- Preambles: {preambles}")
    lines.append(f"- Comments: {comments}")
    lines.append("")

    lines.append("## Entries with warnings")
    if not warned:
        lines.append("- None")
    else:
        for entry in warned:
            lines.append(f"### {_entry_label(entry)}")
            for warning in entry.warnings:
                lines.append(f"- {warning}")
            lines.append("")

    lines.append("")
    lines.append("## Unknown-field suggestions")
    suggestion_lines: list[str] = []
    for entry in entries:
        for name, suggestion in field_suggestions(entry).items():
            suggestion_lines.append(f"- {_entry_label(entry)}: `{name}` -> did you mean `{suggestion}`?")
    lines.extend(suggestion_lines or ["- None"])
    lines.append("")

    lines.append("## Clean entries")
    if not clean:
        lines.append("- None")
    else:
        for entry in clean:
            lines.append(f"- {_entry_label(entry)}")

    return "\n".join(lines).strip() + "\n"


def terminal_summary(records: Sequence[Record]) -> str:
    warned = [r for r in records if isinstance(r, Entry) and r.warnings]
    if not warned:
        return "Entries with warnings: 0"

    lines = [f"Entries with warnings: {len(warned)}"]
    for entry in warned:
        lines.append(f"- {entry.cite_key or '<no key>'}: {'; '.join(entry.warnings)}")
    return "\n".join(lines)

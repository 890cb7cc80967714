"""Parse, lint and serialize BibTeX records."""

from __future__ import annotations

from .bibliography import EXPORT_MIME_TYPE, Bibliography, export_filename, load_bibliography, retype
from .errors import BibTeXLintError, BibTeXSyntaxError, EmptyBibliographyError, InvalidRecordError
from .linter import closest_entry_type, edit_distance, lint, lint_all
from .parser import BibTeXParser, parse
from .records import Comment, Entry, Preamble, Record, new_entry
from .schema import ENTRY_TYPE_NAMES, OPTIONAL_FIELDS, SCHEMAS, EntrySchema, schema_for
from .serializer import serialize, serialize_one

__all__ = [
    "EXPORT_MIME_TYPE",
    "ENTRY_TYPE_NAMES",
    "OPTIONAL_FIELDS",
    "SCHEMAS",
    "BibTeXLintError",
    "BibTeXParser",
    "BibTeXSyntaxError",
    "Bibliography",
    "Comment",
    "EmptyBibliographyError",
    "Entry",
    "EntrySchema",
    "InvalidRecordError",
    "Preamble",
    "Record",
    "closest_entry_type",
    "edit_distance",
    "export_filename",
    "lint",
    "lint_all",
    "load_bibliography",
    "new_entry",
    "parse",
    "retype",
    "schema_for",
    "serialize",
    "serialize_one",
]

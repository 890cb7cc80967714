"""Entry-type schema table.

Field order inside `required` and `recommended` is the order fields are
laid out in after linting and on export.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class EntrySchema:
    required: tuple[str, ...] = ()
    recommended: tuple[str, ...] = ()
    description: str = ""


_SCHEMAS: dict[str, EntrySchema] = {
    "article": EntrySchema(
        required=("title", "author", "journal", "year"),
        recommended=("volume", "number", "pages", "month"),
        description="An article from a journal, magazine, newspaper, or other periodical.",
    ),
    "book": EntrySchema(
        required=("title", "author", "publisher", "year"),
        recommended=("volume", "number", "series", "address", "editor", "edition", "month"),
        description="A book where the publisher is clearly identifiable.",
    ),
    "booklet": EntrySchema(
        required=("title",),
        recommended=("author", "howpublished", "address", "month", "year"),
        description=(
            "A printed work that is bound, but does not have a clearly identifiable "
            "publisher or supporting institution."
        ),
    ),
    "conference": EntrySchema(
        required=("title", "author", "booktitle", "year"),
        recommended=(
            "editor",
            "volume",
            "pages",
            "number",
            "series",
            "address",
            "month",
            "organization",
            "publisher",
        ),
        description="An article that has been included in conference proceedings.",
    ),
    "glossdef": EntrySchema(
        required=("word", "description"),
        recommended=("keywords", "sort-word", "short", "group", "title"),
        description="A definition of a term in a glossary.",
    ),
    "inbook": EntrySchema(
        required=("title", "author", "chapter", "pages", "publisher", "year"),
        recommended=("editor", "number", "volume", "series", "type", "address", "edition", "month"),
        description="A section, such as a chapter, or a page range within a book.",
    ),
    "incollection": EntrySchema(
        required=("title", "author", "booktitle", "publisher", "year"),
        recommended=(
            "editor",
            "volume",
            "number",
            "series",
            "type",
            "chapter",
            "pages",
            "address",
            "edition",
            "month",
        ),
        description=(
            "A titled section of a book, such as a short story within a larger "
            "collection of short stories."
        ),
    ),
    "inproceedings": EntrySchema(
        required=("title", "author", "booktitle", "year"),
        recommended=(
            "editor",
            "volume",
            "series",
            "pages",
            "address",
            "month",
            "organization",
            "publisher",
        ),
        description=(
            "A paper that has been published in conference proceedings. "
            "Same usage as `conference`, which exists for Scribe compatibility."
        ),
    ),
    "jurthesis": EntrySchema(
        required=("title", "author", "school", "year"),
        recommended=("type", "address", "month"),
        description="A thesis for a law degree.",
    ),
    "manual": EntrySchema(
        required=("title",),
        recommended=("author", "organization", "address", "edition", "month", "year"),
        description=(
            "A technical manual for a machine or software, such as would come with "
            "a purchase to explain operation to the new owner."
        ),
    ),
    "mastersthesis": EntrySchema(
        required=("title", "author", "school", "year"),
        recommended=("type", "address", "month"),
        description="A thesis written for the Master's level degree.",
    ),
    "misc": EntrySchema(
        required=(),
        recommended=("title", "author", "howpublished", "month", "year"),
        description=(
            "Used if none of the other entry types quite match the source. "
            "Frequently used to cite web pages, lecture slides or personal notes."
        ),
    ),
    "periodical": EntrySchema(
        required=("title", "year", "author"),
        recommended=("editor", "volume", "journal", "pages"),
        description="A periodical.",
    ),
    "phdthesis": EntrySchema(
        required=("title", "author", "school", "year"),
        recommended=("type", "address", "month"),
        description="A thesis written for the PhD level degree.",
    ),
    "proceedings": EntrySchema(
        required=("title", "year"),
        recommended=(
            "editor",
            "number",
            "volume",
            "series",
            "address",
            "month",
            "publisher",
            "organization",
        ),
        description="A conference proceeding.",
    ),
    "techreport": EntrySchema(
        required=("title", "author", "institution", "year"),
        recommended=("type", "number", "address", "month"),
        description=(
            "An institutionally published report such as a report from a school, "
            "a government organization, an organization, or a company. Also used "
            "for white papers and working papers."
        ),
    ),
    "unpublished": EntrySchema(
        required=("title", "author"),
        recommended=("month", "year"),
        description=(
            "A document that has not been officially published such as a paper "
            "draft or manuscript in preparation."
        ),
    ),
    "url": EntrySchema(
        required=("url",),
        recommended=("urldate", "title", "author", "lastchecked"),
        description="A resource on the internet.",
    ),
    "electronic": EntrySchema(
        required=("title", "author"),
        recommended=("urldate",),
        description="An electronic book.",
    ),
    "webpage": EntrySchema(
        required=("title", "url"),
        recommended=("lastchecked", "year", "month"),
        description="A webpage.",
    ),
    "preamble": EntrySchema(description="The preamble of a BibTeX file."),
    "comment": EntrySchema(description="A comment in a BibTeX file."),
    "unknown": EntrySchema(description="An unknown entry type."),
}

SCHEMAS: Mapping[str, EntrySchema] = MappingProxyType(_SCHEMAS)

UNKNOWN_TYPE = "unknown"
SPECIAL_TYPES = frozenset({"preamble", "comment", UNKNOWN_TYPE})

# Candidate order for type correction; ties go to the earlier name.
ENTRY_TYPE_NAMES: tuple[str, ...] = tuple(name for name in _SCHEMAS if name not in SPECIAL_TYPES)

OPTIONAL_FIELDS: tuple[str, ...] = (
    "abstract",
    "note",
    "keywords",
    "rating",
    "doi",
    "isbn",
    "issn",
    "issue",
)

_EMPTY_SCHEMA = EntrySchema()


def is_entry_type(name: str) -> bool:
    return name in ENTRY_TYPE_NAMES


def schema_for(type_name: str) -> EntrySchema:
    return SCHEMAS.get(type_name, _EMPTY_SCHEMA)


def known_field_names() -> list[str]:
    names: dict[str, None] = {}
    for entry_schema in SCHEMAS.values():
        for name in entry_schema.required + entry_schema.recommended:
            names[name] = None
    for name in OPTIONAL_FIELDS:
        names[name] = None
    return list(names)

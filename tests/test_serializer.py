"""Tests for the serializer."""

import pytest

from bibtex_lint.errors import BibTeXSyntaxError, InvalidRecordError
from bibtex_lint.linter import lint
from bibtex_lint.parser import parse
from bibtex_lint.records import Comment, Entry, Preamble
from bibtex_lint.serializer import serialize, serialize_one


class TestSerializeOne:
    def test_entry_layout(self):
        entry = Entry(type="article", cite_key="k", fields={"title": "T", "year": "2020"})

        assert serialize_one(entry) == "@article{k,\ntitle = {T},\nyear = {2020}\n}"

    def test_quoted_values_come_back_braced(self):
        entry = parse('@misc{k, title = "Quoted"}')[0]

        assert serialize_one(entry) == "@misc{k,\ntitle = {Quoted}\n}"

    def test_quoted_preamble_end_to_end(self):
        preamble = parse('@preamble{"some text"}')[0]

        assert serialize_one(preamble) == "@preamble{some text}"

    def test_preamble_wrapper_is_not_doubled(self):
        assert serialize_one(Preamble(value="@preamble{x}")) == "@preamble{x}"

    def test_comment(self):
        assert serialize_one(Comment(value="hello")) == "@comment{hello}"
        assert serialize_one(Comment(value="@comment{hello}")) == "@comment{hello}"

    def test_quoted_comment_round_trips_unchanged(self):
        assert serialize(parse('@comment{"x"}')) == '@comment{"x"}'

    def test_unbalanced_brace_in_quoted_value_does_not_reparse(self):
        # Values are always re-wrapped in braces, so a lone "}" ends the field early.
        entry = parse('@misc{k, title = "a } b"}')[0]
        text = serialize_one(entry)

        assert text == "@misc{k,\ntitle = {a } b}\n}"
        with pytest.raises(BibTeXSyntaxError):
            parse(text)

    def test_invalid_record_raises(self):
        with pytest.raises(InvalidRecordError):
            serialize_one("@article{k}")


class TestSerialize:
    def test_records_joined_by_newline(self):
        records = [Comment(value="c"), Preamble(value="p"), Entry(type="misc", cite_key="m", fields={"a": "1"})]

        assert serialize(records) == "@comment{c}\n@preamble{p}\n@misc{m,\na = {1}\n}"

    def test_empty_sequence(self):
        assert serialize([]) == ""

    def test_invalid_record_in_sequence_raises(self):
        with pytest.raises(InvalidRecordError):
            serialize([Comment(value="c"), None])


class TestRoundTrip:
    def test_linted_entry_survives_round_trip(self):
        original = lint(
            Entry(
                type="book",
                cite_key="knuth1984",
                fields={
                    "title": "The {TeX}book",
                    "author": "Donald E. Knuth",
                    "publisher": "Addison-Wesley",
                    "year": "1984",
                    "edition": "1st",
                },
            )
        )
        again = lint(parse(serialize([original]))[0])

        assert again.type == original.type
        assert again.cite_key == original.cite_key
        assert list(again.fields.items()) == list(original.fields.items())
        assert again.warnings == original.warnings

    def test_whole_file_round_trip(self):
        text = '@comment{c}\n@preamble{"p"}\n@article{a, title = {T}, extra = {e}}'
        first = [lint(r) for r in parse(text)]
        second = [lint(r) for r in parse(serialize(first))]

        assert second == first

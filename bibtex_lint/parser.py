"""Hand-written recursive-descent parser for BibTeX text.

    @Type{CiteKey, field = {value}, field = "value", }
    @preamble{...}
    @comment{...}

Text outside an `@...` construct is ignored, as are `%` line comments
between tokens. Entry types are kept exactly as written; folding them into
the known set is the linter's job.
"""

from __future__ import annotations

from .errors import BibTeXSyntaxError
from .records import Comment, Entry, Preamble, Record

IDENTIFIER_PUNCTUATION = frozenset("-_:")


def _is_identifier_char(char: str) -> bool:
    return char != "" and ((char.isascii() and char.isalnum()) or char in IDENTIFIER_PUNCTUATION)


def _describe(char: str) -> str:
    return "end of input" if char == "" else repr(char)


def _unquote(value: str) -> str:
    stripped = value.strip()
    if len(stripped) >= 2 and stripped[0] == '"' and stripped[-1] == '"' and '"' not in stripped[1:-1]:
        return stripped[1:-1]
    return value


class BibTeXParser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def parse(self) -> list[Record]:
        records: list[Record] = []
        while self.position < len(self.text):
            self.skip_whitespace()
            if self.peek() == "@":
                records.append(self.parse_object())
            elif self.position < len(self.text):
                self.position += 1
        return records

    def parse_object(self) -> Record:
        self.consume("@")
        type_name = self.parse_identifier()
        self.skip_whitespace()

        keyword = type_name.lower()
        if keyword == "preamble":
            return Preamble(value=_unquote(self.parse_value()))
        if keyword == "comment":
            return Comment(value=self.parse_value())
        return self.parse_entry(type_name)

    def parse_entry(self, type_name: str) -> Entry:
        self.consume("{")
        self.skip_whitespace()
        cite_key = self.parse_identifier()
        self.skip_whitespace()
        fields: dict[str, str] = {}
        if self.peek() == "}":
            self.consume("}")
            return Entry(type=type_name, cite_key=cite_key, fields=fields)
        self.consume(",")

        while True:
            self.skip_whitespace()
            if self.peek() == "}":
                self.consume("}")
                break

            field_name = self.parse_identifier()
            if not field_name:
                raise BibTeXSyntaxError(
                    f"Expected a field name but found {_describe(self.peek())}", self.position
                )
            self.skip_whitespace()
            self.consume("=")
            self.skip_whitespace()
            # Repeated names keep their first position and take the last value.
            fields[field_name] = self.parse_value()
            self.skip_whitespace()

            char = self.peek()
            if char == ",":
                self.consume(",")
            elif char != "}":
                raise BibTeXSyntaxError(f"Expected ',' or '}}' but found {_describe(char)}", self.position)

        return Entry(type=type_name, cite_key=cite_key, fields=fields)

    def parse_value(self) -> str:
        char = self.peek()
        if char == "{":
            return self.parse_braced_text()
        if char == '"':
            return self.parse_quoted_text()
        raise BibTeXSyntaxError(f"Expected '{{' or '\"' but found {_describe(char)}", self.position)

    def parse_braced_text(self) -> str:
        start = self.position
        self.consume("{")
        depth = 1
        chunk_start = self.position
        while True:
            char = self.peek()
            if char == "":
                raise BibTeXSyntaxError("Unterminated '{'", start)
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    break
            self.position += 1
        text = self.text[chunk_start : self.position]
        self.consume("}")
        return text

    def parse_quoted_text(self) -> str:
        start = self.position
        self.consume('"')
        end = self.text.find('"', self.position)
        if end == -1:
            raise BibTeXSyntaxError("Unterminated '\"'", start)
        text = self.text[self.position : end]
        self.position = end + 1
        return text

    def parse_identifier(self) -> str:
        start = self.position
        while _is_identifier_char(self.peek()):
            self.position += 1
        return self.text[start : self.position]

    def skip_whitespace(self) -> None:
        while self.position < len(self.text):
            char = self.text[self.position]
            if char.isspace():
                self.position += 1
            elif char == "%":
                newline = self.text.find("\n", self.position)
                self.position = len(self.text) if newline == -1 else newline
            else:
                break

    def peek(self) -> str:
        if self.position < len(self.text):
            return self.text[self.position]
        return ""

    def consume(self, expected: str) -> str:
        char = self.peek()
        if char != expected:
            raise BibTeXSyntaxError(f"Expected '{expected}' but found {_describe(char)}", self.position)
        self.position += 1
        return char


def parse(text: str) -> list[Record]:
    return BibTeXParser(text).parse()

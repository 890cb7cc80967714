"""Tests for the command-line interface."""

from bibtex_lint.cli import default_normalized_path, default_report_path, list_types, main
from bibtex_lint.parser import parse

CLEAN_BIB = """@article{clean,
  title = {T}, author = {A}, journal = {J}, year = {2020},
  volume = {1}, number = {2}, pages = {3--4}, month = {jan}
}
"""

MESSY_BIB = """@artcle{messy, title = {T}, foo = {}}
@preamble{"p"}
"""


class TestCli:
    def test_clean_file_exits_zero(self, tmp_path, capsys):
        bib = tmp_path / "refs.bib"
        bib.write_text(CLEAN_BIB, encoding="utf-8")

        assert main([str(bib)]) == 0

        out = capsys.readouterr().out
        assert "Wrote markdown report" in out
        assert "Entries with warnings: 0" in out
        assert default_report_path(bib).exists()

    def test_warnings_exit_one_and_fix_writes_normalized_bib(self, tmp_path, capsys):
        bib = tmp_path / "refs.bib"
        bib.write_text(MESSY_BIB, encoding="utf-8")

        assert main([str(bib), "--fix"]) == 1

        normalized = default_normalized_path(bib)
        assert normalized.name == "refs_normalized.bib"
        records = parse(normalized.read_text(encoding="utf-8"))
        assert records[0].type == "article"
        assert "foo" not in records[0].fields
        assert records[1].value == "p"
        assert "messy: " in capsys.readouterr().out

    def test_explicit_output_paths(self, tmp_path):
        bib = tmp_path / "refs.bib"
        bib.write_text(MESSY_BIB, encoding="utf-8")
        report = tmp_path / "out" / "report.md"
        report.parent.mkdir()
        out_bib = tmp_path / "fixed.bib"

        main([str(bib), "--fix", "--report", str(report), "--out-bib", str(out_bib)])

        assert report.read_text(encoding="utf-8").startswith("# BibTeX Lint Report")
        assert out_bib.read_text(encoding="utf-8").startswith("@article{messy,\ntitle = {T},")

    def test_verbose_prints_debug_lines(self, tmp_path, capsys):
        bib = tmp_path / "refs.bib"
        bib.write_text(MESSY_BIB, encoding="utf-8")

        main([str(bib), "--verbose"])

        assert "[debug] loaded 2 records" in capsys.readouterr().out

    def test_missing_file_is_fatal(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.bib")]) == 2
        assert "fatal: input file does not exist" in capsys.readouterr().err

    def test_syntax_error_is_fatal(self, tmp_path, capsys):
        bib = tmp_path / "broken.bib"
        bib.write_text("@article{k, title = {unterminated", encoding="utf-8")

        assert main([str(bib)]) == 2
        err = capsys.readouterr().err
        assert "fatal: could not load bib file" in err
        assert "position" in err

    def test_empty_bibliography_is_fatal(self, tmp_path, capsys):
        bib = tmp_path / "empty.bib"
        bib.write_text("% nothing here\n", encoding="utf-8")

        assert main([str(bib)]) == 2
        assert not default_report_path(bib).exists()

    def test_no_input_is_fatal(self, capsys):
        assert main([]) == 2
        assert "fatal: no input file given" in capsys.readouterr().err

    def test_list_types(self, capsys):
        assert main(["--list-types"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("article: required [title, author, journal, year]")
        assert "misc: required [-]" in out
        assert "preamble:" not in list_types()
        assert "unknown:" not in list_types()

"""Tests for the nt2json and json2nt command line tools."""

import io
import json
import sys

import pytest

from ntcodec.cli import build_parser, json2nt_main, main, nt2json_main
from ntcodec.cli.commands import read_input
from ntcodec.cli.errors import CLIInputError, cli_debug_enabled, format_cli_error
from ntcodec.errors import NTSyntaxError


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    for name in ("NTCODEC_DEBUG", "DEBUG", "NTCODEC_INDENT", "NTCODEC_NEWLINE", "NTCODEC_MAX_DEPTH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _write


class TestNt2Json:
    def test_file(self, write_file, capsys):
        path = write_file("doc.nt", "a: 1\nb:\n    - x\n")
        assert main(["nt2json", path]) == 0
        assert json.loads(capsys.readouterr().out) == {"a": "1", "b": ["x"]}

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("- a\n"))
        assert main(["nt2json"]) == 0
        assert json.loads(capsys.readouterr().out) == ["a"]

    def test_empty_document_is_null(self, write_file, capsys):
        path = write_file("empty.nt", "# nothing\n")
        assert nt2json_main([path]) == 0
        assert capsys.readouterr().out == "null\n"

    def test_json_indent(self, write_file, capsys):
        path = write_file("doc.nt", "a: 1")
        nt2json_main(["--json-indent", "2", path])
        assert capsys.readouterr().out == '{\n  "a": "1"\n}\n'

    def test_syntax_error(self, write_file, capsys):
        path = write_file("dup.nt", "a: 1\na: 2")
        with pytest.raises(SystemExit) as exc_info:
            main(["nt2json", path])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Line 2, column 1: Duplicate key 'a'" in err
        assert "Traceback" not in err

    def test_debug_shows_traceback(self, write_file, capsys):
        path = write_file("dup.nt", "a: 1\na: 2")
        with pytest.raises(SystemExit):
            main(["nt2json", "--debug", path])
        assert "Traceback" in capsys.readouterr().err

    def test_depth_limit_from_env(self, write_file, monkeypatch, capsys):
        monkeypatch.setenv("NTCODEC_MAX_DEPTH", "2")
        path = write_file("deep.nt", "a:\n    b:\n        c: d\n")
        with pytest.raises(SystemExit) as exc_info:
            nt2json_main([path])
        assert exc_info.value.code == 1
        assert "Maximum nesting depth of 2 exceeded" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["nt2json", str(tmp_path / "missing.nt")])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "File not found" in err
        assert "Hint:" in err


class TestJson2Nt:
    def test_file(self, write_file, capsys):
        path = write_file("doc.json", '{"a": ["x", "y"]}')
        assert main(["json2nt", path]) == 0
        assert capsys.readouterr().out == "a:\n    - x\n    - y\n"

    def test_layout_flags(self, write_file, capsys):
        path = write_file("doc.json", '{"a": ["x", "y"]}')
        assert json2nt_main(["--indent", "2", "--newline", "crlf", path]) == 0
        assert capsys.readouterr().out == "a:\r\n  - x\r\n  - y\r\n"

    def test_layout_from_env(self, write_file, monkeypatch, capsys):
        monkeypatch.setenv("NTCODEC_INDENT", "1")
        path = write_file("doc.json", '{"a": {"b": "c"}}')
        json2nt_main([path])
        assert capsys.readouterr().out == "a:\n b: c\n"

    def test_invalid_json(self, write_file, capsys):
        path = write_file("bad.json", "{")
        with pytest.raises(SystemExit):
            json2nt_main([path])
        err = capsys.readouterr().err
        assert "Invalid JSON" in err
        assert "(line 1, column 2)" in err

    def test_unrepresentable_value(self, write_file, capsys):
        path = write_file("num.json", "[1]")
        with pytest.raises(SystemExit) as exc_info:
            json2nt_main([path])
        assert exc_info.value.code == 1
        assert "Invalid value" in capsys.readouterr().err


class TestHelpers:
    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_read_input_rejects_bad_utf8(self, tmp_path):
        path = tmp_path / "latin.nt"
        path.write_bytes(b"a: \xff")
        with pytest.raises(CLIInputError) as exc_info:
            read_input(str(path))
        assert exc_info.value.code == "CLI_INPUT_ERROR"

    def test_read_input_keeps_terminators(self, tmp_path):
        path = tmp_path / "crlf.nt"
        path.write_bytes(b"a: 1\r\nb: 2\r")
        assert read_input(str(path)) == "a: 1\r\nb: 2\r"

    def test_format_codec_error(self):
        error = NTSyntaxError("Expected ':'", line=1, column=1)
        assert format_cli_error(error) == "Line 1, column 1: Expected ':'"

    def test_format_other_error(self):
        assert format_cli_error(ValueError("boom")) == "ValueError: boom"

    @pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("0", False), ("", False)])
    def test_debug_env(self, monkeypatch, value, expected):
        monkeypatch.setenv("NTCODEC_DEBUG", value)
        assert cli_debug_enabled() is expected

"""Tests for the command-line interface."""

import hashlib
import io
import json
import os
from pathlib import Path

import pytest

from shall.cli import build_parser, build_request, main
from shall.config import Settings
from shall.exceptions import ConfigurationError
from shall.models import Algorithm, DirectorySource, FileSource, LiteralSource, StdinSource

ABC_ROWS = [
    "SHA1     | - | a9993e364706816aba3e25717850c26c9cd0d89d",
    "SHA256   | - | ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    "SHA512   | - | ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
    "MD5      | - | 900150983cd24fb0d6963f7d28e17f72",
]


def _request(argv: list[str]):
    return build_request(build_parser().parse_args(argv), Settings())


class TestBuildRequest:
    """Tests for turning arguments into a HashRequest."""

    def test_literal(self) -> None:
        request = _request(["abc"])
        assert request.source == LiteralSource(text="abc")
        assert request.algorithms == frozenset()

    def test_flags(self) -> None:
        request = _request(["--md5", "--sha512", "abc"])
        assert request.algorithms == frozenset({Algorithm.MD5, Algorithm.SHA512})

    def test_precedence(self) -> None:
        """--directory beats --file, which beats --stdin and the literal."""
        assert isinstance(_request(["--directory", "d", "--file", "f", "x"]).source, DirectorySource)
        assert isinstance(_request(["--file", "f", "--stdin", "x"]).source, FileSource)
        assert isinstance(_request(["--stdin", "x"]).source, StdinSource)

    def test_no_input(self) -> None:
        with pytest.raises(ConfigurationError):
            _request(["--md5"])

    def test_verbose_from_settings(self) -> None:
        args = build_parser().parse_args(["abc"])
        assert build_request(args, Settings(verbose=True)).verbose is True
        args = build_parser().parse_args(["--verbose", "abc"])
        assert build_request(args, Settings()).verbose is True


class TestMain:
    """End-to-end tests through main()."""

    def test_literal_all_algorithms(self, capsys) -> None:
        assert main(["abc"]) == 0
        assert capsys.readouterr().out.splitlines() == ABC_ROWS

    def test_single_algorithm(self, capsys) -> None:
        assert main(["--md5", ""]) == 0
        out = capsys.readouterr().out
        assert out == "MD5      | - | d41d8cd98f00b204e9800998ecf8427e\n"

    def test_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "input.txt"
        path.write_bytes(b"abc")
        assert main(["--sha1", "--file", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [ABC_ROWS[0]]

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main(["--file", str(tmp_path / "missing.txt")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error reading file" in captured.err

    def test_stdin(self, monkeypatch, capsys) -> None:
        class FakeStdin:
            buffer = io.BytesIO(b"abc")

        monkeypatch.setattr("sys.stdin", FakeStdin())
        assert main(["--stdin", "--md5"]) == 0
        assert capsys.readouterr().out.splitlines() == [ABC_ROWS[3]]

    def test_directory(self, tmp_path: Path, capsys) -> None:
        root = tmp_path / "dir"
        root.mkdir()
        (root / "abc.txt").write_bytes(b"abc")
        (root / "empty.txt").write_bytes(b"")
        (root / "sub").mkdir()

        assert main(["--directory", str(root), "--md5"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "MD5      | abc.txt | 900150983cd24fb0d6963f7d28e17f72",
            "MD5      | empty.txt | d41d8cd98f00b204e9800998ecf8427e",
        ]

    @pytest.mark.parametrize("flags", [[], ["--md5", "--sha1"]])
    def test_directory_requires_one_flag(self, tmp_path: Path, capsys, flags) -> None:
        (tmp_path / "file.txt").write_bytes(b"abc")
        assert main(["--directory", str(tmp_path), *flags]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exactly one hash type required" in captured.err

    def test_missing_directory(self, tmp_path: Path, capsys) -> None:
        assert main(["--directory", str(tmp_path / "nope"), "--sha256"]) == 1
        assert "Error reading directory" in capsys.readouterr().err

    def test_no_input(self, capsys) -> None:
        assert main([]) == 1
        assert "No input given" in capsys.readouterr().err

    def test_verbose_goes_to_stderr(self, capsys) -> None:
        assert main(["--verbose", "--sha256", "abc"]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [ABC_ROWS[1]]
        assert "Calculating SHA256" in captured.err
        assert "Input size" in captured.err

    def test_json_format(self, capsys) -> None:
        assert main(["--format", "json", "--md5", "abc"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record == {
            "algorithm": "MD5",
            "subject": None,
            "digest": "900150983cd24fb0d6963f7d28e17f72",
        }

    def test_settings_from_env(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SHALL_OUTPUT_FORMAT", "json")
        assert main(["--md5", "abc"]) == 0
        assert json.loads(capsys.readouterr().out)["algorithm"] == "MD5"

    def test_label_width_from_env(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SHALL_LABEL_WIDTH", "6")
        monkeypatch.setenv("SHALL_SUBJECT_PLACEHOLDER", "*")
        assert main(["--md5", "abc"]) == 0
        assert capsys.readouterr().out == "MD5    | * | 900150983cd24fb0d6963f7d28e17f72\n"

    def test_undecodable_literal(self, capsys) -> None:
        """A literal that is not valid UTF-8 hashes its raw argv bytes."""
        assert main(["--md5", os.fsdecode(b"\xff")]) == 0
        expected = hashlib.md5(b"\xff").hexdigest()
        assert capsys.readouterr().out == f"MD5      | - | {expected}\n"

    def test_invalid_settings(self, monkeypatch, capsys) -> None:
        """A bad SHALL_* value exits with 1 and a message, not a traceback."""
        monkeypatch.setenv("SHALL_LABEL_WIDTH", "wide")
        assert main(["--md5", "abc"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid settings" in captured.err
        assert "label_width" in captured.err

    def test_verbose_setting_enables_notices(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SHALL_VERBOSE", "true")
        assert main(["--sha256", "abc"]) == 0
        assert "Calculating SHA256" in capsys.readouterr().err

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "shall 0.1.0" in capsys.readouterr().out

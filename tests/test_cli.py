"""
Integration tests for folder_organizer.cli module.

Tests argument parsing, exit codes and the hand-off to watch mode.
"""

from pathlib import Path

import pytest

from folder_organizer import __version__, config
from folder_organizer import watcher
from folder_organizer.cli import create_parser, main

from conftest import FIXED_DATE


class TestCreateParser:
    """Tests for create_parser function."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.path == config.DEFAULT_FOLDER
        assert args.path == Path("./Downloads")
        assert args.watch is False
        assert args.verbose is False
        assert args.log_file is None

    def test_path_option(self):
        parser = create_parser()

        assert parser.parse_args(["--path", "/tmp/x"]).path == Path("/tmp/x")
        assert parser.parse_args(["-p", "/tmp/y"]).path == Path("/tmp/y")

    def test_watch_flag(self):
        parser = create_parser()

        assert parser.parse_args(["--watch"]).watch is True
        assert parser.parse_args(["-w"]).watch is True

    def test_verbose_flag(self):
        assert create_parser().parse_args(["-v"]).verbose is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            create_parser().parse_args(["--version"])

        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Tests for main function."""

    def test_organizes_folder(self, make_file, target_dir: Path):
        make_file("a.jpg", b"same picture")
        make_file("b.jpg", b"same picture")
        make_file("c.txt", b"text")

        assert main(["--path", str(target_dir)]) == 0

        assert (target_dir / "images" / FIXED_DATE / "a.jpg").exists()
        assert (target_dir / "duplicates" / "b.jpg").exists()
        assert (target_dir / "documents" / FIXED_DATE / "c.txt").exists()

    def test_prints_moves_and_duplicates(self, make_file, target_dir: Path, capsys):
        make_file("a.jpg", b"same picture")
        make_file("b.jpg", b"same picture")

        main(["-p", str(target_dir)])

        out = capsys.readouterr().out
        assert "Duplicate found: b.jpg" in out
        assert "Moved a.jpg" in out

    def test_missing_folder_exits_nonzero(self, tmp_path: Path, capsys):
        missing = tmp_path / "missing"

        assert main(["--path", str(missing)]) == 1

        assert not missing.exists()
        assert "Could not organize" in capsys.readouterr().err

    def test_runs_watcher_after_first_pass(self, make_file, target_dir: Path, monkeypatch):
        make_file("c.txt", b"text")
        calls = []

        def fake_run(folder):
            # The initial pass has already happened
            assert (target_dir / "documents" / FIXED_DATE / "c.txt").exists()
            calls.append(folder)

        monkeypatch.setattr(watcher, "run", fake_run)

        assert main(["--path", str(target_dir), "--watch"]) == 0
        assert calls == [target_dir]

    def test_no_watch_without_flag(self, target_dir: Path, monkeypatch):
        calls = []
        monkeypatch.setattr(watcher, "run", calls.append)

        assert main(["--path", str(target_dir)]) == 0
        assert calls == []

    def test_watch_setup_failure_exits_nonzero(self, target_dir: Path, monkeypatch, capsys):
        def failing_run(folder):
            raise OSError("inotify watch limit reached")

        monkeypatch.setattr(watcher, "run", failing_run)

        assert main(["--path", str(target_dir), "-w"]) == 1
        assert "inotify watch limit reached" in capsys.readouterr().err

    def test_writes_log_file(self, make_file, target_dir: Path, tmp_path: Path):
        make_file("song.mp3", b"audio")
        log_file = tmp_path / "organizer.log"

        main(["--path", str(target_dir), "--log-file", str(log_file)])

        assert "Moved song.mp3" in log_file.read_text()

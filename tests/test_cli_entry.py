"""
Tests for the command-line front end: argument resolution, messages and
end-to-end runs in a working directory.
"""

from datetime import timedelta

import pytest

from fraps_linker.cli import cli_entry
from fraps_linker.cli.cli_entry import (
    format_minutes,
    help_text,
    is_help,
    main,
    resolve_max_gap,
    run,
)
from fraps_linker.core.models_fs import ISSUE_MESSAGES, LinkOptions, PlanIssue
from fraps_linker.core.scan_files import scan_captures

HELP_TEXT = (
    "This utility renames raw FRAPS footage so that VirtualDub will consider the segments "
    "linked and automatically append them.\n"
    "It looks for all the .avi files in its current working directory.\n"
    "\n"
    "Usage:\n"
    "[programname.exe]\tuses default time gap between videos (5 minutes)\n"
    "[programname.exe] 10.5\toverrides time gap between videos to be 10.5 minutes\n"
    "[programname.exe] -h\tdisplays this help message.\n"
)

COLLISION = (
    "One of the renames cannot be performed because there is already a file of the same name.\n"
    "Aborting.\n"
)
MISSING = (
    "One of the renames cannot be performed because the file to be renamed is missing.\n"
    "Aborting.\n"
)

SEGMENTS = (
    "GameA 2020-01-01 10-00-00-00.avi",
    "GameA 2020-01-01 10-03-00-00.avi",
)


def listing(directory):
    return sorted(p.name for p in directory.iterdir())


class TestAbortMessages:
    """Abort texts come from core and are shared by every front end"""

    def test_cli_uses_core_messages(self):
        assert cli_entry.ISSUE_MESSAGES is ISSUE_MESSAGES

    def test_exact_text(self):
        assert ISSUE_MESSAGES[PlanIssue.COLLISION] + "\n" == COLLISION
        assert ISSUE_MESSAGES[PlanIssue.MISSING_SOURCE] + "\n" == MISSING


class TestHelp:
    """Test suite for help handling"""

    def test_help_text_verbatim(self):
        assert help_text() + "\n" == HELP_TEXT

    @pytest.mark.parametrize("token", ["h", "-h", "help", "-help", "H", "-HELP", "Help", "-hElP"])
    def test_help_tokens(self, token):
        assert is_help(token) is True

    @pytest.mark.parametrize("token", ["--help", "/?", "hh", " -h", ""])
    def test_not_help(self, token):
        assert is_help(token) is False

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc:
            resolve_max_gap(["-H"])

        assert exc.value.code == 0
        assert capsys.readouterr().out == HELP_TEXT

    def test_help_ignores_following_arguments(self, capsys):
        with pytest.raises(SystemExit):
            resolve_max_gap(["help", "3"])
        assert capsys.readouterr().out == HELP_TEXT


class TestResolveMaxGap:
    """Test suite for max gap argument resolution"""

    def test_no_argument_uses_default(self, capsys):
        options = resolve_max_gap([])
        assert options.max_gap == timedelta(minutes=5)
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("arg, minutes, shown", [
        ("2", 2, "2"),
        ("2.0", 2, "2"),
        ("10.5", 10.5, "10.5"),
        ("1", 1, "1"),
        (" 7 ", 7, "7"),
        ("1.25", 1.25, "1.25"),
    ])
    def test_override(self, capsys, arg, minutes, shown):
        options = resolve_max_gap([arg])
        assert options.max_gap == timedelta(minutes=minutes)
        assert capsys.readouterr().out == f"Max gap overridden to {shown} minutes.\n"

    def test_only_first_argument_read(self, capsys):
        options = resolve_max_gap(["3", "abc"])
        assert options.max_gap == timedelta(minutes=3)

    @pytest.mark.parametrize("arg", ["0.5", "0", "-4", "0.999", "nan", "inf"])
    def test_invalid_gap(self, capsys, arg):
        with pytest.raises(SystemExit) as exc:
            resolve_max_gap([arg])

        assert exc.value.code == 0
        assert capsys.readouterr().out == "Invalid max time gap between videos specified.\n"

    @pytest.mark.parametrize("arg", ["abc", "5min", "", "1,5,3"])
    def test_invalid_argument(self, capsys, arg):
        with pytest.raises(SystemExit) as exc:
            resolve_max_gap([arg])

        assert exc.value.code == 0
        assert capsys.readouterr().out == "Invalid argument specified.\n" + HELP_TEXT

    @pytest.mark.parametrize("value, expected", [
        (5, "5"),
        (2.0, "2"),
        (10.5, "10.5"),
        (1.1, "1.1"),
    ])
    def test_format_minutes(self, value, expected):
        assert format_minutes(value) == expected


class TestRun:
    """End-to-end runs against a directory"""

    def test_links_segments(self, make_captures, capsys):
        directory = make_captures(*SEGMENTS)

        code = run(directory, LinkOptions())

        assert code == 0
        assert capsys.readouterr().out == (
            "Found 2 files to rename.\n"
            "2 files renamed successfully.\n"
        )
        assert listing(directory) == [
            "GameA 2020-1-1 10-0-0.00.avi",
            "GameA 2020-1-1 10-0-0.01.avi",
        ]

    def test_two_minute_override_splits(self, make_captures):
        directory = make_captures(*SEGMENTS)

        run(directory, LinkOptions.from_minutes(2))

        assert listing(directory) == [
            "GameA 2020-1-1 10-0-0.00.avi",
            "GameA 2020-1-1 10-3-0.00.avi",
        ]

    def test_other_files_untouched(self, make_captures):
        directory = make_captures(SEGMENTS[0], "readme.txt", "GameA 2020-01-01 10-00-00-00.mp4")

        run(directory)

        assert listing(directory) == [
            "GameA 2020-01-01 10-00-00-00.mp4",
            "GameA 2020-1-1 10-0-0.00.avi",
            "readme.txt",
        ]

    def test_collision_aborts(self, make_captures, capsys):
        directory = make_captures(*SEGMENTS, "GameA 2020-1-1 10-0-0.00.avi")
        before = listing(directory)

        code = run(directory)

        assert code == 1
        assert capsys.readouterr().out == "Found 2 files to rename.\n" + COLLISION
        assert listing(directory) == before

    def test_bad_date_raises_after_count(self, make_captures, capsys):
        directory = make_captures("GameA 2020-13-01 10-00-00-00.avi")

        with pytest.raises(ValueError):
            run(directory)

        assert capsys.readouterr().out == "Found 1 files to rename.\n"
        assert listing(directory) == ["GameA 2020-13-01 10-00-00-00.avi"]

    def test_count_printed_before_parsing(self, make_captures, capsys, monkeypatch):
        directory = make_captures(*SEGMENTS)
        printed_at_parse = []

        def record_parse(paths):
            printed_at_parse.append(capsys.readouterr().out)
            return scan_captures(directory)

        monkeypatch.setattr(cli_entry, "parse_captures", record_parse)

        run(directory)

        assert printed_at_parse == ["Found 2 files to rename.\n"]

    def test_missing_source_aborts(self, make_captures, capsys, monkeypatch):
        directory = make_captures(*SEGMENTS)
        files = scan_captures(directory)
        (directory / SEGMENTS[1]).unlink()
        monkeypatch.setattr(cli_entry, "parse_captures", lambda _paths: files)

        code = run(directory)

        assert code == 1
        assert capsys.readouterr().out == "Found 2 files to rename.\n" + MISSING
        assert listing(directory) == [SEGMENTS[0]]

    def test_partial_failure_reported(self, make_captures, capsys, monkeypatch):
        directory = make_captures(*SEGMENTS)
        real_validate = cli_entry.validate_plan

        def validate_then_lose_file(plan):
            issues = real_validate(plan)
            (directory / SEGMENTS[1]).unlink()
            return issues

        monkeypatch.setattr(cli_entry, "validate_plan", validate_then_lose_file)

        code = run(directory)

        out = capsys.readouterr().out.splitlines()
        assert code == 1
        assert out[0] == "Found 2 files to rename."
        assert out[1] == "1 of 2 files renamed; 1 renames failed:"
        assert out[2].startswith(f"  - {SEGMENTS[1]} -> GameA 2020-1-1 10-0-0.01.avi: ")

    def test_second_run_finds_nothing(self, make_captures, capsys):
        directory = make_captures(*SEGMENTS)
        run(directory)
        after_first = listing(directory)
        capsys.readouterr()

        code = run(directory)

        assert code == 0
        assert capsys.readouterr().out == (
            "Found 0 files to rename.\n"
            "0 files renamed successfully.\n"
        )
        assert listing(directory) == after_first


class TestMain:
    """Test suite for main()"""

    def test_uses_working_directory(self, make_captures, monkeypatch, capsys):
        directory = make_captures(*SEGMENTS)
        monkeypatch.chdir(directory)

        code = main([])

        assert code == 0
        assert "2 files renamed successfully." in capsys.readouterr().out
        assert listing(directory) == [
            "GameA 2020-1-1 10-0-0.00.avi",
            "GameA 2020-1-1 10-0-0.01.avi",
        ]

    def test_override_then_run(self, make_captures, capsys):
        directory = make_captures(*SEGMENTS)

        main(["2"], directory=directory)

        assert capsys.readouterr().out == (
            "Max gap overridden to 2 minutes.\n"
            "Found 2 files to rename.\n"
            "2 files renamed successfully.\n"
        )
        assert listing(directory) == [
            "GameA 2020-1-1 10-0-0.00.avi",
            "GameA 2020-1-1 10-3-0.00.avi",
        ]

    def test_invalid_argument_touches_nothing(self, make_captures, capsys, monkeypatch):
        directory = make_captures(*SEGMENTS)

        def fail_scan(*args, **kwargs):
            raise AssertionError("directory must not be scanned")

        monkeypatch.setattr(cli_entry, "scan_capture_paths", fail_scan)

        with pytest.raises(SystemExit) as exc:
            main(["abc"], directory=directory)

        assert exc.value.code == 0
        assert capsys.readouterr().out == "Invalid argument specified.\n" + HELP_TEXT
        assert listing(directory) == sorted(SEGMENTS)

    def test_reads_sys_argv(self, make_captures, monkeypatch, capsys):
        directory = make_captures(*SEGMENTS)
        monkeypatch.setattr("sys.argv", ["fraps-linker", "-h"])

        with pytest.raises(SystemExit):
            main(directory=directory)

        assert capsys.readouterr().out == HELP_TEXT

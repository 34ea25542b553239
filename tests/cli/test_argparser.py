"""Unit tests for the argument parser module in dirtree CLI."""

import argparse
from pathlib import Path

import pytest

from dirtree.cli.argparser import create_parser, non_negative_int


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.path == "."
    assert args.depth is None
    assert not args.show_all
    assert args.ignore == []
    assert args.include == []
    assert args.output is None
    assert not args.stats
    assert args.color == "auto"
    assert not args.verbose


def test_all_options(parser):
    args = parser.parse_args(
        [
            "./project/",
            "-d",
            "3",
            "--show-all",
            "--ignore",
            "docs",
            "--ignore",
            "README.md",
            "--include",
            "build",
            "-o",
            "tree.txt",
            "--stats",
            "--color",
            "never",
            "-v",
        ]
    )

    assert args.path == "./project/"
    assert args.depth == 3
    assert args.show_all
    assert args.ignore == ["docs", "README.md"]
    assert args.include == ["build"]
    assert args.output == Path("tree.txt")
    assert args.stats
    assert args.color == "never"
    assert args.verbose


def test_long_depth_and_output(parser):
    args = parser.parse_args(["--depth", "0", "--output", "out.txt"])
    assert args.depth == 0
    assert args.output == Path("out.txt")


def test_repeated_parses_do_not_share_lists(parser):
    first = parser.parse_args(["--ignore", "a"])
    second = create_parser().parse_args([])
    assert first.ignore == ["a"]
    assert second.ignore == []


@pytest.mark.parametrize("value", ["-1", "two", "1.5"])
def test_invalid_depth_exits_with_usage_error(parser, value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--depth", value])

    assert excinfo.value.code == 2
    assert "invalid depth" in capsys.readouterr().err


def test_invalid_color(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--color", "sometimes"])
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirtree ")


def test_non_negative_int():
    assert non_negative_int("0") == 0
    assert non_negative_int("12") == 12
    with pytest.raises(argparse.ArgumentTypeError):
        non_negative_int("-3")


def test_help_lists_default_ignored_names(parser):
    help_text = parser.format_help()
    assert "node_modules" in help_text
    assert "--show-all" in help_text

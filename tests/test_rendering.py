"""Unit tests for tree line rendering."""

import pytest
from rich.color import ColorSystem
from rich.style import Style

from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.rendering import (
    BRANCH_LAST,
    BRANCH_MIDDLE,
    DIRECTORY_STYLE,
    SYMLINK_STYLE,
    TreeLine,
    TreeRenderer,
    branch_for,
    child_prefix,
    entry_style,
)


def make_entry(name="item", is_dir=False, is_symlink=False, index=0, total=1):
    return DirectoryEntry(name, name, is_dir=is_dir, is_symlink=is_symlink, size=None, index=index, total=total)


def test_glyphs_are_exact():
    assert BRANCH_MIDDLE == "├── "
    assert BRANCH_LAST == "└── "
    assert branch_for(False) == "├── "
    assert branch_for(True) == "└── "


def test_child_prefix_grows_by_one_segment_per_level():
    prefix = ""
    for is_last in (False, True, False):
        prefix = child_prefix(prefix, is_last)
    assert prefix == "│   " + "    " + "│   "


@pytest.mark.parametrize(
    "index,total,expected",
    [(0, 3, "│   ├── item"), (2, 3, "│   └── item"), (0, 1, "│   └── item")],
)
def test_render_entry_plain_text(index, total, expected):
    line = TreeRenderer().render_entry(make_entry(index=index, total=total), "│   ")
    assert line.plain == expected


def test_render_root_is_unstyled():
    line = TreeRenderer().render_root("../some dir")
    assert line.plain == "../some dir"
    assert not line.style
    assert line.render(ColorSystem.STANDARD) == "../some dir"


def test_regular_file_is_unstyled():
    assert not entry_style(make_entry())
    assert TreeRenderer().render_entry(make_entry(), "").render(ColorSystem.STANDARD) == "└── item"


def test_directory_style():
    assert entry_style(make_entry(is_dir=True)) == DIRECTORY_STYLE


def test_symlink_style_overlays_kind():
    assert entry_style(make_entry(is_symlink=True)) == SYMLINK_STYLE

    style = entry_style(make_entry(is_dir=True, is_symlink=True))
    assert style.bold
    assert style.italic
    assert style.color == Style(color="yellow").color


def test_style_only_covers_the_name():
    line = TreeRenderer().render_entry(make_entry("src", is_dir=True, index=0, total=2), "    ")

    assert line.prefix == "    ├── "
    assert line.name == "src"
    assert line.style == DIRECTORY_STYLE
    assert line.render(ColorSystem.STANDARD) == "    ├── \x1b[1;34msrc\x1b[0m"


def test_render_without_color_system_is_plain():
    line = TreeLine("├── ", "src", DIRECTORY_STYLE)
    assert line.render() == line.render(None) == "├── src"


@pytest.mark.parametrize("name", ["a\tb.txt", "c\rd.txt", "e\bf\x0bg\x0ch", "  padded  "])
def test_names_are_kept_verbatim(name):
    line = TreeRenderer().render_entry(make_entry(name), "│   ")

    assert line.plain == "│   └── " + name
    assert line.render(None) == "│   └── " + name
    assert line.render(ColorSystem.STANDARD) == "│   └── " + name


def test_styled_name_keeps_control_characters():
    line = TreeRenderer().render_entry(make_entry("tab\tdir", is_dir=True), "")
    assert line.render(ColorSystem.STANDARD) == "└── \x1b[1;34mtab\tdir\x1b[0m"

"""Line rendering for the box-drawing tree.

A tree line keeps the branch prefix and the entry name exactly as they are, so
names containing tabs, carriage returns or other control characters are written
unchanged. Styling is applied only when a line is rendered for a terminal, as
ANSI codes around the name; the plain text of a line never depends on it.
"""

from typing import NamedTuple, Optional

from rich.color import ColorSystem
from rich.style import Style

from dirtree.file_system_tree.directory_entry import DirectoryEntry

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
PREFIX_CONTINUATION = "│   "
PREFIX_BLANK = "    "

DIRECTORY_STYLE = Style(color="blue", bold=True)
SYMLINK_STYLE = Style(color="yellow", italic=True)


def branch_for(is_last: bool) -> str:
    """Return the branch glyph placed before an entry name.

    Example:
        >>> branch_for(False), branch_for(True)
        ('├── ', '└── ')
    """
    return BRANCH_LAST if is_last else BRANCH_MIDDLE


def child_prefix(prefix: str, is_last: bool) -> str:
    """Extend a prefix for the children of an entry.

    The children of the last sibling get blank padding; the children of any other
    sibling get a vertical continuation line so the parent's branch stays connected.

    Example:
        >>> child_prefix("", False) + "|"
        '│   |'
        >>> child_prefix("│   ", True) + "|"
        '│       |'
    """
    return prefix + (PREFIX_BLANK if is_last else PREFIX_CONTINUATION)


def entry_style(entry: DirectoryEntry) -> Style:
    """Pick the style for an entry name.

    Directories are bold blue. Symlinks are italic yellow, layered over the
    directory style when the link points to a directory. Everything else is
    unstyled.
    """
    style = DIRECTORY_STYLE if entry.is_dir else Style.null()
    if entry.is_symlink:
        style += SYMLINK_STYLE
    return style


class TreeLine(NamedTuple):
    """One line of the tree: glyphs, the raw name and the style for the name.

    Attributes:
        prefix (str): Continuation markers and branch glyph, empty for the root line.
        name (str): The entry name (or root path) exactly as it came from the file system.
        style (Style): Style applied to ``name`` when rendering in color.

    Example:
        >>> line = TreeLine("├── ", "a\\tb.txt", Style.null())
        >>> line.plain
        '├── a\\tb.txt'
        >>> TreeLine("└── ", "src", DIRECTORY_STYLE).render(ColorSystem.STANDARD)
        '└── \\x1b[1;34msrc\\x1b[0m'
    """

    prefix: str
    name: str
    style: Style

    @property
    def plain(self) -> str:
        """The line without styling."""
        return self.prefix + self.name

    def render(self, color_system: Optional[ColorSystem] = None) -> str:
        """Render the line, wrapping the name in ANSI codes if a color system is given.

        Args:
            color_system: Terminal color capability, or None for plain text.

        Returns:
            The line without a trailing newline.
        """
        if color_system is None:
            return self.plain
        return self.prefix + self.style.render(self.name, color_system=color_system)


class TreeRenderer:
    """Formats the root line and one line per directory entry.

    Example:
        >>> renderer = TreeRenderer()
        >>> entry = DirectoryEntry("src", "./src", True, False, None, 0, 2)
        >>> renderer.render_entry(entry, "│   ").plain
        '│   ├── src'
        >>> renderer.render_root("./project").plain
        './project'
    """

    def render_root(self, root: str) -> TreeLine:
        """Render the root path exactly as given, without styling or branch."""
        return TreeLine("", root, Style.null())

    def render_entry(self, entry: DirectoryEntry, prefix: str) -> TreeLine:
        """Render ``prefix + branch + name`` for one entry.

        Args:
            entry: The entry being rendered.
            prefix: Continuation markers accumulated from the entry's ancestors.

        Returns:
            The line, with the name's style chosen according to the entry's kind.
        """
        return TreeLine(prefix + branch_for(entry.is_last), entry.name, entry_style(entry))

"""Name-based exclusion with a built-in list of build and VCS artifacts."""

from typing import AbstractSet, Iterable, Optional

from dirtree.config import TraversalConfig

from .base_rules import BaseExclusionRules

DEFAULT_IGNORED_NAMES = frozenset(
    {
        # Version control
        ".git",
        ".hg",
        ".svn",
        # OS metadata
        ".DS_Store",
        # Dependencies, build output and caches
        "node_modules",
        "target",
        "dist",
        "build",
        ".cache",
        ".next",
        ".turbo",
        ".vercel",
        ".idea",
        ".vscode",
        "venv",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".tox",
        "out",
        "coverage",
        ".parcel-cache",
    }
)


def is_ignored(
    name: str,
    show_all: bool,
    custom_ignores: AbstractSet[str],
    force_includes: AbstractSet[str],
) -> bool:
    """Decide whether an entry name is filtered out of the tree.

    Precedence, from strongest to weakest: an explicit custom ignore, then
    ``show_all`` (which disables only the default list), then a force-include
    (which rescues a default-ignored name), then the default list itself.
    Anything else is visible.

    Args:
        name: The entry's basename.
        show_all: Disable the default ignore list.
        custom_ignores: Names that are always skipped.
        force_includes: Names exempted from the default ignore list.

    Returns:
        True if the entry must be skipped.

    Example:
        >>> is_ignored(".git", False, set(), set())
        True
        >>> is_ignored(".git", True, set(), set())
        False
        >>> is_ignored(".git", False, set(), {".git"})
        False
        >>> is_ignored("docs", True, {"docs"}, {"docs"})
        True
        >>> is_ignored(".gitignore", False, set(), set())
        False
    """
    if name in custom_ignores:
        return True
    if show_all:
        return False
    if name in DEFAULT_IGNORED_NAMES:
        return name not in force_includes
    return False


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching exact entry names.

    Wraps :func:`is_ignored` with a fixed configuration. Names are compared
    exactly: no globbing and no case folding.

    Attributes:
        show_all (bool): Whether the default ignore list is disabled.
        custom_ignores (Set[str]): Names that are always excluded.
        force_includes (FrozenSet[str]): Names exempted from the default list.

    Example:
        >>> rules = NameExclusionRules(custom_ignores=["docs"], force_includes=["build"])
        >>> rules.exclude("docs"), rules.exclude("build"), rules.exclude("dist")
        (True, False, True)
        >>> rules.add_rule("notes.txt")
        >>> rules.exclude("notes.txt")
        True
    """

    def __init__(
        self,
        show_all: bool = False,
        custom_ignores: Optional[Iterable[str]] = None,
        force_includes: Optional[Iterable[str]] = None,
    ) -> None:
        self.show_all = show_all
        self.custom_ignores = set(custom_ignores or ())
        self.force_includes = frozenset(force_includes or ())

    @classmethod
    def from_config(cls, config: TraversalConfig) -> "NameExclusionRules":
        """Create rules matching the filtering options of a traversal configuration."""
        return cls(show_all=config.show_all, custom_ignores=config.ignore, force_includes=config.include)

    def exclude(self, name: str) -> bool:
        return is_ignored(name, self.show_all, self.custom_ignores, self.force_includes)

    def add_rule(self, rule: str) -> None:
        """Add a name to the custom ignores.

        Args:
            rule: Exact entry name to exclude. Custom ignores take precedence over
                force-includes and ``show_all``.
        """
        self.custom_ignores.add(rule)

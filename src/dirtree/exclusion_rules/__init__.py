"""Exclusion rules for filtering directory entries by name."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_IGNORED_NAMES, NameExclusionRules, is_ignored

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_IGNORED_NAMES",
    "NameExclusionRules",
    "is_ignored",
]

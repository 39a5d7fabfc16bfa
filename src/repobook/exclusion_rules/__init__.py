"""Exclusion rules for filtering tree entries before a directory map is built."""

from .base_path_rules import BasePathExclusionRules
from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .entry_filter import filter_entries
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "BasePathExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "filter_entries",
]

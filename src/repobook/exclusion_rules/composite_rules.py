"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects.

    A path is excluded if ANY constituent rule excludes it, so a base path restriction
    and a set of ignore patterns can be applied as one.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent exclusion rules, checked in order.

    Example:
        >>> from repobook.exclusion_rules.base_path_rules import BasePathExclusionRules
        >>> from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> ignore = GitIgnoreExclusionRules()
        >>> ignore.add_rule("*.png")
        >>> composite = CompositeExclusionRules([BasePathExclusionRules("docs"), ignore])
        >>> composite.exclude("docs/intro.md")
        False
        >>> composite.exclude("docs/diagram.png"), composite.exclude("src/main.py")
        (True, True)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path is excluded by any constituent rule, stopping at the first hit."""
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured.

        Rules without a ``has_rules`` method are assumed to be configured.
        """
        for rule in self.rules:
            has_rules = getattr(rule, "has_rules", None)
            if not callable(has_rules) or has_rules():
                return True
        return False

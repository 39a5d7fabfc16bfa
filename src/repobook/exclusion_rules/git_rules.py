"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from repobook.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Matching is done by the pathspec library exactly the way Git matches ignore files,
    including globs, directory patterns ending in ``/``, ``**`` and ``!`` negation.
    Rules from every loaded file and every added pattern are combined in the order they
    arrive, so later negations can re-include earlier matches.

    Directory markers in a Git tree listing carry no trailing slash. Callers that want
    a directory pattern such as ``build/`` to hit the marker itself should check the
    path with a slash appended; :func:`repobook.exclusion_rules.filter_entries` does so.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("node_modules/react/index.js")
        True
        >>> rules.exclude("server.log"), rules.exclude("keep.log")
        (True, False)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Slash-separated, repository-relative path.

        Returns:
            bool: True if the last matching pattern is a non-negated one.
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        """Check whether any pattern has been loaded or added."""
        return len(self.spec.patterns) > 0

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. ``"*.png"``, ``"docs/"`` or ``"!keep.md"``."""
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        # Recompile so the matcher sees the combined pattern list in arrival order
        self.spec = PathSpec([*self.spec.patterns, *patterns])

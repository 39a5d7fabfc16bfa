from abc import ABC, abstractmethod
from typing import Sequence, Union

from repobook.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for tree entry exclusion rules.

    Exclusion rules run before the tree builder and decide, from a repository-relative
    path alone, whether an entry is dropped from the listing. Implementations must
    provide the path check. Loading rules from files and adding individual rules are
    optional capabilities that depend on the rule type.

    Example:
        >>> from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.lock')
        >>> git_rules.exclude('yarn.lock')
        True
        >>> from repobook.exclusion_rules.base_path_rules import BasePathExclusionRules
        >>> base_rules = BasePathExclusionRules('docs')  # Constructor-only configuration
        >>> base_rules.exclude('src/main.py')
        True
        >>> # base_rules.add_rule('x')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Slash-separated path relative to the repository root.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the format of the specific rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

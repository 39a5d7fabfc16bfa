"""Repository file listing as a filtered directory map.

This module provides the RepoBook class, which ties the GitHub client, the exclusion
rules, the tree builder and an output strategy together for one repository branch.
"""

import logging
from typing import Dict, List, Optional, Union

from repobook.directory_tree.directory_node import DirectoryNode
from repobook.directory_tree.filter_options import FilterOptions
from repobook.directory_tree.tree_builder import TreeBuilder
from repobook.exclusion_rules.base_path_rules import BasePathExclusionRules
from repobook.exclusion_rules.base_rules import BaseExclusionRules
from repobook.exclusion_rules.composite_rules import CompositeExclusionRules
from repobook.exclusion_rules.entry_filter import filter_entries
from repobook.github.client import GitHubClient
from repobook.github.repository import RepositoryId
from repobook.output_strategies import OUTPUT_FORMATS, OutputStrategy, get_output_strategy
from repobook.types import RawEntry

logger = logging.getLogger(__name__)


class RepoBook:
    """Filtered directory map of one repository branch.

    The flat tree listing is fetched once and cached. Entries outside the base path of
    the filter options, or excluded by the extra exclusion rules, are dropped before the
    tree builder sees them; the extension allow-list and directory-list visibility are
    applied by the builder itself.

    Attributes:
        client (GitHubClient): Client used to fetch the tree listing.
        repository (RepositoryId): Repository being listed.
        branch (Optional[str]): Branch name, or None for the default branch.
        options (FilterOptions): Filter options passed to the tree builder.
        exclusion_rules (Optional[BaseExclusionRules]): Extra rules applied before building.

    Example:
        >>> book = RepoBook(GitHubClient(), "octocat/Hello-World",
        ...                 options=FilterOptions.from_raw(file_types="md"))  # doctest: +SKIP
        >>> print(book.render())  # doctest: +SKIP
        {
            "": {
                "files": [
                    "README.md"
                ],
                "dirs": []
            }
        }

    Raises:
        RepositoryNameError: If the repository identifier is malformed.
        ValueError: If the output format is unsupported.
    """

    def __init__(
        self,
        client: GitHubClient,
        repository: Union[str, RepositoryId],
        *,
        branch: Optional[str] = None,
        options: Optional[FilterOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        output_format: str = "json",
    ) -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")

        self.client = client
        self.repository = RepositoryId.coerce(repository)
        self.branch = branch or None
        self.options = options if options is not None else FilterOptions()
        self.exclusion_rules = exclusion_rules
        self._builder = TreeBuilder(self.options)
        self._strategy: OutputStrategy = get_output_strategy(output_format, root_name=str(self.repository))
        self._entries: Optional[List[RawEntry]] = None

    def fetch_entries(self) -> List[RawEntry]:
        """Fetch, on first call, and return the flat tree listing of the branch.

        Raises:
            GitHubAPIError: If the listing cannot be fetched.
        """
        if self._entries is None:
            self._entries = self.client.fetch_tree_entries(self.repository, self.branch)
        return self._entries

    def _effective_rules(self) -> Optional[BaseExclusionRules]:
        rules: List[BaseExclusionRules] = []
        if self.options.base_path:
            rules.append(BasePathExclusionRules(self.options.base_path))
        if self.exclusion_rules is not None:
            rules.append(self.exclusion_rules)
        if not rules:
            return None
        if len(rules) == 1:
            return rules[0]
        return CompositeExclusionRules(rules)

    def build_directory_map(self) -> Dict[str, DirectoryNode]:
        """Build the filtered directory map of the branch.

        Raises:
            GitHubAPIError: If the listing cannot be fetched.
        """
        entries = self.fetch_entries()
        directory_map = self._builder.build(list(filter_entries(entries, self._effective_rules())))
        logger.info(
            "%s: %d tree entries reduced to %d directories",
            self.repository,
            len(entries),
            len(directory_map),
        )
        return directory_map

    @property
    def output_extension(self) -> str:
        """File extension of the configured output format, including the leading dot."""
        return self._strategy.get_file_extension()

    def render(self) -> str:
        """Build the directory map and format it with the configured output strategy.

        Raises:
            GitHubAPIError: If the listing cannot be fetched.
        """
        return self._strategy.format_directory_map(self.build_directory_map())

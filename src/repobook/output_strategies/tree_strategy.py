"""Text tree output strategy for directory maps."""

from typing import Mapping

from repobook.directory_tree.directory_node import DirectoryNode
from repobook.directory_tree.tree_view import DirectoryTreeView

from .base_strategy import OutputStrategy


class TreeOutputStrategy(OutputStrategy):
    """Output strategy that draws a directory map like the Unix ``tree`` command.

    Attributes:
        root_name (str): Label printed for the repository root.

    Example:
        >>> strategy = TreeOutputStrategy(root_name="owner/repo")
        >>> print(strategy.format_directory_map({"docs": DirectoryNode(files=("a.md",))}))
        owner/repo/
        └── docs/
            └── a.md
    """

    def __init__(self, root_name: str = ".") -> None:
        self.root_name = root_name

    def format_directory_map(self, directory_map: Mapping[str, DirectoryNode]) -> str:
        return DirectoryTreeView(directory_map, root_name=self.root_name).get_tree_representation()

    def get_file_extension(self) -> str:
        return ".txt"

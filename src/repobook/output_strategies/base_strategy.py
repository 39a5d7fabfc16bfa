"""Output strategy base class defining the interface for directory map formatting."""

from abc import ABC, abstractmethod
from typing import Mapping

from repobook.directory_tree.directory_node import DirectoryNode


class OutputStrategy(ABC):
    """Abstract base class for directory map output formats.

    This class implements the Strategy pattern for turning a directory map into text
    for a human operator or another tool. Each concrete strategy renders the whole map
    at once; directory maps are small compared to the repositories they summarise.

    Example:
        >>> class CountStrategy(OutputStrategy):
        ...     def format_directory_map(self, directory_map):
        ...         return f"{len(directory_map)} directories"
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".txt"
        >>> CountStrategy().format_directory_map({})
        '0 directories'
    """

    @abstractmethod
    def format_directory_map(self, directory_map: Mapping[str, DirectoryNode]) -> str:
        """Format a complete directory map.

        Args:
            directory_map: Mapping from directory path to its contents.

        Returns:
            The formatted text, without a trailing newline.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".json", ".txt").
        """
        pass

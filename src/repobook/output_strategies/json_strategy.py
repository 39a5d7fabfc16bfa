"""JSON output strategy for directory maps."""

import json
from typing import Mapping, Optional

from repobook.directory_tree.directory_node import DirectoryNode

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats a directory map as a JSON object.

    Each directory path becomes a key whose value has a ``files`` list and, unless
    directory lists were hidden, a ``dirs`` list:

    {
        "": {"files": ["README.md"], "dirs": ["src"]},
        "src": {"files": ["main.py"], "dirs": []}
    }

    Directory paths are sorted so the output is stable across runs.

    Attributes:
        indent (int): Indentation width of the JSON output.

    Example:
        >>> strategy = JSONOutputStrategy(indent=None)
        >>> strategy.format_directory_map({"docs": DirectoryNode(files=("a.md",))})
        '{"docs": {"files": ["a.md"]}}'
        >>> strategy.format_directory_map({})
        '{}'
    """

    def __init__(self, indent: Optional[int] = 4) -> None:
        self.indent = indent

    def format_directory_map(self, directory_map: Mapping[str, DirectoryNode]) -> str:
        data = {path: directory_map[path].to_dict() for path in sorted(directory_map)}
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def get_file_extension(self) -> str:
        """Get the file extension for JSON output.

        Example:
            >>> JSONOutputStrategy().get_file_extension()
            '.json'
        """
        return ".json"

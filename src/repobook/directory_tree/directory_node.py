"""Output node representation for directory maps."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class DirectoryNode:
    """Contents of one directory in a directory map.

    Attributes:
        files (Tuple[str, ...]): Base names of the files directly inside the directory,
            in the order they appeared in the tree listing.
        dirs (Optional[Tuple[str, ...]]): Base names of the immediate subdirectories, or
            None when directory lists were hidden.

    Example:
        >>> DirectoryNode(files=("a.ts", "b.ts"), dirs=()).to_dict()
        {'files': ['a.ts', 'b.ts'], 'dirs': []}
        >>> DirectoryNode(files=("a.ts",)).to_dict()
        {'files': ['a.ts']}
    """

    files: Tuple[str, ...]
    dirs: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert the node to plain lists, omitting ``dirs`` when it is hidden."""
        data = {"files": list(self.files)}
        if self.dirs is not None:
            data["dirs"] = list(self.dirs)
        return data

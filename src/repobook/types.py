from enum import Enum
from os import PathLike
from typing import Any, Mapping, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Raw Git tree item as returned by the GitHub API
RawEntry = Mapping[str, Any]


class EntryKind(str, Enum):
    """Enumeration of Git tree item kinds understood by the tree builder.

    Other kinds GitHub may report, such as ``commit`` for submodules, are treated as
    malformed entries and skipped.

    Attributes:
        BLOB: Regular file
        TREE: Directory marker
    """

    BLOB = "blob"
    TREE = "tree"

"""Input entry representation for Git tree items."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from repobook.types import EntryKind


@dataclass(frozen=True)
class TreeEntry:
    """A single item of a recursive Git tree listing.

    Only the two fields the tree builder needs are kept. Anything else GitHub returns
    for a tree item (mode, sha, size, url) is ignored.

    Attributes:
        path (str): Slash-separated path relative to the repository root.
        kind (EntryKind): BLOB for files, TREE for directory markers.

    Example:
        >>> entry = TreeEntry.from_raw({"path": "src/main.py", "type": "blob", "size": 12})
        >>> entry.path, entry.kind.value
        ('src/main.py', 'blob')
        >>> entry.parent, entry.name
        ('src', 'main.py')
        >>> TreeEntry.from_raw({"path": "vendor/lib", "type": "commit"}) is None
        True
    """

    path: str
    kind: EntryKind

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["TreeEntry"]:
        """Create an entry from a raw tree item, or return None if it is malformed.

        The kind is read from ``type`` (GitHub's field name) and falls back to ``kind``.
        Items that are not mappings, have a missing or empty path, or have a kind other
        than blob or tree (for example submodule ``commit`` items) are malformed.

        Args:
            raw: A raw tree item, or an existing TreeEntry which is returned unchanged.

        Returns:
            The parsed entry, or None when the item cannot be used.
        """
        if isinstance(raw, TreeEntry):
            return raw
        if not isinstance(raw, Mapping):
            return None

        path = raw.get("path")
        if not isinstance(path, str) or not path:
            return None

        kind = raw.get("type", raw.get("kind"))
        if isinstance(kind, EntryKind):
            return cls(path, kind)
        if not isinstance(kind, str):
            return None
        try:
            return cls(path, EntryKind(kind))
        except ValueError:
            return None

    @property
    def parent(self) -> str:
        """Path of the directory containing this entry, or "" for the repository root."""
        head, _, _ = self.path.rpartition("/")
        return head

    @property
    def name(self) -> str:
        """Base name of this entry (the last path segment)."""
        return self.path.rpartition("/")[2]

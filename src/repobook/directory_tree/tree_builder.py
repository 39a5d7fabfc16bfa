"""Directory map reconstruction from a flat Git tree listing.

This module provides the TreeBuilder class, which turns a flat, unordered sequence of
path entries into a mapping from directory path to a DirectoryNode. The work is split
into three stages that can be exercised independently:

1. group   - bucket every entry under its parent directory, applying the extension
             allow-list to files and recording directory markers as child names
2. prune   - drop every directory that ended up owning no files
3. project - freeze the surviving buckets into DirectoryNode values, hiding the
             subdirectory lists if requested
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from repobook.directory_tree.directory_node import DirectoryNode
from repobook.directory_tree.filter_options import FilterOptions
from repobook.directory_tree.tree_entry import TreeEntry
from repobook.exceptions import InvalidInputError
from repobook.types import EntryKind

logger = logging.getLogger(__name__)


@dataclass
class DirectoryBucket:
    """Mutable accumulator for one directory while entries are being grouped."""

    files: List[str] = field(default_factory=list)
    dirs: List[str] = field(default_factory=list)


def file_extension(name: str) -> Optional[str]:
    """Return the text after the last dot of a file name, or None if it has no dot.

    Example:
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension(".gitignore")
        'gitignore'
        >>> file_extension("Makefile") is None
        True
    """
    if "." not in name:
        return None
    return name.rpartition(".")[2]


class TreeBuilder:
    """Builds filtered directory maps from flat Git tree listings.

    Directories are significant only as file containers: a directory appears in the
    result only if at least one file directly inside it survives filtering. Directory
    markers (TREE entries) are recorded as child names of their parent directory; they
    never create a key of their own.

    The root directory is keyed by the empty string.

    Attributes:
        options (FilterOptions): Extension allow-list and directory-list visibility.

    Example:
        >>> entries = [
        ...     {"path": "src/a.ts", "type": "blob"},
        ...     {"path": "src/b.ts", "type": "blob"},
        ...     {"path": "src", "type": "tree"},
        ... ]
        >>> TreeBuilder(FilterOptions()).build(entries)
        {'src': DirectoryNode(files=('a.ts', 'b.ts'), dirs=())}
        >>> TreeBuilder(FilterOptions(hide_dirs=True)).build(entries)
        {'src': DirectoryNode(files=('a.ts', 'b.ts'), dirs=None)}
    """

    def __init__(self, options: Optional[FilterOptions] = None) -> None:
        """Initialize a TreeBuilder.

        Args:
            options: Filter options. Defaults to no extension filtering with directory
                lists shown.

        Raises:
            InvalidInputError: If options is not a FilterOptions instance.
        """
        if options is None:
            options = FilterOptions()
        if not isinstance(options, FilterOptions):
            raise InvalidInputError(f"options must be FilterOptions, got {type(options).__name__}")
        self.options = options

    def build(self, entries: Iterable[Any]) -> Dict[str, DirectoryNode]:
        """Build the directory map for a flat sequence of entries.

        Args:
            entries: Raw tree items (mappings with ``path`` and ``type``) or TreeEntry
                objects. Malformed items are skipped.

        Returns:
            Mapping from directory path to its contents. Empty when there are no entries
            or when every file was filtered out.

        Raises:
            InvalidInputError: If entries is not an iterable of items.
        """
        _check_entries(entries)
        buckets = self.prune(self.group(entries))
        directory_map = self.project(buckets)
        logger.debug("Built directory map with %d directories", len(directory_map))
        return directory_map

    def group(self, entries: Iterable[Any]) -> Dict[str, DirectoryBucket]:
        """Bucket entries under their parent directory path.

        Files failing the extension allow-list are dropped, but their parent bucket is
        still created. Directory markers are always recorded, whatever ``hide_dirs`` is.

        Args:
            entries: Raw tree items or TreeEntry objects, processed in order.

        Returns:
            Mapping from parent directory path to its accumulated contents.
        """
        buckets: Dict[str, DirectoryBucket] = {}
        extensions = self.options.file_extensions

        for raw in entries:
            entry = TreeEntry.from_raw(raw)
            if entry is None:
                logger.debug("Skipping malformed tree entry: %r", raw)
                continue

            bucket = buckets.setdefault(entry.parent, DirectoryBucket())

            if entry.kind == EntryKind.BLOB:
                if extensions and file_extension(entry.name) not in extensions:
                    continue
                bucket.files.append(entry.name)
            else:
                bucket.dirs.append(entry.name)

        return buckets

    def prune(self, buckets: Mapping[str, DirectoryBucket]) -> Dict[str, DirectoryBucket]:
        """Return only the buckets that own at least one file.

        A directory holding nothing but subdirectories, or whose files were all filtered
        out, is dropped even though its name may still be listed by its parent.
        """
        return {path: bucket for path, bucket in buckets.items() if bucket.files}

    def project(self, buckets: Mapping[str, DirectoryBucket]) -> Dict[str, DirectoryNode]:
        """Freeze buckets into DirectoryNode values.

        Args:
            buckets: Grouped (and usually pruned) directory contents.

        Returns:
            Mapping from directory path to DirectoryNode, with ``dirs`` set to None when
            ``hide_dirs`` is enabled.
        """
        hide_dirs = self.options.hide_dirs
        return {
            path: DirectoryNode(
                files=tuple(bucket.files),
                dirs=None if hide_dirs else tuple(bucket.dirs),
            )
            for path, bucket in buckets.items()
        }


def _check_entries(entries: Any) -> None:
    # A str, bytes or mapping is iterable but never a listing of entries
    if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
        raise InvalidInputError(f"entries must be an iterable of tree entries, got {type(entries).__name__}")


def build(entries: Iterable[Any], options: Optional[FilterOptions] = None) -> Dict[str, DirectoryNode]:
    """Build a filtered directory map from a flat sequence of Git tree entries.

    Convenience wrapper around :meth:`TreeBuilder.build`.

    Args:
        entries: Raw tree items (mappings with ``path`` and ``type``) or TreeEntry
            objects. Malformed items are skipped.
        options: Filter options. Defaults to no filtering with directory lists shown.

    Returns:
        Mapping from directory path ("" for the root) to DirectoryNode.

    Raises:
        InvalidInputError: If entries or options have the wrong shape.

    Example:
        >>> build([{"path": "x.md", "type": "blob"}, {"path": "y.txt", "type": "blob"}],
        ...       FilterOptions(file_extensions=frozenset({"md"})))
        {'': DirectoryNode(files=('x.md',), dirs=())}
        >>> build([{"path": "Makefile", "type": "blob"}], FilterOptions.from_raw(file_types="md"))
        {}
    """
    return TreeBuilder(options).build(entries)

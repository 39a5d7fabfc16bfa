"""Directory map reconstruction from flat Git tree listings.

This module provides the types and the builder that turn a flat, unordered list of
repository path entries into a compact, filtered mapping from directory path to the
files (and optionally subdirectory names) it directly contains.
"""

from .directory_node import DirectoryNode
from .filter_options import FilterOptions, parse_file_extensions
from .tree_builder import TreeBuilder, build
from .tree_entry import TreeEntry

__all__ = [
    "DirectoryNode",
    "FilterOptions",
    "TreeBuilder",
    "TreeEntry",
    "build",
    "parse_file_extensions",
]

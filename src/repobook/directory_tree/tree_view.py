"""Hierarchical view of a directory map.

This module provides the DirectoryTreeView class, which rebuilds a real tree out of a
flat directory map so it can be counted and printed in the style of the Unix ``tree``
command.
"""

from typing import Dict, Iterator, Mapping, Optional

from repobook.directory_tree.directory_node import DirectoryNode
from repobook.directory_tree.repo_node import RepoNode


class DirectoryTreeView:
    """A tree representation of a directory map.

    Every key of the directory map becomes a directory node, creating intermediate
    directories along the way (a pruned parent still has to appear to hold its
    children). Files become leaf nodes. Names in a node's ``dirs`` list become
    directory nodes as well, so directories that own no files remain visible when the
    map was built with directory lists shown.

    The tree is built lazily on first access.

    Attributes:
        directory_map (Mapping[str, DirectoryNode]): The map being represented.
        root_name (str): Name shown for the repository root.

    Example:
        >>> from repobook.directory_tree import DirectoryNode
        >>> view = DirectoryTreeView(
        ...     {"": DirectoryNode(files=("README.md",)), "src/app": DirectoryNode(files=("main.py",))},
        ...     root_name="demo",
        ... )
        >>> print(view.get_tree_representation())
        demo/
        ├── src/
        │   └── app/
        │       └── main.py
        └── README.md
    """

    def __init__(self, directory_map: Mapping[str, DirectoryNode], root_name: str = ".") -> None:
        self.directory_map = directory_map
        self.root_name = root_name
        self._tree: Optional[RepoNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> RepoNode:
        """Get the root node of the tree, building it on first access."""
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        root = RepoNode(self.root_name, is_dir=True)
        # Nodes by repository-relative path, so lookups never scan a directory's children
        nodes: Dict[str, RepoNode] = {"": root}

        # Sorting the keys makes the result independent of the map's insertion order
        for path in sorted(self.directory_map):
            node = self.directory_map[path]
            self._ensure_directory(nodes, path)
            for name in node.dirs or ():
                self._ensure_directory(nodes, _join(path, name))
            for name in node.files:
                file_path = _join(path, name)
                if file_path not in nodes:
                    nodes[file_path] = RepoNode(name, parent=nodes[path], is_dir=False)

        self._tree = root
        self._count_files_and_directories()

    def _ensure_directory(self, nodes: Dict[str, RepoNode], path: str) -> RepoNode:
        existing = nodes.get(path)
        if existing is not None:
            return existing
        parent_path, _, name = path.rpartition("/")
        parent = self._ensure_directory(nodes, parent_path)
        directory = RepoNode(name, parent=parent, is_dir=True)
        nodes[path] = directory
        return directory

    def _count_files_and_directories(self) -> None:
        assert self._tree is not None
        self._file_count = 0
        self._directory_count = 0
        for node in self._tree.descendants:
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding the root)."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation one line at a time.

        Directories are listed before files, both alphabetically ignoring case, and
        directory names carry a trailing slash.

        Yields:
            Lines of the tree representation, including the connecting lines.
        """
        root = self.get_tree()

        def write_node(node: RepoNode, prefix: str, is_last: bool) -> Iterator[str]:
            connector = "└── " if is_last else "├── "
            suffix = "/" if node.is_dir else ""
            yield f"{prefix}{connector}{node.name}{suffix}"
            child_prefix = prefix + ("    " if is_last else "│   ")
            yield from write_children(node, child_prefix)

        def write_children(node: RepoNode, prefix: str) -> Iterator[str]:
            sorted_children = sorted(node.children, key=lambda n: (not n.is_dir, n.name.lower()))
            for i, child in enumerate(sorted_children):
                yield from write_node(child, prefix, i == len(sorted_children) - 1)

        yield f"{root.name}/"
        yield from write_children(root, "")

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a single string."""
        return "\n".join(self.stream_tree_representation())


def _join(directory: str, name: str) -> str:
    return f"{directory}/{name}" if directory else name

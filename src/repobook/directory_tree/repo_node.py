"""Node representation for repository paths in a rendered tree."""

from typing import Any, Optional

from anytree import Node


class RepoNode(Node):  # type: ignore
    """Node class representing a file or directory of a repository listing.

    Extends anytree.Node with a flag telling directories from files. Inherits tree
    traversal and manipulation capabilities from anytree.Node.

    Attributes:
        name (str): Base name of the file or directory.
        parent (Optional[RepoNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[RepoNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = RepoNode("repo", is_dir=True)
        >>> readme = RepoNode("README.md", parent=root)
        >>> readme.parent.name, readme.is_dir
        ('repo', False)
    """

    def __init__(self, name: str, parent: Optional["RepoNode"] = None, is_dir: bool = False, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

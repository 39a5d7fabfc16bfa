"""Unit tests for the DirectoryNode class."""

import pytest

from repobook.directory_tree.directory_node import DirectoryNode


def test_to_dict_with_dirs():
    node = DirectoryNode(files=("a.ts", "b.ts"), dirs=("lib",))
    assert node.to_dict() == {"files": ["a.ts", "b.ts"], "dirs": ["lib"]}


def test_to_dict_with_empty_dirs():
    assert DirectoryNode(files=("a.ts",), dirs=()).to_dict() == {"files": ["a.ts"], "dirs": []}


def test_to_dict_hidden_dirs():
    node = DirectoryNode(files=("a.ts",))
    assert node.dirs is None
    assert "dirs" not in node.to_dict()


def test_node_is_frozen_and_hashable():
    node = DirectoryNode(files=("a.ts",), dirs=())
    with pytest.raises(AttributeError):
        node.files = ()  # type: ignore[misc]
    assert hash(node) == hash(DirectoryNode(files=("a.ts",), dirs=()))

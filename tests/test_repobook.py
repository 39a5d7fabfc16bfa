"""Unit tests for the RepoBook class."""

import json
from unittest.mock import MagicMock

import pytest

from repobook.directory_tree.directory_node import DirectoryNode
from repobook.directory_tree.filter_options import FilterOptions
from repobook.exceptions import GitHubAPIError, RepositoryNameError
from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
from repobook.github.repository import RepositoryId
from repobook.repobook import RepoBook


@pytest.fixture
def listing():
    return [
        {"path": "README.md", "type": "blob"},
        {"path": "docs", "type": "tree"},
        {"path": "docs/index.md", "type": "blob"},
        {"path": "docs/logo.png", "type": "blob"},
        {"path": "docs/guide", "type": "tree"},
        {"path": "docs/guide/setup.md", "type": "blob"},
        {"path": "docs-old", "type": "tree"},
        {"path": "docs-old/index.md", "type": "blob"},
        {"path": "src", "type": "tree"},
        {"path": "src/main.py", "type": "blob"},
    ]


@pytest.fixture
def mock_client(listing):
    client = MagicMock()
    client.fetch_tree_entries.return_value = listing
    return client


def test_build_directory_map(mock_client):
    book = RepoBook(mock_client, "octo/repo")
    assert book.build_directory_map() == {
        "": DirectoryNode(files=("README.md",), dirs=("docs", "docs-old", "src")),
        "docs": DirectoryNode(files=("index.md", "logo.png"), dirs=("guide",)),
        "docs/guide": DirectoryNode(files=("setup.md",), dirs=()),
        "docs-old": DirectoryNode(files=("index.md",), dirs=()),
        "src": DirectoryNode(files=("main.py",), dirs=()),
    }
    mock_client.fetch_tree_entries.assert_called_once_with(RepositoryId("octo", "repo"), None)


def test_base_path_and_file_types(mock_client):
    options = FilterOptions.from_raw(file_types="md", hide_dirs=True, path="/docs/")
    book = RepoBook(mock_client, "octo/repo", branch="develop", options=options)
    assert book.build_directory_map() == {
        "docs": DirectoryNode(files=("index.md",)),
        "docs/guide": DirectoryNode(files=("setup.md",)),
    }
    mock_client.fetch_tree_entries.assert_called_once_with(RepositoryId("octo", "repo"), "develop")


def test_exclusion_rules_combined_with_base_path(mock_client):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("guide/")
    rules.add_rule("*.png")
    book = RepoBook(mock_client, "octo/repo", options=FilterOptions.from_raw(path="docs"), exclusion_rules=rules)
    assert book.build_directory_map() == {"docs": DirectoryNode(files=("index.md",), dirs=())}


def test_listing_is_fetched_once(mock_client):
    book = RepoBook(mock_client, "octo/repo")
    book.build_directory_map()
    book.render()
    assert mock_client.fetch_tree_entries.call_count == 1


def test_render_json(mock_client):
    book = RepoBook(mock_client, "octo/repo", options=FilterOptions.from_raw(file_types="py"))
    assert json.loads(book.render()) == {"src": {"files": ["main.py"], "dirs": []}}


def test_render_tree(mock_client):
    book = RepoBook(mock_client, "octo/repo", options=FilterOptions.from_raw(file_types="py"), output_format="tree")
    assert book.render() == "octo/repo/\n└── src/\n    └── main.py"


def test_empty_repository(mock_client):
    mock_client.fetch_tree_entries.return_value = []
    assert RepoBook(mock_client, "octo/repo").render() == "{}"


def test_unsupported_format(mock_client):
    with pytest.raises(ValueError, match="Unsupported output format"):
        RepoBook(mock_client, "octo/repo", output_format="xml")


def test_invalid_repository(mock_client):
    with pytest.raises(RepositoryNameError):
        RepoBook(mock_client, "octo")


def test_api_errors_propagate(mock_client):
    mock_client.fetch_tree_entries.side_effect = GitHubAPIError("Not Found", status_code=404)
    with pytest.raises(GitHubAPIError):
        RepoBook(mock_client, "octo/repo").render()


@pytest.mark.parametrize("output_format,extension", [("json", ".json"), ("tree", ".txt")])
def test_output_extension(mock_client, output_format, extension):
    assert RepoBook(mock_client, "octo/repo", output_format=output_format).output_extension == extension

"""Unit tests for the argument parser module in the repobook CLI."""

import argparse
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from repobook.cli.argparser import create_exclusion_action, create_parser, validate_args
from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
from repobook.github.client import DEFAULT_API_URL


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


@pytest.fixture
def temp_ignore_file():
    """Create a temporary ignore file for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / ".repobookignore"
        path.write_text("*.png\n")
        yield path


def test_create_exclusion_action(mock_exclusion_rules):
    """Test that the action updates the rules and records values in order."""
    action_class = create_exclusion_action(mock_exclusion_rules)
    action = action_class(["-i", "--ignore"], "ignore")
    namespace = argparse.Namespace()

    action(None, namespace, "*.png", "-i")
    action(None, namespace, "rules.txt", "--exclude")

    mock_exclusion_rules.add_rule.assert_called_once_with("*.png")
    mock_exclusion_rules.load_rules.assert_called_once_with(Path("rules.txt"))
    assert namespace.ignore == ["*.png", "rules.txt"]


def test_create_exclusion_action_none_value(mock_exclusion_rules):
    action = create_exclusion_action(mock_exclusion_rules)(["-i"], "ignore")
    action(None, argparse.Namespace(), None, "-i")
    mock_exclusion_rules.add_rule.assert_not_called()


def test_tree_defaults(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["tree", "octo/repo"])
    assert args.command == "tree"
    assert args.repository == "octo/repo"
    assert args.branch is None
    assert args.path is None
    assert args.file_types is None
    assert args.hide_dirs is False
    assert args.format == "json"
    assert args.output is None
    assert args.token is None
    assert args.api_url == DEFAULT_API_URL
    assert args.verbose == 0


def test_tree_all_options(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(
        ["-vv", "-t", "tok", "tree", "octo/repo", "-b", "dev", "-p", "docs", "-x", ".md,.txt", "-H", "-f", "tree"]
        + ["-o", "out.txt"]
    )
    assert args.verbose == 2
    assert args.token == "tok"
    assert args.branch == "dev"
    assert args.path == "docs"
    assert args.file_types == ".md,.txt"
    assert args.hide_dirs is True
    assert args.format == "tree"
    assert args.output == Path("out.txt")


def test_tree_exclusion_options_apply_in_order(temp_ignore_file):
    rules = GitIgnoreExclusionRules()
    args = create_parser(rules).parse_args(
        ["tree", "octo/repo", "-e", str(temp_ignore_file), "-i", "!logo.png", "-i", "vendor/"]
    )
    assert args.exclude == [temp_ignore_file]
    assert args.ignore == ["!logo.png", "vendor/"]
    assert rules.exclude("diagram.png")
    assert not rules.exclude("logo.png")
    assert rules.exclude("vendor/lib.go")


def test_environment_defaults(mock_exclusion_rules, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")
    args = create_parser(mock_exclusion_rules).parse_args(["tree", "octo/repo"])
    assert args.token == "env-token"
    assert args.api_url == "https://github.example.com/api/v3"


def test_add_users(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["add-users", "octo/repo", "alice", "bob", "-P", "admin"])
    assert args.command == "add-users"
    assert args.users == ["alice", "bob"]
    assert args.permission == "admin"


def test_add_users_default_permission(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["add-users", "octo/repo", "alice"])
    assert args.permission == "push"


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["tree"],
        ["tree", "octo/repo", "-f", "xml"],
        ["add-users", "octo/repo"],
        ["add-users", "octo/repo", "alice", "-P", "owner"],
        ["clone", "octo/repo"],
    ],
)
def test_invalid_arguments(mock_exclusion_rules, argv):
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_exclusion_rules).parse_args(argv)
    assert excinfo.value.code == 2


def test_repos(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["-t", "tok", "repos"])
    assert args.command == "repos"
    assert args.token == "tok"


def test_validate_args_repos_requires_token():
    with pytest.raises(ValueError, match="repos requires an access token"):
        validate_args(argparse.Namespace(command="repos", token=None))
    validate_args(argparse.Namespace(command="repos", token="tok"))


def test_validate_args_add_users_requires_token():
    with pytest.raises(ValueError, match="requires an access token"):
        validate_args(argparse.Namespace(command="add-users", token=None))
    validate_args(argparse.Namespace(command="add-users", token="tok"))
    validate_args(argparse.Namespace(command="tree", token=None))

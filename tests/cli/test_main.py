"""Unit tests for the CLI main module."""

import json
import logging
from unittest.mock import patch

import pytest

from repobook.cli.main import configure_logging, format_report, main
from repobook.exceptions import GitHubAPIError
from repobook.github.collaborators import CollaboratorReport, CollaboratorResult
from repobook.github.repository import RepositoryId, RepositorySummary

LISTING = [
    {"path": "README.md", "type": "blob"},
    {"path": "docs", "type": "tree"},
    {"path": "docs/index.md", "type": "blob"},
    {"path": "docs/logo.png", "type": "blob"},
]


@pytest.fixture
def mock_client():
    """Patch the GitHub client used by the CLI."""
    with patch("repobook.cli.main.GitHubClient") as client_class:
        client = client_class.return_value
        client.fetch_tree_entries.return_value = LISTING
        client.add_collaborator.return_value = True
        yield client_class


def test_tree_json(mock_client, capsys):
    main(["tree", "octo/repo", "-x", "md"])
    output = capsys.readouterr().out
    assert output.endswith("\n")
    assert json.loads(output) == {
        "": {"files": ["README.md"], "dirs": ["docs"]},
        "docs": {"files": ["index.md"], "dirs": []},
    }
    mock_client.assert_called_once_with(token=None, base_url="https://api.github.com")


def test_tree_text_with_base_path(mock_client, capsys):
    main(["tree", "octo/repo", "-p", "docs", "-f", "tree", "-H"])
    assert capsys.readouterr().out == "octo/repo/\n└── docs/\n    ├── index.md\n    └── logo.png\n"


def test_tree_ignore_pattern(mock_client, capsys):
    main(["tree", "octo/repo", "-i", "*.png", "-i", "README.md"])
    assert json.loads(capsys.readouterr().out) == {"docs": {"files": ["index.md"], "dirs": []}}


def test_tree_output_file(mock_client, tmp_path, capsys):
    output_file = tmp_path / "map.json"
    main(["tree", "octo/repo", "-o", str(output_file), "-H"])
    assert capsys.readouterr().out == ""
    assert json.loads(output_file.read_text(encoding="utf-8")) == {
        "": {"files": ["README.md"]},
        "docs": {"files": ["index.md", "logo.png"]},
    }


def test_tree_passes_token_and_api_url(mock_client):
    main(["-t", "tok", "--api-url", "https://github.example.com/api/v3", "tree", "octo/repo", "-b", "dev"])
    mock_client.assert_called_once_with(token="tok", base_url="https://github.example.com/api/v3")
    mock_client.return_value.fetch_tree_entries.assert_called_once()
    assert mock_client.return_value.fetch_tree_entries.call_args[0][1] == "dev"


def test_api_error_exits_1(mock_client, capsys):
    mock_client.return_value.fetch_tree_entries.side_effect = GitHubAPIError("Not Found", status_code=404)
    with pytest.raises(SystemExit) as excinfo:
        main(["tree", "octo/repo"])
    assert excinfo.value.code == 1
    assert "Error: GitHub API error (404): Not Found" in capsys.readouterr().err


def test_invalid_repository_exits_1(mock_client, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["tree", "octo"])
    assert excinfo.value.code == 1
    assert "Invalid repository name" in capsys.readouterr().err


def test_empty_file_type_exits_1(mock_client, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["tree", "octo/repo", "-x", "md,,txt"])
    assert excinfo.value.code == 1
    assert "File types cannot be empty" in capsys.readouterr().err


def test_missing_exclude_file_exits_1(mock_client, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["tree", "octo/repo", "-e", "/non/existent/.ignore"])
    assert excinfo.value.code == 1
    assert "Rules file not found" in capsys.readouterr().err


def test_syntax_error_exits_2(mock_client):
    with pytest.raises(SystemExit) as excinfo:
        main(["tree"])
    assert excinfo.value.code == 2


def test_broken_pipe_exits_141(mock_client):
    with patch("repobook.cli.main.RepoBook") as book_class:
        book_class.return_value.render.side_effect = BrokenPipeError
        with pytest.raises(SystemExit) as excinfo:
            main(["tree", "octo/repo"])
    assert excinfo.value.code == 141


def test_add_users(mock_client, capsys):
    main(["-t", "tok", "add-users", "octo/repo", "alice", "bob", "-P", "pull"])
    assert capsys.readouterr().out == (
        "added alice (invited)\nadded bob (invited)\n2 of 2 users added to octo/repo with pull permission\n"
    )


def test_add_users_partial_failure_exits_1(mock_client, capsys):
    mock_client.return_value.add_collaborator.side_effect = [True, GitHubAPIError("Not Found", status_code=404)]
    with pytest.raises(SystemExit) as excinfo:
        main(["-t", "tok", "add-users", "octo/repo", "alice", "ghost"])
    assert excinfo.value.code == 1
    assert "failed ghost: Not Found" in capsys.readouterr().out


def test_add_users_without_token_exits_1(mock_client, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["add-users", "octo/repo", "alice"])
    assert excinfo.value.code == 1
    assert "requires an access token" in capsys.readouterr().err
    mock_client.return_value.add_collaborator.assert_not_called()


def test_format_report():
    report = CollaboratorReport(
        "octo/repo",
        "push",
        [
            CollaboratorResult("alice", succeeded=True, invited=True),
            CollaboratorResult("bob", succeeded=True, invited=False),
            CollaboratorResult("ghost", succeeded=False, error="Not Found"),
        ],
    )
    assert format_report(report) == "\n".join(
        [
            "added alice (invited)",
            "added bob (already a collaborator)",
            "failed ghost: Not Found",
            "2 of 3 users added to octo/repo with push permission",
        ]
    )


@pytest.mark.parametrize("verbosity,level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)])
def test_configure_logging(verbosity, level):
    with patch("repobook.cli.main.logging.basicConfig") as basic_config:
        configure_logging(verbosity)
    assert basic_config.call_args.kwargs["level"] == level


def test_repos(mock_client, capsys):
    mock_client.return_value.list_repositories.return_value = [
        RepositorySummary(RepositoryId("octo", "repo"), "main"),
        RepositorySummary(RepositoryId("team", "site"), "gh-pages"),
    ]
    main(["-t", "tok", "repos"])
    assert capsys.readouterr().out == "octo/repo\tmain\nteam/site\tgh-pages\n"
    mock_client.assert_called_once_with(token="tok", base_url="https://api.github.com")


def test_repos_without_token_exits_1(mock_client, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["repos"])
    assert excinfo.value.code == 1
    assert "repos requires an access token" in capsys.readouterr().err
    mock_client.return_value.list_repositories.assert_not_called()


def test_repos_api_error_exits_1(mock_client, capsys):
    mock_client.return_value.list_repositories.side_effect = GitHubAPIError("Bad credentials", status_code=401)
    with pytest.raises(SystemExit) as excinfo:
        main(["-t", "bad", "repos"])
    assert excinfo.value.code == 1
    assert "Error: GitHub API error (401): Bad credentials" in capsys.readouterr().err


@pytest.mark.parametrize("output_format,expected_name", [("json", "listing.json"), ("tree", "listing.txt")])
def test_tree_output_file_gets_format_extension(mock_client, tmp_path, output_format, expected_name):
    main(["tree", "octo/repo", "-f", output_format, "-o", str(tmp_path / "listing")])
    assert [path.name for path in tmp_path.iterdir()] == [expected_name]


def test_tree_output_file_keeps_given_extension(mock_client, tmp_path):
    main(["tree", "octo/repo", "-f", "tree", "-o", str(tmp_path / "listing.md")])
    assert (tmp_path / "listing.md").read_text(encoding="utf-8").startswith("octo/repo/\n")

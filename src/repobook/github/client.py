"""Minimal GitHub REST API client.

This module provides the GitHubClient class, covering only the calls the tool needs:
listing the user's repositories, resolving a branch to its root tree, fetching the
recursive Git tree, and adding repository collaborators. Requests are sequential and
blocking, each bounded by a timeout; there are no retries.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import requests

from repobook import __version__
from repobook.exceptions import GitHubAPIError
from repobook.github.repository import RepositoryId, RepositorySummary
from repobook.types import RawEntry

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 10
REPOSITORIES_PER_PAGE = 100
USER_AGENT = f"repobook/{__version__}"

RepositoryLike = Union[str, RepositoryId]


class CollaboratorPermission(str, Enum):
    """Permission level granted to a new collaborator.

    Values:
        PULL: Read-only access
        TRIAGE: Manage issues and pull requests without write access
        PUSH: Read and write access
        MAINTAIN: Manage the repository without sensitive or destructive actions
        ADMIN: Full access
    """

    PULL = "pull"
    TRIAGE = "triage"
    PUSH = "push"
    MAINTAIN = "maintain"
    ADMIN = "admin"


class GitHubClient:
    """Client for the parts of the GitHub REST API used by repobook.

    Attributes:
        base_url (str): API root, without a trailing slash.
        timeout (float): Per-request timeout in seconds.
        session (requests.Session): Session carrying the default headers.

    Example:
        >>> client = GitHubClient(token="ghp_example")  # doctest: +SKIP
        >>> entries = client.fetch_tree_entries("octocat/Hello-World")  # doctest: +SKIP
        >>> entries[0]["path"]  # doctest: +SKIP
        'README'
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Personal access token. Anonymous requests are made when None; they
                only work for public repositories and are heavily rate limited.
            base_url: API root, e.g. a GitHub Enterprise ``https://host/api/v3``.
            timeout: Per-request timeout in seconds.
            session: Session to use instead of creating one.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": USER_AGENT,
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        # Pagination links from the Link header are already absolute
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise GitHubAPIError(_error_message(response), status_code=response.status_code)
        return response

    def _get_json(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        response = self._request("GET", path, **kwargs)
        try:
            data = response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON in response from {path}", status_code=response.status_code) from e
        if not isinstance(data, dict):
            raise GitHubAPIError(f"Unexpected response from {path}", status_code=response.status_code)
        return data

    def get_default_branch(self, repository: RepositoryLike) -> str:
        """Return the name of a repository's default branch.

        Raises:
            RepositoryNameError: If the repository identifier is malformed.
            GitHubAPIError: If the request fails.
        """
        repo = RepositoryId.coerce(repository)
        data = self._get_json(_repo_path(repo))
        branch = data.get("default_branch")
        if not isinstance(branch, str) or not branch:
            raise GitHubAPIError(f"No default branch reported for {repo}")
        return branch

    def get_branch_tree_sha(self, repository: RepositoryLike, branch: str) -> str:
        """Resolve a branch name to the SHA of its root tree.

        Falls back to the head commit SHA when GitHub does not report the tree; the trees
        endpoint accepts either.

        Raises:
            RepositoryNameError: If the repository identifier is malformed.
            GitHubAPIError: If the request fails or the branch has no commit.
        """
        repo = RepositoryId.coerce(repository)
        data = self._get_json(f"{_repo_path(repo)}/branches/{_path_part(branch)}")
        commit = data.get("commit") or {}
        tree_sha = ((commit.get("commit") or {}).get("tree") or {}).get("sha")
        sha = tree_sha or commit.get("sha")
        if not isinstance(sha, str) or not sha:
            raise GitHubAPIError(f"Branch {branch!r} of {repo} has no commit")
        logger.debug("Resolved %s@%s to %s", repo, branch, sha)
        return sha

    def get_tree(self, repository: RepositoryLike, tree_sha: str, recursive: bool = True) -> List[RawEntry]:
        """Fetch the Git tree listing for a tree or commit SHA.

        Args:
            repository: ``owner/repo`` string or RepositoryId.
            tree_sha: Tree or commit SHA.
            recursive: Whether to list every nested item rather than only the top level.

        Returns:
            The raw tree items, each with at least ``path`` and ``type``.

        Raises:
            RepositoryNameError: If the repository identifier is malformed.
            GitHubAPIError: If the request fails.
        """
        repo = RepositoryId.coerce(repository)
        params = {"recursive": "1"} if recursive else None
        data = self._get_json(
            f"{_repo_path(repo)}/git/trees/{_path_part(tree_sha)}",
            params=params,
        )
        tree = data.get("tree")
        if not isinstance(tree, list):
            raise GitHubAPIError(f"Tree listing for {repo} is missing")
        if data.get("truncated"):
            logger.warning("GitHub truncated the tree listing for %s; some entries are missing", repo)
        return tree

    def fetch_tree_entries(self, repository: RepositoryLike, branch: Optional[str] = None) -> List[RawEntry]:
        """Fetch the complete flat tree listing of a branch.

        Args:
            repository: ``owner/repo`` string or RepositoryId.
            branch: Branch name. The repository's default branch when None or blank.

        Returns:
            The raw tree items of the branch head commit.

        Raises:
            RepositoryNameError: If the repository identifier is malformed.
            GitHubAPIError: If any request fails.
        """
        repo = RepositoryId.coerce(repository)
        if not branch:
            branch = self.get_default_branch(repo)
        sha = self.get_branch_tree_sha(repo, branch)
        entries = self.get_tree(repo, sha, recursive=True)
        logger.info("Fetched %d tree entries from %s@%s", len(entries), repo, branch)
        return entries

    def list_repositories(self) -> List[RepositorySummary]:
        """List every repository the authenticated user can access.

        Follows the ``next`` links of GitHub's paginated response until the last page.
        Items without an owner login, a name or a default branch are skipped.

        Returns:
            One summary per repository, in the order GitHub returns them.

        Raises:
            GitHubAPIError: If any page cannot be fetched or is not a JSON list.
        """
        repositories: List[RepositorySummary] = []
        url: Optional[str] = "/user/repos"
        params: Optional[Dict[str, str]] = {"per_page": str(REPOSITORIES_PER_PAGE)}

        while url:
            response = self._request("GET", url, params=params)
            try:
                page = response.json()
            except ValueError as e:
                raise GitHubAPIError("Invalid JSON in repository listing", status_code=response.status_code) from e
            if not isinstance(page, list):
                raise GitHubAPIError("Unexpected repository listing", status_code=response.status_code)

            for item in page:
                summary = RepositorySummary.from_raw(item)
                if summary is None:
                    logger.debug("Skipping malformed repository item: %r", item)
                    continue
                repositories.append(summary)

            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

        logger.info("Listed %d repositories", len(repositories))
        return repositories

    def add_collaborator(
        self,
        repository: RepositoryLike,
        username: str,
        permission: Union[str, CollaboratorPermission] = CollaboratorPermission.PUSH,
    ) -> bool:
        """Add a user as a repository collaborator.

        Args:
            repository: ``owner/repo`` string or RepositoryId.
            username: GitHub login of the user.
            permission: Permission level to grant.

        Returns:
            True if an invitation was created, False if the user already had access.

        Raises:
            RepositoryNameError: If the repository identifier is malformed.
            GitHubAPIError: If the request fails.
        """
        repo = RepositoryId.coerce(repository)
        permission = CollaboratorPermission(permission)
        response = self._request(
            "PUT",
            f"{_repo_path(repo)}/collaborators/{_path_part(username)}",
            json={"permission": permission.value},
        )
        return response.status_code == 201


def _repo_path(repo: RepositoryId) -> str:
    return f"/repos/{_path_part(repo.owner)}/{_path_part(repo.name)}"


def _path_part(value: str) -> str:
    return quote(value, safe="")


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return response.reason or f"HTTP {response.status_code}"

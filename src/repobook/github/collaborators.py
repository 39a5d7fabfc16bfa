"""Bulk collaborator management."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from repobook.exceptions import GitHubAPIError, InvalidInputError
from repobook.github.client import CollaboratorPermission, GitHubClient, RepositoryLike
from repobook.github.repository import RepositoryId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollaboratorResult:
    """Outcome of adding one collaborator.

    Attributes:
        username (str): GitHub login the request was made for.
        succeeded (bool): Whether GitHub accepted the request.
        invited (bool): True if an invitation was created, False if the user already
            had access or the request failed.
        error (Optional[str]): Failure description when the request failed.
    """

    username: str
    succeeded: bool
    invited: bool = False
    error: Optional[str] = None


@dataclass
class CollaboratorReport:
    """Per-user results of a bulk collaborator add.

    Example:
        >>> report = CollaboratorReport("octo/repo", "push")
        >>> report.results.append(CollaboratorResult("alice", succeeded=True, invited=True))
        >>> report.results.append(CollaboratorResult("bob", succeeded=False, error="Not Found"))
        >>> [r.username for r in report.succeeded], [r.username for r in report.failed]
        (['alice'], ['bob'])
        >>> report.all_succeeded
        False
    """

    repository: str
    permission: str
    results: List[CollaboratorResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[CollaboratorResult]:
        return [result for result in self.results if result.succeeded]

    @property
    def failed(self) -> List[CollaboratorResult]:
        return [result for result in self.results if not result.succeeded]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


def add_collaborators(
    client: GitHubClient,
    repository: RepositoryLike,
    usernames: Iterable[str],
    permission: Union[str, CollaboratorPermission] = CollaboratorPermission.PUSH,
) -> CollaboratorReport:
    """Add every user in a list as a collaborator, reporting the outcome per user.

    One request is made per username, in order. Blank names are skipped and repeated
    names are requested once. A failure for one user does not stop the others.

    Args:
        client: GitHub client to issue the requests with.
        repository: ``owner/repo`` string or RepositoryId.
        usernames: GitHub logins to add.
        permission: Permission level granted to every user.

    Returns:
        A report with one result per distinct username.

    Raises:
        RepositoryNameError: If the repository identifier is malformed.
        InvalidInputError: If the permission level is unknown.
    """
    repo = RepositoryId.coerce(repository)
    try:
        permission = CollaboratorPermission(permission)
    except ValueError:
        valid = ", ".join(p.value for p in CollaboratorPermission)
        raise InvalidInputError(f"Invalid permission {permission!r}; expected one of: {valid}") from None

    report = CollaboratorReport(str(repo), permission.value)
    seen = set()
    for username in usernames:
        username = username.strip()
        if not username or username in seen:
            continue
        seen.add(username)

        try:
            invited = client.add_collaborator(repo, username, permission)
        except GitHubAPIError as e:
            logger.warning("Failed to add %s to %s: %s", username, repo, e.message)
            report.results.append(CollaboratorResult(username, succeeded=False, error=e.message))
            continue

        logger.info("Added %s to %s with %s permission", username, repo, permission.value)
        report.results.append(CollaboratorResult(username, succeeded=True, invited=invited))

    return report

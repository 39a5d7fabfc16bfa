"""Repository identifiers and listing summaries."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from repobook.exceptions import RepositoryNameError


@dataclass(frozen=True)
class RepositoryId:
    """An ``owner/repo`` pair identifying a GitHub repository.

    Example:
        >>> repo = RepositoryId.parse("octocat/Hello-World")
        >>> repo.owner, repo.name, str(repo)
        ('octocat', 'Hello-World', 'octocat/Hello-World')
    """

    owner: str
    name: str

    @classmethod
    def parse(cls, value: str) -> "RepositoryId":
        """Parse an ``owner/repo`` string.

        Surrounding whitespace is ignored. Both parts must be non-empty and there must be
        exactly one slash.

        Raises:
            RepositoryNameError: If the value is not a valid identifier.
        """
        if not isinstance(value, str):
            raise RepositoryNameError(repr(value))
        parts = value.strip().split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise RepositoryNameError(value)
        return cls(parts[0].strip(), parts[1].strip())

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def coerce(cls, value: Union[str, "RepositoryId"]) -> "RepositoryId":
        """Return value unchanged if it is already a RepositoryId, otherwise parse it."""
        if isinstance(value, RepositoryId):
            return value
        return cls.parse(value)


@dataclass(frozen=True)
class RepositorySummary:
    """A repository the authenticated user can access, with its default branch.

    Example:
        >>> summary = RepositorySummary.from_raw(
        ...     {"name": "Hello-World", "owner": {"login": "octocat"}, "default_branch": "main"}
        ... )
        >>> str(summary.repository), summary.default_branch
        ('octocat/Hello-World', 'main')
    """

    repository: RepositoryId
    default_branch: str

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["RepositorySummary"]:
        """Create a summary from a GitHub repository item, or return None if it is malformed."""
        if not isinstance(raw, Mapping):
            return None
        owner = raw.get("owner")
        login = owner.get("login") if isinstance(owner, Mapping) else None
        name = raw.get("name")
        branch = raw.get("default_branch")
        if not all(isinstance(value, str) and value for value in (login, name, branch)):
            return None
        return cls(RepositoryId(login, name), branch)

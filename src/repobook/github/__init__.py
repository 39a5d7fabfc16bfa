"""GitHub API access: repository and tree listings, collaborator management."""

from .client import CollaboratorPermission, GitHubClient
from .collaborators import CollaboratorReport, CollaboratorResult, add_collaborators
from .repository import RepositoryId, RepositorySummary

__all__ = [
    "CollaboratorPermission",
    "CollaboratorReport",
    "CollaboratorResult",
    "GitHubClient",
    "RepositoryId",
    "RepositorySummary",
    "add_collaborators",
]

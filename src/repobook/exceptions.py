from typing import Optional


class RepoBookError(Exception):
    """
    Base class for all errors raised by repobook.

    Example:
        >>> isinstance(InvalidInputError("bad"), RepoBookError)
        True
    """

    pass


class InvalidInputError(RepoBookError, ValueError):
    """
    Exception raised when input to the tree builder or its options has the wrong shape.

    This is raised before any processing begins, so no partial result is ever returned
    alongside it. Malformed individual tree entries are not reported this way; they are
    skipped.

    Example:
        >>> error = InvalidInputError("entries must be an iterable of tree entries")
        >>> str(error)
        'entries must be an iterable of tree entries'
    """

    pass


class RepositoryNameError(InvalidInputError):
    """
    Exception raised when a repository identifier is not of the form ``owner/repo``.

    Attributes:
        name (str): The rejected repository identifier.

    Example:
        >>> error = RepositoryNameError("just-a-name")
        >>> str(error)
        "Invalid repository name: 'just-a-name'"
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid repository name: {name!r}")


class GitHubAPIError(RepoBookError):
    """
    Exception raised when a request to the GitHub API fails.

    Covers both transport failures (no response at all) and unsuccessful HTTP responses
    such as a bad token, a missing repository or rate limiting.

    Attributes:
        message (str): Human-readable failure description.
        status_code (Optional[int]): HTTP status code, or None for transport failures.

    Example:
        >>> error = GitHubAPIError("Not Found", status_code=404)
        >>> str(error)
        'GitHub API error (404): Not Found'
        >>> str(GitHubAPIError("Connection refused"))
        'GitHub API error: Connection refused'
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """
        Initialize the exception with the failure description and optional status code.

        Args:
            message (str): Failure description, usually GitHub's own ``message`` field.
            status_code (Optional[int]): HTTP status code of the failed response.
        """
        self.message = message
        self.status_code = status_code
        if status_code is None:
            super().__init__(f"GitHub API error: {message}")
        else:
            super().__init__(f"GitHub API error ({status_code}): {message}")

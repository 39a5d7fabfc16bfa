"""GitHub repository exploration utilities.

This package provides tools for listing a repository branch's file tree as a
compact, filtered directory map and for bulk-adding repository collaborators.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("repobook")
except PackageNotFoundError:
    __version__ = "unknown"

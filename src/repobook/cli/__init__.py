"""Command-line interface for repobook."""

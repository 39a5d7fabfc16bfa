"""Command-line interface for repobook.

This module provides the command-line entry point, which lists a repository branch as a
filtered directory map, lists the accessible repositories, or bulk-adds collaborators
to a repository.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution, or at least one collaborator could not be added
    2: Command-line syntax error
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Markdown files of the default branch, as JSON
    $ repobook tree owner/repo -x md

    # Add two users with read access
    $ repobook add-users owner/repo alice bob -P pull

    # Accessible repositories and their default branches
    $ GITHUB_TOKEN=... repobook repos
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from repobook.cli.argparser import create_parser, validate_args
from repobook.directory_tree.filter_options import FilterOptions
from repobook.exceptions import RepoBookError
from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
from repobook.github.client import GitHubClient
from repobook.github.collaborators import CollaboratorReport, add_collaborators
from repobook.repobook import RepoBook

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags."""
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def format_report(report: CollaboratorReport) -> str:
    """Format a collaborator report as one line per user followed by a summary line.

    Args:
        report: Results of a bulk collaborator add.

    Returns:
        The formatted report.
    """
    lines = []
    for result in report.results:
        if result.succeeded:
            note = "invited" if result.invited else "already a collaborator"
            lines.append(f"added {result.username} ({note})")
        else:
            lines.append(f"failed {result.username}: {result.error}")
    lines.append(
        f"{len(report.succeeded)} of {len(report.results)} users added to {report.repository} "
        f"with {report.permission} permission"
    )
    return "\n".join(lines)


def run_tree(args: argparse.Namespace, exclusion_rules: GitIgnoreExclusionRules, client: GitHubClient) -> None:
    """Handle the tree command."""
    options = FilterOptions.from_raw(file_types=args.file_types, hide_dirs=args.hide_dirs, path=args.path)
    book = RepoBook(
        client,
        args.repository,
        branch=args.branch,
        options=options,
        exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
        output_format=args.format,
    )
    output = book.render() + "\n"

    if args.output:
        output_path = args.output
        if not output_path.suffix:
            output_path = output_path.with_suffix(book.output_extension)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output)
    else:
        sys.stdout.write(output)
        sys.stdout.flush()


def run_repos(client: GitHubClient, out: TextIO) -> None:
    """Handle the repos command: one tab-separated repository and default branch per line."""
    for summary in client.list_repositories():
        print(f"{summary.repository}\t{summary.default_branch}", file=out)


def run_add_users(args: argparse.Namespace, client: GitHubClient, out: TextIO) -> bool:
    """Handle the add-users command.

    Returns:
        True if every user was added.
    """
    report = add_collaborators(client, args.repository, args.users, args.permission)
    print(format_report(report), file=out)
    return report.all_succeeded


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the repobook command-line interface.

    Args:
        argv: Command-line arguments, excluding the program name. Defaults to sys.argv.

    Exit codes:
        0: Successful completion
        1: Runtime error, or at least one collaborator could not be added
        2: Command-line syntax error
        141: Broken pipe
    """
    try:
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        # argparse exits with 2 for argument errors and 0 for --version
        args = parser.parse_args(argv)

        validate_args(args)
        configure_logging(args.verbose)

        client = GitHubClient(token=args.token, base_url=args.api_url)

        if args.command == "tree":
            run_tree(args, exclusion_rules, client)
        elif args.command == "repos":
            run_repos(client, sys.stdout)
        elif not run_add_users(args, client, sys.stdout):
            sys.exit(1)

    except BrokenPipeError:
        sys.exit(141)
    except (RepoBookError, OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

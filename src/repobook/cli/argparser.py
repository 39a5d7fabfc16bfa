"""Command-line argument parsing for repobook.

This module defines the command-line interface for repobook, handling argument parsing
and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from repobook import __version__
from repobook.exclusion_rules.base_rules import BaseExclusionRules
from repobook.github.client import DEFAULT_API_URL, CollaboratorPermission
from repobook.output_strategies import OUTPUT_FORMATS


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, preserving the order of -e/--exclude and -i/--ignore options exactly as
    they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object updated by the tree command's
            -e/--exclude and -i/--ignore options.

    Returns:
        An ArgumentParser instance configured with repobook's commands and options.
    """
    description = """
    repobook: explore and manage GitHub repositories.

    Commands:
    - repos      List the repositories your token can access, with their default branches
    - tree       List a branch's files as a compact directory map, filtered by base
                 path, ignore patterns and file extension
    - add-users  Add several users as collaborators of a repository in one go

    The access token is read from -t/--token or the GITHUB_TOKEN environment variable.
    """

    epilog = """
    Examples:
      # Directory map of the default branch as JSON
      repobook tree octocat/Hello-World

      # Only Markdown and text files below docs/, without subdirectory lists
      repobook tree owner/repo -p docs -x "md, txt" -H

      # A specific branch, drawn as a tree and written to a file
      repobook tree owner/repo -b develop -f tree -o listing.txt

      # Skip vendored code and images
      repobook tree owner/repo -i "vendor/" -i "*.png" -e .repobookignore

      # Give three users write access
      repobook add-users owner/repo alice bob carol -P push

      # Repositories you can access, with their default branches
      repobook repos
    """

    parser = argparse.ArgumentParser(
        prog="repobook",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"repobook {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-t",
        "--token",
        default=os.environ.get("GITHUB_TOKEN"),
        help="GitHub access token (default: $GITHUB_TOKEN). The token needs the 'repo' scope for private repositories.",
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get("GITHUB_API_URL", DEFAULT_API_URL),
        metavar="URL",
        help=f"GitHub API root URL (default: $GITHUB_API_URL or {DEFAULT_API_URL}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for progress, -vv for debugging output).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    tree_parser = subparsers.add_parser("tree", help="List a branch's files as a filtered directory map.")
    tree_parser.add_argument("repository", metavar="OWNER/REPO", help="Repository to list.")
    tree_parser.add_argument(
        "-b",
        "--branch",
        help="Branch to list (default: the repository's default branch).",
    )
    tree_parser.add_argument(
        "-p",
        "--path",
        metavar="BASE_PATH",
        help="Only list entries at or below this path.",
    )
    tree_parser.add_argument(
        "-x",
        "--file-types",
        metavar="EXTS",
        help="Comma-separated list of file extensions to keep, e.g. '.md,.txt'. All files are kept by default.",
    )
    tree_parser.add_argument(
        "-H",
        "--hide-dirs",
        action="store_true",
        help="Omit subdirectory lists from the output.",
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    tree_parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns for entries to leave out (can be specified multiple times).",
    )
    tree_parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern for entries to leave out, e.g. '*.png', 'vendor/' or '!keep.png'. "
            "Can be specified multiple times; patterns apply in order, mixed with -e/--exclude."
        ),
    )
    tree_parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json).",
    )
    tree_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help=(
            "Output file path. If not specified, output is written to stdout. A name without an extension "
            "gets the format's one (.json or .txt)."
        ),
    )

    subparsers.add_parser("repos", help="List accessible repositories and their default branches.")

    users_parser = subparsers.add_parser("add-users", help="Add users as repository collaborators.")
    users_parser.add_argument("repository", metavar="OWNER/REPO", help="Repository to add the users to.")
    users_parser.add_argument("users", metavar="USER", nargs="+", help="GitHub logins to add.")
    users_parser.add_argument(
        "-P",
        "--permission",
        choices=[permission.value for permission in CollaboratorPermission],
        default=CollaboratorPermission.PUSH.value,
        help="Permission granted to every user (default: push).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.command in ("add-users", "repos") and not args.token:
        raise ValueError(f"{args.command} requires an access token (-t/--token or GITHUB_TOKEN)")

"""Application of exclusion rules to raw tree listings."""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional

from repobook.types import EntryKind

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


def filter_entries(entries: Iterable[Any], rules: Optional[BaseExclusionRules]) -> Iterator[Any]:
    """Yield the entries of a tree listing that the rules do not exclude.

    Directory markers are also checked with a trailing slash, so that directory-only
    patterns such as ``build/`` match the marker for ``build`` itself. Items without a
    usable string path are passed through untouched; the tree builder skips them.

    Args:
        entries: Raw tree items (mappings) or objects with ``path`` and ``kind``.
        rules: Exclusion rules to apply. None passes every entry through.

    Yields:
        The entries that were not excluded, in their original order.

    Example:
        >>> from repobook.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> listing = [
        ...     {"path": "build", "type": "tree"},
        ...     {"path": "build/out.js", "type": "blob"},
        ...     {"path": "main.js", "type": "blob"},
        ... ]
        >>> [entry["path"] for entry in filter_entries(listing, rules)]
        ['main.js']
    """
    for entry in entries:
        if rules is None:
            yield entry
            continue

        if isinstance(entry, Mapping):
            path = entry.get("path")
            kind = entry.get("type", entry.get("kind"))
        else:
            path = getattr(entry, "path", None)
            kind = getattr(entry, "kind", None)

        if not isinstance(path, str) or not path:
            yield entry
            continue

        if rules.exclude(path) or (kind == EntryKind.TREE and rules.exclude(path + "/")):
            logger.debug("Excluded %s", path)
            continue
        yield entry

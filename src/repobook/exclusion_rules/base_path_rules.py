"""Exclusion rules restricting a listing to one subdirectory."""

from typing import Optional

from .base_rules import BaseExclusionRules


class BasePathExclusionRules(BaseExclusionRules):
    """Exclude every path outside a base directory.

    A path is kept when it is the base path itself or lies below it. The comparison is
    segment-wise, so a base path of ``doc`` keeps ``doc/intro.md`` but not
    ``docs/intro.md``. A blank base path keeps everything.

    Ancestors of the base path are excluded too. Their directory markers would only add
    names to parents that the builder prunes anyway, since no file outside the base
    path survives.

    Attributes:
        base_path (str): The normalised base path, without surrounding slashes.

    Example:
        >>> rules = BasePathExclusionRules("/docs/")
        >>> rules.base_path
        'docs'
        >>> rules.exclude("docs"), rules.exclude("docs/guide/intro.md")
        (False, False)
        >>> rules.exclude("docs-old/intro.md"), rules.exclude("README.md")
        (True, True)
    """

    def __init__(self, base_path: Optional[str] = None) -> None:
        self.base_path = (base_path or "").strip().strip("/")

    def exclude(self, path: str) -> bool:
        if not self.base_path:
            return False
        path = path.strip("/")
        return not (path == self.base_path or path.startswith(self.base_path + "/"))

    def has_rules(self) -> bool:
        """Check whether a base path is set."""
        return bool(self.base_path)

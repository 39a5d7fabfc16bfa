"""Filter configuration for directory map reconstruction."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Union

from repobook.exceptions import InvalidInputError


def parse_file_extensions(raw: Optional[Union[str, Iterable[str]]]) -> FrozenSet[str]:
    """Parse a raw extension allow-list into a set of bare extensions.

    The raw form is either a comma-separated string (as typed into a form field, e.g.
    ``".md, .txt"``) or an iterable of tokens. Each token is trimmed of surrounding
    whitespace and must then be non-empty; at most one leading dot is removed
    afterwards. A bare ``"."`` therefore yields the empty extension, which selects names
    ending in a dot. Comparison against file names is later done by exact,
    case-sensitive string equality.

    Args:
        raw: None, a comma-separated string, or an iterable of extension strings.

    Returns:
        The set of extensions. Empty when ``raw`` is None or blank, meaning no filtering.

    Raises:
        InvalidInputError: If a token inside a non-blank list is empty or only whitespace,
            or if ``raw`` is neither a string nor an iterable of strings.

    Example:
        >>> sorted(parse_file_extensions(" .md, txt ,..rst"))
        ['.rst', 'md', 'txt']
        >>> parse_file_extensions("")
        frozenset()
        >>> parse_file_extensions("md,,txt")
        Traceback (most recent call last):
        ...
        repobook.exceptions.InvalidInputError: File types cannot be empty
    """
    if raw is None:
        return frozenset()

    if isinstance(raw, str):
        if not raw.strip():
            return frozenset()
        tokens: Iterable[object] = raw.split(",")
    else:
        try:
            tokens = list(raw)
        except TypeError:
            raise InvalidInputError(f"File types must be a string or an iterable of strings, got {type(raw).__name__}")

    extensions = set()
    for token in tokens:
        if not isinstance(token, str):
            raise InvalidInputError(f"File type must be a string, got {type(token).__name__}")
        token = token.strip()
        if not token:
            raise InvalidInputError("File types cannot be empty")
        if token.startswith("."):
            token = token[1:]
        extensions.add(token)
    return frozenset(extensions)


@dataclass(frozen=True)
class FilterOptions:
    """Options controlling which files and directory lists end up in a directory map.

    Attributes:
        file_extensions (FrozenSet[str]): Allowed extensions without a leading dot. Empty
            means every file is kept.
        hide_dirs (bool): If True, directory nodes are emitted without their
            subdirectory-name lists.
        base_path (Optional[str]): Path prefix the caller wants to restrict the listing
            to. The tree builder itself does not apply it; see
            :class:`repobook.exclusion_rules.BasePathExclusionRules`.

    Example:
        >>> options = FilterOptions.from_raw(file_types="md, .txt", hide_dirs=True, path="/docs/")
        >>> sorted(options.file_extensions), options.hide_dirs, options.base_path
        (['md', 'txt'], True, 'docs')
    """

    file_extensions: FrozenSet[str] = field(default_factory=frozenset)
    hide_dirs: bool = False
    base_path: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_extensions", parse_file_extensions(self.file_extensions))
        if not isinstance(self.hide_dirs, bool):
            raise InvalidInputError(f"hide_dirs must be a bool, got {type(self.hide_dirs).__name__}")
        if self.base_path is not None and not isinstance(self.base_path, str):
            raise InvalidInputError(f"base_path must be a string, got {type(self.base_path).__name__}")

    @classmethod
    def from_raw(
        cls,
        file_types: Optional[Union[str, Iterable[str]]] = None,
        hide_dirs: bool = False,
        path: Optional[str] = None,
    ) -> "FilterOptions":
        """Build options from raw form values.

        Args:
            file_types: Comma-separated extension list or iterable of extensions.
            hide_dirs: Whether to omit subdirectory lists from the output.
            path: Base path; surrounding slashes are stripped and a blank value means
                no base path.

        Returns:
            The parsed options.

        Raises:
            InvalidInputError: If any value is malformed.
        """
        base_path = path.strip().strip("/") if isinstance(path, str) else path
        return cls(
            file_extensions=parse_file_extensions(file_types),
            hide_dirs=hide_dirs,
            base_path=base_path or None,
        )

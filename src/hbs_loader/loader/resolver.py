"""Path resolver: turns template names into locations via prefix + name + suffix."""

from __future__ import annotations

import logging

from hbs_loader.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

SEPARATOR = "/"
DEFAULT_PREFIX = SEPARATOR
DEFAULT_SUFFIX = ".hbs"


def normalize(name: str) -> str:
    """Strip a single leading '/' from a template name."""
    if name.startswith(SEPARATOR):
        return name[1:]
    return name


def _with_trailing_separator(value: str | None, message: str) -> str:
    if value is None:
        raise InvalidArgumentError(message)
    if not value.endswith(SEPARATOR):
        value += SEPARATOR
    return value


class PathResolver:
    """Resolves template and partial names to absolute locations.

    ``prefix`` and ``partials_prefix`` are separate fields. Both start out as
    ``DEFAULT_PREFIX``; changing one never touches the other.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        partials_prefix: str = DEFAULT_PREFIX,
        suffix: str | None = DEFAULT_SUFFIX,
    ) -> None:
        self._prefix = DEFAULT_PREFIX
        self._partials_prefix = DEFAULT_PREFIX
        self._suffix = DEFAULT_SUFFIX
        self.prefix = prefix
        self.partials_prefix = partials_prefix
        self.suffix = suffix

    @property
    def prefix(self) -> str:
        """Prefix prepended to template names."""
        return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        self._prefix = _with_trailing_separator(value, "a view prefix is required")
        logger.debug("Template prefix set to %r", self._prefix)

    @property
    def partials_prefix(self) -> str:
        """Prefix prepended to partial template names."""
        return self._partials_prefix

    @partials_prefix.setter
    def partials_prefix(self, value: str) -> None:
        self._partials_prefix = _with_trailing_separator(value, "a partials prefix is required")
        logger.debug("Partials prefix set to %r", self._partials_prefix)

    @property
    def suffix(self) -> str:
        """Suffix (usually a file extension) appended to template names."""
        return self._suffix

    @suffix.setter
    def suffix(self, value: str | None) -> None:
        self._suffix = value if value is not None else ""
        logger.debug("Template suffix set to %r", self._suffix)

    def resolve(self, name: str) -> str:
        """Resolve a template name to its location."""
        return self._compose(self._prefix, name)

    def resolve_partial(self, name: str) -> str:
        """Resolve a partial name to its location."""
        return self._compose(self._partials_prefix, name)

    def _compose(self, prefix: str, name: str) -> str:
        if name is None:
            raise InvalidArgumentError("a template name is required")
        return prefix + normalize(name) + self._suffix

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self._prefix!r}, "
            f"partials_prefix={self._partials_prefix!r}, suffix={self._suffix!r})"
        )

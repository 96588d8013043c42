"""Template name resolution and the loader base class."""

from hbs_loader.loader.base import TemplateLoader
from hbs_loader.loader.resolver import (
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    PathResolver,
    normalize,
)

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "PathResolver",
    "TemplateLoader",
    "normalize",
]

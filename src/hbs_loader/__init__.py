"""Template name resolution for Handlebars-style template loaders."""

from hbs_loader.exceptions import HbsLoaderError, InvalidArgumentError
from hbs_loader.loader import (
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    PathResolver,
    TemplateLoader,
    normalize,
)

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "HbsLoaderError",
    "InvalidArgumentError",
    "PathResolver",
    "TemplateLoader",
    "normalize",
]

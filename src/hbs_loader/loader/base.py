"""Abstract base class for template loader backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from hbs_loader.loader.resolver import PathResolver

logger = logging.getLogger(__name__)


class TemplateLoader(PathResolver, ABC):
    """Base class that all template loaders must implement.

    Subclasses only fetch content; naming is handled by ``PathResolver``.
    """

    @abstractmethod
    def source_at(self, location: str) -> str:
        """Return the raw template content stored at a resolved location."""

    def load(self, name: str) -> str:
        location = self.resolve(name)
        logger.debug("Loading template %r from %s", name, location)
        return self.source_at(location)

    def load_partial(self, name: str) -> str:
        location = self.resolve_partial(name)
        logger.debug("Loading partial %r from %s", name, location)
        return self.source_at(location)

"""Process-wide memo of resolved ``PropertyModel`` objects keyed by class."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from beanmeta.config import ReflectionSettings

from .property_model import PropertyModel
from .reflector import resolve

logger = logging.getLogger(__name__)


class MetadataRegistry:
    """Serves one ``PropertyModel`` per class.

    With class caching enabled a model is resolved on first request and
    published with a single dict assignment. Two threads racing on an unseen
    class may both resolve it; the results are equal, so the later write
    simply replaces the earlier one. Entries are never evicted.
    """

    def __init__(
        self,
        settings: Optional[ReflectionSettings] = None,
        *,
        resolver: Callable[[type], PropertyModel] = resolve,
    ):
        self._settings = settings if settings is not None else ReflectionSettings()
        self._class_cache_enabled = self._settings.class_cache_enabled
        self._resolver = resolver
        self._models: dict[type, PropertyModel] = {}

    @property
    def class_cache_enabled(self) -> bool:
        return self._class_cache_enabled

    @class_cache_enabled.setter
    def class_cache_enabled(self, enabled: bool) -> None:
        self._class_cache_enabled = bool(enabled)

    def get(self, cls: type) -> PropertyModel:
        if not self._class_cache_enabled:
            return self._resolver(cls)

        cached = self._models.get(cls)
        if cached is None:
            cached = self._resolver(cls)
            self._models[cls] = cached
            logger.debug("Cached property model for %s", cls.__qualname__)
        return cached

    for_type = get

    def is_cached(self, cls: type) -> bool:
        return cls in self._models

    def __len__(self) -> int:
        return len(self._models)


_default_registry: Optional[MetadataRegistry] = None
_default_registry_guard = threading.Lock()


def get_default_registry() -> MetadataRegistry:
    """Return the shared registry, configured from the environment on first use."""
    global _default_registry

    with _default_registry_guard:
        if _default_registry is None:
            _default_registry = MetadataRegistry(ReflectionSettings.from_env())
        return _default_registry


__all__ = ["MetadataRegistry", "get_default_registry"]

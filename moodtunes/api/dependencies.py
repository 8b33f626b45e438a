"""Dependency Providers — inject the catalog, shuffler and settings into routes.

Invariants:
    - Routes never read the catalog or a random source from module globals
    - One shuffler per process (lru_cache); seeded when SHUFFLE_SEED is set

Design Decisions:
    - FastAPI Depends + app.dependency_overrides: tests swap the catalog or the
      shuffler without patching modules
"""

from functools import lru_cache

from moodtunes.config import Settings, get_settings
from moodtunes.core.catalog import Catalog, default_catalog
from moodtunes.core.shuffle import IdentityShuffler, RandomShuffler, Shuffler


def get_catalog() -> Catalog:
    return default_catalog()


@lru_cache
def _shuffler_for(enabled: bool, seed: int | None) -> Shuffler:
    if not enabled:
        return IdentityShuffler()
    return RandomShuffler(seed)


def get_shuffler() -> Shuffler:
    settings = get_settings()
    return _shuffler_for(settings.shuffle_enabled, settings.shuffle_seed)


def get_app_settings() -> Settings:
    return get_settings()

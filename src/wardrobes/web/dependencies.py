"""FastAPI dependency injection for wardrobe services."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends

from wardrobes.application.config import (
    ConfigError,
    config_to_catalog,
    load_catalog,
    load_catalog_from_dict,
)
from wardrobes.domain.entities import Catalog

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "WARDROBES_CATALOG"


@lru_cache(maxsize=1)
def get_default_catalog() -> Catalog | None:
    """Load the server catalog named by WARDROBES_CATALOG, once."""
    path = os.environ.get(CATALOG_ENV_VAR)
    if not path:
        return None
    logger.info(f"Loading default catalog from {path}")
    return config_to_catalog(load_catalog(Path(path)))


def resolve_catalog(data: dict[str, Any] | None, default: Catalog | None) -> Catalog:
    """Catalog from the request body, falling back to the server catalog.

    Raises:
        ConfigError: If the body catalog is invalid, or there is neither a
            body catalog nor a server catalog.
    """
    if data is not None:
        return config_to_catalog(load_catalog_from_dict(data))
    if default is None:
        raise ConfigError(
            message=f"No catalog in request and {CATALOG_ENV_VAR} is not set",
            error_type="missing_catalog",
        )
    return default


# Type aliases for cleaner endpoint signatures
DefaultCatalogDep = Annotated[Catalog | None, Depends(get_default_catalog)]

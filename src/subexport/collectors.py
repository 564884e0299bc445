"""
Extraction of collector entries from an import request.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import ExporterConfig
from .errors import CollectionValidationError, DuplicateCollectionError
from .model import OptList

logger = logging.getLogger(__name__)


def collect_collections(config: ExporterConfig, request: OptList) -> dict[str, Any]:
    """
    Remove collector entries from ``request`` and return their values.

    The request list is modified in place: collected entries take no part in
    group expansion or export resolution.

    Raises:
        DuplicateCollectionError: If a collector appears more than once
        CollectionValidationError: If a collector's validator rejects its value
    """
    collection: dict[str, Any] = {}

    for collector, validator in config.collectors.items():
        indexes = [i for i, (name, _) in enumerate(request) if name == collector]
        if not indexes:
            continue
        if len(indexes) > 1:
            raise DuplicateCollectionError(collector)

        _, value = request.pop(indexes[0])
        collection[collector] = value

        if validator is not None and not validator(value):
            raise CollectionValidationError(collector, value)

        logger.debug("Collected %s", collector)

    return collection

"""Deck metadata — the optional YAML block heading a presentation."""

from __future__ import annotations

import logging

import yaml

from .models import Metadata

logger = logging.getLogger(__name__)

_KEYS = ("author", "date", "theme", "paging")


def parse_metadata(segment: str) -> tuple[Metadata, bool]:
    """Parse *segment* as a metadata block.

    Returns ``(metadata, exists)``.  *exists* is ``True`` only when the
    segment is a YAML mapping with at least one of ``author``, ``date``,
    ``theme`` or ``paging``.  Anything else (markdown, YAML errors, scalars)
    yields the defaults and ``False``; malformed metadata is never fatal.
    """
    try:
        data = yaml.safe_load(segment)
    except (yaml.YAMLError, ValueError) as exc:
        # Out-of-range timestamps such as 2024-13-45 raise ValueError.
        logger.debug("First segment is not valid metadata: %s", exc)
        return Metadata(), False

    if not isinstance(data, dict):
        return Metadata(), False

    found = {key: data[key] for key in _KEYS if data.get(key) is not None}
    if not found:
        return Metadata(), False

    metadata = Metadata(**{key: str(value) for key, value in found.items()})
    logger.debug("Metadata block: %s", metadata)
    return metadata, True

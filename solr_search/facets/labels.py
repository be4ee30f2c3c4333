"""Facet key to label resolution."""

from typing import Dict, Mapping

from loguru import logger

from solr_search.exceptions import FieldNotFoundError
from solr_search.interfaces import FieldLabelResolver

STRING_FIELD_SUFFIX = "_s"


class MappingFieldLabelResolver(FieldLabelResolver):
    """Field label resolver backed by a slug to label mapping."""

    def __init__(self, labels: Mapping[str, str]):
        self.labels: Dict[str, str] = dict(labels)

    def get_label(self, slug: str) -> str:
        try:
            return self.labels[slug]
        except KeyError:
            raise FieldNotFoundError(slug)


def key_to_slug(key: str) -> str:
    """Strip the string field suffix from a facet key.

    Only an exact trailing ``_s`` is removed: ``status_s`` becomes
    ``status`` and ``tags`` is left alone.
    """
    if key.endswith(STRING_FIELD_SUFFIX):
        return key[: -len(STRING_FIELD_SUFFIX)]
    return key


def key_to_label(key: str, resolver: FieldLabelResolver) -> str:
    """Get the human-readable label for a facet key.

    Args:
        key: The facet key, e.g. ``collection_s``
        resolver: Field label lookup

    Returns:
        The label

    Raises:
        FieldNotFoundError: If the key's slug has no field definition
    """
    slug = key_to_slug(key)
    logger.debug(f"Resolving label for facet key {key!r} (slug {slug!r})")
    return resolver.get_label(slug)

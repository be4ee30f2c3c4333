"""Collection tree providers."""

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

from loguru import logger

from solr_search.exceptions import ConfigurationError
from solr_search.interfaces import CollectionTreeProvider


class InMemoryCollectionTreeProvider(CollectionTreeProvider):
    """Collection tree built from flat collection records.

    Each record has an ``id``, a ``name`` and a ``parent_id``; root
    collections have a ``parent_id`` of 0 or None. Records whose parent is
    missing are listed as roots after the others. Sibling order follows
    record order.
    """

    def __init__(self, records: Iterable[Mapping[str, Any]]):
        self._names: Dict[Any, str] = {}
        self._roots: List[Any] = []
        self._children: Dict[Any, List[Any]] = defaultdict(list)

        for record in records:
            collection_id = record["id"]
            self._names[collection_id] = record["name"]
            parent_id = record.get("parent_id")
            if parent_id:
                self._children[parent_id].append(collection_id)
            else:
                self._roots.append(collection_id)

        for parent_id in [pid for pid in self._children if pid not in self._names]:
            orphans = self._children.pop(parent_id)
            logger.warning(
                f"Collections {orphans} reference missing parent {parent_id!r}, listing them as roots"
            )
            self._roots.extend(orphans)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryCollectionTreeProvider":
        """Load collection records from a JSON list.

        Raises:
            ConfigurationError: If the file is missing or not a JSON list
        """
        try:
            with open(path) as f:
                records = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Collection tree file not found: {path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in collection tree file: {str(e)}")

        if not isinstance(records, list):
            raise ConfigurationError("Collection tree file must contain a JSON list")

        logger.debug(f"Loaded {len(records)} collection(s) from {path}")
        return cls(records)

    def get_root_collections(self) -> List[Dict[str, Any]]:
        return [{"id": cid, "name": self._names[cid]} for cid in self._roots]

    def get_descendant_tree(self, collection_id: Any) -> List[Dict[str, Any]]:
        return [
            {
                "id": child_id,
                "name": self._names[child_id],
                "children": self.get_descendant_tree(child_id),
            }
            for child_id in self._children.get(collection_id, [])
        ]

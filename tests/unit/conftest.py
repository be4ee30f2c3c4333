"""Test configuration and fixtures."""

from typing import Any, Dict, List
from unittest.mock import Mock

import pysolr
import pytest

from solr_search.config import SolrSearchConfig
from solr_search.facets.labels import MappingFieldLabelResolver
from solr_search.facets.providers import InMemoryCollectionTreeProvider
from solr_search.settings.highlight import install_default_options
from solr_search.settings.stores import InMemoryOptionStore

# Flat collection records, as stored by the host's collection tree table
MOCK_COLLECTIONS: List[Dict[str, Any]] = [
    {"id": 1, "parent_id": 0, "name": "Maps"},
    {"id": 2, "parent_id": None, "name": "Photographs"},
    {"id": 3, "parent_id": 2, "name": "Portraits"},
    {"id": 4, "parent_id": 3, "name": "Studio Portraits"},
    {"id": 5, "parent_id": 2, "name": "Landscapes"},
]

MOCK_FIELD_LABELS = {
    "collection": "Collection",
    "author": "Author",
    "status": "Status",
    "tags": "Tags",
}


@pytest.fixture
def config() -> SolrSearchConfig:
    """Search configuration for testing."""
    return SolrSearchConfig(
        solr_base_url="http://localhost:8983/solr",
        default_collection="omeka",
        facet_fields=["collection_s", "author_s"],
        field_labels=MOCK_FIELD_LABELS,
    )


@pytest.fixture
def option_store() -> InMemoryOptionStore:
    """Option store holding the default highlight options."""
    store = InMemoryOptionStore()
    install_default_options(store)
    return store


@pytest.fixture
def label_resolver() -> MappingFieldLabelResolver:
    return MappingFieldLabelResolver(MOCK_FIELD_LABELS)


@pytest.fixture
def collection_records() -> List[Dict[str, Any]]:
    return [dict(record) for record in MOCK_COLLECTIONS]


@pytest.fixture
def collection_provider(collection_records) -> InMemoryCollectionTreeProvider:
    return InMemoryCollectionTreeProvider(collection_records)


@pytest.fixture
def mock_pysolr():
    """Mock pysolr.Solr instance returning one document with facets."""
    mock = Mock(spec=pysolr.Solr)
    results = Mock()
    results.hits = 1
    results.docs = [{"id": "1", "title": "Map of Boston"}]
    results.facets = {
        "facet_fields": {
            "collection_s": ["Maps", 1, "Photographs", 0],
        }
    }
    results.highlighting = {"1": {"title": ["<em>Map</em> of Boston"]}}
    mock.search.return_value = results
    return mock

"""Facet URL state, labels and collection tree facets."""

from solr_search.facets.codec import (
    Facet,
    add_facet,
    facets_to_filter_queries,
    make_url,
    parse_facets,
    remove_facet,
)
from solr_search.facets.labels import MappingFieldLabelResolver, key_to_label
from solr_search.facets.providers import InMemoryCollectionTreeProvider
from solr_search.facets.tree import (
    FacetTreeNode,
    collection_tree_full_list_facet,
    collection_tree_list_facet,
    render_facet_tree,
)

__all__ = [
    "Facet",
    "FacetTreeNode",
    "InMemoryCollectionTreeProvider",
    "MappingFieldLabelResolver",
    "add_facet",
    "collection_tree_full_list_facet",
    "collection_tree_list_facet",
    "facets_to_filter_queries",
    "key_to_label",
    "make_url",
    "parse_facets",
    "remove_facet",
    "render_facet_tree",
]

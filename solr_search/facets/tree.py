"""Collection tree facets.

The tree is first built as ``FacetTreeNode`` values, each carrying the URL
that adds its collection as a facet, and only then serialized to nested
list markup by ``render_facet_tree``.
"""

import html
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from loguru import logger

from solr_search.config import DEFAULT_RESULTS_URL
from solr_search.facets.codec import add_facet
from solr_search.interfaces import CollectionTreeProvider

COLLECTION_FIELD = "collection"
FACET_CLASS = "facet-value"


@dataclass
class FacetTreeNode:
    """A collection in the facet tree."""

    name: str
    url: str
    children: List["FacetTreeNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def _collection_node(
    name: str,
    children: List[FacetTreeNode],
    params: Optional[Mapping[str, object]],
    results_url: str,
) -> FacetTreeNode:
    url = add_facet(params, COLLECTION_FIELD, name, results_url, escape=False)
    return FacetTreeNode(name=name, url=url, children=children)


def collection_tree_list_facet(
    collection_tree: Optional[Sequence[Mapping[str, Any]]],
    params: Optional[Mapping[str, object]] = None,
    results_url: str = DEFAULT_RESULTS_URL,
) -> List[FacetTreeNode]:
    """Recursively build facet nodes from a nested collection tree.

    Args:
        collection_tree: Nested mappings with ``name`` and ``children``
        params: Current query parameters
        results_url: Base results route

    Returns:
        One node per collection, in input order
    """
    if not collection_tree:
        return []
    return [
        _collection_node(
            collection["name"],
            collection_tree_list_facet(collection.get("children"), params, results_url),
            params,
            results_url,
        )
        for collection in collection_tree
    ]


def collection_tree_full_list_facet(
    provider: CollectionTreeProvider,
    params: Optional[Mapping[str, object]] = None,
    results_url: str = DEFAULT_RESULTS_URL,
) -> Optional[List[FacetTreeNode]]:
    """Build the full collection facet hierarchy from the root collections.

    Returns:
        The root nodes, or None when there are no root collections
    """
    root_collections = provider.get_root_collections()
    if not root_collections:
        logger.debug("No root collections, skipping collection facets")
        return None

    nodes = []
    for root in root_collections:
        descendants = provider.get_descendant_tree(root["id"])
        nodes.append(
            _collection_node(
                root["name"],
                collection_tree_list_facet(descendants, params, results_url),
                params,
                results_url,
            )
        )
    return nodes


def _render_nodes(nodes: Sequence[FacetTreeNode], parts: List[str]) -> None:
    parts.append("<ul>")
    for node in nodes:
        name = html.escape(node.name)
        parts.append(f'<li class="{FACET_CLASS}">')
        if node.is_leaf:
            parts.append(
                f'<a href="{html.escape(node.url)}" class="{FACET_CLASS}">{name}</a>'
            )
        else:
            parts.append(f'<p class="{FACET_CLASS}">{name}</p>')
            _render_nodes(node.children, parts)
        parts.append("</li>")
    parts.append("</ul>")


def render_facet_tree(nodes: Optional[Sequence[FacetTreeNode]]) -> Optional[str]:
    """Serialize facet nodes to a nested HTML unordered list.

    Leaves render as facet links, other nodes as plain labels followed by
    their children.

    Returns:
        The markup, or None for an empty tree
    """
    if not nodes:
        return None
    parts: List[str] = []
    _render_nodes(nodes, parts)
    return "".join(parts)

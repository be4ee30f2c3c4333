"""Faceted Solr search client."""

from typing import Any, Dict, List, Mapping, Optional

import pysolr
from loguru import logger

from solr_search.config import SolrSearchConfig
from solr_search.exceptions import QueryError
from solr_search.facets.codec import (
    add_facet,
    facets_to_filter_queries,
    parse_facets,
    query_param,
)
from solr_search.interfaces import OptionStore
from solr_search.settings.highlight import HighlightSettings

MATCH_ALL = "*:*"


class SolrSearchClient:
    """Runs searches for the current facet and highlight state."""

    def __init__(
        self,
        config: SolrSearchConfig,
        option_store: OptionStore,
        solr_client: Optional[pysolr.Solr] = None,
    ):
        """Initialize the client.

        Args:
            config: Search configuration
            option_store: Store holding the highlight options
            solr_client: Optional pre-configured pysolr client
        """
        self.config = config
        self.option_store = option_store
        self._solr_client = solr_client

    def _get_or_create_client(self) -> pysolr.Solr:
        if not self._solr_client:
            self._solr_client = pysolr.Solr(
                f"{self.config.solr_base_url}/{self.config.default_collection}",
                timeout=self.config.connection_timeout,
            )
        return self._solr_client

    def build_search_params(self, params: Mapping[str, object]) -> Dict[str, Any]:
        """Build the Solr request parameters, excluding ``q``."""
        search_params: Dict[str, Any] = {}

        filters = facets_to_filter_queries(parse_facets(params))
        if filters:
            search_params["fq"] = filters

        if self.config.facet_fields:
            search_params.update({
                "facet": "true",
                "facet.field": list(self.config.facet_fields),
                "facet.mincount": 1,
            })

        highlight = HighlightSettings.from_store(self.option_store)
        search_params.update(highlight.to_solr_params())
        return search_params

    def search(
        self,
        params: Mapping[str, object],
        rows: int = 10,
        start: int = 0,
    ) -> Dict[str, Any]:
        """Search for the given query parameters.

        Args:
            params: Current query parameters (``q`` and ``facet``)
            rows: Number of documents to return
            start: Offset of the first document

        Returns:
            Dict with ``numFound``, ``start``, ``docs``, ``facets`` and
            ``highlighting``

        Raises:
            QueryError: If Solr rejects or fails the request
        """
        query = query_param(params, "q").strip() or MATCH_ALL
        search_params = self.build_search_params(params)
        logger.debug(f"Solr search q={query!r} params={search_params}")

        try:
            results = self._get_or_create_client().search(
                query, rows=rows, start=start, **search_params
            )
        except pysolr.SolrError as e:
            logger.error(f"Solr search failed: {str(e)}")
            raise QueryError(f"Search failed: {str(e)}") from e

        return {
            "numFound": results.hits,
            "start": start,
            "docs": list(results.docs),
            "facets": self._format_facets(results.facets, params),
            "highlighting": results.highlighting or {},
        }

    def _format_facets(
        self, facets: Optional[Dict[str, Any]], params: Mapping[str, object]
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Pair up Solr's flat facet counts and attach add-facet URLs."""
        formatted: Dict[str, List[Dict[str, Any]]] = {}
        for field, counts in ((facets or {}).get("facet_fields") or {}).items():
            formatted[field] = [
                {
                    "value": value,
                    "count": count,
                    "url": add_facet(
                        params, field, value, self.config.results_url, escape=False
                    ),
                }
                for value, count in zip(counts[::2], counts[1::2])
            ]
        return formatted

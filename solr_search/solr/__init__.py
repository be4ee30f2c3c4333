"""Solr access for the search helpers."""

from solr_search.solr.client import SolrSearchClient

__all__ = ["SolrSearchClient"]

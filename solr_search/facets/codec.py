"""Parse and rebuild the facet state carried in search result URLs.

The ``facet`` query parameter holds zero or more ``field:"value"`` terms
joined by `` AND ``, e.g. ``collection:"Maps" AND author:"Smith"``. The
free-text search term travels separately in ``q``.
"""

import html
import re
from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from loguru import logger

from solr_search.config import DEFAULT_RESULTS_URL

FACET_PATTERN = re.compile(r'(?P<field>\w+):"(?P<value>[^"]+)"', re.ASCII)
FACET_SEPARATOR = " AND "


class Facet(NamedTuple):
    """A field/value filter applied to a search."""

    field: str
    value: str

    def __str__(self) -> str:
        return f'{self.field}:"{self.value}"'


FacetLike = Union[Facet, Tuple[str, str]]


def query_param(params: Optional[Mapping[str, object]], name: str) -> str:
    """Get a single query parameter as text.

    Multi-valued parameters (as produced by ``parse_qs``) use the last value.
    """
    if not params:
        return ""
    value = params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else ""
    if value is None:
        return ""
    return str(value)


def parse_facets(params: Optional[Mapping[str, object]]) -> List[Facet]:
    """Extract the facet pairs from the query parameters.

    Args:
        params: Current query parameters

    Returns:
        The facets in order of appearance; empty when ``facet`` is absent
        or holds no well-formed terms.
    """
    raw = query_param(params, "facet")
    facets = [
        Facet(match.group("field"), match.group("value"))
        for match in FACET_PATTERN.finditer(raw)
    ]
    logger.debug(f"Parsed {len(facets)} facet(s) from {raw!r}")
    return facets


def make_url(
    facets: Sequence[FacetLike],
    params: Optional[Mapping[str, object]] = None,
    results_url: str = DEFAULT_RESULTS_URL,
    escape: bool = True,
) -> str:
    """Rebuild the results URL with a new list of facets.

    Args:
        facets: Facet pairs to encode
        params: Current query parameters, ``q`` is carried over
        results_url: Base results route
        escape: HTML-escape the URL for embedding in markup

    Returns:
        The new URL
    """
    f_param = quote_plus(FACET_SEPARATOR.join(str(Facet(*facet)) for facet in facets))
    q_param = quote_plus(query_param(params, "q"))
    url = f"{results_url}?q={q_param}&facet={f_param}"
    return html.escape(url) if escape else url


def add_facet(
    params: Optional[Mapping[str, object]],
    field: str,
    value: str,
    results_url: str = DEFAULT_RESULTS_URL,
    escape: bool = True,
) -> str:
    """Add a facet to the current URL.

    The pair is appended only if it is not already active.
    """
    facets = parse_facets(params)
    facet = Facet(field, value)
    if facet not in facets:
        facets.append(facet)
    return make_url(facets, params, results_url, escape)


def remove_facet(
    params: Optional[Mapping[str, object]],
    field: str,
    value: str,
    results_url: str = DEFAULT_RESULTS_URL,
    escape: bool = True,
) -> str:
    """Remove a facet from the current URL.

    Every occurrence of the exact pair is dropped.
    """
    facet = Facet(field, value)
    reduced = [f for f in parse_facets(params) if f != facet]
    return make_url(reduced, params, results_url, escape)


def facets_to_filter_queries(facets: Sequence[FacetLike]) -> List[str]:
    """Convert facets to Solr filter queries, one per facet."""
    return [str(Facet(*facet)) for facet in facets]

"""Tool for running faceted searches."""

from typing import Dict

import anyio

from solr_search.tools.tool_decorator import tool


@tool()
async def execute_search_query(
    mcp, q: str = "", facet: str = "", rows: int = 10, start: int = 0
) -> Dict:
    """Search the index with the active facets and highlighting settings.

    Args:
        mcp: SolrSearchServer instance
        q: Free-text search term
        facet: Active facets, e.g. collection:"Maps" AND author:"Smith"
        rows: Number of documents to return
        start: Offset of the first document

    Returns:
        Documents, facet counts with add-facet URLs, and highlighting
    """
    params = {"q": q, "facet": facet}
    return await anyio.to_thread.run_sync(
        lambda: mcp.search_client.search(params, rows=rows, start=start)
    )

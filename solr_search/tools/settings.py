"""Tools for the highlighting settings."""

from typing import Dict, Optional

from solr_search.settings.highlight import DEFAULT_OPTIONS, HL_OPTION, HighlightForm
from solr_search.tools.tool_decorator import tool


@tool()
async def execute_get_highlight_settings(mcp) -> Dict:
    """Describe the highlighting settings form with its current values."""
    return HighlightForm(mcp.option_store).as_dict()


@tool()
async def execute_save_highlight_settings(
    mcp,
    solr_search_snippets: str,
    solr_search_fragsize: str,
    solr_search_hl: Optional[str] = None,
) -> Dict:
    """Validate and save the highlighting settings.

    Args:
        mcp: SolrSearchServer instance
        solr_search_snippets: Maximum number of highlighted snippets
        solr_search_fragsize: Maximum number of characters in a snippet
        solr_search_hl: "true" or "false"; unchanged when omitted

    Returns:
        The form description; per-field errors are listed when invalid
    """
    form = HighlightForm(mcp.option_store)
    if solr_search_hl is None:
        solr_search_hl = form.values.get(HL_OPTION) or DEFAULT_OPTIONS[HL_OPTION]
    data = {
        "solr_search_hl": solr_search_hl,
        "solr_search_snippets": solr_search_snippets,
        "solr_search_fragsize": solr_search_fragsize,
    }
    if form.is_valid(data):
        form.save()
    return form.as_dict()

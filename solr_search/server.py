"""MCP server exposing the Solr search helpers."""

import argparse
import functools
import inspect
import os
import sys
from typing import Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from solr_search import __version__
from solr_search.config import DEFAULT_RESULTS_URL, SolrSearchConfig
from solr_search.exceptions import SolrSearchError
from solr_search.facets.labels import MappingFieldLabelResolver
from solr_search.facets.providers import InMemoryCollectionTreeProvider
from solr_search.interfaces import CollectionTreeProvider, FieldLabelResolver, OptionStore
from solr_search.settings.highlight import install_default_options
from solr_search.settings.stores import InMemoryOptionStore, JsonFileOptionStore
from solr_search.solr.client import SolrSearchClient
from solr_search.tools import TOOLS_DEFINITION


class SolrSearchServer:
    """Model Context Protocol server for faceted Solr search."""

    def __init__(
        self,
        config: SolrSearchConfig,
        mcp_port: int = int(os.getenv("MCP_PORT", 8081)),
        option_store: Optional[OptionStore] = None,
        label_resolver: Optional[FieldLabelResolver] = None,
        collection_provider: Optional[CollectionTreeProvider] = None,
        search_client: Optional[SolrSearchClient] = None,
        stdio: bool = False,
    ):
        """Initialize the server.

        Args:
            config: Search configuration
            mcp_port: Port for MCP server
            option_store: Optional option store, defaults to the configured
                options file or an in-memory store
            label_resolver: Optional field label resolver, defaults to the
                configured field labels
            collection_provider: Optional collection tree provider, defaults
                to the configured collection tree file
            search_client: Optional pre-configured search client
            stdio: Use stdio instead of HTTP
        """
        self.config = config
        self.port = mcp_port
        self.stdio = stdio

        self.option_store = option_store or self.__create_option_store()
        install_default_options(self.option_store)
        self.label_resolver = label_resolver or MappingFieldLabelResolver(config.field_labels)
        self.collection_provider = collection_provider or self.__create_collection_provider()
        self.search_client = search_client or SolrSearchClient(config, self.option_store)

        self.__setup_server()

    def __create_option_store(self) -> OptionStore:
        if self.config.options_file:
            return JsonFileOptionStore(self.config.options_file)
        logger.warning("No options file configured, settings will not persist")
        return InMemoryOptionStore()

    def __create_collection_provider(self) -> CollectionTreeProvider:
        if self.config.collection_tree_file:
            return InMemoryCollectionTreeProvider.from_file(self.config.collection_tree_file)
        return InMemoryCollectionTreeProvider([])

    def __setup_server(self):
        """Set up the MCP server and register tools."""
        logger.info(f"Server starting on port {self.port}")

        self.mcp = FastMCP(
            name="Solr Search Server",
            instructions="""This server provides faceted search tools for a Solr index:
- Search with active facets and highlighting
- Build URLs that add or remove facets
- Render the collection facet hierarchy
- Read and save highlighting settings""",
            port=self.port,
        )
        self.__setup_tools()

    def __wrap_tool(self, tool):
        """Bind a tool to this server.

        The server argument is dropped from the exposed signature.
        """

        @functools.wraps(tool)
        async def wrapper(*args, **kwargs):
            return await tool(self, *args, **kwargs)

        signature = inspect.signature(tool)
        wrapper.__signature__ = signature.replace(
            parameters=list(signature.parameters.values())[1:]
        )
        wrapper.__name__ = tool._tool_name
        return wrapper

    def __setup_tools(self):
        """Register MCP tools."""
        for tool in TOOLS_DEFINITION:
            self.mcp.tool(name=tool._tool_name, description=tool.__doc__)(self.__wrap_tool(tool))

    def run(self) -> None:
        """Run the server."""
        logger.info(f"Starting Solr search server {__version__}...")
        if self.stdio:
            self.mcp.run("stdio")
        else:
            self.mcp.run("sse")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Solr Search Server")
    parser.add_argument("--config", help="JSON configuration file", default=os.getenv("SOLR_SEARCH_CONFIG"))
    parser.add_argument("--mcp-port", type=int, help="MCP server port", default=int(os.getenv("MCP_PORT", 8081)))
    parser.add_argument("--solr-base-url", help="Solr base URL", default=os.getenv("SOLR_BASE_URL", "http://localhost:8983/solr"))
    parser.add_argument("--default-collection", help="Solr collection to search", default=os.getenv("DEFAULT_COLLECTION", "default"))
    parser.add_argument("--connection-timeout", type=int, help="Connection timeout in seconds", default=int(os.getenv("CONNECTION_TIMEOUT", 10)))
    parser.add_argument("--results-url", help="Search results route", default=os.getenv("RESULTS_URL", DEFAULT_RESULTS_URL))
    parser.add_argument("--stdio", help="Use stdio instead of HTTP", action="store_true")

    args = parser.parse_args()

    try:
        if args.config:
            config = SolrSearchConfig.load(args.config)
        else:
            config = SolrSearchConfig(
                solr_base_url=args.solr_base_url,
                default_collection=args.default_collection,
                connection_timeout=args.connection_timeout,
                results_url=args.results_url,
            )
        server = SolrSearchServer(config, mcp_port=args.mcp_port, stdio=args.stdio)
    except SolrSearchError as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)

    server.run()


if __name__ == "__main__":
    main()

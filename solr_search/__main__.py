"""Main entry point for the Solr search server."""

from solr_search.server import main

if __name__ == "__main__":
    main()

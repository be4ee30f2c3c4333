"""Configuration for the Solr search helpers."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from solr_search.exceptions import ConfigurationError

DEFAULT_RESULTS_URL = "/solr-search"


def _configuration_error(error: ValidationError) -> ConfigurationError:
    messages = "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )
    return ConfigurationError(f"Invalid configuration: {messages}")


class SolrSearchConfig(BaseModel):
    """Configuration for Solr search.

    Attributes:
        solr_base_url: Base URL of the Solr instance
        default_collection: Collection (core) queried by the search client
        connection_timeout: Connection timeout in seconds
        results_url: Route of the search results page facet URLs point at
        facet_fields: Fields to request facet counts for
        field_labels: Facet slug to human readable label
        options_file: JSON file backing the option store
        collection_tree_file: JSON file with flat collection tree records
    """

    solr_base_url: str
    default_collection: str = "default"
    connection_timeout: int = 10
    results_url: str = DEFAULT_RESULTS_URL
    facet_fields: List[str] = []
    field_labels: Dict[str, str] = {}
    options_file: Optional[str] = None
    collection_tree_file: Optional[str] = None

    def __init__(self, **data: Any):
        if not data.get("solr_base_url"):
            raise ConfigurationError("solr_base_url is required")
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "SolrSearchConfig":
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @field_validator("solr_base_url")
    @classmethod
    def validate_solr_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Solr base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("connection_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Connection timeout must be positive")
        return v

    @field_validator("results_url")
    @classmethod
    def validate_results_url(cls, v: str) -> str:
        if not v:
            raise ValueError("results_url must not be empty")
        return v

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "SolrSearchConfig":
        """Load configuration from a JSON file.

        Args:
            config_path: Path to JSON config file

        Returns:
            SolrSearchConfig instance

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        try:
            with open(config_path) as f:
                config_dict = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {str(e)}")

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration file must contain a JSON object")

        logger.debug(f"Loaded configuration from {config_path}")
        return cls(**config_dict)

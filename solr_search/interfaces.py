"""Interfaces for the host-provided collaborators."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class FieldLabelResolver(ABC):
    """Interface for looking up search field labels."""

    @abstractmethod
    def get_label(self, slug: str) -> str:
        """Get the human-readable label for a field slug.

        Args:
            slug: Field slug, without any type suffix

        Returns:
            The field label

        Raises:
            FieldNotFoundError: If no field is defined for the slug
        """
        pass


class CollectionTreeProvider(ABC):
    """Interface for hierarchical collection data."""

    @abstractmethod
    def get_root_collections(self) -> List[Dict[str, Any]]:
        """List the collections that have no parent.

        Returns:
            List of mappings with at least ``id`` and ``name``
        """
        pass

    @abstractmethod
    def get_descendant_tree(self, collection_id: Any) -> List[Dict[str, Any]]:
        """Get the nested children of a collection.

        Args:
            collection_id: Id of the collection

        Returns:
            List of mappings with ``name`` and ``children``, recursively.
            Empty when the collection has no children.
        """
        pass


class OptionStore(ABC):
    """Interface for a global key/value option store."""

    @abstractmethod
    def get_option(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Read an option.

        Args:
            name: Option key
            default: Value returned when the option is not set

        Raises:
            OptionStoreError: If the store cannot be read
        """
        pass

    @abstractmethod
    def set_option(self, name: str, value: str) -> None:
        """Write an option.

        Args:
            name: Option key
            value: Option value

        Raises:
            OptionStoreError: If the store cannot be written
        """
        pass

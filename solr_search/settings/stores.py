"""Option store implementations."""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from loguru import logger

from solr_search.exceptions import OptionStoreError
from solr_search.interfaces import OptionStore


class InMemoryOptionStore(OptionStore):
    """Option store kept in a dictionary."""

    def __init__(self, options: Optional[Mapping[str, str]] = None):
        self.options: Dict[str, str] = dict(options or {})

    def get_option(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.options.get(name, default)

    def set_option(self, name: str, value: str) -> None:
        self.options[name] = str(value)


class JsonFileOptionStore(OptionStore):
    """Option store persisted as a JSON object on disk.

    The file is read on first access and rewritten in full on every write.
    A missing file is treated as an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._options: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._options is not None:
            return self._options

        if not self.path.exists():
            self._options = {}
            return self._options

        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise OptionStoreError(f"Invalid JSON in option file {self.path}: {str(e)}")
        except OSError as e:
            raise OptionStoreError(f"Failed to read option file {self.path}: {str(e)}")

        if not isinstance(data, dict):
            raise OptionStoreError(f"Option file {self.path} must contain a JSON object")

        self._options = {str(k): str(v) for k, v in data.items()}
        return self._options

    def get_option(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._load().get(name, default)

    def set_option(self, name: str, value: str) -> None:
        options = dict(self._load())
        options[name] = str(value)

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w") as f:
                json.dump(options, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error(f"Failed to write option {name}: {str(e)}")
            raise OptionStoreError(f"Failed to write option file {self.path}: {str(e)}")

        self._options = options

"""Highlight settings and the form that edits them."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from solr_search.exceptions import SettingsValidationError
from solr_search.interfaces import OptionStore

HL_OPTION = "solr_search_hl"
SNIPPETS_OPTION = "solr_search_snippets"
FRAGSIZE_OPTION = "solr_search_fragsize"
OPTION_NAMES = (HL_OPTION, SNIPPETS_OPTION, FRAGSIZE_OPTION)

DEFAULT_OPTIONS = {
    HL_OPTION: "true",
    SNIPPETS_OPTION: "1",
    FRAGSIZE_OPTION: "250",
}

NOT_INT_MESSAGE = "Must be an integer."
IS_EMPTY_MESSAGE = "Value is required and can't be empty"

_INTEGER = re.compile(r"^[+-]?\d+$")
_HL_CHOICES = ("true", "false")


def _integer(value: Any) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("is_empty", IS_EMPTY_MESSAGE)
    # bool is an int subclass
    if isinstance(value, bool):
        raise PydanticCustomError("not_int", NOT_INT_MESSAGE)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER.match(value.strip()):
        return int(value.strip())
    raise PydanticCustomError("not_int", NOT_INT_MESSAGE)


class HighlightSettings(BaseModel):
    """Search result highlighting options."""

    solr_search_hl: str = DEFAULT_OPTIONS[HL_OPTION]
    solr_search_snippets: int
    solr_search_fragsize: int

    @field_validator("solr_search_hl", mode="before")
    @classmethod
    def validate_hl(cls, v: Any) -> str:
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, str) and v.strip().lower() in _HL_CHOICES:
            return v.strip().lower()
        raise PydanticCustomError(
            "not_a_choice", "'{value}' is not a valid choice", {"value": v}
        )

    @field_validator("solr_search_snippets", "solr_search_fragsize", mode="before")
    @classmethod
    def validate_integer(cls, v: Any) -> int:
        return _integer(v)

    @property
    def enabled(self) -> bool:
        return self.solr_search_hl == "true"

    @classmethod
    def from_store(cls, store: OptionStore) -> "HighlightSettings":
        """Read the settings from an option store, falling back to defaults.

        Raises:
            SettingsValidationError: If a stored value is invalid
        """
        values = {
            name: store.get_option(name, DEFAULT_OPTIONS[name]) for name in OPTION_NAMES
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise SettingsValidationError(_collect_errors(e)) from e

    def to_options(self) -> Dict[str, str]:
        """Option values as stored by the option store."""
        return {
            HL_OPTION: self.solr_search_hl,
            SNIPPETS_OPTION: str(self.solr_search_snippets),
            FRAGSIZE_OPTION: str(self.solr_search_fragsize),
        }

    def to_solr_params(self) -> Dict[str, Any]:
        """Solr highlighting request parameters, empty when disabled."""
        if not self.enabled:
            return {}
        return {
            "hl": "true",
            "hl.snippets": self.solr_search_snippets,
            "hl.fragsize": self.solr_search_fragsize,
        }


def _collect_errors(error: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for item in error.errors():
        name = str(item["loc"][0]) if item["loc"] else "__all__"
        message = IS_EMPTY_MESSAGE if item["type"] == "missing" else item["msg"]
        errors.setdefault(name, []).append(message)
    return errors


def install_default_options(store: OptionStore) -> None:
    """Set the default highlight options that are not set yet."""
    for name, value in DEFAULT_OPTIONS.items():
        if store.get_option(name) is None:
            store.set_option(name, value)


@dataclass(frozen=True)
class FormField:
    """A declared form element."""

    name: str
    widget: str
    label: str
    description: str = ""
    choices: Optional[Tuple[Tuple[str, str], ...]] = None
    size: Optional[int] = None
    required: bool = False


class HighlightForm:
    """Admin form for the highlighting options.

    Values are read from the option store when the form is built;
    ``is_valid`` checks a submission and ``save`` writes it back.
    """

    fields = (
        FormField(
            name=HL_OPTION,
            widget="select",
            label="Enable Highlighting",
            description="Enable/Disable highlighting matches in Solr fields.",
            choices=(("true", "True"), ("false", "False")),
        ),
        FormField(
            name=SNIPPETS_OPTION,
            widget="text",
            label="Number of Snippets",
            description="The maximum number of highlighted snippets to generate.",
            size=40,
            required=True,
        ),
        FormField(
            name=FRAGSIZE_OPTION,
            widget="text",
            label="Snippet Length",
            description="The maximum number of characters to display in a snippet.",
            size=40,
            required=True,
        ),
        FormField(name="submit", widget="submit", label="Submit"),
    )

    display_groups = {
        "fields": OPTION_NAMES,
        "submit_button": ("submit",),
    }

    def __init__(self, store: OptionStore):
        self.store = store
        self.values: Dict[str, Optional[str]] = {
            name: store.get_option(name) for name in OPTION_NAMES
        }
        self.errors: Dict[str, List[str]] = {}
        self.settings: Optional[HighlightSettings] = None

    def field(self, name: str) -> FormField:
        for form_field in self.fields:
            if form_field.name == name:
                return form_field
        raise KeyError(name)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        """Validate a submission, keeping the submitted values for redisplay."""
        submitted = {name: data[name] for name in OPTION_NAMES if name in data}
        self.values.update(
            {name: None if value is None else str(value) for name, value in submitted.items()}
        )
        self.settings = None
        self.errors = {}

        try:
            self.settings = HighlightSettings(**submitted)
        except ValidationError as e:
            self.errors = _collect_errors(e)
            logger.debug(f"Highlight settings rejected: {self.errors}")
            return False
        return True

    def save(self, data: Optional[Mapping[str, Any]] = None) -> HighlightSettings:
        """Write the validated settings to the option store.

        Args:
            data: Submission to validate first; if omitted the result of the
                last ``is_valid`` call is saved

        Raises:
            SettingsValidationError: If the submission is invalid
        """
        if data is not None and not self.is_valid(data):
            raise SettingsValidationError(self.errors)
        if self.settings is None:
            raise SettingsValidationError(self.errors, "Form has no valid submission to save")

        for name, value in self.settings.to_options().items():
            self.store.set_option(name, value)
        logger.info(f"Saved highlight settings: {self.settings.to_options()}")
        return self.settings

    def as_dict(self) -> Dict[str, Any]:
        """Describe the form's fields, current values and errors."""
        return {
            "fields": [
                {
                    "name": f.name,
                    "widget": f.widget,
                    "label": f.label,
                    "description": f.description,
                    "choices": dict(f.choices) if f.choices else None,
                    "size": f.size,
                    "required": f.required,
                    "value": self.values.get(f.name),
                    "errors": self.errors.get(f.name, []),
                }
                for f in self.fields
            ],
            "display_groups": {k: list(v) for k, v in self.display_groups.items()},
        }

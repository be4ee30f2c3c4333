"""Unit tests for the highlight settings form."""

import pytest
from pydantic import ValidationError

from solr_search.exceptions import SettingsValidationError
from solr_search.settings.highlight import (
    DEFAULT_OPTIONS,
    IS_EMPTY_MESSAGE,
    NOT_INT_MESSAGE,
    HighlightForm,
    HighlightSettings,
    install_default_options,
)
from solr_search.settings.stores import InMemoryOptionStore


@pytest.fixture
def valid_submission():
    return {
        "solr_search_hl": "false",
        "solr_search_snippets": "3",
        "solr_search_fragsize": "120",
    }


class TestHighlightSettings:
    """Test cases for HighlightSettings."""

    def test_integer_strings(self):
        settings = HighlightSettings(
            solr_search_hl="true", solr_search_snippets=" 2 ", solr_search_fragsize="-5"
        )
        assert settings.solr_search_snippets == 2
        assert settings.solr_search_fragsize == -5
        assert settings.enabled

    @pytest.mark.parametrize("value", ["abc", "1.5", "2e3", True, 1.0, "0x10"])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError) as exc_info:
            HighlightSettings(solr_search_snippets=value, solr_search_fragsize=10)
        assert NOT_INT_MESSAGE in str(exc_info.value)

    def test_hl_choices(self):
        assert HighlightSettings(
            solr_search_hl="False", solr_search_snippets=1, solr_search_fragsize=1
        ).solr_search_hl == "false"
        assert HighlightSettings(
            solr_search_hl=True, solr_search_snippets=1, solr_search_fragsize=1
        ).solr_search_hl == "true"

    def test_to_options(self):
        settings = HighlightSettings(
            solr_search_hl="true", solr_search_snippets=3, solr_search_fragsize=100
        )
        assert settings.to_options() == {
            "solr_search_hl": "true",
            "solr_search_snippets": "3",
            "solr_search_fragsize": "100",
        }

    def test_to_solr_params(self):
        settings = HighlightSettings(
            solr_search_hl="true", solr_search_snippets=3, solr_search_fragsize=100
        )
        assert settings.to_solr_params() == {
            "hl": "true",
            "hl.snippets": 3,
            "hl.fragsize": 100,
        }

    def test_to_solr_params_disabled(self):
        settings = HighlightSettings(
            solr_search_hl="false", solr_search_snippets=3, solr_search_fragsize=100
        )
        assert settings.to_solr_params() == {}

    def test_from_store_defaults(self):
        settings = HighlightSettings.from_store(InMemoryOptionStore())
        assert settings.to_options() == DEFAULT_OPTIONS

    def test_from_store_invalid_value(self):
        store = InMemoryOptionStore({"solr_search_snippets": "many"})
        with pytest.raises(SettingsValidationError) as exc_info:
            HighlightSettings.from_store(store)
        assert exc_info.value.errors == {"solr_search_snippets": [NOT_INT_MESSAGE]}


def test_install_default_options_keeps_existing():
    store = InMemoryOptionStore({"solr_search_snippets": "5"})
    install_default_options(store)
    assert store.options == {
        "solr_search_hl": "true",
        "solr_search_snippets": "5",
        "solr_search_fragsize": "250",
    }


class TestHighlightForm:
    """Test cases for HighlightForm."""

    def test_fields_declared(self, option_store):
        form = HighlightForm(option_store)
        assert [f.name for f in form.fields] == [
            "solr_search_hl",
            "solr_search_snippets",
            "solr_search_fragsize",
            "submit",
        ]
        hl = form.field("solr_search_hl")
        assert hl.widget == "select"
        assert hl.label == "Enable Highlighting"
        assert dict(hl.choices) == {"true": "True", "false": "False"}
        assert not hl.required

        snippets = form.field("solr_search_snippets")
        assert snippets.widget == "text"
        assert snippets.label == "Number of Snippets"
        assert snippets.size == 40
        assert snippets.required
        assert form.field("solr_search_fragsize").label == "Snippet Length"
        assert form.display_groups == {
            "fields": ("solr_search_hl", "solr_search_snippets", "solr_search_fragsize"),
            "submit_button": ("submit",),
        }

    def test_unknown_field(self, option_store):
        with pytest.raises(KeyError):
            HighlightForm(option_store).field("nope")

    def test_values_read_from_store(self, option_store):
        option_store.set_option("solr_search_fragsize", "90")
        form = HighlightForm(option_store)
        assert form.values == {
            "solr_search_hl": "true",
            "solr_search_snippets": "1",
            "solr_search_fragsize": "90",
        }

    def test_valid_submission_saved(self, option_store, valid_submission):
        form = HighlightForm(option_store)
        assert form.is_valid(valid_submission)
        assert form.errors == {}

        settings = form.save()

        assert settings.solr_search_snippets == 3
        assert option_store.options == valid_submission

    def test_save_with_data(self, option_store, valid_submission):
        HighlightForm(option_store).save(valid_submission)
        assert option_store.get_option("solr_search_fragsize") == "120"

    def test_invalid_integer(self, option_store, valid_submission):
        form = HighlightForm(option_store)
        valid_submission["solr_search_snippets"] = "three"

        assert not form.is_valid(valid_submission)
        assert form.errors == {"solr_search_snippets": [NOT_INT_MESSAGE]}
        assert form.values["solr_search_snippets"] == "three"

    def test_required_fields(self, option_store):
        form = HighlightForm(option_store)
        assert not form.is_valid({"solr_search_hl": "true", "solr_search_snippets": ""})
        assert form.errors == {
            "solr_search_snippets": [IS_EMPTY_MESSAGE],
            "solr_search_fragsize": [IS_EMPTY_MESSAGE],
        }

    def test_invalid_choice(self, option_store, valid_submission):
        form = HighlightForm(option_store)
        valid_submission["solr_search_hl"] = "maybe"
        assert not form.is_valid(valid_submission)
        assert form.errors == {"solr_search_hl": ["'maybe' is not a valid choice"]}

    def test_invalid_submission_not_saved(self, option_store, valid_submission):
        form = HighlightForm(option_store)
        valid_submission["solr_search_fragsize"] = "1.5"

        with pytest.raises(SettingsValidationError) as exc_info:
            form.save(valid_submission)

        assert exc_info.value.errors == {"solr_search_fragsize": [NOT_INT_MESSAGE]}
        assert option_store.options == DEFAULT_OPTIONS

    def test_save_without_submission(self, option_store):
        with pytest.raises(SettingsValidationError, match="no valid submission"):
            HighlightForm(option_store).save()

    def test_as_dict(self, option_store):
        form = HighlightForm(option_store)
        form.is_valid({"solr_search_snippets": "x", "solr_search_fragsize": "10"})
        description = form.as_dict()

        fields = {f["name"]: f for f in description["fields"]}
        assert fields["solr_search_snippets"]["value"] == "x"
        assert fields["solr_search_snippets"]["errors"] == [NOT_INT_MESSAGE]
        assert fields["solr_search_hl"]["choices"] == {"true": "True", "false": "False"}
        assert fields["solr_search_fragsize"]["errors"] == []
        assert description["display_groups"]["submit_button"] == ["submit"]

"""Unit tests for input blocks."""

from datetime import date, datetime
from unittest.mock import patch

import pytest
import pytz

from block_kit_builder import Input

NOW_PATH = "block_kit_builder.services.block_builder.input._now"


class TestText:
    """Tests for Input.text."""

    def test_minimal(self):
        assert Input.text("Name", "Type here") == {
            "type": "input",
            "element": {
                "type": "plain_text_input",
                "placeholder": {"type": "plain_text", "text": "Type here"},
                "multiline": False,
            },
            "label": {"type": "plain_text", "text": "Name", "emoji": True},
            "optional": False,
            "dispatch_action": False,
        }

    def test_optional_fields(self):
        block = Input.text(
            "Name",
            "Type here",
            min_length=2,
            max_length=20,
            block_id="name_block",
            action_id="name_input",
            optional=True,
            initial_value="Bob",
            multiline=True,
        )
        element = block["element"]
        assert element["min_length"] == 2
        assert element["max_length"] == 20
        assert element["action_id"] == "name_input"
        assert element["initial_value"] == "Bob"
        assert element["multiline"] is True
        assert block["block_id"] == "name_block"
        assert block["optional"] is True

    def test_dispatch_on_enter(self):
        block = Input.text("Search", "Query", dispatch_action=True)
        assert block["dispatch_action"] is True
        assert block["element"]["dispatch_action_config"] == {
            "trigger_actions_on": ["on_enter_pressed"]
        }

    def test_unset_fields_are_absent(self):
        block = Input.text("Name", "Type here")
        assert "block_id" not in block
        assert {
            "action_id",
            "initial_value",
            "min_length",
            "max_length",
            "dispatch_action_config",
        }.isdisjoint(block["element"])


class TestConversationSelect:
    """Tests for Input.conversation_select."""

    def test_single(self):
        element = Input.conversation_select(
            "Channel", "Pick", initial_conversations="C1"
        )["element"]
        assert element["type"] == "conversations_select"
        assert element["initial_conversation"] == "C1"
        assert "initial_conversations" not in element
        assert element["filter"] == {
            "include": ["public", "private"],
            "exclude_bot_users": True,
            "exclude_external_shared_channels": True,
        }

    def test_multi(self):
        element = Input.conversation_select(
            "Channels",
            "Pick",
            multi=True,
            initial_conversations=["C1", "C2"],
            filter=["im", "mpim"],
            exclude_external_shared_channels=False,
        )["element"]
        assert element["type"] == "multi_conversations_select"
        assert element["initial_conversations"] == ["C1", "C2"]
        assert "initial_conversation" not in element
        assert element["filter"]["include"] == ["im", "mpim"]
        assert element["filter"]["exclude_external_shared_channels"] is False

    def test_no_initial(self):
        element = Input.conversation_select("Channel", "Pick")["element"]
        assert "initial_conversation" not in element


class TestStaticSelect:
    """Tests for Input.static_select."""

    def test_initial_option(self, options):
        element = Input.static_select("Pick", "Choose", options, initial_options="2")[
            "element"
        ]
        assert element["type"] == "static_select"
        assert element["initial_option"] == {
            "text": {"type": "plain_text", "text": "B", "emoji": True},
            "value": "2",
        }

    def test_initial_option_matches_numeric_value(self, numeric_options):
        element = Input.static_select(
            "Pick", "Choose", numeric_options, initial_options="2"
        )["element"]
        assert element["initial_option"]["value"] == 2

    def test_unknown_initial_option(self, options):
        element = Input.static_select("Pick", "Choose", options, initial_options="9")[
            "element"
        ]
        assert "initial_option" not in element

    def test_multi(self, options):
        element = Input.static_select(
            "Pick",
            "Choose",
            options,
            multi=True,
            initial_options=["2", "1"],
            max_selected_items=2,
            action_id="pick",
        )["element"]
        assert element["type"] == "multi_static_select"
        assert [o["value"] for o in element["initial_options"]] == ["1", "2"]
        assert element["max_selected_items"] == 2
        assert element["action_id"] == "pick"
        assert "initial_option" not in element

    def test_single_drops_max_selected_items(self, options):
        element = Input.static_select(
            "Pick", "Choose", options, max_selected_items=2
        )["element"]
        assert element["type"] == "static_select"
        assert "max_selected_items" not in element

    def test_multi_with_scalar_initial(self, options):
        element = Input.static_select(
            "Pick", "Choose", options, multi=True, initial_options="1"
        )["element"]
        assert "initial_options" not in element

    def test_groups(self, grouped_options):
        element = Input.static_select(
            "Pick", "Choose", grouped_options, use_group=True, initial_options="b"
        )["element"]
        assert "options" not in element
        assert [g["label"]["text"] for g in element["option_groups"]] == [
            "Letters",
            "Digits",
        ]
        assert element["initial_option"] == {
            "text": {"type": "plain_text", "text": "B"},
            "value": "b",
        }


class TestRadioSelect:
    """Tests for Input.radio_select."""

    def test_initial_option(self, options):
        block = Input.radio_select("Pick", options, initial_option="2", action_id="r")
        element = block["element"]
        assert element["type"] == "radio_buttons"
        assert element["initial_option"]["value"] == "2"
        assert element["options"][0] == {
            "text": {"type": "plain_text", "text": "A"},
            "value": "1",
        }
        assert element["action_id"] == "r"

    def test_exact_match_only(self, numeric_options):
        """Radio buttons do not match "2" against 2, unlike the static selects."""
        radio = Input.radio_select("Pick", numeric_options, initial_option="2")
        select = Input.static_select(
            "Pick", "Choose", numeric_options, initial_options="2"
        )
        assert "initial_option" not in radio["element"]
        assert "initial_option" in select["element"]

    def test_same_type_matches(self, numeric_options):
        radio = Input.radio_select("Pick", numeric_options, initial_option=2)
        assert radio["element"]["initial_option"]["value"] == 2


class TestCheckboxes:
    """Tests for Input.checkboxes."""

    def test_initial_options(self, options):
        element = Input.checkboxes(options, initial_options=["1"], label="Pick")[
            "element"
        ]
        assert element["initial_options"] == [
            {"text": {"type": "mrkdwn", "text": "A"}, "value": "1"}
        ]

    def test_description(self):
        element = Input.checkboxes(
            [{"text": "A", "value": "1", "description": "first"}], label="Pick"
        )["element"]
        assert element["options"] == [
            {
                "text": {"type": "mrkdwn", "text": "A"},
                "value": "1",
                "description": {"type": "mrkdwn", "text": "first"},
            }
        ]
        assert "initial_options" not in element

    def test_string_initial_is_one_value(self, options):
        """A bare string selects the option with that exact value, not substrings of it."""
        element = Input.checkboxes(options, initial_options="12", label="Pick")["element"]
        assert "initial_options" not in element
        element = Input.checkboxes(options, initial_options="1", label="Pick")["element"]
        assert [o["value"] for o in element["initial_options"]] == ["1"]

    def test_string_initial_with_numeric_values(self, numeric_options):
        element = Input.checkboxes(numeric_options, initial_options="1", label="Pick")[
            "element"
        ]
        assert "initial_options" not in element

    def test_wrapped_by_default(self, options):
        block = Input.checkboxes(options, label="Pick", block_id="cb", optional=True)
        assert block["type"] == "input"
        assert block["block_id"] == "cb"
        assert block["optional"] is True

    def test_bare_element(self, options):
        element = Input.checkboxes(options, action_id="cb", as_input=False)
        assert element["type"] == "checkboxes"
        assert element["action_id"] == "cb"
        assert "label" not in element


class TestDatepicker:
    """Tests for Input.datepicker."""

    def test_explicit_date(self):
        element = Input.datepicker("When", "Pick a date", initial_date="2024-02-29")[
            "element"
        ]
        assert element == {
            "type": "datepicker",
            "placeholder": {"type": "plain_text", "text": "Pick a date", "emoji": True},
            "initial_date": "2024-02-29",
        }

    def test_defaults_to_today(self):
        element = Input.datepicker("When", "Pick a date")["element"]
        assert element["initial_date"] == date.today().strftime("%Y-%m-%d")

    def test_defaults_to_today_in_timezone(self):
        tz = "Pacific/Kiritimati"
        element = Input.datepicker("When", "Pick a date", timezone=tz)["element"]
        assert element["initial_date"] == datetime.now(pytz.timezone(tz)).strftime(
            "%Y-%m-%d"
        )

    def test_unknown_timezone_raises(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            Input.datepicker("When", "Pick a date", timezone="Nowhere/Town")


class TestTimepicker:
    """Tests for Input.timepicker."""

    @pytest.mark.parametrize(
        "initial, expected",
        [
            ("02:07 pm", "14:07"),
            ("02:07 PM", "14:07"),
            ("11:30 am", "11:30"),
            ("12:00 am", "00:00"),
            ("18:45", "18:45"),
        ],
    )
    def test_explicit_time_is_reformatted(self, initial, expected):
        element = Input.timepicker("At", "Pick a time", initial_time=initial)["element"]
        assert element["initial_time"] == expected

    def test_unparsed_time_passes_through(self):
        element = Input.timepicker("At", "Pick a time", initial_time="noon")["element"]
        assert element["initial_time"] == "noon"

    @pytest.mark.parametrize(
        "now, expected",
        [
            (datetime(2024, 1, 1, 10, 7), "10:10"),
            (datetime(2024, 1, 1, 10, 10), "10:15"),
            (datetime(2024, 1, 1, 23, 58), "00:00"),
        ],
    )
    def test_defaults_to_next_five_minutes(self, now, expected):
        with patch(NOW_PATH, return_value=now) as mock_now:
            element = Input.timepicker("At", "Pick a time", timezone="Europe/Paris")[
                "element"
            ]
        mock_now.assert_called_once_with("Europe/Paris")
        assert element["initial_time"] == expected


class TestTimezonePicker:
    """Tests for Input.timezone_picker."""

    def test_grouped_reference_table(self):
        element = Input.timezone_picker(
            "Timezone", "Pick", initial_timezone="Europe/Paris"
        )["element"]
        assert element["type"] == "static_select"
        assert "option_groups" in element
        assert element["initial_option"] == {
            "text": {"type": "plain_text", "text": "Europe/Paris"},
            "value": "Europe/Paris",
        }

    def test_custom_table(self):
        table = [{"zoneName": f"Zone/City{i:03d}"} for i in range(150)]
        block = Input.timezone_picker(
            "Timezone", "Pick", block_id="tz", timezones=table
        )
        groups = block["element"]["option_groups"]
        assert [g["label"]["text"] for g in groups] == ["Zone-1", "Zone-2"]
        assert [len(g["options"]) for g in groups] == [100, 50]
        assert block["block_id"] == "tz"
        assert "initial_option" not in block["element"]


class TestExternalSelect:
    """Tests for Input.external_select."""

    def test_single(self):
        element = Input.external_select(
            "Ticket", "Search", action_id="ticket", minimum_query_length=3
        )["element"]
        assert element == {
            "type": "external_select",
            "placeholder": {"type": "plain_text", "text": "Search"},
            "action_id": "ticket",
            "min_query_length": 3,
        }

    def test_multi_forwards_initial_options(self):
        initial = [{"text": {"type": "plain_text", "text": "T-1"}, "value": "1"}]
        element = Input.external_select(
            "Tickets",
            "Search",
            multi=True,
            initial_options=initial,
            max_selected_items=5,
            focus_on_load=True,
        )["element"]
        assert element["type"] == "multi_external_select"
        assert element["initial_options"] == initial
        assert element["max_selected_items"] == 5
        assert element["focus_on_load"] is True


def test_optional_flag_none_means_required():
    assert Input.text("Name", "Type", optional=None)["optional"] is False

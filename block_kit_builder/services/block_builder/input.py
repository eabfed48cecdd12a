"""
Form inputs.

Every builder returns an `input` block wrapping its element, except `checkboxes`
with `as_input=False` which returns the bare element for use in an actions block.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Union

import pytz

from block_kit_builder.schemas.blocks import InputBlock
from block_kit_builder.schemas.composition import (
    ConversationFilter,
    DispatchActionConfig,
    OptionObject,
    mrkdwn,
    plain_text,
)
from block_kit_builder.schemas.elements import (
    CheckboxesElement,
    ConversationsSelectElement,
    DatepickerElement,
    ExternalSelectElement,
    MultiConversationsSelectElement,
    MultiExternalSelectElement,
    MultiStaticSelectElement,
    PlainTextInputElement,
    RadioButtonsElement,
    StaticSelectElement,
    TimepickerElement,
)
from block_kit_builder.services.options.main import (
    build_options,
    resolve_initial_option,
)
from block_kit_builder.services.settings.main import settings
from block_kit_builder.services.timezones.main import group_timezones
from block_kit_builder.utils.logger import get_logger

logger = get_logger(__name__)

TIME_FORMATS = ("%I:%M %p", "%H:%M")


def _now(timezone: Optional[str] = None) -> datetime:
    """Current time in `timezone`, the configured default, or local time."""
    timezone = timezone or settings.DEFAULT_TIMEZONE
    if timezone:
        return datetime.now(pytz.timezone(timezone))
    return datetime.now()


def _parse_time(value: str) -> str:
    """Reformat a `hh:mm am/pm` (or 24 hour) time to `HH:MM`."""
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).strftime("%H:%M")
        except ValueError:
            continue
    logger.debug("initial_time_not_parsed", initial_time=value)
    return value


class Input:
    """Input blocks for modals and messages."""

    @staticmethod
    def _input(
        element: Any,
        label: Optional[str],
        block_id: Optional[str] = None,
        optional: Optional[bool] = False,
        dispatch_action: Optional[bool] = False,
    ) -> dict:
        """Wrap an element in the input envelope."""
        return InputBlock(
            element=element,
            label=plain_text(label, emoji=True),
            optional=bool(optional),
            dispatch_action=bool(dispatch_action),
            block_id=block_id or None,
        ).build()

    @staticmethod
    def text(
        label: str,
        placeholder: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        optional: bool = False,
        initial_value: Optional[str] = None,
        multiline: bool = False,
        dispatch_action: bool = False,
    ) -> dict:
        """
        Plain text input.

        :param label: input label
        :param placeholder: placeholder text
        :param min_length: minimum length of the text
        :param max_length: maximum length of the text
        :param block_id: optional block id
        :param action_id: optional action id
        :param optional: whether the input may be left empty
        :param initial_value: prefilled text
        :param multiline: multi-line input
        :param dispatch_action: trigger a block action when enter is pressed
        """
        element = PlainTextInputElement(
            placeholder=plain_text(placeholder),
            multiline=multiline,
            action_id=action_id or None,
            initial_value=initial_value or None,
            min_length=min_length or None,
            max_length=max_length or None,
            dispatch_action_config=DispatchActionConfig() if dispatch_action else None,
        )
        return Input._input(element, label, block_id, optional, dispatch_action)

    @staticmethod
    def conversation_select(
        label: str,
        placeholder: str,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        optional: bool = False,
        initial_conversations: Union[str, List[str], None] = None,
        filter: Sequence[str] = ("public", "private"),
        multi: bool = False,
        exclude_bot_users: bool = True,
        exclude_external_shared_channels: bool = True,
    ) -> dict:
        """
        Conversation select, single or multi.

        `initial_conversations` is written to `initial_conversations` for a multi
        select and to `initial_conversation` otherwise.
        """
        conversation_filter = ConversationFilter(
            include=list(filter),
            exclude_bot_users=exclude_bot_users,
            exclude_external_shared_channels=exclude_external_shared_channels,
        )
        if multi:
            element = MultiConversationsSelectElement(
                placeholder=plain_text(placeholder),
                filter=conversation_filter,
                action_id=action_id or None,
                initial_conversations=initial_conversations or None,
            )
        else:
            element = ConversationsSelectElement(
                placeholder=plain_text(placeholder),
                filter=conversation_filter,
                action_id=action_id or None,
                initial_conversation=initial_conversations or None,
            )
        return Input._input(element, label, block_id, optional)

    @staticmethod
    def static_select(
        label: str,
        placeholder: str,
        options: Sequence[Dict[str, Any]],
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        optional: bool = False,
        use_group: bool = False,
        initial_options: Union[str, List[Any], None] = None,
        multi: bool = False,
        max_selected_items: Optional[int] = None,
    ) -> dict:
        """
        Static select, single or multi, with plain options or option groups.

        :param label: input label
        :param placeholder: placeholder text
        :param options: `{text, value}` records, or `{label, options}` groups with `use_group`
        :param block_id: optional block id
        :param action_id: optional action id
        :param optional: whether the input may be left empty
        :param use_group: render `option_groups` instead of `options`
        :param initial_options: value (single) or list of values (multi) selected on load
        :param multi: allow several selections
        :param max_selected_items: selection cap, written on multi selects only;
            single selects ignore it
        """
        built = build_options(options, use_group=use_group)
        initial = resolve_initial_option(built, initial_options, use_group, multi)
        option_fields = {"option_groups" if use_group else "options": built}

        if multi:
            element = MultiStaticSelectElement(
                placeholder=plain_text(placeholder),
                action_id=action_id or None,
                initial_options=initial or None,
                max_selected_items=max_selected_items or None,
                **option_fields,
            )
        else:
            element = StaticSelectElement(
                placeholder=plain_text(placeholder),
                action_id=action_id or None,
                initial_option=initial,
                **option_fields,
            )
        return Input._input(element, label, block_id, optional)

    @staticmethod
    def radio_select(
        label: str,
        options: Sequence[Dict[str, Any]],
        initial_option: Any = None,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        optional: bool = False,
    ) -> dict:
        """
        Radio buttons.

        Unlike the static selects, the initial option is matched on the exact value:
        `"1"` does not select an option whose value is `1`.
        """
        initial = None
        if initial_option:
            initial = next(
                (
                    OptionObject(text=plain_text(o.get("text")), value=o.get("value"))
                    for o in options
                    if o.get("value") == initial_option
                ),
                None,
            )
        element = RadioButtonsElement(
            options=[
                OptionObject(text=plain_text(o.get("text")), value=o.get("value"))
                for o in options
            ],
            action_id=action_id or None,
            initial_option=initial,
        )
        return Input._input(element, label, block_id, optional)

    @staticmethod
    def checkboxes(
        options: Sequence[Dict[str, Any]],
        action_id: Optional[str] = None,
        initial_options: Optional[Sequence[Any]] = None,
        label: Optional[str] = None,
        block_id: Optional[str] = None,
        optional: bool = False,
        as_input: bool = True,
    ) -> dict:
        """
        Checkboxes.

        :param options: `{text, value, description?}` records, rendered as mrkdwn
        :param action_id: optional action id
        :param initial_options: values checked on load, matched exactly; a single string
            is taken as a one item list
        :param label: input label, required when `as_input` is set
        :param block_id: optional block id
        :param optional: whether the input may be left empty
        :param as_input: wrap in an input block, or return the bare element
        """
        initial = None
        if isinstance(initial_options, str):
            initial_options = [initial_options]
        if initial_options:
            initial = [
                OptionObject(text=mrkdwn(o.get("text")), value=o.get("value"))
                for o in options
                if o.get("value") in initial_options
            ]
        element = CheckboxesElement(
            options=[
                OptionObject(
                    text=mrkdwn(o.get("text")),
                    value=o.get("value"),
                    description=mrkdwn(o["description"]) if o.get("description") else None,
                )
                for o in options
            ],
            action_id=action_id or None,
            initial_options=initial or None,
        )
        if as_input:
            return Input._input(element, label, block_id, optional)
        return element.build()

    @staticmethod
    def datepicker(
        label: str,
        placeholder: str,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        initial_date: Optional[str] = None,
        timezone: Optional[str] = None,
        optional: bool = False,
    ) -> dict:
        """
        Date picker.

        Without `initial_date` the picker opens on today, in `timezone` when given.

        :param initial_date: `YYYY-MM-DD` date selected on load
        :param timezone: timezone name used to compute today
        """
        date = initial_date or _now(timezone).strftime("%Y-%m-%d")
        element = DatepickerElement(
            placeholder=plain_text(placeholder, emoji=True),
            action_id=action_id or None,
            initial_date=date,
        )
        return Input._input(element, label, block_id, optional)

    @staticmethod
    def timepicker(
        label: str,
        placeholder: str,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        initial_time: Optional[str] = None,
        timezone: Optional[str] = None,
        optional: bool = False,
    ) -> dict:
        """
        Time picker.

        An explicit `initial_time` (`hh:mm am/pm`) is reformatted to `HH:MM` as is.
        Without it the picker opens on the next 5 minute mark from now.
        """
        if initial_time:
            time = _parse_time(initial_time)
        else:
            now = _now(timezone)
            time = (now + timedelta(minutes=5 - now.minute % 5)).strftime("%H:%M")
        element = TimepickerElement(
            placeholder=plain_text(placeholder, emoji=True),
            action_id=action_id or None,
            initial_time=time,
        )
        return Input._input(element, label, block_id, optional)

    @staticmethod
    def timezone_picker(
        label: str,
        placeholder: str,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        initial_timezone: Optional[str] = None,
        optional: bool = False,
        timezones: Optional[Sequence[Dict[str, Any]]] = None,
    ) -> dict:
        """
        Static select of timezones grouped by region.

        :param initial_timezone: zone name selected on load
        :param timezones: `{"zoneName": ...}` records replacing the reference table
        """
        return Input.static_select(
            label=label,
            placeholder=placeholder,
            block_id=block_id,
            action_id=action_id,
            optional=optional,
            use_group=True,
            initial_options=initial_timezone,
            options=group_timezones(timezones),
        )

    @staticmethod
    def external_select(
        label: str,
        placeholder: str,
        block_id: Optional[str] = None,
        action_id: Optional[str] = None,
        optional: bool = False,
        multi: bool = False,
        minimum_query_length: Optional[int] = None,
        max_selected_items: Optional[int] = None,
        initial_options: Any = None,
        focus_on_load: bool = False,
    ) -> dict:
        """
        Select menu loading its options from the app's options endpoint.

        There is no local option list, so `initial_options` (option record(s) already
        in platform shape) is forwarded untouched.
        """
        element_class = MultiExternalSelectElement if multi else ExternalSelectElement
        element = element_class(
            placeholder=plain_text(placeholder),
            action_id=action_id or None,
            min_query_length=minimum_query_length,
            initial_options=initial_options or None,
            max_selected_items=max_selected_items or None,
            focus_on_load=focus_on_load or None,
        )
        return Input._input(element, label, block_id, optional)

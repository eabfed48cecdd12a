"""
Interactive and display elements.

`Element` is a tagged union on the `type` field, one model per element type.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field

from block_kit_builder.schemas.composition import (
    Composition,
    ConfirmObject,
    ConversationFilter,
    DispatchActionConfig,
    OptionGroupObject,
    OptionObject,
    TextObject,
)


class ButtonElement(Composition):
    type: Literal["button"] = "button"
    text: TextObject
    value: Optional[str] = None
    action_id: Optional[str] = None
    style: Optional[str] = None
    url: Optional[str] = None
    confirm: Optional[ConfirmObject] = None


class StaticSelectElement(Composition):
    type: Literal["static_select"] = "static_select"
    placeholder: TextObject
    action_id: Optional[str] = None
    options: Optional[List[OptionObject]] = None
    option_groups: Optional[List[OptionGroupObject]] = None
    initial_option: Optional[OptionObject] = None
    focus_on_load: Optional[bool] = None
    confirm: Optional[ConfirmObject] = None


class MultiStaticSelectElement(Composition):
    type: Literal["multi_static_select"] = "multi_static_select"
    placeholder: TextObject
    action_id: Optional[str] = None
    options: Optional[List[OptionObject]] = None
    option_groups: Optional[List[OptionGroupObject]] = None
    initial_options: Optional[List[OptionObject]] = None
    max_selected_items: Optional[int] = None


class UsersSelectElement(Composition):
    type: Literal["users_select"] = "users_select"
    placeholder: TextObject
    action_id: Optional[str] = None
    initial_user: Optional[str] = None
    focus_on_load: Optional[bool] = None
    confirm: Optional[ConfirmObject] = None


class ConversationsSelectElement(Composition):
    type: Literal["conversations_select"] = "conversations_select"
    placeholder: TextObject
    filter: ConversationFilter = Field(default_factory=ConversationFilter)
    action_id: Optional[str] = None
    initial_conversation: Any = None


class MultiConversationsSelectElement(Composition):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    placeholder: TextObject
    filter: ConversationFilter = Field(default_factory=ConversationFilter)
    action_id: Optional[str] = None
    initial_conversations: Any = None


class ExternalSelectElement(Composition):
    type: Literal["external_select"] = "external_select"
    placeholder: TextObject
    action_id: Optional[str] = None
    min_query_length: Optional[int] = None
    initial_options: Any = None
    max_selected_items: Optional[int] = None
    focus_on_load: Optional[bool] = None


class MultiExternalSelectElement(Composition):
    type: Literal["multi_external_select"] = "multi_external_select"
    placeholder: TextObject
    action_id: Optional[str] = None
    min_query_length: Optional[int] = None
    initial_options: Any = None
    max_selected_items: Optional[int] = None
    focus_on_load: Optional[bool] = None


class PlainTextInputElement(Composition):
    type: Literal["plain_text_input"] = "plain_text_input"
    placeholder: TextObject
    multiline: bool = False
    action_id: Optional[str] = None
    initial_value: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    dispatch_action_config: Optional[DispatchActionConfig] = None


class DatepickerElement(Composition):
    type: Literal["datepicker"] = "datepicker"
    placeholder: TextObject
    action_id: Optional[str] = None
    initial_date: Optional[str] = None


class TimepickerElement(Composition):
    type: Literal["timepicker"] = "timepicker"
    placeholder: TextObject
    action_id: Optional[str] = None
    initial_time: Optional[str] = None


class RadioButtonsElement(Composition):
    type: Literal["radio_buttons"] = "radio_buttons"
    options: List[OptionObject]
    action_id: Optional[str] = None
    initial_option: Optional[OptionObject] = None


class CheckboxesElement(Composition):
    type: Literal["checkboxes"] = "checkboxes"
    options: List[OptionObject]
    action_id: Optional[str] = None
    initial_options: Optional[List[OptionObject]] = None


class OverflowElement(Composition):
    type: Literal["overflow"] = "overflow"
    options: List[OptionObject]
    action_id: Optional[str] = None
    confirm: Optional[ConfirmObject] = None


class ImageElement(Composition):
    type: Literal["image"] = "image"
    image_url: Optional[str] = None
    alt_text: Optional[str] = None


Element = Annotated[
    Union[
        ButtonElement,
        StaticSelectElement,
        MultiStaticSelectElement,
        UsersSelectElement,
        ConversationsSelectElement,
        MultiConversationsSelectElement,
        ExternalSelectElement,
        MultiExternalSelectElement,
        PlainTextInputElement,
        DatepickerElement,
        TimepickerElement,
        RadioButtonsElement,
        CheckboxesElement,
        OverflowElement,
        ImageElement,
    ],
    Field(discriminator="type"),
]


class AccessoryWrapper(Composition):
    """Section accessory, returned as `{"accessory": {...}}` for merging into a section."""

    accessory: Element

"""Section accessory builders."""

from typing import Any, Dict, List, Optional, Sequence

from block_kit_builder.schemas.composition import ConversationFilter, plain_text
from block_kit_builder.schemas.elements import (
    AccessoryWrapper,
    ButtonElement,
    ConversationsSelectElement,
    ImageElement,
    OverflowElement,
    StaticSelectElement,
)
from block_kit_builder.services.options.main import (
    build_confirm,
    build_options,
    stringify_value,
)


class Accessory:
    """
    Builds the `accessory` part of a section block.

    Every method returns `{"accessory": {...}}`, ready to be merged into a section,
    e.g. `Blocks.markdown("text", **Accessory.image(url))`.
    """

    @staticmethod
    def button(
        text: str,
        value: Any,
        action_id: Optional[str] = None,
        style: Optional[str] = None,
        url: Optional[str] = None,
    ) -> dict:
        """
        Accessory button.

        :param text: button label
        :param value: stored value, non-string values are serialized to JSON
        :param action_id: optional action id
        :param style: optional 'primary' or 'danger'
        :param url: optional url opened on click
        """
        element = ButtonElement(
            text=plain_text(text, emoji=True),
            value=stringify_value(value),
            action_id=action_id or None,
            style=style or None,
            url=url or None,
        )
        return AccessoryWrapper(accessory=element).build()

    @staticmethod
    def static_select(
        options: Sequence[Dict[str, Any]],
        initial_option: Optional[Any] = None,
        action_id: Optional[str] = None,
        placeholder: str = "Pick an option",
    ) -> dict:
        """
        Accessory static select.

        :param options: `{text, value}` records, at most 100
        :param initial_option: value of the option selected on load
        :param action_id: optional action id
        :param placeholder: text shown while nothing is selected
        """
        built = build_options(options, emoji=False)
        initial = None
        if initial_option:
            initial = next((o for o in built if o.value == initial_option), None)
        element = StaticSelectElement(
            options=built,
            placeholder=plain_text(placeholder, emoji=True),
            action_id=action_id or None,
            initial_option=initial,
        )
        return AccessoryWrapper(accessory=element).build()

    @staticmethod
    def overflow(
        options: Sequence[Dict[str, Any]],
        action_id: Optional[str] = None,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        """Overflow menu, with an optional confirm dialog."""
        element = OverflowElement(
            options=build_options(options, emoji=False),
            action_id=action_id or None,
            confirm=build_confirm(dialog),
        )
        return AccessoryWrapper(accessory=element).build()

    @staticmethod
    def image(url: str, alt: str = "image") -> dict:
        element = ImageElement(image_url=url, alt_text=alt)
        return AccessoryWrapper(accessory=element).build()

    @staticmethod
    def conversation_select(
        initial_conversation: Optional[str] = None,
        action_id: Optional[str] = None,
        filter: Sequence[str] = ("public", "private"),
        placeholder: str = "Select channel",
        exclude_bot_users: bool = True,
        exclude_external_shared_channels: bool = True,
    ) -> dict:
        """
        Accessory conversation select.

        :param initial_conversation: channel id selected on load
        :param action_id: optional action id
        :param filter: conversation types to list ('public', 'private', 'im', 'mpim')
        :param placeholder: text shown while nothing is selected
        :param exclude_bot_users: hide bot users
        :param exclude_external_shared_channels: hide externally shared channels
        """
        include: List[str] = list(filter)
        element = ConversationsSelectElement(
            filter=ConversationFilter(
                include=include,
                exclude_bot_users=exclude_bot_users,
                exclude_external_shared_channels=exclude_external_shared_channels,
            ),
            placeholder=plain_text(placeholder, emoji=True),
            action_id=action_id or None,
            initial_conversation=initial_conversation or None,
        )
        return AccessoryWrapper(accessory=element).build()

"""Standalone button elements."""

from typing import Any, Dict, Optional

from block_kit_builder.schemas.composition import plain_text
from block_kit_builder.schemas.elements import ButtonElement
from block_kit_builder.services.options.main import build_confirm, stringify_value


def _button(
    text: str,
    value: Any,
    action_id: Optional[str],
    dialog: Optional[Dict[str, Any]],
    style: Optional[str] = None,
) -> dict:
    """Build a button element. An empty dialog is the same as no dialog."""
    return ButtonElement(
        text=plain_text(text, emoji=True),
        value=stringify_value(value),
        style=style,
        action_id=action_id or None,
        confirm=build_confirm(dialog),
    ).build()


class Button:
    """
    Buttons in the three platform styles.

    `value` is stored as is when it is a string, otherwise as its JSON text.
    `dialog` takes `title`, `description`, `confirm_text` and `cancel_text`.
    """

    @staticmethod
    def primary(
        text: str,
        value: Any,
        action_id: Optional[str] = None,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        return _button(text, value, action_id, dialog, style="primary")

    @staticmethod
    def default(
        text: str,
        value: Any,
        action_id: Optional[str] = None,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        return _button(text, value, action_id, dialog)

    @staticmethod
    def danger(
        text: str,
        value: Any,
        action_id: Optional[str] = None,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        return _button(text, value, action_id, dialog, style="danger")

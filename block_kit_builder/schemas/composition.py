"""
Composition objects shared by elements and blocks.

Every model dumps with ``exclude_none=True`` so unset fields never reach the payload.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Composition(BaseModel):
    """Base for every Block Kit record built by the library."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    def build(self) -> dict:
        """Serialize to a plain dict, omitting unset fields."""
        return self.model_dump(exclude_none=True)


class TextObject(Composition):
    """`plain_text` or `mrkdwn` text wrapper."""

    type: Literal["plain_text", "mrkdwn"] = "plain_text"
    text: Any = None
    emoji: Optional[bool] = None


def plain_text(text: Any, emoji: Optional[bool] = None) -> TextObject:
    return TextObject(type="plain_text", text=text, emoji=emoji)


def mrkdwn(text: Any) -> TextObject:
    return TextObject(type="mrkdwn", text=text)


class OptionObject(Composition):
    """Selectable option. `value` is kept as supplied by the caller."""

    text: TextObject
    value: Any = None
    description: Optional[TextObject] = None


class OptionGroupObject(Composition):
    label: TextObject
    options: List[OptionObject] = Field(default_factory=list)


class ConfirmDialog(BaseModel):
    """Caller side description of a confirmation dialog."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    title: Optional[str] = Field(None, description="Dialog title")
    description: Optional[str] = Field(None, description="Dialog body text")
    confirm_text: Optional[str] = Field(None, alias="confirmText")
    cancel_text: Optional[str] = Field(None, alias="cancelText")


class ConfirmObject(Composition):
    """Confirmation dialog shown before an action runs."""

    title: TextObject
    text: TextObject
    confirm: TextObject
    deny: TextObject


class ConversationFilter(Composition):
    include: List[str] = Field(default_factory=lambda: ["public", "private"])
    exclude_bot_users: bool = True
    exclude_external_shared_channels: bool = True


class DispatchActionConfig(Composition):
    trigger_actions_on: List[str] = Field(default_factory=lambda: ["on_enter_pressed"])

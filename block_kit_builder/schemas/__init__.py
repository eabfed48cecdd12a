"""Pydantic models for Block Kit payloads."""

from .blocks import InputBlock
from .composition import (
    ConfirmObject,
    OptionGroupObject,
    OptionObject,
    TextObject,
    mrkdwn,
    plain_text,
)
from .elements import Element
from .views import Attachment, HomeView, ModalView

__all__ = [
    "Attachment",
    "ConfirmObject",
    "Element",
    "HomeView",
    "InputBlock",
    "ModalView",
    "OptionGroupObject",
    "OptionObject",
    "TextObject",
    "mrkdwn",
    "plain_text",
]

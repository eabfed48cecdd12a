"""Block Kit builders, one namespace per kind of payload."""

from .accessory import Accessory
from .attachment import Attachment
from .blocks import Blocks
from .button import Button
from .input import Input
from .select import Select
from .view import View

__all__ = [
    "Accessory",
    "Attachment",
    "Blocks",
    "Button",
    "Input",
    "Select",
    "View",
]

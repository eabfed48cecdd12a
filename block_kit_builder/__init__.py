"""Declarative builders for Slack Block Kit payloads."""

import logging

from block_kit_builder.services.block_builder import (
    Accessory,
    Attachment,
    Blocks,
    Button,
    Input,
    Select,
    View,
)


class BlockKitBuilder:
    """All builder namespaces in one place."""

    Accessory = Accessory
    Attachment = Attachment
    Blocks = Blocks
    Button = Button
    Input = Input
    Select = Select
    View = View


__all__ = [
    "Accessory",
    "Attachment",
    "BlockKitBuilder",
    "Blocks",
    "Button",
    "Input",
    "Select",
    "View",
]

# Output is left to the host application, see utils.logger.setup_logger.
logging.getLogger(__name__).addHandler(logging.NullHandler())

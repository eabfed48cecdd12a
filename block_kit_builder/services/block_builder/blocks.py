"""Layout block builders."""

from typing import Any, List, Optional, Sequence, Union

from block_kit_builder.schemas.blocks import (
    ActionsBlock,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    SectionBlock,
    merge_extra,
)
from block_kit_builder.schemas.composition import mrkdwn
from block_kit_builder.schemas.composition import plain_text as plain_text_object


class Blocks:
    """Top level layout blocks. `block_id` is only set when given."""

    @staticmethod
    def actions(elements: List[dict], block_id: Optional[str] = None) -> dict:
        """Actions block holding interactive elements (buttons, selects...)."""
        return ActionsBlock(elements=elements, block_id=block_id or None).build()

    @staticmethod
    def context(
        text: Union[str, Sequence[str]], block_id: Optional[str] = None
    ) -> dict:
        """
        Context block.

        A single string gives one mrkdwn element, a list or tuple gives one element
        per entry, in order.
        """
        elements = None
        if isinstance(text, str):
            elements = [mrkdwn(text)]
        elif isinstance(text, (list, tuple)):
            elements = [mrkdwn(t) for t in text]
        return ContextBlock(block_id=block_id or None, elements=elements).build()

    @staticmethod
    def divider(block_id: Optional[str] = None) -> dict:
        return DividerBlock(block_id=block_id or None).build()

    @staticmethod
    def fields(fields: Sequence[str], block_id: Optional[str] = None) -> dict:
        """Section block made of mrkdwn fields."""
        return SectionBlock(
            fields=[mrkdwn(f) for f in fields], block_id=block_id or None
        ).build()

    @staticmethod
    def header(text: str, block_id: Optional[str] = None) -> dict:
        return HeaderBlock(
            text=plain_text_object(text), block_id=block_id or None
        ).build()

    @staticmethod
    def image(url: str, alt: str = "image", block_id: Optional[str] = None) -> dict:
        return ImageBlock(
            image_url=url, alt_text=alt, block_id=block_id or None
        ).build()

    @staticmethod
    def markdown(text: str, block_id: Optional[str] = None, **extra: Any) -> dict:
        """
        Markdown section block.

        Extra keyword arguments (an accessory for instance) are merged over the
        built block and win on conflicts.
        """
        block = SectionBlock(text=mrkdwn(text), block_id=block_id or None).build()
        return merge_extra(block, extra)

    @staticmethod
    def plain_text(text: str, block_id: Optional[str] = None) -> dict:
        return SectionBlock(
            text=plain_text_object(text, emoji=True), block_id=block_id or None
        ).build()

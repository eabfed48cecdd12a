"""Layout blocks and the input envelope."""

from typing import Any, Dict, List, Literal, Optional

from block_kit_builder.schemas.composition import Composition, TextObject
from block_kit_builder.schemas.elements import Element


class ActionsBlock(Composition):
    type: Literal["actions"] = "actions"
    elements: Any = None
    block_id: Optional[str] = None


class ContextBlock(Composition):
    type: Literal["context"] = "context"
    block_id: Optional[str] = None
    elements: Optional[List[TextObject]] = None


class DividerBlock(Composition):
    type: Literal["divider"] = "divider"
    block_id: Optional[str] = None


class SectionBlock(Composition):
    """Section with either a single text or a list of fields."""

    type: Literal["section"] = "section"
    text: Optional[TextObject] = None
    fields: Optional[List[TextObject]] = None
    block_id: Optional[str] = None


class HeaderBlock(Composition):
    type: Literal["header"] = "header"
    text: TextObject
    block_id: Optional[str] = None


class ImageBlock(Composition):
    type: Literal["image"] = "image"
    image_url: Optional[str] = None
    alt_text: Optional[str] = None
    block_id: Optional[str] = None


class InputBlock(Composition):
    """
    Input envelope pairing a label with a form element.

    `optional` and `dispatch_action` are always present in the payload.
    """

    type: Literal["input"] = "input"
    element: Element
    label: TextObject
    optional: bool = False
    dispatch_action: bool = False
    block_id: Optional[str] = None


def merge_extra(block: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    """Merge caller supplied keys over a built block. Later keys win."""
    return {**block, **extra}

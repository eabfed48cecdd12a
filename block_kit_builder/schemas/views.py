"""Top-level surfaces and legacy message attachments."""

from typing import Any, List, Literal, Optional

from pydantic import Field

from block_kit_builder.schemas.composition import Composition, TextObject


class ModalView(Composition):
    type: Literal["modal"] = "modal"
    title: TextObject
    blocks: Any = None
    callback_id: Optional[str] = None
    private_metadata: Optional[str] = None
    submit: Optional[TextObject] = None
    close: Optional[TextObject] = None
    clear_on_close: Optional[bool] = None
    notify_on_close: Optional[bool] = None


class HomeView(Composition):
    type: Literal["home"] = "home"
    blocks: Any = None


class AttachmentField(Composition):
    title: Optional[str] = None
    short: bool = False
    value: str = ""


class Attachment(Composition):
    """Legacy (pre Block Kit) message attachment."""

    fallback: Optional[str] = None
    color: Optional[str] = None
    pretext: Optional[str] = None
    fields: List[AttachmentField] = Field(default_factory=list)

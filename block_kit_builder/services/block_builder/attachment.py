"""Legacy message attachments."""

from typing import Any, Dict, List, Sequence

from block_kit_builder.schemas.views import Attachment as AttachmentModel
from block_kit_builder.schemas.views import AttachmentField
from block_kit_builder.services.options.main import to_string


class Attachment:
    """Message attachments, sent instead of blocks."""

    @staticmethod
    def _fields(data: Dict[str, Any], title: Any) -> List[AttachmentField]:
        """Render `data` as `*Key*: value` lines, skipping unset values."""
        value = "".join(
            f"*{key.capitalize()}*: {to_string(item)}\n"
            for key, item in data.items()
            if item is not None
        )
        return [AttachmentField(title=title, short=False, value=value)]

    @staticmethod
    def get(attachments: Sequence[Dict[str, Any]]) -> List[dict]:
        """
        Get attachments to send in a message instead of blocks.

        :param attachments: `{fallback, color, pretext, data, title}` records
        :return: attachment payloads, one text field each
        """
        return [
            AttachmentModel(
                fallback=attachment.get("fallback"),
                color=attachment.get("color"),
                pretext=attachment.get("pretext"),
                fields=Attachment._fields(
                    attachment.get("data") or {}, attachment.get("title")
                ),
            ).build()
            for attachment in attachments
        ]

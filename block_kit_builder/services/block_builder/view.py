"""Modal and app home surfaces."""

from typing import Any, List, Optional

from block_kit_builder.schemas.composition import plain_text
from block_kit_builder.schemas.views import HomeView, ModalView
from block_kit_builder.services.options.main import stringify_value


class View:
    """Top level containers for blocks."""

    @staticmethod
    def modal(
        title: str,
        blocks: List[dict],
        callback_id: str,
        submit_text: Optional[str] = None,
        close_text: Optional[str] = None,
        metadata: Any = None,
        clear_on_close: bool = False,
        notify_on_close: bool = False,
    ) -> dict:
        """
        Modal view.

        :param title: modal title
        :param blocks: blocks to render
        :param callback_id: id sent back with view submissions
        :param submit_text: submit button text
        :param close_text: close button text
        :param metadata: private metadata, non-string values are stored as compact JSON
        :param clear_on_close: clear the whole view stack on close
        :param notify_on_close: send a view_closed event on close
        """
        return ModalView(
            title=plain_text(title, emoji=True),
            blocks=blocks,
            callback_id=callback_id,
            private_metadata=stringify_value(metadata) if metadata else None,
            submit=plain_text(submit_text, emoji=True) if submit_text else None,
            close=plain_text(close_text, emoji=True) if close_text else None,
            clear_on_close=True if clear_on_close else None,
            notify_on_close=True if notify_on_close else None,
        ).build()

    @staticmethod
    def home(blocks: List[dict]) -> dict:
        """App home view."""
        return HomeView(blocks=blocks).build()

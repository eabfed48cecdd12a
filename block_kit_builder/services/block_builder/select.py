"""Standalone select menus, for actions blocks and accessories."""

from typing import Any, Dict, Optional, Sequence

from block_kit_builder.schemas.composition import plain_text
from block_kit_builder.schemas.elements import StaticSelectElement, UsersSelectElement
from block_kit_builder.services.options.main import (
    build_confirm,
    build_options,
    resolve_initial_option,
)


class Select:
    """Select elements without the input envelope."""

    @staticmethod
    def user_select(
        placeholder: str = "Select an user",
        action_id: Optional[str] = None,
        initial_user: Optional[str] = None,
        focus_on_load: bool = False,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        """
        User select.

        :param placeholder: placeholder text
        :param action_id: optional action id
        :param initial_user: user id selected on load
        :param focus_on_load: focus the menu when the view opens
        :param dialog: confirm dialog shown on select
        """
        return UsersSelectElement(
            placeholder=plain_text(placeholder),
            action_id=action_id or None,
            initial_user=initial_user or None,
            focus_on_load=focus_on_load or None,
            confirm=build_confirm(dialog),
        ).build()

    @staticmethod
    def static_select(
        options: Sequence[Dict[str, Any]],
        placeholder: str = "Select an user",
        action_id: Optional[str] = None,
        use_group: bool = False,
        initial_option: Optional[str] = None,
        focus_on_load: bool = False,
        dialog: Optional[Dict[str, Any]] = None,
    ) -> dict:
        """
        Single static select.

        :param options: `{text, value}` records, or `{label, options}` groups with `use_group`
        :param initial_option: value of the option selected on load
        """
        built = build_options(options, use_group=use_group)
        initial = None
        if initial_option:
            initial = resolve_initial_option(built, initial_option, use_group, False)
        return StaticSelectElement(
            placeholder=plain_text(placeholder),
            action_id=action_id or None,
            initial_option=initial,
            focus_on_load=focus_on_load or None,
            confirm=build_confirm(dialog),
            **{"option_groups" if use_group else "options": built},
        ).build()

"""
Option helpers shared by the select style builders.

Options arrive from callers as plain records (`{"text": ..., "value": ...}` or
`{"label": ..., "options": [...]}` for groups) and leave as composition models.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from block_kit_builder.schemas.composition import (
    ConfirmDialog,
    ConfirmObject,
    OptionGroupObject,
    OptionObject,
    plain_text,
)
from block_kit_builder.utils.logger import get_logger

logger = get_logger(__name__)

InitialOption = Union[OptionObject, List[OptionObject], None]


def stringify_value(value: Any) -> Optional[str]:
    """Pass strings through, serialize everything else to JSON text."""
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def to_string(value: Any) -> str:
    """
    Textual form of a value used when matching options.

    Numbers and strings with the same text compare equal: `1`, `1.0` and `"1"` all give `"1"`.
    Sequences join their items with commas: `["a", "b"]` gives `"a,b"`.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else to_string(v) for v in value)
    return str(value)


def build_options(
    options: Sequence[Dict[str, Any]], use_group: bool = False, emoji: bool = True
) -> Union[List[OptionObject], List[OptionGroupObject]]:
    """
    Remap caller options into option (or option group) models.

    :param options: `{text, value}` records, or `{label, options}` records when `use_group` is set
    :param use_group: treat `options` as option groups
    :param emoji: set the emoji flag on ungrouped option labels
    """
    if use_group:
        return [
            OptionGroupObject(
                label=plain_text(group.get("label")),
                options=[
                    OptionObject(text=plain_text(o.get("text")), value=o.get("value"))
                    for o in group.get("options", [])
                ],
            )
            for group in options
        ]
    return [
        OptionObject(
            text=plain_text(o.get("text"), emoji=True if emoji else None),
            value=o.get("value"),
        )
        for o in options
    ]


def resolve_initial_option(
    options: Sequence[Union[OptionObject, OptionGroupObject]],
    initial: Any,
    use_group: bool = False,
    multi: bool = False,
) -> InitialOption:
    """
    Find the option(s) matching `initial` among already built options.

    Values are compared by their textual form. In multi mode the result follows option
    order, not the order of `initial`. Any other combination of inputs yields None.
    """
    if use_group:
        candidates = [o for group in options for o in group.options]
    else:
        candidates = list(options)

    if multi and isinstance(initial, (list, tuple)) and initial:
        wanted = [to_string(v) for v in initial]
        return [o for o in candidates if to_string(o.value) in wanted]

    if not multi and isinstance(initial, str):
        for o in candidates:
            if to_string(o.value) == initial:
                return OptionObject(text=o.text, value=o.value)
        logger.debug("initial_option_not_found", initial=initial)

    return None


def build_confirm(
    dialog: Union[ConfirmDialog, Dict[str, Any], None],
) -> Optional[ConfirmObject]:
    """Build a confirm object, or None when the dialog is missing or empty."""
    if not isinstance(dialog, ConfirmDialog):
        if not dialog:
            return None
        dialog = ConfirmDialog.model_validate(dialog)
    return ConfirmObject(
        title=plain_text(dialog.title),
        text=plain_text(dialog.description),
        confirm=plain_text(dialog.confirm_text),
        deny=plain_text(dialog.cancel_text),
    )

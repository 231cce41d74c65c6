"""Editing of the Secure Note template and parsing of `op item create` output."""
import logging
from copy import deepcopy
from typing import Any, Dict, Optional

from share1password.op import ItemId

logger = logging.getLogger(__name__)

NOTES_FIELD = "notesPlain"

Template = Dict[str, Any]


def fill_note(template: Template, text: str) -> Template:
    """Return a copy of `template` whose notesPlain field holds `text`.

    Everything else is left as is. A template without that field comes back
    unchanged.
    """
    note = deepcopy(template)
    fields = note.get("fields") if isinstance(note, dict) else None
    updated = False
    if isinstance(fields, list):
        for field in fields:
            if isinstance(field, dict) and field.get("id") == NOTES_FIELD:
                field["value"] = text
                updated = True
    if not updated:
        logger.warning("Template has no %r field, the note will be empty.", NOTES_FIELD)
    return note


def extract_item_id(payload: Any) -> Optional[ItemId]:
    if not isinstance(payload, dict):
        return None
    # `id` wins whenever the key is present, even if its value is unusable.
    value = payload["id"] if "id" in payload else payload.get("uuid")
    if isinstance(value, str) and value:
        return ItemId(value)
    return None

# src/sheet_outline/hierarchy/anchors.py

import re

_WHITESPACE = re.compile(r"\s+")


def anchor_id(title: str, item_name: str | None = None) -> str:
    """Navigation identifier for a Section or one of its Items.

    ``title`` or ``title-item_name`` with each whitespace run replaced by
    a single ``-``. Characters unsafe for markup are left for the caller
    to escape.
    """
    raw = title if item_name is None else f"{title}-{item_name}"
    return _WHITESPACE.sub("-", raw)

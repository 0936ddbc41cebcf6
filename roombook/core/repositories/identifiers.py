from __future__ import annotations

import re

_IDENTIFIER = re.compile(r"[0-9a-fA-F]{32}")


class InvalidIdentifierError(ValueError):
    """The value cannot be an identifier of the directory or store it was handed to."""


def require_identifier(value: str, *, kind: str) -> str:
    """
    Identifiers are uuid4 hex strings (32 hex digits). Anything else is refused before any lookup.
    """
    if not isinstance(value, str) or _IDENTIFIER.fullmatch(value) is None:
        raise InvalidIdentifierError(f"Invalid {kind} id: {value!r}")
    return value

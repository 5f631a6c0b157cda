import uuid


def normalize_id(value) -> str:
    """
    Canonical string form of an identifier taken from a URL or a token.

    Valid UUIDs are rendered the way they are stored (lowercase, hyphenated);
    anything else is passed through unchanged and simply matches no row.
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        return str(value)

"""Input validators shared by the service layer."""

from uuid import UUID


def parse_record_id(value: str | UUID | None) -> UUID | None:
    """Parse a record identifier taken from a path or request body.

    Returns None for anything that is not a UUID, so a malformed id is
    reported the same way as an id that matches no record.
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except ValueError:
        return None

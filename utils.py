def present(value) -> bool:
    """Missing (None) and empty strings count as absent; 0 and False do not."""
    return value is not None and value != ""


def first_present(*values, default=None):
    for v in values:
        if present(v):
            return v
    return default


def clip(text: str | None, limit: int) -> str:
    return (text or "")[:limit]

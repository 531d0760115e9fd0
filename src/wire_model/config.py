import os

DEFAULT_MAX_DEPTH = 64


def get_max_depth() -> int:
    """Nesting ceiling for decoding, from ``WIRE_MODEL_MAX_DEPTH``."""
    raw = os.getenv("WIRE_MODEL_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))
    try:
        value = int(raw)
    except (ValueError, TypeError):
        return DEFAULT_MAX_DEPTH
    return value if value > 0 else DEFAULT_MAX_DEPTH

"""Small helpers shared across rectgeom modules."""

from .coerce import as_number, as_point, as_rect, is_sequence
from .log import get_logger, setup_logging
from .numeric import clamp, in_range

__all__ = [
    "as_number",
    "as_point",
    "as_rect",
    "is_sequence",
    "get_logger",
    "setup_logging",
    "clamp",
    "in_range",
]

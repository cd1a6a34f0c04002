"""discspect core - shared layout constants and default records."""
from .protocol import DISCRIMINATOR_LEN, HEADER_LEN, EVENT_CPI_TAG, KNOWN_TAGS, KNOWN_EVENTS
from .records import RECORDS

__all__ = ["DISCRIMINATOR_LEN", "HEADER_LEN", "EVENT_CPI_TAG", "KNOWN_TAGS", "KNOWN_EVENTS", "RECORDS"]

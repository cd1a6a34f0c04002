"""Byte layout of the records discspect inspects.

Widths of the leading discriminators and the names given to the ones we
recognise. Names are labels only; payloads are never decoded.
"""

# Record layout: [Discriminator(8) | Inner(8) | Payload(N)]
DISCRIMINATOR_LEN = 8
HEADER_LEN = 16

# Known leading discriminators
EVENT_CPI_TAG = bytes.fromhex("e445a52e51cb9a1d")  # Anchor self-CPI event frame

KNOWN_TAGS = {
    EVENT_CPI_TAG: "anchor_event_cpi",
}

# Known inner discriminators of self-CPI event frames
SWAP_EVENT = bytes.fromhex("40c6cde8260871e2")
FEE_EVENT = bytes.fromhex("494f4e7fb8d50ddc")

KNOWN_EVENTS = {
    SWAP_EVENT: "swap_event",
    FEE_EVENT: "fee_event",
}

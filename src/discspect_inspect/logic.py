from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable
from warnings import warn

from discspect_core.protocol import DISCRIMINATOR_LEN, HEADER_LEN, KNOWN_EVENTS, KNOWN_TAGS
from .const import ERRORS

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class InspectError(ValueError):
    """A record that cannot be inspected."""

    code = ""

    def __init__(self, detail: str, index: int = 0, record: str = ""):
        super().__init__(f"{ERRORS[self.code]}: {detail}")
        self.detail = detail
        self.index = index
        self.record = record


class DecodeError(InspectError):
    code = "E_HEX_DECODE"


class ShortBufferError(InspectError):
    code = "E_SHORT_BUFFER"


class ShortPayloadWarning(UserWarning):
    code = "W_SHORT_PAYLOAD"


@dataclass(frozen=True)
class Inspection:
    index: int
    record: str
    discriminator: bytes
    length: int
    derived_length: int
    tag: str | None = None
    inner_discriminator: bytes | None = None
    event: str | None = None

    def disc_values(self) -> list[int]:
        return list(self.discriminator)

    def disc_hex(self) -> str:
        return self.discriminator.hex()

    def line(self) -> str:
        return format_line(self)


@dataclass
class InspectSummary:
    inspections: list[Inspection] = field(default_factory=list)
    errors: list[InspectError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def decode_record(record: str, index: int = 0) -> bytes:
    """Decode a hex record strictly: even length, hex digits only."""
    if len(record) % 2:
        raise DecodeError(f"odd length {len(record)}", index, record)
    if not _HEX_RE.fullmatch(record):
        bad = next(c for c in record if c not in "0123456789abcdefABCDEF")
        raise DecodeError(f"invalid character {bad!r}", index, record)
    return bytes.fromhex(record)


def read_discriminator(buf: bytes, index: int = 0, record: str = "") -> bytes:
    if len(buf) < DISCRIMINATOR_LEN:
        raise ShortBufferError(f"{len(buf)} bytes (need {DISCRIMINATOR_LEN})", index, record)
    return bytes(buf[:DISCRIMINATOR_LEN])


def derived_length(buf: bytes) -> int:
    # Not clamped. Shorter buffers go negative.
    return len(buf) - HEADER_LEN


def inspect_record(record: str, index: int = 0) -> Inspection:
    """Decode one record and derive its discriminator and length."""
    buf = decode_record(record, index)
    disc = read_discriminator(buf, index, record)

    if len(buf) < HEADER_LEN:
        warn(
            f"record[{index}]: {len(buf)} bytes is shorter than header ({HEADER_LEN})",
            ShortPayloadWarning,
        )

    tag = KNOWN_TAGS.get(disc)
    inner = None
    if tag is not None and len(buf) >= HEADER_LEN:
        inner = bytes(buf[DISCRIMINATOR_LEN:HEADER_LEN])

    return Inspection(
        index=index,
        record=record,
        discriminator=disc,
        length=len(buf),
        derived_length=derived_length(buf),
        tag=tag,
        inner_discriminator=inner,
        event=KNOWN_EVENTS.get(inner) if inner is not None else None,
    )


def format_line(ins: Inspection) -> str:
    values = ",".join(str(v) for v in ins.disc_values())
    return f"disc={values} ({ins.disc_hex()}) {ins.derived_length}"


def format_tag_line(ins: Inspection) -> str:
    inner = ins.inner_discriminator.hex() if ins.inner_discriminator is not None else "-"
    line = f"  tag={ins.tag or '-'} inner={inner}"
    if ins.event:
        line += f" event={ins.event}"
    return line


def _stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def inspect(
    records: Iterable[str],
    echo: Callable[[str], None] = print,
    fail_fast: bool = False,
    verbose: bool = False,
    err: Callable[[str], None] = _stderr,
) -> InspectSummary:
    """Inspect records in order, one output line per good record.

    Bad records are reported and skipped unless fail_fast is set, in which
    case the first error propagates.
    """
    summary = InspectSummary()
    for i, rec in enumerate(records):
        try:
            ins = inspect_record(rec, i)
        except InspectError as e:
            if fail_fast:
                raise
            err(f"FAIL record[{i}]: {e.code}: {e}")
            summary.errors.append(e)
            continue

        echo(format_line(ins))
        if verbose:
            echo(format_tag_line(ins))
        summary.inspections.append(ins)
    return summary

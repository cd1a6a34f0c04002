import warnings

import pytest

from discspect_core import EVENT_CPI_TAG, RECORDS
from discspect_inspect.logic import (
    DecodeError,
    ShortBufferError,
    ShortPayloadWarning,
    decode_record,
    derived_length,
    format_line,
    format_tag_line,
    inspect,
    inspect_record,
    read_discriminator,
)


def test_eight_byte_record_line():
    with pytest.warns(ShortPayloadWarning):
        ins = inspect_record("0011223344556677")
    assert ins.disc_values() == [0, 17, 34, 51, 68, 85, 102, 119]
    assert ins.disc_hex() == "0011223344556677"
    assert ins.derived_length == -8
    assert format_line(ins) == "disc=0,17,34,51,68,85,102,119 (0011223344556677) -8"


def test_41_byte_record():
    rec = "ab" * 41
    assert len(rec) == 82
    ins = inspect_record(rec)
    assert ins.length == 41
    assert ins.derived_length == 25


def test_57_byte_record():
    ins = inspect_record("00" * 57)
    assert ins.derived_length == 41


def test_default_records():
    first = inspect_record(RECORDS[0])
    assert first.length == 128
    assert first.derived_length == 112
    assert first.line() == "disc=228,69,165,46,81,203,154,29 (e445a52e51cb9a1d) 112"

    second = inspect_record(RECORDS[1], 1)
    assert second.length == 88
    assert second.derived_length == 72


def test_known_tag_carries_inner_discriminator():
    ins = inspect_record(RECORDS[0])
    assert ins.discriminator == EVENT_CPI_TAG
    assert ins.tag == "anchor_event_cpi"
    assert ins.inner_discriminator == bytes.fromhex("40c6cde8260871e2")
    assert ins.event == "swap_event"
    assert inspect_record(RECORDS[1]).event == "fee_event"


def test_unknown_tag():
    ins = inspect_record("ff" * 20)
    assert ins.tag is None
    assert ins.inner_discriminator is None


def test_known_tag_without_inner_bytes():
    with pytest.warns(ShortPayloadWarning):
        ins = inspect_record(EVENT_CPI_TAG.hex() + "0102")
    assert ins.tag == "anchor_event_cpi"
    assert ins.inner_discriminator is None


@pytest.mark.parametrize("rec", ["00", "", "0011223344556677", "deadbeef" * 5])
def test_hex_round_trip(rec):
    assert decode_record(rec).hex() == rec


def test_uppercase_accepted():
    assert decode_record("DEADBEEF") == b"\xde\xad\xbe\xef"


def test_odd_length_rejected():
    with pytest.raises(DecodeError) as exc:
        decode_record("abc", index=3)
    assert exc.value.code == "E_HEX_DECODE"
    assert exc.value.index == 3
    assert exc.value.record == "abc"


@pytest.mark.parametrize("rec", ["zz", "00 11", "0x00", "12\n3"])
def test_invalid_characters_rejected(rec):
    with pytest.raises(DecodeError):
        decode_record(rec)


def test_short_buffer():
    with pytest.raises(ShortBufferError) as exc:
        read_discriminator(b"\x01\x02\x03")
    assert exc.value.code == "E_SHORT_BUFFER"
    with pytest.raises(ShortBufferError):
        inspect_record("")


def test_discriminator_is_always_eight_bytes():
    for n in (8, 9, 16, 100):
        assert len(read_discriminator(bytes(n))) == 8


def test_derived_length_not_clamped():
    assert derived_length(b"") == -16
    assert derived_length(bytes(16)) == 0
    assert derived_length(bytes(200)) == 184


def test_no_warning_at_header_len():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        inspect_record("00" * 16)


def test_inspect_continues_after_errors():
    out: list[str] = []
    errs: list[str] = []
    summary = inspect(["abc", RECORDS[0], "0102"], echo=out.append, err=errs.append)

    assert out == ["disc=228,69,165,46,81,203,154,29 (e445a52e51cb9a1d) 112"]
    assert len(errs) == 2
    assert errs[0].startswith("FAIL record[0]: E_HEX_DECODE")
    assert errs[1].startswith("FAIL record[2]: E_SHORT_BUFFER")
    assert not summary.ok
    assert [i.index for i in summary.inspections] == [1]


def test_inspect_fail_fast():
    with pytest.raises(DecodeError):
        inspect([RECORDS[0], "xyz0"], echo=lambda s: None, fail_fast=True)


def test_inspect_verbose():
    out: list[str] = []
    summary = inspect(RECORDS, echo=out.append, verbose=True)
    assert summary.ok
    assert len(out) == 4
    assert out[1] == "  tag=anchor_event_cpi inner=40c6cde8260871e2 event=swap_event"
    assert out[3] == "  tag=anchor_event_cpi inner=494f4e7fb8d50ddc event=fee_event"


def test_unknown_inner_discriminator():
    ins = inspect_record(EVENT_CPI_TAG.hex() + "ff" * 8)
    assert ins.inner_discriminator == b"\xff" * 8
    assert ins.event is None
    assert format_tag_line(ins) == "  tag=anchor_event_cpi inner=ffffffffffffffff"

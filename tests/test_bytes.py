"""Tests for append_bytes() and try_append_bytes().

Covers the fatal and recoverable policies for malformed UTF-8, and the
rule that every slice must hold whole characters.
"""

import pytest

from string_builder import (
    BuilderConsumedError,
    DecodeError,
    DecodeErrorKind,
    DecodePanic,
    Err,
    Ok,
    StringBuilder,
)

SENTENCE = "„Pelé hat alles verändert."
SENTENCE_BYTES = SENTENCE.encode("utf-8")


class TestSampleSentence:
    """Fixed byte layout the boundary tests below rely on."""

    def test_layout(self) -> None:
        assert len(SENTENCE_BYTES) == 30
        assert SENTENCE_BYTES[0:9].decode() == "„Pelé "
        assert SENTENCE_BYTES[9:18].decode() == "hat alles"
        assert SENTENCE_BYTES[18:30].decode() == " verändert."


# =========================================================================
# append_bytes (fatal policy)
# =========================================================================


class TestAppendBytes:
    """Trusted input: success appends, failure aborts."""

    def test_three_slices_on_char_boundaries(self) -> None:
        result = (
            StringBuilder.new()
            .append_bytes(SENTENCE_BYTES[0:9])
            .append_bytes(SENTENCE_BYTES[9:18])
            .append_bytes(SENTENCE_BYTES[18:30])
            .to_string()
        )
        assert result == SENTENCE

    def test_whole_sequence(self) -> None:
        assert StringBuilder().append_bytes(SENTENCE_BYTES).to_string() == SENTENCE

    def test_empty_bytes_is_noop(self) -> None:
        sb = StringBuilder.from_str("abc")
        assert sb.append_bytes(b"") is sb
        assert sb.to_string() == "abc"

    def test_accepts_bytearray_and_memoryview(self) -> None:
        result = (
            StringBuilder()
            .append_bytes(bytearray(SENTENCE_BYTES[0:9]))
            .append_bytes(memoryview(SENTENCE_BYTES)[9:])
            .to_string()
        )
        assert result == SENTENCE

    def test_rejects_str(self) -> None:
        with pytest.raises(TypeError, match="bytes-like"):
            StringBuilder().append_bytes("abc")  # type: ignore[arg-type]

    def test_incomplete_prefix_aborts(self) -> None:
        """Bytes [0,7) end inside 'é'."""
        with pytest.raises(DecodePanic) as exc_info:
            StringBuilder().append_bytes(SENTENCE_BYTES[0:7])
        error = exc_info.value.error
        assert error.kind is DecodeErrorKind.INCOMPLETE
        assert error.valid_up_to == 6
        assert exc_info.value.__cause__ is error

    def test_continuation_tail_aborts(self) -> None:
        """Bytes [7,9) start with the second byte of 'é'."""
        sb = StringBuilder().append_bytes(SENTENCE_BYTES[0:6])
        with pytest.raises(DecodePanic) as exc_info:
            sb.append_bytes(SENTENCE_BYTES[7:9])
        assert exc_info.value.error.kind is DecodeErrorKind.INVALID
        assert exc_info.value.error.valid_up_to == 0

    def test_panic_message_names_failure(self) -> None:
        with pytest.raises(DecodePanic, match="incomplete utf-8 byte sequence from index 3"):
            StringBuilder().append_bytes("Pelé".encode()[:4])

    def test_panic_bypasses_except_exception(self) -> None:
        with pytest.raises(DecodePanic):
            try:
                StringBuilder().append_bytes(b"\xff")
            except Exception:
                pytest.fail("DecodePanic must not be an Exception")

    def test_builder_consumed_after_abort(self) -> None:
        sb = StringBuilder.from_str("kept?")
        with pytest.raises(DecodePanic):
            sb.append_bytes(b"ok\xff")
        assert sb.consumed
        with pytest.raises(BuilderConsumedError, match="append_bytes"):
            sb.to_string()


# =========================================================================
# try_append_bytes (recoverable policy)
# =========================================================================


class TestTryAppendBytes:
    """Untrusted input: Ok(builder) or Err(DecodeError)."""

    def test_success_returns_ok_wrapping_same_builder(self) -> None:
        sb = StringBuilder()
        outcome = sb.try_append_bytes(b"abc")
        assert isinstance(outcome, Ok)
        assert outcome.value is sb

    def test_pele_split_on_boundary(self) -> None:
        data = "Pelé".encode()
        result = (
            StringBuilder.new()
            .try_append_bytes(data[0:3])
            .unwrap()
            .try_append_bytes(data[3:])
            .unwrap()
            .to_string()
        )
        assert result == "Pelé"

    def test_round_trip(self) -> None:
        assert StringBuilder.new().try_append_bytes(SENTENCE_BYTES).unwrap().to_string() == SENTENCE

    def test_empty_bytes_is_noop(self) -> None:
        outcome = StringBuilder.from_str("abc").try_append_bytes(b"")
        assert outcome.unwrap().to_string() == "abc"

    def test_split_character_first_slice_fails(self) -> None:
        outcome = StringBuilder().try_append_bytes(SENTENCE_BYTES[0:7])
        assert isinstance(outcome, Err)
        error = outcome.error
        assert isinstance(error, DecodeError)
        assert error.kind is DecodeErrorKind.INCOMPLETE
        assert error.valid_up_to == 6
        assert error.error_len is None
        assert str(error) == "incomplete utf-8 byte sequence from index 6"

    def test_split_character_second_slice_fails(self) -> None:
        sb = StringBuilder().try_append_bytes(SENTENCE_BYTES[0:6]).unwrap()
        outcome = sb.try_append_bytes(SENTENCE_BYTES[7:9])
        assert outcome.is_err()
        error = outcome.unwrap_err()
        assert error.kind is DecodeErrorKind.INVALID
        assert error.valid_up_to == 0
        assert error.error_len == 1
        assert str(error) == "invalid utf-8 sequence of 1 bytes from index 0"

    def test_unwrap_err_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError, match="incomplete"):
            StringBuilder().try_append_bytes(b"\xe2\x80").unwrap()

    def test_failed_call_consumes_builder(self) -> None:
        sb = StringBuilder.from_str("abc")
        assert sb.try_append_bytes(b"\xff").is_err()
        with pytest.raises(BuilderConsumedError, match="try_append_bytes"):
            sb.append("def")

    def test_match_statement(self) -> None:
        match StringBuilder.from_str("Pel").try_append_bytes("é".encode()):
            case Ok(sb):
                assert sb.to_string() == "Pelé"
            case Err(error):
                pytest.fail(f"unexpected error: {error}")

    def test_caller_can_retry_with_fresh_builder(self) -> None:
        partial = "Pelé".encode()
        outcome = StringBuilder.from_str(">").try_append_bytes(partial[:4])
        assert outcome.is_err()
        retried = StringBuilder.from_str(">").try_append_bytes(partial).unwrap()
        assert retried.to_string() == ">Pelé"


# =========================================================================
# Mixed chains
# =========================================================================


class TestMixedMode:
    """Interleaving text and byte appends."""

    def test_alternating_matches_concatenation(self) -> None:
        pieces = ["„Pelé", " hat ", "alles", " verändert."]
        result = (
            StringBuilder.new()
            .append(pieces[0])
            .append_bytes(pieces[1].encode())
            .append(pieces[2])
            .try_append_bytes(pieces[3].encode())
            .unwrap()
            .to_string()
        )
        assert result == "".join(pieces)

    def test_from_then_bytes_then_lines(self) -> None:
        result = (
            StringBuilder.from_str("a")
            .append_bytes("ö".encode())
            .append_line()
            .extend(["b", "c"])
            .to_string()
        )
        assert result == "aö\nbc"

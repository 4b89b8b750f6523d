"""Unit tests for LogBuffer and chunk splitting."""

from __future__ import annotations

import pytest

from kubeoptic.constants.limits import MAX_LOG_LINES
from kubeoptic.models.logs import LogBuffer, LogLine, split_chunk


@pytest.mark.unit
@pytest.mark.fast
class TestSplitChunk:
    """Test split_chunk."""

    def test_splits_on_newlines(self) -> None:
        """Test LF and CRLF boundaries."""
        assert split_chunk("a\nb\r\nc") == ["a", "b", "c"]

    def test_drops_empty_lines(self) -> None:
        """Test that blank lines and trailing newlines vanish."""
        assert split_chunk("\n\na\n\nb\n") == ["a", "b"]

    def test_empty_chunk(self) -> None:
        """Test that an empty chunk has no lines."""
        assert split_chunk("") == []


@pytest.mark.unit
@pytest.mark.fast
class TestLogBuffer:
    """Test LogBuffer ring behaviour."""

    def test_default_capacity(self) -> None:
        """Test that the default cap is 10,000 lines."""
        assert LogBuffer().capacity == MAX_LOG_LINES == 10_000

    def test_rejects_non_positive_capacity(self) -> None:
        """Test that a zero capacity is refused."""
        with pytest.raises(ValueError):
            LogBuffer(0)

    def test_append_and_iterate(self) -> None:
        """Test that lines come back oldest first with their positions."""
        buffer = LogBuffer(5)
        buffer.extend(["a", "b"])
        assert list(buffer) == [LogLine("a", 0), LogLine("b", 1)]
        assert buffer[-1] == LogLine("b", 1)

    def test_eviction_at_capacity(self) -> None:
        """Test that the oldest line is evicted per insert."""
        buffer = LogBuffer(3)
        buffer.extend(["1", "2", "3", "4", "5"])
        assert buffer.texts() == ["3", "4", "5"]
        assert len(buffer) == 3
        assert buffer.total_appended == 5

    def test_ten_thousand_and_five_chunks(self) -> None:
        """Test that 10,005 single-line chunks keep lines 6..10,005."""
        buffer = LogBuffer()
        for number in range(1, 10_006):
            buffer.extend(split_chunk(f"line {number}\n"))
        assert len(buffer) == 10_000
        assert buffer[0].text == "line 6"
        assert buffer[-1].text == "line 10005"

    def test_clear(self) -> None:
        """Test that clear empties the ring and resets the counter."""
        buffer = LogBuffer(3)
        buffer.append("x")
        buffer.clear()
        assert not buffer
        assert buffer.total_appended == 0

"""Byte to character offset mapping for UTF-8 documents."""

from __future__ import annotations

from typing import Final

# Bytes of the form 10xxxxxx continue a character instead of starting one
_CONTINUATION_MASK: Final = 0xC0
_CONTINUATION_TAG: Final = 0x80


class UTF8PositionMapper:
    """Maps byte offsets in a UTF-8 document to character offsets.

    Instead of storing a character offset for every byte, the mapper keeps
    a checkpoint every ``checkpoint_interval`` bytes and counts forward
    from the nearest one. Every byte that is not a continuation byte starts
    a character, so offsets stay well defined even in malformed input.
    """

    def __init__(
        self, data: bytes | bytearray, checkpoint_interval: int = 256
    ) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            data: The encoded document to create position mapping for
            checkpoint_interval: Interval between checkpoints in bytes
        """
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")

        self.data: Final = data
        self.checkpoint_interval: Final = checkpoint_interval
        # checkpoints[i] is the character offset of byte i * interval
        self.checkpoints: list[int] = []
        self._is_ascii_only: bool = data.isascii()

        if not self._is_ascii_only:
            self._build_checkpoints()

    @property
    def is_ascii_only(self) -> bool:
        return self._is_ascii_only

    def _count_chars(self, start: int, end: int) -> int:
        """Counts character-starting bytes in data[start:end]."""
        return sum(
            1
            for byte in self.data[start:end]
            if byte & _CONTINUATION_MASK != _CONTINUATION_TAG
        )

    def _build_checkpoints(self) -> None:
        """Build checkpoint mapping at regular byte intervals."""
        interval = self.checkpoint_interval
        char_pos = 0

        for byte_pos in range(0, len(self.data) + 1, interval):
            self.checkpoints.append(char_pos)
            char_pos += self._count_chars(byte_pos, byte_pos + interval)

    def byte_to_char(self, byte_pos: int) -> int:
        """Convert byte position to character position.

        Offsets past the end of the data count one character per byte.

        Args:
            byte_pos: Byte position in the UTF-8 encoded document

        Returns:
            Character position in the decoded document
        """
        if byte_pos < 0:
            raise ValueError("byte_pos must be non-negative")

        # Fast path for ASCII-only data
        if self._is_ascii_only:
            return byte_pos

        overflow = max(0, byte_pos - len(self.data))
        byte_pos -= overflow

        index = byte_pos // self.checkpoint_interval
        checkpoint_byte = index * self.checkpoint_interval
        return (
            self.checkpoints[index]
            + self._count_chars(checkpoint_byte, byte_pos)
            + overflow
        )

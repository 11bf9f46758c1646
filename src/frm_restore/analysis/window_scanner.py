"""
Strided window scanning over byte buffers.

The field extractors all work the same way: walk a fixed offset range in
ascending order with a fixed stride and look at a fixed-width slice at each
offset. ByteWindowScanner does the walking for every extractor: offsets are
visited in ascending order and the first accepted window wins.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ByteWindowScanner:
    """
    Scanner yielding fixed-width slices across an offset range.

    Attributes:
        start: First offset scanned (inclusive)
        end: Scan limit (exclusive)
        stride: Distance between consecutive offsets
        width: Size of each yielded slice

    Windows that would run past the end of the buffer are skipped, never
    truncated.

    Example:
        >>> scanner = ByteWindowScanner(start=0x2000, end=0x3000, stride=4, width=4)
        >>> for offset, window in scanner.windows(image):
        ...     value = int.from_bytes(window, "little")
    """
    start: int
    end: int
    stride: int
    width: int

    def __post_init__(self):
        if self.stride <= 0:
            raise ValueError(f"stride must be positive, got {self.stride}")
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid scan range [{self.start:#x}, {self.end:#x})")

    def offsets(self) -> range:
        """Offsets visited, in scan order."""
        return range(self.start, self.end, self.stride)

    def windows(self, data: bytes) -> Iterator[tuple[int, bytes]]:
        """
        Yield (offset, slice) pairs in ascending offset order.

        Args:
            data: Buffer to scan

        Yields:
            Tuple of (offset, bytes of length `width`)
        """
        view = memoryview(data)
        for offset in self.offsets():
            if offset + self.width > len(data):
                break
            yield offset, bytes(view[offset:offset + self.width])

    def first(
        self,
        data: bytes,
        decode: Callable[[bytes], Optional[T]],
    ) -> Optional[tuple[int, T]]:
        """
        Return the first window that decodes to a value.

        Args:
            data: Buffer to scan
            decode: Returns a value for an acceptable window, None otherwise

        Returns:
            Tuple of (offset, value) for the lowest accepted offset, or None
        """
        for offset, window in self.windows(data):
            value = decode(window)
            if value is not None:
                return offset, value
        return None

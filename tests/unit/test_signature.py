"""
Unit tests for FRM variant detection.
"""

from frm_restore.analysis.signature import (
    VARIANT_LEGACY,
    VARIANT_UNKNOWN,
    detect_variant,
    detect_variant_label,
)
from tests.fixtures import MockDFlashImage, create_erased_image


class TestMarkerDetection:
    """Test marker lookup in the signature windows."""

    def test_xeq384_in_first_window(self):
        image = MockDFlashImage().with_marker(b"XEQ384", offset=0x104).build()

        detection = detect_variant(image)

        assert detection.label == "FRM3 XEQ384"
        assert detection.marker == "XEQ384"
        assert detection.offset == 0x104
        assert not detection.is_heuristic_fallback

    def test_xet512_in_second_window(self):
        image = MockDFlashImage().with_marker(b"XET512", offset=0x200).build()
        assert detect_variant_label(image) == "FRM3 XET512"

    def test_first_window_wins(self):
        image = (MockDFlashImage()
                 .with_marker(b"XET512", offset=0x100)
                 .with_marker(b"XEQ384", offset=0x200)
                 .build())
        assert detect_variant_label(image) == "FRM3 XET512"

    def test_marker_order_within_window(self):
        image = (MockDFlashImage()
                 .with_marker(b"XET512", offset=0x100)
                 .with_marker(b"XEQ384", offset=0x108)
                 .build())
        assert detect_variant_label(image) == "FRM3 XEQ384"

    def test_marker_straddling_window_end_ignored(self):
        """A marker must lie entirely inside the window."""
        image = MockDFlashImage().with_marker(b"XEQ384", offset=0x10C).build()
        assert detect_variant_label(image) == VARIANT_UNKNOWN

    def test_marker_outside_windows_ignored(self):
        image = MockDFlashImage().with_marker(b"XEQ384", offset=0x300).build()
        assert detect_variant_label(image) == VARIANT_UNKNOWN


class TestFallback:
    """Test the size-based fallback label."""

    def test_full_size_without_marker(self):
        detection = detect_variant(create_erased_image())

        assert detection.label == VARIANT_UNKNOWN
        assert detection.is_heuristic_fallback
        assert detection.offset is None

    def test_other_size_without_marker(self):
        assert detect_variant_label(bytes(4096)) == VARIANT_LEGACY

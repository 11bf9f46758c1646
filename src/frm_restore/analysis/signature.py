"""
FRM variant detection from marker strings.

Variant markers are short ASCII tokens stored near the start of the D-Flash
image. Detection is a heuristic: a marker found in one of the signature
windows names the variant, anything else falls back to a generic label
chosen by image size. The label is a hint for the operator, never a
guarantee of the hardware revision.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from frm_restore.core.layout import DFLASH_SIZE

logger = logging.getLogger(__name__)


# Signature windows, searched in order (start, end exclusive)
SIGNATURE_WINDOWS = (
    (0x100, 0x110),
    (0x200, 0x210),
)

# Markers, checked in order within each window
VARIANT_MARKERS = (
    (b"XEQ384", "FRM3 XEQ384"),
    (b"XET512", "FRM3 XET512"),
)

VARIANT_UNKNOWN = "FRM3 Unknown"
VARIANT_LEGACY = "FRM2"


@dataclass(frozen=True)
class VariantDetection:
    """
    Result of variant detection.

    Attributes:
        label: Variant label (always set)
        marker: Marker that matched, None for a fallback label
        offset: Absolute offset of the marker, None for a fallback label
    """
    label: str
    marker: Optional[str] = None
    offset: Optional[int] = None

    @property
    def is_heuristic_fallback(self) -> bool:
        """True when no marker was found and the label is a size guess."""
        return self.marker is None


def detect_variant(data: bytes) -> VariantDetection:
    """
    Detect the FRM variant of a D-Flash image.

    The first window holding any marker wins; within a window the first
    marker in VARIANT_MARKERS wins.

    Args:
        data: D-Flash image

    Returns:
        VariantDetection with the variant label
    """
    for start, end in SIGNATURE_WINDOWS:
        window = bytes(data[start:end])
        for marker, label in VARIANT_MARKERS:
            position = window.find(marker)
            if position >= 0:
                logger.debug("Variant marker %s at 0x%04X", marker.decode("ascii"), start + position)
                return VariantDetection(
                    label=label,
                    marker=marker.decode("ascii"),
                    offset=start + position,
                )

    if len(data) == DFLASH_SIZE:
        return VariantDetection(label=VARIANT_UNKNOWN)
    return VariantDetection(label=VARIANT_LEGACY)


def detect_variant_label(data: bytes) -> str:
    """Convenience wrapper returning only the variant label."""
    return detect_variant(data).label

"""
Test fixtures for FRM Workbench.

Provides synthetic D-Flash images with known contents for testing without
real module dumps.
"""

from tests.fixtures.dflash_images import (
    MockDFlashImage,
    SAMPLE_VIN,
    SAMPLE_VIN_US,
    SAMPLE_MILEAGE,
    create_erased_image,
    create_zeroed_image,
    create_uniform_image,
    create_vehicle_image,
    create_partial_image,
)

__all__ = [
    "MockDFlashImage",
    "SAMPLE_VIN",
    "SAMPLE_VIN_US",
    "SAMPLE_MILEAGE",
    "create_erased_image",
    "create_zeroed_image",
    "create_uniform_image",
    "create_vehicle_image",
    "create_partial_image",
]

"""
Fields derived from an identifier code.

The manufacturer prefix (first three characters) maps to a model category
and the tenth character maps to a production year. Both tables are static.
An unknown prefix still yields a generic category label, but an unknown
year code yields no year at all.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from frm_restore.analysis.identifier import extract_identifier
from frm_restore.analysis.odometer import extract_odometer
from frm_restore.analysis.validators import is_valid_identifier

CATEGORY_FALLBACK = "BMW (Unknown Model)"

MANUFACTURER_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "WBA": "BMW 3 Series",
    "WBY": "BMW X3",
    "5UX": "BMW X3 (US)",
    "WBX": "BMW X1",
    "WBS": "BMW M Series",
    "4US": "BMW (US Market)",
})

YEAR_CODES: Mapping[str, int] = MappingProxyType({
    "1": 2001, "2": 2002, "3": 2003, "4": 2004, "5": 2005,
    "6": 2006, "7": 2007, "8": 2008, "9": 2009, "A": 2010,
    "B": 2011, "C": 2012, "D": 2013, "E": 2014, "F": 2015,
})

PREFIX_LENGTH = 3
YEAR_CODE_POSITION = 9


@dataclass(frozen=True)
class DerivedFields:
    """Category and production year resolved from an identifier."""
    category: Optional[str] = None
    production_year: Optional[int] = None


def resolve_category(identifier: str) -> str:
    """Map the manufacturer prefix to a category label."""
    return MANUFACTURER_CATEGORIES.get(identifier[:PREFIX_LENGTH], CATEGORY_FALLBACK)


def resolve_production_year(identifier: str) -> Optional[int]:
    """Map the year code character to a year, or None if it is not tabled."""
    if len(identifier) <= YEAR_CODE_POSITION:
        return None
    return YEAR_CODES.get(identifier[YEAR_CODE_POSITION])


def resolve_fields(identifier: Optional[str]) -> DerivedFields:
    """
    Resolve category and production year for an identifier.

    Args:
        identifier: Identifier code, or None

    Returns:
        DerivedFields; both fields are None when the identifier is absent
        or invalid
    """
    if identifier is None or not is_valid_identifier(identifier):
        return DerivedFields()
    return DerivedFields(
        category=resolve_category(identifier),
        production_year=resolve_production_year(identifier),
    )


@dataclass(frozen=True)
class VehicleData:
    """
    Vehicle fields recovered from a D-Flash image.

    Attributes:
        identifier: 17-character identifier code (VIN)
        category: Model category from the manufacturer prefix
        production_year: Model year from the year code
        odometer: Odometer reading in miles (little-endian)
    """
    identifier: Optional[str] = None
    category: Optional[str] = None
    production_year: Optional[int] = None
    odometer: Optional[int] = None


def extract_vehicle_data(data: bytes) -> VehicleData:
    """
    Run the identifier, derived-field and odometer extractors.

    Absent fields are None; this never raises for a well-sized image.
    """
    identifier = extract_identifier(data)
    derived = resolve_fields(identifier)
    return VehicleData(
        identifier=identifier,
        category=derived.category,
        production_year=derived.production_year,
        odometer=extract_odometer(data),
    )

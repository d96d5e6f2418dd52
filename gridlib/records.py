"""Records A, B and C of the DEM file format and their readers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional

from .fortran_reader import FortranReader, GridLibError

__all__ = [
    "DegMinSec",
    "CartesianCoordinates",
    "RecordA",
    "RecordB",
    "RecordC",
    "to_degrees",
    "read_record_a",
    "read_record_b",
    "read_record_c",
    "format_record_a",
    "format_record_c",
]

BLOCK_SIZE = 1024
_RECORD_B_HEADER_SIZE = 4 * 6 + 5 * 24
_ELEVATION_WIDTH = 6


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass
class DegMinSec:
    """An angle given as degrees, minutes and seconds."""

    degree: int = 0
    minute: int = 0
    second: float = 0.0

    def __str__(self) -> str:
        return f"{self.degree} {self.minute} {_format_value(self.second)}"


def to_degrees(dms: DegMinSec) -> float:
    """Convert degrees, minutes and seconds to decimal degrees."""
    return float(dms.degree) + dms.minute / 60.0 + dms.second / 3600.0


@dataclass
class CartesianCoordinates:
    easting: float = 0.0
    northing: float = 0.0

    def __str__(self) -> str:
        return f"{_format_value(self.easting)} {_format_value(self.northing)}"


@dataclass
class RecordA:
    """The header record of a DEM file."""

    file_name: str = ""
    text: str = ""
    longitude: Optional[DegMinSec] = None
    latitude: Optional[DegMinSec] = None
    process_code: Optional[str] = None
    sectional_indicator: str = ""
    origin_code: str = ""
    dem_level_code: Optional[int] = None
    elevation_pattern_code: Optional[int] = None
    ref_sys: Optional[int] = None
    ref_sys_zone: Optional[int] = None
    map_projection_params: list[Optional[float]] = field(default_factory=lambda: [None] * 15)
    horizontal_unit: Optional[int] = None
    vertical_unit: Optional[int] = None
    polygon_sides: Optional[int] = None
    quadrangle_corners: list[Optional[CartesianCoordinates]] = field(
        default_factory=lambda: [None] * 4
    )
    min_elevation: Optional[float] = None
    max_elevation: Optional[float] = None
    rotation_angle: Optional[float] = None
    elevation_accuracy: Optional[int] = None
    x_resolution: Optional[float] = None
    y_resolution: Optional[float] = None
    z_resolution: Optional[float] = None
    rows: Optional[int] = None
    columns: Optional[int] = None
    largest_contour_interval: Optional[int] = None
    largest_contour_interval_units: Optional[int] = None
    smallest_contour_interval: Optional[int] = None
    smallest_contour_interval_units: Optional[int] = None
    data_source_year: Optional[int] = None
    data_completion_year: Optional[int] = None
    inspection_flag: Optional[str] = None
    data_validation_flag: Optional[int] = None
    suspect_and_void_area_flag: Optional[int] = None
    vertical_datum: Optional[int] = None
    horizontal_datum: Optional[int] = None
    data_edition: Optional[int] = None
    percent_void: Optional[int] = None
    edge_match_flag: Optional[int] = None
    vertical_datum_shift: Optional[float] = None


@dataclass
class RecordB:
    """A profile of elevations from a DEM file."""

    row: int = 0
    column: int = 0
    rows: int = 0
    columns: int = 0
    x: float = 0.0
    y: float = 0.0
    elevation_base: float = 0.0
    elevation_min: Optional[float] = None
    elevation_max: Optional[float] = None
    elevations: list[int] = field(default_factory=list)


@dataclass
class RecordC:
    """Accuracy statistics from the end of a DEM file."""

    has_datum_rmse: Optional[int] = None
    datum_rmse: list[Optional[int]] = field(default_factory=lambda: [None] * 3)
    datum_rmse_sample_size: Optional[int] = None
    has_dem_rmse: Optional[int] = None
    dem_rmse: list[Optional[int]] = field(default_factory=lambda: [None] * 3)
    dem_rmse_sample_size: Optional[int] = None


def _format_field(name: str, value: object) -> list[str]:
    if isinstance(value, list):
        return [
            f"{name}[{index}]: {_format_value(item)}\n"
            for index, item in enumerate(value)
            if item is not None
        ]
    if isinstance(value, str) and value == "":
        return []
    if value is None:
        return []
    return [f"{name}: {_format_value(value)}\n"]


def format_record_a(rec: RecordA) -> str:
    """Describe every field of *rec* that has a value, one per line."""
    return "".join(
        line for f in fields(rec) for line in _format_field(f.name, getattr(rec, f.name))
    )


def format_record_c(rec: RecordC) -> str:
    """Describe the RMSE values of *rec* that are present, one per line."""
    lines: list[str] = []
    if rec.has_datum_rmse is not None:
        lines += _format_field("has_datum_rmse", rec.has_datum_rmse)
        lines += _format_field("datum_rmse", rec.datum_rmse)
    if rec.has_dem_rmse is not None:
        lines += _format_field("has_dem_rmse", rec.has_dem_rmse)
        lines += _format_field("dem_rmse", rec.dem_rmse)
    return "".join(lines)


def _read_deg_min_sec(reader: FortranReader) -> DegMinSec | None:
    degree = reader.read_int16(4)
    minute = reader.read_int16(2)
    second = reader.read_float32(7)
    if degree is None or minute is None or second is None:
        return None
    return DegMinSec(degree, minute, second)


def read_record_a(reader: FortranReader) -> RecordA:
    """Read a record of type A from *reader*."""
    result = RecordA()
    result.file_name = reader.read_string(40)
    result.text = reader.read_string(40)
    reader.skip(29)
    result.longitude = _read_deg_min_sec(reader)
    result.latitude = _read_deg_min_sec(reader)
    result.process_code = reader.read_char()
    reader.skip(1)
    result.sectional_indicator = reader.read_string(3)
    result.origin_code = reader.read_string(4)
    result.dem_level_code = reader.read_int16(6)
    result.elevation_pattern_code = reader.read_int16(6)
    result.ref_sys = reader.read_int16(6)
    result.ref_sys_zone = reader.read_int16(6)
    result.map_projection_params = [reader.read_float64(24) for _ in range(15)]
    result.horizontal_unit = reader.read_int16(6)
    result.vertical_unit = reader.read_int16(6)
    result.polygon_sides = reader.read_int16(6)
    corners: list[Optional[CartesianCoordinates]] = []
    for _ in range(4):
        easting = reader.read_float64(24)
        northing = reader.read_float64(24)
        if easting is not None and northing is not None:
            corners.append(CartesianCoordinates(easting, northing))
        else:
            corners.append(None)
    result.quadrangle_corners = corners
    result.min_elevation = reader.read_float64(24)
    result.max_elevation = reader.read_float64(24)
    result.rotation_angle = reader.read_float64(24)
    result.elevation_accuracy = reader.read_int16(6)
    result.x_resolution = reader.read_float64(12)
    result.y_resolution = reader.read_float64(12)
    result.z_resolution = reader.read_float64(12)
    result.rows = reader.read_int16(6)
    result.columns = reader.read_int16(6)
    result.largest_contour_interval = reader.read_int16(5)
    result.largest_contour_interval_units = reader.read_int8(1)
    result.smallest_contour_interval = reader.read_int16(5)
    result.smallest_contour_interval_units = reader.read_int8(1)
    result.data_source_year = reader.read_int16(4)
    result.data_completion_year = reader.read_int16(4)
    result.inspection_flag = reader.read_char()
    result.data_validation_flag = reader.read_int8(1)
    result.suspect_and_void_area_flag = reader.read_int8(2)
    result.vertical_datum = reader.read_int8(2)
    result.horizontal_datum = reader.read_int8(2)
    result.data_edition = reader.read_int16(4)
    result.percent_void = reader.read_int16(4)
    result.edge_match_flag = reader.read_int32(8)
    result.vertical_datum_shift = reader.read_float64(7)
    reader.skip(109)
    return result


def _require(value, name: str):
    if value is None:
        raise GridLibError(f"Missing value for {name}.")
    return value


def read_record_b(reader: FortranReader) -> RecordB:
    """Read a record of type B, which may span several 1024-byte blocks."""
    result = RecordB(
        row=_require(reader.read_int16(6), "row"),
        column=_require(reader.read_int16(6), "column"),
        rows=_require(reader.read_int16(6), "rows"),
        columns=_require(reader.read_int16(6), "columns"),
        x=_require(reader.read_float64(24), "x"),
        y=_require(reader.read_float64(24), "y"),
        elevation_base=_require(reader.read_float64(24), "elevation_base"),
        elevation_min=reader.read_float64(24),
        elevation_max=reader.read_float64(24),
    )
    if result.rows < 0 or result.columns < 0:
        raise GridLibError("Negative profile dimensions.")

    block_pos = _RECORD_B_HEADER_SIZE
    remainder = result.rows * result.columns
    while remainder > 0:
        count = min((BLOCK_SIZE - block_pos) // _ELEVATION_WIDTH, remainder)
        result.elevations.extend(
            _require(reader.read_int16(_ELEVATION_WIDTH), "elevation") for _ in range(count)
        )
        remainder -= count
        block_pos += count * _ELEVATION_WIDTH
        reader.skip(BLOCK_SIZE - block_pos)
        block_pos = 0
    return result


def read_record_c(reader: FortranReader) -> RecordC:
    """Read a record of type C from *reader*."""
    result = RecordC()
    result.has_datum_rmse = reader.read_int16(6)
    result.datum_rmse = [reader.read_int16(6) for _ in range(3)]
    result.datum_rmse_sample_size = reader.read_int16(6)
    result.has_dem_rmse = reader.read_int16(6)
    result.dem_rmse = [reader.read_int16(6) for _ in range(3)]
    result.dem_rmse_sample_size = reader.read_int16(6)
    reader.skip(60)
    return result
import io

import pytest

from gridlib.fortran_reader import FortranReader, GridLibError
from gridlib.records import (
    CartesianCoordinates,
    DegMinSec,
    RecordC,
    format_record_a,
    format_record_c,
    read_record_a,
    read_record_b,
    read_record_c,
    to_degrees,
)

CORNERS = [
    ("500000.0", "5200000.0"),
    ("500000.0", "5230000.0"),
    ("530000.0", "5230000.0"),
    ("530000.0", "5200000.0"),
]


def _pack(fields, block=1024):
    text = "".join(value.rjust(width) for value, width in fields)
    assert len(text) <= block
    return text.ljust(block).encode("ascii")


def _record_a_fields():
    fields = [
        ("TESTFILE", 40), ("Made-up test quadrangle", 40), ("", 29),
        ("-122", 4), ("30", 2), ("15.0", 7),
        ("47", 4), ("15", 2), ("0.0", 7),
        ("1", 1), ("", 1), ("", 3), ("USGS", 4),
        ("1", 6), ("1", 6), ("1", 6), ("10", 6),
    ]
    fields += [("0.0", 24)] * 15
    fields += [("2", 6), ("2", 6), ("4", 6)]
    for easting, northing in CORNERS:
        fields += [(easting, 24), (northing, 24)]
    fields += [
        ("1.5D+02", 24), ("2000.0", 24), ("0.0", 24), ("1", 6),
        ("30.0", 12), ("30.0", 12), ("1.0", 12), ("1", 6), ("3", 6),
        ("", 5), ("", 1), ("", 5), ("", 1), ("1999", 4), ("2000", 4),
        ("", 1), ("1", 1), ("", 2), ("2", 2), ("3", 2),
        ("", 4), ("", 4), ("", 8), ("", 7),
    ]
    return fields


def _record_a_reader():
    return FortranReader(io.BytesIO(_pack(_record_a_fields())))


def _record_b_bytes(elevations, rows, columns=1):
    header = "".join(
        value.rjust(width)
        for value, width in [
            ("1", 6), ("1", 6), (str(rows), 6), (str(columns), 6),
            ("500000.0", 24), ("5200000.0", 24), ("0.0", 24), ("", 24), ("", 24),
        ]
    )
    blocks = []
    current = header
    for elevation in elevations:
        if len(current) + 6 > 1024:
            blocks.append(current.ljust(1024))
            current = ""
        current += str(elevation).rjust(6)
    blocks.append(current.ljust(1024))
    return "".join(blocks).encode("ascii")


def test_to_degrees_whole_degrees():
    assert to_degrees(DegMinSec(47, 0, 0.0)) == 47.0


def test_to_degrees_minutes_and_seconds_add_up():
    assert to_degrees(DegMinSec(10, 60, 0.0)) == to_degrees(DegMinSec(11, 0, 0.0))
    assert to_degrees(DegMinSec(10, 0, 3600.0)) == to_degrees(DegMinSec(11, 0, 0.0))


def test_read_record_a_fields():
    reader = _record_a_reader()
    rec = read_record_a(reader)
    assert reader.tell() == 1024
    assert rec.file_name == "TESTFILE"
    assert rec.text == "Made-up test quadrangle"
    assert rec.longitude == DegMinSec(-122, 30, 15.0)
    assert rec.latitude == DegMinSec(47, 15, 0.0)
    assert rec.process_code == "1"
    assert rec.sectional_indicator == ""
    assert rec.origin_code == "USGS"
    assert rec.ref_sys == 1
    assert rec.ref_sys_zone == 10
    assert rec.map_projection_params == [0.0] * 15
    assert rec.horizontal_unit == 2
    assert rec.polygon_sides == 4
    assert rec.quadrangle_corners == [
        CartesianCoordinates(float(e), float(n)) for e, n in CORNERS
    ]
    assert rec.min_elevation == 150.0
    assert rec.max_elevation == 2000.0
    assert rec.x_resolution == 30.0
    assert rec.rows == 1
    assert rec.columns == 3
    assert rec.largest_contour_interval is None
    assert rec.data_source_year == 1999
    assert rec.inspection_flag is None
    assert rec.data_validation_flag == 1
    assert rec.suspect_and_void_area_flag is None
    assert rec.vertical_datum == 2
    assert rec.horizontal_datum == 3
    assert rec.vertical_datum_shift is None


def test_read_record_a_missing_corner_is_none():
    fields = _record_a_fields()
    index = fields.index(("5230000.0", 24))
    fields[index] = ("", 24)
    rec = read_record_a(FortranReader(io.BytesIO(_pack(fields))))
    assert rec.quadrangle_corners[1] is None
    assert rec.quadrangle_corners[0] == CartesianCoordinates(500000.0, 5200000.0)


def test_read_record_a_truncated_raises():
    data = _pack(_record_a_fields())[:500]
    with pytest.raises(GridLibError):
        read_record_a(FortranReader(io.BytesIO(data)))


def test_format_record_a():
    out = format_record_a(read_record_a(_record_a_reader()))
    lines = out.splitlines()
    assert lines[0] == "file_name: TESTFILE"
    assert "longitude: -122 30 15" in lines
    assert "origin_code: USGS" in lines
    assert "map_projection_params[14]: 0" in lines
    assert not any(line.startswith("percent_void") for line in lines)
    assert not any(line.startswith("sectional_indicator") for line in lines)


def test_read_record_b_single_block():
    elevations = [100, -5, 2500]
    reader = FortranReader(io.BytesIO(_record_b_bytes(elevations, rows=3)))
    rec = read_record_b(reader)
    assert (rec.row, rec.column, rec.rows, rec.columns) == (1, 1, 3, 1)
    assert rec.x == 500000.0
    assert rec.y == 5200000.0
    assert rec.elevation_min is None
    assert rec.elevations == elevations
    assert reader.tell() == 1024


def test_read_record_b_spans_blocks():
    elevations = list(range(200))
    data = _record_b_bytes(elevations, rows=200)
    reader = FortranReader(io.BytesIO(data))
    rec = read_record_b(reader)
    assert rec.elevations == elevations
    assert reader.tell() == len(data)


def test_consecutive_records_b():
    data = _record_b_bytes([1, 2], rows=2) + _record_b_bytes([3, 4, 5], rows=3)
    reader = FortranReader(io.BytesIO(data))
    assert read_record_b(reader).elevations == [1, 2]
    assert read_record_b(reader).elevations == [3, 4, 5]


def test_read_record_b_missing_header_raises():
    data = b" " * 1024
    with pytest.raises(GridLibError):
        read_record_b(FortranReader(io.BytesIO(data)))


def test_read_record_b_missing_elevation_raises():
    data = _record_b_bytes([7], rows=3)
    with pytest.raises(GridLibError):
        read_record_b(FortranReader(io.BytesIO(data)))


def test_read_record_c():
    values = ["1", "5", "6", "7", "100", "1", "8", "9", "10", "200"]
    data = "".join(v.rjust(6) for v in values).ljust(120).encode("ascii")
    reader = FortranReader(io.BytesIO(data))
    rec = read_record_c(reader)
    assert rec.has_datum_rmse == 1
    assert rec.datum_rmse == [5, 6, 7]
    assert rec.datum_rmse_sample_size == 100
    assert rec.has_dem_rmse == 1
    assert rec.dem_rmse == [8, 9, 10]
    assert rec.dem_rmse_sample_size == 200
    assert reader.tell() == 120


def test_format_record_c_empty():
    assert format_record_c(RecordC()) == ""


def test_format_record_c_datum_only():
    rec = RecordC(has_datum_rmse=1, datum_rmse=[5, None, None])
    assert format_record_c(rec) == "has_datum_rmse: 1\ndatum_rmse[0]: 5\n"


def test_format_record_c_zero_flag_is_printed():
    rec = RecordC(has_dem_rmse=0, dem_rmse=[None, 4, None])
    assert format_record_c(rec) == "has_dem_rmse: 0\ndem_rmse[1]: 4\n"
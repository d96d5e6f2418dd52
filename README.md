# gridlib

Building blocks for reading elevation data in the fixed-width DEM format, plus a few
grid and coordinate helpers. The package uses only the standard library.

## Modules

- `gridlib.parse_number`
  - `parse_int(text, bits=32, signed=True, detect_base=False)` parses an integer that
    must fit in the given number of bits.
    - Single underscores between digits are allowed.
    - With `detect_base`, the prefixes `0b`, `0o` and `0x` are recognised.
    - `false` and `null` give 0, and `true` gives 1.
  - `parse_float(text, max_exponent10=308)` parses a floating-point number.
    - `e`, `E`, `d` and `D` are all accepted as the exponent marker.
    - It recognises `Infinity`, `+Infinity`, `-Infinity`, `NaN` and `null` (which gives
      infinity).
  - Both functions raise `ValueError` on invalid input.
- `gridlib.fortran_reader`
  - `FortranReader` reads fixed-width text fields from a binary stream. It offers
    `read_string`, `read_char`, `read_int8`/`16`/`32` and `read_float32`/`64`.
    - Blank numeric fields come back as `None`.
    - Invalid fields and reads past the end raise `GridLibError`.
  - It also has `skip`, `seek`, `tell`, `fill_buffer` and `remaining_buffer_size`.
- `gridlib.records`
  - Dataclasses for the DEM records `RecordA` (header), `RecordB` (an elevation profile)
    and `RecordC` (accuracy statistics), with `DegMinSec` and `CartesianCoordinates`.
  - `read_record_a`, `read_record_b` and `read_record_c` read each record from a
    `FortranReader`.
  - `to_degrees` converts a `DegMinSec` to decimal degrees.
  - `format_record_a` and `format_record_c` list the fields that have values, one per
    line.
- `gridlib.dem_reader`
  - `DemReader(stream)` reads record A when it is created. If the data validation flag
    is set, it also reads record C from the final 1024 bytes.
  - The reader exposes them as `record_a` and `record_c`.
  - `next_record_b()` returns the next B record, or `None` when there are no more.
    Iterating over the reader yields the same records.
- `gridlib.grid_rect`
  - `GridPos`, `GridSize` and `GridRect` are frozen dataclasses.
  - `add(pos, size)` moves a position by a size, saturating at `UINT_MAX`.
  - `get_intersection(a, b)` returns the overlap, or an all-zero rectangle when the two
    do not meet.
  - `is_empty(item)` takes a size or a rectangle.
- `gridlib.utm`
  - `utm_to_geo(easting, northing, utm_zone)` returns `(latitude, longitude)` in degrees.
    It assumes the northern hemisphere.
- `gridlib.model_matrix`
  - `ModelMatrix(matrix)` wraps a 4×4 matrix and returns its `position()`, `col_axis()`,
    `row_axis()` and `vertical_axis()`.
  - `ModelMatrixBuilder` starts from the identity matrix. Its setter methods can be
    chained, and `matrix()` returns the result.

## Installing

```
pip install .
```

## Reading a DEM file

```python
from gridlib.dem_reader import DemReader
from gridlib.records import format_record_a

with open("area.dem", "rb") as f:
    reader = DemReader(f)
    print(format_record_a(reader.record_a))
    for profile in reader:
        print(profile.column, len(profile.elevations))
```

## Rectangles and coordinates

```python
from gridlib.grid_rect import GridPos, GridRect, GridSize, get_intersection
from gridlib.utm import utm_to_geo

a = GridRect(GridPos(5, 5), GridSize(8, 8))
b = GridRect(GridPos(3, 6), GridSize(6, 10))
print(get_intersection(a, b))
# GridRect(pos=GridPos(row=5, column=6), size=GridSize(rows=4, columns=7))

lat, lon = utm_to_geo(500000.0, 6650000.0, 32)
```

## What it does not do

- DEM files are read only as records. The package does not put the elevations together
  into a grid object, and it does not attach a coordinate reference system to them.
- It does not read GeoTIFF files.
- It does not write JSON or image output.
- It has no command-line tools.

## Running the tests

```
pip install .[test]
pytest
```
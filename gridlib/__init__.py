"""DEM record reading, number parsing, grid rectangles, UTM conversion and model matrices."""

__version__ = "0.8.0"
__all__ = [
    "dem_reader",
    "fortran_reader",
    "grid_rect",
    "model_matrix",
    "parse_number",
    "records",
    "utm",
]
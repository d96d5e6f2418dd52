"""Conversion from UTM coordinates to geographic latitude and longitude."""

from __future__ import annotations

import math

__all__ = ["utm_to_geo"]

_FLATTENING = 1 / 298.257222101
_SCALE_FACTOR = 0.9996
_SEMI_MAJOR_AXIS = 6_378_137.0
_FALSE_EASTING = 500_000.0


def _powers(base: float, count: int) -> list[float]:
    """Return [base, base**2, ..., base**count] by repeated multiplication."""
    result = [base]
    for _ in range(count - 1):
        result.append(result[-1] * base)
    return result


def utm_to_geo(easting: float, northing: float, utm_zone: int) -> tuple[float, float]:
    """Convert northern-hemisphere UTM coordinates to (latitude, longitude) in degrees."""
    f = _FLATTENING
    k0 = _SCALE_FACTOR
    a = _SEMI_MAJOR_AXIS
    ecc_squared = 2.0 * f - f * f
    ecc_prime_squared = ecc_squared / (1 - ecc_squared)
    root = math.sqrt(1.0 - ecc_squared)
    e = _powers((1.0 - root) / (1.0 + root), 4)

    m = northing / k0
    mu = m / (a * (1 - ecc_squared * (1 + ecc_squared * (3 + 5 * ecc_squared / 4) / 16) / 4))
    phi1 = (
        mu
        + (3 * e[0] / 2 - 27 * e[2] / 32) * math.sin(2 * mu)
        + (21 * e[1] / 16 - 55 * e[3] / 32) * math.sin(4 * mu)
        + (151 * e[2] / 96) * math.sin(6 * mu)
    )

    sin_phi = math.sin(phi1)
    n1 = a / math.sqrt(1 - ecc_squared * sin_phi * sin_phi)
    r1 = a * (1 - ecc_squared) / math.pow(1 - ecc_squared * sin_phi * sin_phi, 1.5)

    t = _powers(math.tan(phi1) ** 2, 2)
    c = _powers(ecc_prime_squared * math.cos(phi1) ** 2, 2)
    d = _powers((easting - _FALSE_EASTING) / (n1 * k0), 6)

    lat = phi1 - (n1 * math.tan(phi1) / r1) * (
        d[1] / 2.0
        - (5 + 3 * t[0] + 10 * c[0] - 4 * c[1] - 9 * ecc_prime_squared) * d[3] / 24
        + (61 + 90 * t[0] + 298 * c[0] + 45 * t[1] - 252 * ecc_prime_squared - 3 * c[1])
        * d[5] / 720
    )
    # The central meridian lies in the middle of the zone.
    lon_origin = math.radians(6 * utm_zone - 3 - 180)
    lon = lon_origin + (
        d[0]
        - (1 + 2 * t[0] + c[0]) * d[2] / 6
        + (5 + 28 * t[0] - 2 * c[0] - 3 * c[1] + 8 * ecc_prime_squared + 24 * t[1]) * d[4] / 120
    ) / math.cos(phi1)

    return math.degrees(lat), math.degrees(lon)
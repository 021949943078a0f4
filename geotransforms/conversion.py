"""
Closed-form conversions between coordinate systems.

Every function accepts any sequence of three numbers (typically one of the
typed values from geotransforms.coordinates) and returns a new typed value.
Inputs are never mutated. Numeric edge cases such as poles, the origin or the
polar axis are not guarded; NaN and infinities propagate as produced by IEEE
arithmetic instead of raising.
"""

__all__ = [
    'cartesian_to_cylindrical', 'cartesian_to_spherical',
    'cylindrical_to_cartesian', 'spherical_to_cartesian',
    'enu_to_ned', 'ned_to_enu',
    'ecef_to_lla', 'lla_to_ecef',
]

from typing import Sequence, Tuple

import numpy as np

from geotransforms.coordinates import Cartesian, Cylindrical, Enu, Lla, Ned, Spherical
from geotransforms.ellipsoid import Ellipsoid, WGS84
from geotransforms.utils.logging import warn_once


def _components(vec: Sequence[float]) -> Tuple[np.float64, np.float64, np.float64]:
    """Unpacks a 3-component input into numpy float64 scalars"""
    a, b, c = vec
    return np.float64(a), np.float64(b), np.float64(c)


# -------------------------------------------------------------------------
# Spherical / Cylindrical / Cartesian
# -------------------------------------------------------------------------

def spherical_to_cartesian(sphere: Sequence[float]) -> Cartesian:
    """
    Converts spherical coordinates to cartesian coordinates.

        x = rho * sin(theta) * cos(phi)
        y = rho * sin(theta) * sin(phi)
        z = rho * cos(theta)

    Args:
        sphere:
            (rho, theta, phi) in meters, radians, radians

    Returns:
        Cartesian
    """
    rho, theta, phi = _components(sphere)
    with np.errstate(all='ignore'):
        return Cartesian(
            rho * np.sin(theta) * np.cos(phi),
            rho * np.sin(theta) * np.sin(phi),
            rho * np.cos(theta),
        )


def cylindrical_to_cartesian(cyl: Sequence[float]) -> Cartesian:
    """
    Converts cylindrical coordinates to cartesian coordinates.

        x = rho * cos(theta)
        y = rho * sin(theta)
        z = z

    Args:
        cyl:
            (rho, theta, z) in meters, radians, meters

    Returns:
        Cartesian
    """
    rho, theta, z = _components(cyl)
    with np.errstate(all='ignore'):
        return Cartesian(
            rho * np.cos(theta),
            rho * np.sin(theta),
            z,
        )


def cartesian_to_spherical(cart: Sequence[float]) -> Spherical:
    """
    Converts cartesian coordinates to spherical coordinates.

        rho = sqrt(x^2 + y^2 + z^2)
        theta = atan2(sqrt(x^2 + y^2), z)
        phi = atan2(y, x)

    Args:
        cart:
            (x, y, z) in meters

    Returns:
        Spherical
    """
    x, y, z = _components(cart)
    with np.errstate(all='ignore'):
        return Spherical(
            np.sqrt(x ** 2 + y ** 2 + z ** 2),
            np.arctan2(np.sqrt(x ** 2 + y ** 2), z),
            np.arctan2(y, x),
        )


def cartesian_to_cylindrical(cart: Sequence[float]) -> Cylindrical:
    """
    Converts cartesian coordinates to cylindrical coordinates.

        rho = sqrt(x^2 + y^2)
        theta = atan2(y, x)
        z = z

    Args:
        cart:
            (x, y, z) in meters

    Returns:
        Cylindrical
    """
    x, y, z = _components(cart)
    with np.errstate(all='ignore'):
        return Cylindrical(
            np.sqrt(x ** 2 + y ** 2),
            np.arctan2(y, x),
            z,
        )


# -------------------------------------------------------------------------
# Local tangent plane
# -------------------------------------------------------------------------

def enu_to_ned(enu: Sequence[float]) -> Ned:
    """Converts East-North-Up to North-East-Down: (e, n, u) -> (n, e, -u)"""
    east, north, up = _components(enu)
    return Ned(north, east, -up)


def ned_to_enu(ned: Sequence[float]) -> Enu:
    """Converts North-East-Down to East-North-Up: (n, e, d) -> (e, n, -d)"""
    north, east, down = _components(ned)
    return Enu(east, north, -down)


# -------------------------------------------------------------------------
# Geodetic (ellipsoidal)
# -------------------------------------------------------------------------

def lla_to_ecef(lla: Sequence[float], ellipsoid: Ellipsoid = WGS84) -> Cartesian:
    """
    Converts geodetic coordinates to Earth-Centered Earth-Fixed coordinates.

        N = a / sqrt(1 - e^2 * sin^2(lat))
        x = (N + alt) * cos(lat) * cos(lon)
        y = (N + alt) * cos(lat) * sin(lon)
        z = ((b^2 / a^2) * N + alt) * sin(lat)

    Args:
        lla:
            (latitude, longitude, altitude) in radians, radians, meters

        ellipsoid: (Optional)
            The reference ellipsoid. Defaults to WGS84.

    Returns:
        Cartesian ECEF position, in meters
    """
    lat, lon, alt = _components(lla)
    a = ellipsoid.semi_major_axis
    b = ellipsoid.semi_minor_axis

    with np.errstate(all='ignore'):
        sin_lat = np.sin(lat)
        cos_lat = np.cos(lat)
        n = a / np.sqrt(1 - ellipsoid.first_eccentricity_squared * sin_lat ** 2)

        return Cartesian(
            (n + alt) * cos_lat * np.cos(lon),
            (n + alt) * cos_lat * np.sin(lon),
            ((b ** 2 / a ** 2) * n + alt) * sin_lat,
        )


def ecef_to_lla(ecef: Sequence[float], ellipsoid: Ellipsoid = WGS84) -> Lla:
    """
    Converts Earth-Centered Earth-Fixed coordinates to geodetic coordinates
    using Bowring's closed form (no iteration).

        p = sqrt(x^2 + y^2)
        theta = atan2(z * a, p * b)
        lat = atan2(z + e'^2 * b * sin^3(theta), p - e^2 * a * cos^3(theta))
        lon = atan2(y, x)
        alt = p / cos(lat) - N

    Altitude is ill-conditioned on the polar axis (x = y = 0), where cos(lat)
    approaches zero; the unguarded result is returned.

    Args:
        ecef:
            (x, y, z) in meters

        ellipsoid: (Optional)
            The reference ellipsoid. Defaults to WGS84.

    Returns:
        Lla, in radians, radians, meters
    """
    x, y, z = _components(ecef)
    a = ellipsoid.semi_major_axis
    b = ellipsoid.semi_minor_axis
    e2 = ellipsoid.first_eccentricity_squared
    ep2 = ellipsoid.second_eccentricity_squared

    with np.errstate(all='ignore'):
        p = np.sqrt(x ** 2 + y ** 2)
        if p == 0:
            warn_once(
                'ECEF position lies on the polar axis; geodetic altitude is not '
                'well defined there. (this warning will not repeat)'
            )

        theta = np.arctan2(z * a, p * b)
        lat = np.arctan2(
            z + ep2 * b * np.sin(theta) ** 3,
            p - e2 * a * np.cos(theta) ** 3,
        )
        lon = np.arctan2(y, x)

        n = a / np.sqrt(1 - e2 * np.sin(lat) ** 2)
        alt = p / np.cos(lat) - n

    return Lla(lat, lon, alt)

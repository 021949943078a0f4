from geotransforms._version import __version__  # noqa: F401
from geotransforms.utils.logging import LOGGER
from geotransforms.coordinates import Cartesian, Cylindrical, Enu, Lla, Ned, Spherical
from geotransforms.ellipsoid import Ellipsoid, InvalidEllipsoidParameters, GRS80, WGS72, WGS84
from geotransforms.conversion import (
    cartesian_to_cylindrical, cartesian_to_spherical,
    cylindrical_to_cartesian, spherical_to_cartesian,
    enu_to_ned, ned_to_enu,
    ecef_to_lla, lla_to_ecef,
)

__all__ = [
    'Cartesian',
    'Cylindrical',
    'Ellipsoid',
    'Enu',
    'GRS80',
    'InvalidEllipsoidParameters',
    'Lla',
    'Ned',
    'Spherical',
    'WGS72',
    'WGS84',
    'cartesian_to_cylindrical',
    'cartesian_to_spherical',
    'cylindrical_to_cartesian',
    'ecef_to_lla',
    'enu_to_ned',
    'lla_to_ecef',
    'ned_to_enu',
    'spherical_to_cartesian',
    'LOGGER',
]

"""
Typed 3-component coordinate values, one per coordinate system
"""

__all__ = ['Cartesian', 'Cylindrical', 'Enu', 'Lla', 'Ned', 'Spherical']

from typing import Iterator, Tuple, Union

import numpy as np

from geotransforms.utils.functions import round_half_up


class _Vector3:
    """
    Base class for an immutable ordered triple of floats.

    Subclasses name their components via _FIELDS; the components are
    exposed as read-only attributes of the same names.
    """

    _FIELDS: Tuple[str, str, str]

    __slots__ = ('_values',)

    def __init__(
        self,
        a: Union[float, int, str],
        b: Union[float, int, str],
        c: Union[float, int, str],
    ):
        object.__setattr__(self, '_values', (float(a), float(b), float(c)))

    def __getattr__(self, item):
        fields = type(self)._FIELDS
        if item in fields:
            return object.__getattribute__(self, '_values')[fields.index(item)]

        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'")

    def __setattr__(self, key, value):
        raise AttributeError(f"'{type(self).__name__}' is immutable")

    def __delattr__(self, item):
        raise AttributeError(f"'{type(self).__name__}' is immutable")

    def __reduce__(self):
        # Rebuild through __init__; the slot cannot be restored with setattr
        return type(self), self._values

    def __eq__(self, other):
        if type(other) is not type(self):
            return False

        return self._values == other._values

    def __hash__(self):
        return hash((type(self).__name__, self._values))

    def __repr__(self):
        return f'<{type(self).__name__}({", ".join(map(str, self._values))})>'

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self):
        return 3

    def __getitem__(self, index):
        return self._values[index]

    @classmethod
    def from_array(cls, values):
        """
        Creates a coordinate from any array-like holding exactly three numbers,
        e.g. a list, a tuple or a numpy array of shape (3,).

        Args:
            values:
                The three components, in the order of this coordinate system

        Returns:
            An instance of the calling class
        """
        arr = np.asarray(values, dtype=float)
        if arr.shape != (3,):
            raise ValueError(
                f'{cls.__name__} requires exactly 3 components, got shape {arr.shape}'
            )

        return cls(*arr.tolist())

    def rounded(self, precision: int):
        """
        Rounds each component half up to the given precision

        Args:
            precision:
                Number of decimal places to keep

        Returns:
            A new coordinate of the same type
        """
        return type(self)(*(round_half_up(x, precision) for x in self._values))

    def to_array(self) -> np.ndarray:
        """Converts the coordinate to a numpy array of shape (3,)"""
        return np.array(self._values, dtype=np.float64)

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the coordinate to a tuple of floats, in component order"""
        return self._values


class Cartesian(_Vector3):
    """
    Cartesian coordinates (x, y, z) in meters. Also used for Earth-Centered
    Earth-Fixed (ECEF) positions.
    """
    _FIELDS = ('x', 'y', 'z')
    __slots__ = ()


class Spherical(_Vector3):
    """
    Spherical coordinates (rho, theta, phi): radial distance in meters, polar
    angle measured from the +z axis in radians, and azimuth from the +x axis
    in radians.
    """
    _FIELDS = ('rho', 'theta', 'phi')
    __slots__ = ()


class Cylindrical(_Vector3):
    """Cylindrical coordinates (rho, theta, z): meters, radians, meters"""
    _FIELDS = ('rho', 'theta', 'z')
    __slots__ = ()


class Enu(_Vector3):
    """Local tangent plane East-North-Up coordinates, in meters"""
    _FIELDS = ('east', 'north', 'up')
    __slots__ = ()


class Ned(_Vector3):
    """Local tangent plane North-East-Down coordinates, in meters"""
    _FIELDS = ('north', 'east', 'down')
    __slots__ = ()


class Lla(_Vector3):
    """
    Geodetic coordinates (latitude, longitude, altitude) referenced to an
    ellipsoid. Latitude and longitude in radians, altitude in meters above
    the ellipsoid surface.
    """
    _FIELDS = ('latitude', 'longitude', 'altitude')
    __slots__ = ()

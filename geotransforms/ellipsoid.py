"""
Reference ellipsoid model used by the geodetic conversions
"""

__all__ = ['Ellipsoid', 'InvalidEllipsoidParameters', 'GRS80', 'WGS72', 'WGS84']

import math
from typing import Optional

from geotransforms._const import GRS80_A, GRS80_F, WGS72_A, WGS72_F, WGS84_A, WGS84_F
from geotransforms.utils.mixins import LoggingMixin


class InvalidEllipsoidParameters(ValueError):
    """Raised when an ellipsoid cannot be built from the given axis/flattening"""


class Ellipsoid(LoggingMixin):
    """
    An immutable oblate ellipsoid of revolution, defined by its semi-major axis
    and flattening. The semi-minor axis and both eccentricities are derived once
    at construction time.

    Args:
        semi_major_axis:
            Equatorial radius, in meters. Must be finite and positive.

        flattening:
            Flattening (a - b) / a. Must be finite and within [0, 1).

        name: (Optional)
            A label for the ellipsoid, e.g. 'WGS84'

    Raises:
        InvalidEllipsoidParameters
    """

    def __init__(
        self,
        semi_major_axis: float,
        flattening: float,
        name: Optional[str] = None,
    ):
        super().__init__()
        a, f = float(semi_major_axis), float(flattening)

        if not math.isfinite(a) or a <= 0:
            raise InvalidEllipsoidParameters(
                f'semi-major axis must be a positive finite number, got {semi_major_axis}'
            )

        # f in [0, 1) keeps b = a * (1 - f) within [0, a]; underflow to 0 is checked below
        if not math.isfinite(f) or not 0 <= f < 1:
            raise InvalidEllipsoidParameters(
                f'flattening must be within [0, 1), got {flattening}'
            )

        b = a * (1 - f)
        if not b > 0:
            raise InvalidEllipsoidParameters(
                f'semi-minor axis must be positive, got {b} from a={a}, f={f}'
            )

        e2 = 1 - (b / a) ** 2
        try:
            ep2 = (a / b) ** 2 - 1
        except OverflowError:
            ep2 = math.inf
        if not math.isfinite(ep2):
            raise InvalidEllipsoidParameters(
                f'second eccentricity overflows for a={a}, f={f}'
            )

        self._name = name
        self._a = a
        self._f = f
        self._b = b
        self._e2 = e2
        self._ep2 = ep2
        self._e = math.sqrt(e2)
        self._ep = math.sqrt(ep2)
        self._frozen = True

        self.logger.debug('Created %r (b=%s, e=%s, e\'=%s)', self, b, self._e, self._ep)

    @classmethod
    def from_axes(
        cls,
        semi_major_axis: float,
        semi_minor_axis: float,
        name: Optional[str] = None,
    ) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major and semi-minor axes.

        Args:
            semi_major_axis:
                Equatorial radius, in meters

            semi_minor_axis:
                Polar radius, in meters. Must be positive and not larger
                than the semi-major axis.

            name: (Optional)
                A label for the ellipsoid

        Returns:
            Ellipsoid
        """
        a, b = float(semi_major_axis), float(semi_minor_axis)
        if not math.isfinite(a) or a <= 0:
            raise InvalidEllipsoidParameters(
                f'semi-major axis must be a positive finite number, got {semi_major_axis}'
            )
        if not math.isfinite(b) or not 0 < b <= a:
            raise InvalidEllipsoidParameters(
                f'semi-minor axis must be within (0, {a}], got {semi_minor_axis}'
            )

        return cls(a, (a - b) / a, name=name)

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"'{type(self).__name__}' is immutable")

        super().__setattr__(key, value)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        label = f'{self._name}, ' if self._name else ''
        return f'<Ellipsoid({label}a={self._a}, f={self._f})>'

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def semi_major_axis(self) -> float:
        """Equatorial radius a, in meters"""
        return self._a

    @property
    def semi_minor_axis(self) -> float:
        """Polar radius b = a * (1 - f), in meters"""
        return self._b

    @property
    def flattening(self) -> float:
        return self._f

    @property
    def first_eccentricity(self) -> float:
        """First eccentricity e, where e^2 = 1 - (b/a)^2"""
        return self._e

    @property
    def first_eccentricity_squared(self) -> float:
        return self._e2

    @property
    def second_eccentricity(self) -> float:
        """Second eccentricity e', where e'^2 = (a/b)^2 - 1"""
        return self._ep

    @property
    def second_eccentricity_squared(self) -> float:
        return self._ep2


WGS84 = Ellipsoid(WGS84_A, WGS84_F, name='WGS84')
GRS80 = Ellipsoid(GRS80_A, GRS80_F, name='GRS80')
WGS72 = Ellipsoid(WGS72_A, WGS72_F, name='WGS72')

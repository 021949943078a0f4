
from geotransforms.coordinates import _Vector3


def _assert_rounded_equivalence(vec1: _Vector3, vec2: _Vector3, precision: int = 7):
    return type(vec1) is type(vec2) and vec1.rounded(precision) == vec2.rounded(precision)


from pytest import approx

from geotransforms.coordinates import _Vector3


def assert_vectors_equal(v1: _Vector3, v2: _Vector3, abs_tol=1e-9, rel_tol=1e-9):
    """
    Asserts that two coordinate values are of the same type and that each
    pair of components agrees within the given tolerances.

    Args:
        v1: The first coordinate value
        v2: The second coordinate value
        abs_tol: The absolute tolerance for floating point comparison.
        rel_tol: The relative tolerance for floating point comparison.
    """
    try:
        assert type(v1) is type(v2)
        for a, b in zip(v1, v2):
            assert a == approx(b, abs=abs_tol, rel=rel_tol)
    except AssertionError as e:
        raise AssertionError(f'{v1!r} != {v2!r}') from e

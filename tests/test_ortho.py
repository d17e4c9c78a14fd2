import pytest

from rayforge.ortho import OrthonormalFrame
from rayforge.vec3 import Vec3, unit_vector


DIRECTIONS = [
    Vec3(0.0, 0.0, 1.0),
    Vec3(1.0, 0.0, 0.0),
    Vec3(3.0, -2.0, 5.0),
    Vec3(-0.95, 0.1, 0.2),
]


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_axes_are_orthonormal(direction):
    frame = OrthonormalFrame.from_w(direction)
    for axis in frame:
        assert axis.length() == pytest.approx(1.0)
    assert frame.u.dot(frame.v) == pytest.approx(0.0, abs=1e-12)
    assert frame.u.dot(frame.w) == pytest.approx(0.0, abs=1e-12)
    assert frame.v.dot(frame.w) == pytest.approx(0.0, abs=1e-12)


def test_local_maps_basis_vectors_to_axes():
    frame = OrthonormalFrame.from_w(Vec3(1.0, 2.0, 3.0))
    assert list(frame.local(1, 0, 0)) == pytest.approx(list(frame.u), abs=1e-12)
    assert list(frame.local(0, 1, 0)) == pytest.approx(list(frame.v), abs=1e-12)
    assert list(frame.local(0, 0, 1)) == pytest.approx(list(frame.w), abs=1e-12)


def test_local_vector_matches_local():
    frame = OrthonormalFrame.from_w(Vec3(-2.0, 0.5, 1.0))
    coords = Vec3(0.3, -1.2, 2.5)
    expected = list(frame.local(0.3, -1.2, 2.5))
    assert list(frame.local_vector(coords)) == pytest.approx(expected, abs=1e-12)


def test_local_preserves_length():
    frame = OrthonormalFrame.from_w(Vec3(4.0, 1.0, -1.0))
    coords = Vec3(0.3, -1.2, 2.5)
    assert frame.local_vector(coords).length() == pytest.approx(coords.length())


def test_indexing_and_default_frame():
    frame = OrthonormalFrame.from_w(Vec3(0.0, 1.0, 0.0))
    assert frame[0] == frame.u
    assert frame[2] == frame.w
    with pytest.raises(IndexError):
        frame[3]
    empty = OrthonormalFrame()
    assert empty.local(1.0, 2.0, 3.0) == Vec3()
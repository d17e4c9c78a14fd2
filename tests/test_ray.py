import pytest

from rayforge.ray import Ray
from rayforge.vec3 import Point3, Vec3


def test_default_ray():
    r = Ray()
    assert r.origin == Point3()
    assert r.direction == Vec3()
    assert r.time == 0.0


def test_time_defaults_to_zero_and_can_be_set():
    origin = Point3(1, 2, 3)
    direction = Vec3(0, 0, 1)
    assert Ray(origin, direction).time == 0.0
    assert Ray(origin, direction, 0.5).time == 0.5


def test_at_zero_is_origin():
    r = Ray(Point3(1, -2, 3), Vec3(4, 5, 6))
    assert r.at(0) == r.origin


def test_at_one_is_origin_plus_direction():
    r = Ray(Point3(1, -2, 3), Vec3(4, 5, 6))
    assert r.at(1) == r.origin + r.direction


def test_at_returns_point():
    r = Ray(Point3(1, -2, 3), Vec3(4, 5, 6))
    result = r.at(2.5)
    assert isinstance(result, Point3)
    assert list(result) == pytest.approx([11.0, 10.5, 18.0])


def test_at_is_linear_in_t():
    r = Ray(Point3(0.5, 1, -1), Vec3(2, -1, 3))
    step = r.at(3) - r.at(2)
    assert list(step) == pytest.approx(list(r.direction))


def test_ray_is_immutable():
    r = Ray(Point3(1, 2, 3), Vec3(0, 1, 0))
    with pytest.raises(AttributeError):
        setattr(r, "time", 1.0)
    assert r.time == 0.0
    assert list(r.at(2)) == pytest.approx([1.0, 4.0, 3.0])
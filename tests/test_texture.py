import random

import pytest

from rayforge.perlin import Perlin
from rayforge.texture import CheckerTexture, NoiseTexture, SolidColor, Texture
from rayforge.vec3 import Point3, Vec3

RED = Vec3(1, 0, 0)
BLUE = Vec3(0, 0, 1)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_solid_color_returns_albedo_everywhere():
    tex = SolidColor(Vec3(0.2, 0.4, 0.6))
    assert tex.value(0, 0, Point3(0, 0, 0)) == Vec3(0.2, 0.4, 0.6)
    assert tex.value(0.7, 0.1, Point3(-5, 3, 8)) == Vec3(0.2, 0.4, 0.6)


def test_solid_color_from_rgb_matches_constructor():
    assert SolidColor.from_rgb(0.1, 0.2, 0.3).value(0, 0, Point3()) == SolidColor(
        Vec3(0.1, 0.2, 0.3)
    ).value(0, 0, Point3())


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point3(0.5, 0.5, 0.5), RED),
        (Point3(1.5, 0.5, 0.5), BLUE),
        (Point3(1.5, 1.5, 0.5), RED),
        (Point3(-0.5, 0.5, 0.5), BLUE),
        (Point3(-0.5, -0.5, 0.5), RED),
    ],
)
def test_checker_alternates_by_cell(point, expected):
    tex = CheckerTexture.from_colors(1.0, RED, BLUE)
    assert tex.value(0, 0, point) == expected


def test_checker_scale_widens_cells():
    tex = CheckerTexture.from_colors(2.0, RED, BLUE)
    assert tex.value(0, 0, Point3(1.5, 0.5, 0.5)) == RED
    assert tex.value(0, 0, Point3(2.5, 0.5, 0.5)) == BLUE


def test_checker_accepts_nested_textures():
    inner = CheckerTexture.from_colors(0.5, RED, BLUE)
    outer = CheckerTexture(1.0, inner, SolidColor(Vec3(0, 1, 0)))
    point = Point3(0.75, 0.25, 0.25)
    assert outer.value(0, 0, point) == inner.value(0, 0, point)
    assert outer.value(0, 0, Point3(1.5, 0.5, 0.5)) == Vec3(0, 1, 0)


def test_noise_texture_at_origin_is_mid_grey():
    random.seed(7)
    tex = NoiseTexture(4.0)
    result = tex.value(0, 0, Point3(0, 0, 0))
    assert result.x == pytest.approx(0.5)
    assert result.y == pytest.approx(0.5)
    assert result.z == pytest.approx(0.5)


@pytest.mark.parametrize(
    "point", [Point3(0.3, 0.7, 1.1), Point3(-2.25, 4.5, 9.125), Point3(10, 0.5, -3.5)]
)
def test_noise_texture_is_grey_and_in_unit_range(point):
    random.seed(11)
    result = NoiseTexture(2.0).value(0, 0, point)
    assert result.x == result.y == result.z
    assert 0.0 <= result.x <= 1.0


def test_noise_texture_uses_given_generator():
    random.seed(3)
    noise = Perlin()
    tex = NoiseTexture(1.0, noise)
    point = Point3(0.4, 0.8, 1.2)
    random.seed(3)
    other = NoiseTexture(1.0, Perlin())
    assert tex.noise is noise
    assert tex.value(0, 0, point) == other.value(0, 0, point)
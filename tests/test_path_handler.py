import math

import pytest

from pursuit_controller.path_handler import PathGenerator, TypePath


def test_type_path_parses_configuration_names():
    assert TypePath("lineare") is TypePath.LINEARE
    assert TypePath("s_curve") is TypePath.S_CURVE
    with pytest.raises(ValueError):
        TypePath("zigzag")


def test_lineare_path_is_diagonal_and_starts_at_one():
    path = PathGenerator(TypePath.LINEARE).generate_path(10.0)
    assert len(path) == 9
    assert path[0] == (1.0, 1.0)
    assert all(x == y for x, y in path)


def test_lineare_path_truncates_fractional_length():
    whole = PathGenerator(TypePath.LINEARE).generate_path(6.0)
    fractional = PathGenerator(TypePath.LINEARE).generate_path(6.9)
    assert whole == fractional


@pytest.mark.parametrize("kind", list(TypePath))
def test_non_positive_length_gives_empty_path(kind):
    assert PathGenerator(kind).generate_path(0.0) == []
    assert PathGenerator(kind).generate_path(-5.0) == []


def test_circle_points_lie_on_radius():
    length = 20.0
    path = PathGenerator(TypePath.CIRCLE).generate_path(length)
    radius = length / (2.0 * math.pi)
    assert len(path) == 20
    for x, y in path:
        assert math.hypot(x, y) == pytest.approx(radius)
    assert path[0] == pytest.approx((radius, 0.0))


def test_sinusoid_follows_cosine():
    path = PathGenerator(TypePath.SINUSOID).generate_path(8.0)
    assert [x for x, _ in path] == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
    for x, y in path:
        assert y == pytest.approx(math.cos(x))


def test_s_curve_is_shifted_to_start_at_one():
    path = PathGenerator(TypePath.S_CURVE).generate_path(30.0)
    assert path[0][0] == 1.0
    assert min(y for _, y in path) == pytest.approx(1.0)
    assert all(x < 31.0 for x, _ in path)


def test_s_curve_spacing_is_one_tenth():
    path = PathGenerator(TypePath.S_CURVE).generate_path(5.0)
    steps = [b[0] - a[0] for a, b in zip(path, path[1:])]
    assert all(step == pytest.approx(0.1) for step in steps)


def test_generate_path_dispatches_s_curve():
    generator = PathGenerator(TypePath.S_CURVE)
    assert generator.generate_path(12.0) == generator.generate_s_curve_path(12.0)


def test_path_type_can_be_changed():
    generator = PathGenerator(TypePath.CIRCLE)
    generator.path_type = TypePath.LINEARE
    assert generator.path_type is TypePath.LINEARE
    assert generator.generate_path(3.0) == [(1.0, 1.0), (2.0, 2.0)]
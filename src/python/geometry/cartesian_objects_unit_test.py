import math

import numpy as np
import pytest
import scipy.spatial.transform as sst  # type: ignore[import-untyped]

import geometry


def test_pose_wraps_heading() -> None:
    pose = geometry.Pose2d(1, 2, 3 * math.pi / 2)
    assert np.isclose(pose.heading, -math.pi / 2)
    assert pose.is_close(geometry.Pose2d(1, 2, -math.pi / 2))
    assert pose.is_finite()
    assert not geometry.Pose2d(math.nan, 0, 0).is_finite()
    assert not geometry.Pose2d(0, 0, math.inf).is_finite()


def test_pose_distance() -> None:
    p0 = geometry.Pose2d(1, 0)
    p1 = geometry.Pose2d(1, 1, 1.0)
    assert p0.distance(p1) == 1.0
    assert geometry.Pose2d.zero().distance(geometry.Pose2d(3, 4)) == 5.0


@pytest.mark.parametrize(
    "origin, pose",
    [
        (geometry.Pose2d(0, 0, 0), geometry.Pose2d(1, 2, 0.5)),
        (geometry.Pose2d(1, -1, math.pi / 2), geometry.Pose2d(2, 3, -0.2)),
        (geometry.Pose2d(-4, 2, -2.5), geometry.Pose2d(0, 0, 3.0)),
    ],
)
def test_relative_to(origin: geometry.Pose2d, pose: geometry.Pose2d) -> None:
    local = pose.relative_to(origin)
    # Rotating the world offset by the inverse origin heading gives the local offset.
    inverse = sst.Rotation.from_euler("z", -origin.heading)
    expected = inverse.apply([pose.x - origin.x, pose.y - origin.y, 0.0])

    assert np.isclose(local.x, expected[0])
    assert np.isclose(local.y, expected[1])
    assert np.isclose(
        local.heading, geometry.wrap_radians(pose.heading - origin.heading)
    )
    assert origin.transform_by(local).is_close(pose)


def test_exp_straight_line() -> None:
    start = geometry.Pose2d(1, 1, math.pi / 2)
    end = start.exp(geometry.Twist2d(2, 0, 0))
    assert end.is_close(geometry.Pose2d(1, 3, math.pi / 2))


def test_exp_quarter_circle() -> None:
    # A quarter circle of radius 1 travelling counterclockwise.
    twist = geometry.Twist2d(math.pi / 2, 0, math.pi / 2)
    end = geometry.Pose2d.zero().exp(twist)
    assert end.is_close(geometry.Pose2d(1, 1, math.pi / 2))


@pytest.mark.parametrize(
    "start, end",
    [
        (geometry.Pose2d(0, 0, 0), geometry.Pose2d(2, 0, 0)),
        (geometry.Pose2d(0, 0, 0), geometry.Pose2d(1, 1, math.pi / 2)),
        (geometry.Pose2d(1, -2, 0.3), geometry.Pose2d(3, 1, -0.4)),
    ],
)
def test_log_inverts_exp(start: geometry.Pose2d, end: geometry.Pose2d) -> None:
    twist = start.log(end)
    assert start.exp(twist).is_close(end)


def test_interpolate() -> None:
    start = geometry.Pose2d(0, 0, 0)
    end = geometry.Pose2d(1, 1, math.pi / 2)

    assert start.interpolate(end, 0.0) == start
    assert start.interpolate(end, 1.0) == end
    assert start.interpolate(end, 2.0) == end
    # Halfway along the unit quarter circle.
    mid = start.interpolate(end, 0.5)
    half = 0.5**0.5
    assert mid.is_close(geometry.Pose2d(half, 1 - half, math.pi / 4))


def test_interpolate_across_wrap_around() -> None:
    start = geometry.Pose2d(0, 0, math.pi - 0.1)
    end = geometry.Pose2d(0, 0, -math.pi + 0.1)
    mid = start.interpolate(end, 0.5)
    # Takes the short way around through pi rather than sweeping through zero.
    assert np.isclose(abs(mid.heading), math.pi)

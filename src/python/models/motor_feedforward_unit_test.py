import pytest
from config import robot_config

from models import motor_feedforward

_KS = 0.2
_KV = 2.5
_KA = 0.3


@pytest.fixture
def feedforward() -> motor_feedforward.SimpleMotorFeedforward:
    gains = robot_config.FeedforwardGains(ks=_KS, kv=_KV, ka=_KA)
    return motor_feedforward.SimpleMotorFeedforward(gains)


def test_zero(feedforward: motor_feedforward.SimpleMotorFeedforward) -> None:
    assert feedforward.calculate(0.0) == 0.0
    assert feedforward.calculate(0.0, 0.0) == 0.0


@pytest.mark.parametrize(
    "velocity, acceleration", [(1.0, 0.0), (-1.0, 0.0), (2.0, 1.0), (-0.5, -3.0)]
)
def test_calculate(
    feedforward: motor_feedforward.SimpleMotorFeedforward,
    velocity: float,
    acceleration: float,
) -> None:
    sign = 1 if velocity > 0 else -1
    expected = _KS * sign + _KV * velocity + _KA * acceleration
    assert feedforward.calculate(velocity, acceleration) == pytest.approx(expected)


def test_static_friction_only_at_zero_velocity_when_accelerating(
    feedforward: motor_feedforward.SimpleMotorFeedforward,
) -> None:
    assert feedforward.calculate(0.0, 2.0) == pytest.approx(_KA * 2.0)


@pytest.mark.parametrize("velocity, acceleration", [(1.0, 0.0), (-2.0, 0.5)])
def test_velocity_inverts_calculate(
    feedforward: motor_feedforward.SimpleMotorFeedforward,
    velocity: float,
    acceleration: float,
) -> None:
    voltage = feedforward.calculate(velocity, acceleration)
    assert feedforward.velocity(voltage, acceleration) == pytest.approx(velocity)


def test_velocity_below_static_friction(
    feedforward: motor_feedforward.SimpleMotorFeedforward,
) -> None:
    assert feedforward.velocity(_KS / 2) == 0.0
    assert feedforward.velocity(-_KS / 2) == 0.0


def test_max_achievable_velocity(
    feedforward: motor_feedforward.SimpleMotorFeedforward,
) -> None:
    expected_velocity = (12.0 - _KS) / _KV
    assert feedforward.max_achievable_velocity(12.0) == pytest.approx(expected_velocity)
    assert feedforward.max_achievable_velocity(12.0, 2.0) == pytest.approx(
        (12.0 - _KS - _KA * 2.0) / _KV
    )

import json
import pathlib
from typing import Any, Dict

import pydantic
import pytest

from config import robot_config, session


def _config_dict(**overrides: Any) -> Dict[str, Any]:
    config = {
        "track_width": 0.6,
        "feedforward": {"ks": 0.2, "kv": 2.5, "ka": 0.3},
        "ramsete": {"b": 2.0, "zeta": 0.7},
        "left_pid": {"p": 1.0},
        "right_pid": {"p": 1.0},
    }
    config.update(overrides)
    return config


def test_default_robot_config() -> None:
    config = session.get_robot_config()
    assert config.track_width > 0.0
    assert config.mode == robot_config.DriveMode.VOLTAGE
    assert config.left_pid is not None
    assert config.right_pid is not None


def test_velocity_robot_config() -> None:
    config = session.get_robot_config(robot_name="velocity")
    assert config.mode == robot_config.DriveMode.VELOCITY
    assert config.gain_profile == 1
    assert config.left_pid is None


@pytest.mark.parametrize("track_width", [0.0, -0.5])
def test_invalid_track_width(track_width: float) -> None:
    with pytest.raises(pydantic.ValidationError):
        robot_config.RobotConfig.model_validate(_config_dict(track_width=track_width))


@pytest.mark.parametrize(
    "ramsete", [{"b": 0.0, "zeta": 0.7}, {"b": 2.0, "zeta": 1.0}, {"b": 2.0}]
)
def test_invalid_ramsete_gains(ramsete: Dict[str, float]) -> None:
    with pytest.raises(pydantic.ValidationError):
        robot_config.RobotConfig.model_validate(_config_dict(ramsete=ramsete))


def test_missing_feedforward() -> None:
    config = _config_dict()
    del config["feedforward"]
    with pytest.raises(pydantic.ValidationError):
        robot_config.RobotConfig.model_validate(config)


def test_voltage_mode_requires_pid() -> None:
    with pytest.raises(pydantic.ValidationError):
        robot_config.RobotConfig.model_validate(_config_dict(right_pid=None))

    # Velocity mode closes the loop on the motor controller so no gains are needed.
    config = robot_config.RobotConfig.model_validate(
        _config_dict(mode="VELOCITY", left_pid=None, right_pid=None)
    )
    assert config.mode == robot_config.DriveMode.VELOCITY


def test_config_is_read_only() -> None:
    config = robot_config.RobotConfig.model_validate(_config_dict())
    with pytest.raises(pydantic.ValidationError):
        config.track_width = 1.0  # type: ignore[misc]


def test_from_json(tmp_path: pathlib.Path) -> None:
    file_path = tmp_path / "robot.json"
    file_path.write_text(json.dumps(_config_dict(track_width=0.7)))
    assert robot_config.RobotConfig.from_json(file_path).track_width == 0.7

    with pytest.raises(ValueError):
        robot_config.RobotConfig.from_json(tmp_path / "missing.json")

import os
from typing import Optional

import system_info

from config import robot_config

_ROBOT_NAME_ENV = "PATHFOLLOW_ROBOT"
_DEFAULT_ROBOT_NAME = "default"


def get_robot_config(*, robot_name: Optional[str] = None) -> robot_config.RobotConfig:
    """The config of the named robot, the configured robot by default."""
    robot_name = robot_name or get_robot_name()
    file_path = system_info.get_robot_config_directory() / f"{robot_name}.json"
    return robot_config.RobotConfig.from_json(file_path)


def get_robot_name() -> str:
    """The configured robot."""
    return os.environ.get(_ROBOT_NAME_ENV, _DEFAULT_ROBOT_NAME)

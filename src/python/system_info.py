import os
import pathlib

# Environment overrides, useful when the project is not run from its repository.
_LOG_DIR_ENV = "PATHFOLLOW_LOG_DIR"
_CONFIG_DIR_ENV = "PATHFOLLOW_CONFIG_DIR"


def get_root_project_directory() -> pathlib.Path:
    """Gets the root directory of this project's repository."""
    current_module = pathlib.Path(__file__).resolve()
    directories = current_module.parts
    idx = directories.index("src")

    return pathlib.Path().joinpath(*directories[:idx])


def get_log_directory() -> pathlib.Path:
    if log_dir := os.environ.get(_LOG_DIR_ENV):
        return pathlib.Path(log_dir)

    return get_root_project_directory() / "var" / "log"


def get_robot_config_directory() -> pathlib.Path:
    if config_dir := os.environ.get(_CONFIG_DIR_ENV):
        return pathlib.Path(config_dir)

    return get_root_project_directory() / "env" / "robot_configs"

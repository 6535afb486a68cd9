import argparse
import asyncio
import pathlib
import sys


def _set_project_path() -> None:
    project_dir = pathlib.Path(__file__).resolve().parent
    pathfollow_parent_dir = project_dir / "src/python"
    sys.path.append(str(pathfollow_parent_dir))


if __name__ == "__main__":
    # Sets the project path so we can find the controls module.
    _set_project_path()
    parser = argparse.ArgumentParser(
        description="Follows a trajectory with a simulated drivetrain."
    )
    parser.add_argument(
        "trajectory", type=pathlib.Path, help="Path to a trajectory json file."
    )
    parser.add_argument(
        "--robot", type=str, default=None, help="Name of the robot config to use."
    )
    parser.add_argument(
        "--rate", type=float, default=50.0, help="Control rate in Hz."
    )
    args = parser.parse_args()
    from config import session
    from controls import follow_runner
    from planning import trajectory

    config = session.get_robot_config(robot_name=args.robot)
    path = trajectory.Trajectory.from_json(args.trajectory)
    try:
        final_error = asyncio.run(follow_runner.simulate(path, config, args.rate))
        print(
            f"Final error x={final_error.x:.4f}m y={final_error.y:.4f}m "
            f"heading={final_error.heading:.4f}rad"
        )
    except KeyboardInterrupt:
        # Prevent ^C or ^Z from being printed
        sys.stderr.write("\r")

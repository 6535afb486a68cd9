from typing import Optional, Tuple

import geometry
from config import robot_config
from drivers import primitives as driver_primitives
from models import motor_feedforward
from models import primitives as model_primitives

from controls import pid_controller


class DriveOutput:
    """Turns the target wheel speeds of a tick into a drive command. The feedforward
    acceleration comes from the change in target since the previous tick.
    """

    # Whether the measured wheel speeds are needed to build the command.
    uses_wheel_speeds: bool = False

    def __init__(self, feedforward: motor_feedforward.SimpleMotorFeedforward) -> None:
        self._feedforward = feedforward

    def reset(self) -> None:
        """Clears any state carried between ticks. Called when following starts."""
        ...

    def command(
        self,
        target: model_primitives.WheelSpeeds,
        previous_target: model_primitives.WheelSpeeds,
        time_step: float,
        measured: Optional[model_primitives.WheelSpeeds] = None,
    ) -> driver_primitives.DriveCommand:
        raise NotImplementedError

    def _feedforward_voltages(
        self,
        target: model_primitives.WheelSpeeds,
        previous_target: model_primitives.WheelSpeeds,
        time_step: float,
    ) -> Tuple[float, float]:
        left = self._feedforward.calculate(
            target.left, _acceleration(target.left, previous_target.left, time_step)
        )
        right = self._feedforward.calculate(
            target.right, _acceleration(target.right, previous_target.right, time_step)
        )
        return left, right


class VoltageOutput(DriveOutput):
    """Feedforward plus a software PID correction per side on the measured wheel
    speeds, sent as raw voltages limited to the battery voltage.
    """

    uses_wheel_speeds = True

    def __init__(
        self,
        feedforward: motor_feedforward.SimpleMotorFeedforward,
        left_controller: pid_controller.PIDController,
        right_controller: pid_controller.PIDController,
        max_voltage: float,
    ) -> None:
        super().__init__(feedforward)
        self._left_controller = left_controller
        self._right_controller = right_controller
        self._max_voltage = max_voltage

    def reset(self) -> None:
        self._left_controller.reset()
        self._right_controller.reset()

    def command(
        self,
        target: model_primitives.WheelSpeeds,
        previous_target: model_primitives.WheelSpeeds,
        time_step: float,
        measured: Optional[model_primitives.WheelSpeeds] = None,
    ) -> driver_primitives.VoltageCommand:
        if measured is None:
            raise ValueError("Voltage output requires the measured wheel speeds.")

        left_ff, right_ff = self._feedforward_voltages(
            target, previous_target, time_step
        )
        left = left_ff + self._left_controller.calculate(measured.left, target.left)
        right = right_ff + self._right_controller.calculate(
            measured.right, target.right
        )
        return driver_primitives.VoltageCommand(
            self._saturate(left), self._saturate(right)
        )

    def _saturate(self, voltage: float) -> float:
        return geometry.clip(voltage, -self._max_voltage, self._max_voltage)


class VelocityOutput(DriveOutput):
    """Speed setpoints plus feedforward voltages for motor controllers running their
    own velocity loop with the configured gain profile. No software PID is involved.
    """

    def __init__(
        self, feedforward: motor_feedforward.SimpleMotorFeedforward, gain_profile: int
    ) -> None:
        super().__init__(feedforward)
        self._gain_profile = gain_profile

    def command(
        self,
        target: model_primitives.WheelSpeeds,
        previous_target: model_primitives.WheelSpeeds,
        time_step: float,
        measured: Optional[model_primitives.WheelSpeeds] = None,
    ) -> driver_primitives.VelocityCommand:
        left_ff, right_ff = self._feedforward_voltages(
            target, previous_target, time_step
        )
        return driver_primitives.VelocityCommand(
            target.left, left_ff, target.right, right_ff, self._gain_profile
        )


def from_config(config: robot_config.RobotConfig) -> DriveOutput:
    """The drive output matching the configured drive mode."""
    feedforward = motor_feedforward.SimpleMotorFeedforward(config.feedforward)
    if config.mode == robot_config.DriveMode.VELOCITY:
        return VelocityOutput(feedforward, config.gain_profile)
    elif config.mode == robot_config.DriveMode.VOLTAGE:
        if config.left_pid is None or config.right_pid is None:
            raise ValueError("Voltage mode requires PID gains for both sides.")

        return VoltageOutput(
            feedforward,
            pid_controller.PIDController.from_gains(config.left_pid),
            pid_controller.PIDController.from_gains(config.right_pid),
            config.max_voltage,
        )
    else:
        raise NotImplementedError(f"Unexpected drive mode: {config.mode}")


def _acceleration(target: float, previous_target: float, time_step: float) -> float:
    """Rate of change of the target speed. No time has passed on the first tick or on
    repeated ticks at the same timestamp, there the acceleration term is dropped.
    """
    if time_step <= 0.0:
        return 0.0

    return (target - previous_target) / time_step

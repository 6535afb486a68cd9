import time
from typing import Optional

from config import robot_config


class PIDController:
    """A PID Controller. Handles controlling a simple system via PID control gains. Time
    interval is set by how often control signal is calculated and handled internally.
    """

    def __init__(self, p_gain: float = 0, i_gain: float = 0, d_gain: float = 0):
        self._p_gain = p_gain
        self._i_gain = i_gain
        self._d_gain = d_gain

        self._integrated_error = 0.0
        self._previous_error = 0.0
        self._previous_control_signal_ts: Optional[float] = None

    @classmethod
    def from_gains(cls, gains: robot_config.PIDGains) -> "PIDController":
        return cls(gains.p, gains.i, gains.d)

    def calculate(self, measured: float, setpoint: float) -> float:
        """The control signal driving the measured value to the setpoint."""
        return self.control_signal(setpoint - measured)

    def control_signal(self, error: float) -> float:
        now = time.perf_counter()
        error_rate_of_change = 0.0
        if self._previous_control_signal_ts is not None:
            time_step = now - self._previous_control_signal_ts
            # Repeated calls within the same timestamp only update the proportional
            # part.
            if time_step > 0.0:
                self._integrated_error += time_step * error
                error_rate_of_change = (error - self._previous_error) / time_step

        self._previous_control_signal_ts = now
        self._previous_error = error

        return (
            self._calc_p_control(error)
            + self._calc_i_control()
            + self._calc_d_control(error_rate_of_change)
        )

    def reset(self) -> None:
        self._integrated_error = 0.0
        self._previous_error = 0.0
        self._previous_control_signal_ts = None

    def _calc_p_control(self, error: float) -> float:
        return self._p_gain * error

    def _calc_i_control(self) -> float:
        return self._i_gain * self._integrated_error

    def _calc_d_control(self, error_rate_of_change: float) -> float:
        return self._d_gain * error_rate_of_change

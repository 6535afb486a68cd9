import geometry
from config import robot_config


class SimpleMotorFeedforward:
    """Open loop voltage estimate of a permanent magnet DC motor drive from its
    characterized static, velocity and acceleration gains.
    """

    def __init__(self, gains: robot_config.FeedforwardGains) -> None:
        self._ks = gains.ks
        self._kv = gains.kv
        self._ka = gains.ka

    def calculate(self, velocity: float, acceleration: float = 0.0) -> float:
        """Volts to achieve the velocity (m/s) and acceleration (m/s^2)."""
        return (
            self._ks * geometry.sign(velocity)
            + self._kv * velocity
            + self._ka * acceleration
        )

    def velocity(self, voltage: float, acceleration: float = 0.0) -> float:
        """Inverse of calculate, the steady velocity the voltage produces while
        accelerating at the given rate. Voltages below the static friction give zero.
        """
        if self._kv == 0.0:
            raise ValueError("Velocity is undefined without a velocity gain.")

        drive_voltage = voltage - self._ka * acceleration
        if abs(drive_voltage) <= self._ks:
            return 0.0

        return (drive_voltage - self._ks * geometry.sign(drive_voltage)) / self._kv

    def max_achievable_velocity(
        self, max_voltage: float, acceleration: float = 0.0
    ) -> float:
        """The fastest forward velocity reachable with the supplied voltage while
        accelerating at the given rate.
        """
        return self.velocity(max_voltage, acceleration)

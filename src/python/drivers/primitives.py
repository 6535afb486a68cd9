from __future__ import annotations

import dataclasses
from typing import Tuple, Union


@dataclasses.dataclass(frozen=True)
class VoltageCommand:
    """Raw voltages applied to each drive side."""

    left: float
    right: float

    @property
    def data(self) -> Tuple[float, float]:
        return self.left, self.right


@dataclasses.dataclass(frozen=True)
class VelocityCommand:
    """Speed setpoints (m/s) for the motor controllers' own velocity loops along with
    an arbitrary feedforward voltage per side. The gain profile selects which gain
    slot the motor controllers run their loop with.
    """

    left: float
    left_feedforward: float
    right: float
    right_feedforward: float
    gain_profile: int

    @property
    def data(self) -> Tuple[float, float, float, float]:
        return self.left, self.left_feedforward, self.right, self.right_feedforward


DriveCommand = Union[VoltageCommand, VelocityCommand]

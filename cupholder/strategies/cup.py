"""
Linear cup strategy: maps a bust difference to a cup name and back.

Every region uses this strategy with its own parameters. All arithmetic is
done in the threshold's native unit, so a "-1 inch" threshold is applied in
inches even when the difference was measured in cm.

Forward:
    d < threshold          → below_first_cup_name
    otherwise              → names[floor((d - threshold) / step) + 1]
Backward:
    index 0                → below_first_cup_value
    index n > 0            → threshold + (n - 1) × step
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cupholder.utilities.conversion import snap
from cupholder.utilities.types import Measurement, Unit

from .cup_names import decode_cup_name, encode_cup_name


@dataclass(frozen=True)
class LinearCupStrategy:
    """
    Evenly stepped cup sizing above a first-cup threshold.

    below_first_cup_value need not equal the threshold: a region may report
    a typical value for its smallest cup (JP: threshold 6.5 cm, smallest cup
    5 cm).
    """

    first_cup_threshold: Measurement
    cup_step: Measurement
    below_first_cup_name: str
    below_first_cup_value: Measurement

    def __post_init__(self) -> None:
        if self.cup_step.to_cm() <= 0:
            raise ValueError(f"cup_step must be positive, got {self.cup_step}")

    @property
    def native_unit(self) -> Unit:
        return self.first_cup_threshold.unit

    def measurement_to_cup_name(self, difference: Measurement, names: Sequence[str]) -> str:
        unit = self.native_unit
        excess = difference.to_unit(unit) - self.first_cup_threshold.to_unit(unit)
        steps = snap(excess / self.cup_step.to_unit(unit))
        if steps < 0:
            return self.below_first_cup_name
        return encode_cup_name(math.floor(steps) + 1, names)

    def cup_name_to_measurement(self, cup: str, names: Sequence[str]) -> Measurement:
        unit = self.native_unit
        index = decode_cup_name(cup, names)
        if index == 0:
            return self.below_first_cup_value.in_unit(unit)
        return self.first_cup_threshold.add(self.cup_step.multiply(index - 1))

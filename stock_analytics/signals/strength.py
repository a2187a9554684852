"""Signal strength scaling shared by every indicator rule"""

from dataclasses import dataclass

from ..models.signals import SignalDirection


@dataclass(frozen=True)
class SignalReading:
    """Direction and strength an indicator rule derived from its record."""
    direction: SignalDirection
    strength: float
    value: float
    description: str


def clip_unit(value: float) -> float:
    """Clip to the [0, 1] strength scale."""
    return max(0.0, min(1.0, value))


def threshold_strength(distance: float, saturation: float) -> float:
    """
    Strength of a signal whose value is ``distance`` past its threshold.

    0.5 at the threshold, rising linearly to 1.0 at ``saturation`` past it.
    """
    if saturation <= 0:
        return 1.0
    return clip_unit(0.5 + 0.5 * max(distance, 0.0) / saturation)


def hold_strength(distance_to_threshold: float, span: float) -> float:
    """
    Strength of a hold signal: how close the value sits to the nearest threshold.

    0.0 at ``span`` away (the neutral midpoint), capped just below 0.5 at the threshold
    so a hold never outranks a directional signal at the same distance.
    """
    if span <= 0:
        return 0.0
    return min(0.49, clip_unit(0.5 * (1.0 - max(distance_to_threshold, 0.0) / span)))

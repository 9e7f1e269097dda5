from functools import reduce
from typing import Iterable, NamedTuple


class ElevationChanges(NamedTuple):
    gain: float
    loss: float


class _AnchorState(NamedTuple):
    anchor: float
    gain: float
    loss: float


def _step(threshold_m: float):
    def fold(state: _AnchorState, elevation: float) -> _AnchorState:
        diff = elevation - state.anchor
        if diff >= threshold_m:
            return _AnchorState(elevation, state.gain + diff, state.loss)
        if diff <= -threshold_m:
            return _AnchorState(elevation, state.gain, state.loss - diff)
        return state

    return fold


def accumulate_gain_loss(elevations: Iterable[float], threshold_m: float = 4.0) -> ElevationChanges:
    """Total ascent and descent with a hysteresis threshold.

    A change is committed only once the elevation has moved at least
    ``threshold_m`` away from the last committed anchor; the anchor then
    moves to the current elevation. Smaller oscillations are ignored.
    Totals keep full precision.
    """
    values = iter(float(e) for e in elevations)
    first = next(values, None)
    if first is None:
        return ElevationChanges(0.0, 0.0)
    state = reduce(_step(threshold_m), values, _AnchorState(first, 0.0, 0.0))
    return ElevationChanges(state.gain, state.loss)

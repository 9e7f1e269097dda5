import logging
import math
from typing import Any, Mapping, Optional

from gpx_profile.config import DEFAULT_CONFIG, ProfileConfig

logger = logging.getLogger(__name__)

_FIELDS = ("step_m", "smooth_window_m", "threshold_m", "simplify_tolerance")


def _parse_value(name: str, raw: Any) -> float:
    default = getattr(DEFAULT_CONFIG, name)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return default
    try:
        value = float(str(raw).strip().replace(",", "."))
    except (ValueError, TypeError):
        logger.warning("Invalid %s %r, using default: %s", name, raw, default)
        return default
    if not math.isfinite(value) or value < 0 or (name == "step_m" and value == 0):
        logger.warning("Out of range %s %r, using default: %s", name, raw, default)
        return default
    return value


def parse_profile_params(params: Optional[Mapping[str, Any]] = None) -> ProfileConfig:
    """
    Builds a ProfileConfig from loosely typed user input (form fields, query args).
    Every missing, unparsable or out-of-range value falls back to its default.
    """
    params = params or {}
    unknown = set(params).difference(_FIELDS)
    if unknown:
        logger.warning("Ignoring unknown profile parameters: %s", sorted(unknown))
    return ProfileConfig(**{name: _parse_value(name, params.get(name)) for name in _FIELDS})

from typing import Any, Dict, Mapping, Optional, Sequence

from gpx_profile import ProfileResult, Track, process_tracks
from services.validate_params_service import parse_profile_params


def load_profile(tracks: Sequence[Track], params: Optional[Mapping[str, Any]] = None) -> ProfileResult:
    config = parse_profile_params(params)
    return process_tracks(tracks, config)


def profile_payload(tracks: Sequence[Track], params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """``{"stats": ..., "chartData": [...]}`` ready for the chart widget."""
    return load_profile(tracks, params).to_dict()

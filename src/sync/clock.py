# sync/clock.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaybackEstimate:
    """
    Anchor taken from the last authoritative sample.

    Replaced wholesale on every sample; never adjusted in place.
    """
    track_id: str
    anchor_wall_time: float        # local monotonic seconds
    anchor_position_seconds: float
    is_playing: bool


def reset(track_id: str, position_seconds: float, is_playing: bool, now: float) -> PlaybackEstimate:
    return PlaybackEstimate(
        track_id=track_id,
        anchor_wall_time=now,
        anchor_position_seconds=position_seconds,
        is_playing=is_playing,
    )


def estimate(state: PlaybackEstimate, now: float) -> float:
    """
    Extrapolated position in seconds. Frozen while paused.
    Not clamped to the track duration.
    """
    if not state.is_playing:
        return state.anchor_position_seconds
    return state.anchor_position_seconds + (now - state.anchor_wall_time)

"""Helper functions for frame rate and timecode field arithmetic."""

from __future__ import annotations

import math
import re

_Parts = tuple[int, int, int, int]

RATE_PATTERN = re.compile(r"^(\d+)/(\d+)$", re.ASCII)
TIMECODE_PATTERN = re.compile(
    r"^(\d+)[:;.,](\d\d)[:;.,](\d\d)[:;.,](\d+)$", re.ASCII
)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
MINUTES_PER_DAY = 24 * 60


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going away from zero.

    Unlike the builtin round(), 24.5 gives 25.

    Args:
        value (float): A non-negative value.

    Returns:
        int: The rounded value.
    """
    return int(math.floor(value + 0.5))


def round_fps(fps: float) -> float:
    """Round a frame rate to two decimal places."""
    return math.floor(fps * 100 + 0.5) / 100


def drop_frames_per_minute(fps: float) -> int:
    """Return the number of frame numbers skipped at each drop minute.

    This is the nearest integer to 6.6666% of the frame rate, 2 for 29.97
    and 4 for 59.94.

    Args:
        fps (float): The nominal frame rate.

    Returns:
        int: Frames skipped per minute.
    """
    return round_half_up(fps * 0.066666)


def frames_per_day(time_base: int, drop_frames: int = 0) -> int:
    """Return the packed frame count of 24 hours of timecode."""
    return time_base * SECONDS_PER_HOUR * 24 - drop_frames * (
        MINUTES_PER_DAY - MINUTES_PER_DAY // 10
    )


def parts_to_frames(
    time_base: int,
    hours: int,
    minutes: int,
    seconds: int,
    frames: int,
    drop_frames: int = 0,
) -> int:
    """Convert timecode fields to a packed frame count.

    Args:
        time_base (int): Frames per timecode second.
        hours (int): The hours field.
        minutes (int): The minutes field.
        seconds (int): The seconds field.
        frames (int): The frames field.
        drop_frames (int): Frame numbers skipped at each minute that is not
            a multiple of ten. 0 for non-drop timecodes.

    Returns:
        int: The frame count.
    """
    total_frames = (
        (time_base * SECONDS_PER_HOUR * hours)
        + (time_base * SECONDS_PER_MINUTE * minutes)
        + (time_base * seconds)
        + frames
    )

    # remove the frame numbers that drop frame counting never uses
    total_minutes = (60 * hours) + minutes
    return total_frames - drop_frames * (total_minutes - total_minutes // 10)


def frames_to_parts(frames: int, time_base: int) -> _Parts:
    """Split a continuous frame count into hours, minutes, seconds, frames.

    Hours are not wrapped at 24.
    """
    frames_per_hour = time_base * SECONDS_PER_HOUR
    frames_per_minute = time_base * SECONDS_PER_MINUTE

    hrs, remaining = divmod(frames, frames_per_hour)
    mins, remaining = divmod(remaining, frames_per_minute)
    secs, frs = divmod(remaining, time_base)

    return hrs, mins, secs, frs


def drop_frame_to_parts(
    frames: int, time_base: int, drop_frames: int
) -> _Parts:
    """Split a packed drop frame count into hours, minutes, seconds, frames.

    The skipped frame numbers are added back so that the result can be
    decomposed positionally like a non-drop count.

    Args:
        frames (int): The packed frame count.
        time_base (int): Frames per timecode second.
        drop_frames (int): Frame numbers skipped at each minute that is not
            a multiple of ten.

    Returns:
        tuple: A tuple containing the hours, minutes, seconds and frames.
    """
    # Number of packed frames per minute and per ten minutes. Only the first
    # minute of each ten minute block keeps all of its frame numbers.
    frames_per_minute = time_base * SECONDS_PER_MINUTE - drop_frames
    frames_per_10_minutes = time_base * SECONDS_PER_MINUTE * 10 - drop_frames * 9

    d, m = divmod(frames, frames_per_10_minutes)
    if m > drop_frames:
        frames += (drop_frames * 9 * d) + drop_frames * (
            (m - drop_frames) // frames_per_minute
        )
    else:
        frames += drop_frames * 9 * d

    return frames_to_parts(frames, time_base)


def format_parts(
    hrs: int, mins: int, secs: int, frs: int, drop_frame: bool = False
) -> str:
    """Return the string representation of the given timecode fields.

    Args:
        hrs (int): The hours portion of the Timecode.
        mins (int): The minutes portion of the Timecode.
        secs (int): The seconds portion of the Timecode.
        frs (int): The frames portion of the Timecode.
        drop_frame (bool): Use ";" as the frame delimiter.

    Returns:
        str: The timecode string.
    """
    delimiter = ";" if drop_frame else ":"
    return f"{hrs:02d}:{mins:02d}:{secs:02d}{delimiter}{frs:02d}"

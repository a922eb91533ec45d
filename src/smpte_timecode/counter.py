"""Mutable timecode counter that rolls over every 24 hours."""

from __future__ import annotations

import logging
import sys

from .helpers import frames_per_day
from .rate import Rate
from .timecode import Timecode

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


#%%
class TimecodeCounter:
    """A running timecode, like the one of a tape deck or a live encoder.

    The counter holds an immutable :class:`Timecode` and replaces it on each
    operation. Unlike a Timecode it wraps around after 24 hours, and going
    below 00:00:00:00 wraps to the end of the day.

    Args:
        rate (Rate): The rate of the counter.
        frames (int): The start frame count. Defaults to 0.
    """

    def __init__(self, rate: Rate, frames: int = 0) -> None:
        self._timecode = Timecode(rate, self._wrap(rate, frames))

    @classmethod
    def from_fps(cls, fps: float, drop_frame: bool = False) -> Self:
        """Create a counter at 00:00:00:00 for the given frame rate.

        Raises:
            InvalidRateError: If the fps is smaller than 1.
        """
        return cls(Rate(fps, drop_frame))

    @staticmethod
    def _wrap(rate: Rate, frames: int) -> int:
        day = frames_per_day(rate.time_base, rate.drop_frames)
        wrapped = frames % day
        if wrapped != frames:
            logger.debug(
                "Timecode counter at %s rolled over from frame %d to %d",
                rate, frames, wrapped,
            )
        return wrapped

    def _set_frames(self, frames: int) -> None:
        rate = self._timecode.rate
        self._timecode = Timecode(rate, self._wrap(rate, frames))

    def _frames_from(self, other: Timecode | TimecodeCounter) -> int:
        """Return the frame count of other at the rate of this counter.

        Timecodes of another rate are converted through their seconds, partial
        frames are truncated.
        """
        if isinstance(other, TimecodeCounter):
            other = other.timecode
        if other.rate == self.rate:
            return other.frames
        return int(other.seconds * self.rate.time_base)

    @property
    def timecode(self) -> Timecode:
        """Return the current value as an immutable Timecode."""
        return self._timecode

    @property
    def rate(self) -> Rate:
        """Return the rate of this counter."""
        return self._timecode.rate

    @property
    def frames(self) -> int:
        """Return the current frame count."""
        return self._timecode.frames

    def to_seconds(self) -> float:
        """Return the real time of the current frame count.

        Returns:
            float: The frame count divided by the fps.
        """
        return self._timecode.real_seconds

    def reset(self) -> None:
        """Set the counter back to 00:00:00:00."""
        self._timecode = Timecode(self.rate)

    def set_drop_frame(self, drop_frame: bool) -> None:
        """Switch drop frame numbering on or off, keeping the frame count."""
        rate = self.rate.with_drop_frame(drop_frame)
        self._timecode = Timecode(rate, self._wrap(rate, self.frames))

    def set_frame_rate(self, fps: float) -> None:
        """Change the frame rate, keeping the frame count and drop frame setting.

        Args:
            fps (float): The new frame rate.

        Raises:
            InvalidRateError: If the fps is smaller than 1. The counter is left
                unchanged.
        """
        rate = Rate(fps, self.rate.drop_frame)
        self._timecode = Timecode(rate, self._wrap(rate, self.frames))

    def add_frames(self, frames: int) -> None:
        """Add frames to the counter."""
        self._set_frames(self.frames + frames)

    def sub_frames(self, frames: int) -> None:
        """Subtract frames from the counter."""
        self._set_frames(self.frames - frames)

    def add_seconds(self, seconds: float) -> None:
        """Add seconds to the counter, using the time base of its rate."""
        self.add_frames(int(seconds * self.rate.time_base))

    def sub_seconds(self, seconds: float) -> None:
        """Subtract seconds from the counter, using the time base of its rate."""
        self.sub_frames(int(seconds * self.rate.time_base))

    def add_string(self, timecode: str) -> None:
        """Add a timecode string to the counter.

        Args:
            timecode (str): A timecode string at the rate of this counter.

        Raises:
            ParseError: If the string is not a timecode.
            RangeError: If a field of the timecode is out of range.
        """
        self.add_frames(Timecode.parse(self.rate, timecode).frames)

    def sub_string(self, timecode: str) -> None:
        """Subtract a timecode string from the counter.

        Args:
            timecode (str): A timecode string at the rate of this counter.

        Raises:
            ParseError: If the string is not a timecode.
            RangeError: If a field of the timecode is out of range.
        """
        self.sub_frames(Timecode.parse(self.rate, timecode).frames)

    def add(self, other: Timecode | TimecodeCounter) -> None:
        """Add another timecode or counter to this counter."""
        self.add_frames(self._frames_from(other))

    def sub(self, other: Timecode | TimecodeCounter) -> None:
        """Subtract another timecode or counter from this counter."""
        self.sub_frames(self._frames_from(other))

    def next(self) -> Self:
        """Add one frame to this counter to go the next frame.

        Returns:
            TimecodeCounter: Returns self.
        """
        self.add_frames(1)
        return self

    def back(self) -> Self:
        """Subtract one frame from this counter to go back one frame.

        Returns:
            TimecodeCounter: Returns self.
        """
        self.sub_frames(1)
        return self

    def __str__(self) -> str:
        return str(self._timecode)

    def __repr__(self) -> str:
        return f"{__class__.__name__}({self.rate!r}, frames={self.frames})"
####

"""Timecode class for handling timecode calculations."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

from .errors import NegativeResultError, ParseError, RangeError, TimecodeError
from .helpers import (
    TIMECODE_PATTERN,
    drop_frame_to_parts,
    format_parts,
    frames_to_parts,
    parts_to_frames,
)

if TYPE_CHECKING:
    from .rate import Rate

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is the
    frame count, then when required it converts the frames to hours, minutes,
    seconds and frames by using the rate. Timecodes are immutable, every
    arithmetic operation returns a new instance.

    The frame count of a drop frame Timecode is packed: frame numbers skipped
    by the drop frame numbering are not counted. Hours are not wrapped at 24.

    Args:
        rate (Rate): The rate of the Timecode.
        frames (int): The number of frames since 00:00:00:00. Defaults to 0.

    Raises:
        RangeError: If frames is negative.
    """

    def __init__(self, rate: Rate, frames: int = 0) -> None:
        if not isinstance(frames, int):
            raise TypeError(
                f"{__class__.__name__}.frames should be an integer, "
                f"not a {frames.__class__.__name__}"
            )
        if frames < 0:
            raise RangeError(
                f"{__class__.__name__}.frames can not be negative, got: {frames}"
            )
        self._rate = rate
        self._frames = frames

    @classmethod
    def parse(cls, rate: Rate, timecode: str) -> Self:
        """Parse the given timecode string.

        The string is of the form hh:mm:ss:ff. Minutes and seconds are two
        digits between 00 and 59, hours and frames may have any number of
        digits. Any of ":", ";", "." or "," is accepted as a separator in any
        position.

        Args:
            rate (Rate): The rate to interpret the timecode with.
            timecode (str): The timecode string.

        Raises:
            ParseError: If the string is not a timecode.
            RangeError: If minutes or seconds are 60 or more, or frames is
                not below the time base of the rate.

        Returns:
            Timecode: The parsed Timecode.
        """
        match = TIMECODE_PATTERN.fullmatch(timecode)
        if match is None:
            raise ParseError(f"Unable to parse timecode: {timecode!r}")

        try:
            hours, minutes, seconds, frames = map(int, match.groups())
        except ValueError as err:
            raise ParseError(f"Unable to parse timecode: {timecode!r}: {err}") from err

        if minutes >= 60:
            raise RangeError(f"Minutes must be between 0 and 59, got: {minutes}")
        if seconds >= 60:
            raise RangeError(f"Seconds must be between 0 and 59, got: {seconds}")
        if frames >= rate.time_base:
            raise RangeError(
                f"Frames must be between 0 and {rate.time_base - 1}, got: {frames}"
            )

        return cls(
            rate,
            parts_to_frames(
                rate.time_base, hours, minutes, seconds, frames, rate.drop_frames
            ),
        )

    @classmethod
    def from_frames(cls, rate: Rate, frames: int) -> Self:
        """Return a Timecode of the given rate and frame count."""
        return cls(rate, frames)

    @classmethod
    def from_seconds(cls, rate: Rate, seconds: float) -> Self:
        """Return a Timecode of the given rate and seconds.

        This uses the time base of the rate, so 1 second at 29.97 fps is 30
        frames. Partial frames are truncated.

        Args:
            rate (Rate): The rate of the Timecode.
            seconds (float): The seconds, can not be negative.

        Raises:
            RangeError: If seconds is negative or not a finite number.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        if not math.isfinite(seconds):
            raise RangeError(f"Seconds must be a finite number, got: {seconds}")
        if seconds < 0:
            raise RangeError(f"Timecode can not have a negative value: {seconds}")
        return cls(rate, int(seconds * rate.time_base))

    @property
    def rate(self) -> Rate:
        """Return the Rate of this Timecode."""
        return self._rate

    @property
    def frames(self) -> int:
        """Return the frame count of this Timecode.

        Returns:
            int: The number of frames since 00:00:00:00.
        """
        return self._frames

    def to_parts(self) -> tuple[int, int, int, int]:
        """Convert the frame count to timecode fields.

        Returns:
            tuple: A tuple containing the hours, minutes, seconds and frames.
        """
        if self._rate.drop_frame:
            return drop_frame_to_parts(
                self._frames, self._rate.time_base, self._rate.drop_frames
            )
        return frames_to_parts(self._frames, self._rate.time_base)

    @property
    def hour(self) -> int:
        """Return the hours part of the timecode.

        A timecode of 02:12:49:15 returns 2.
        """
        hrs, _, _, _ = self.to_parts()
        return hrs

    @property
    def minute(self) -> int:
        """Return the minutes part of the timecode.

        A timecode of 02:12:49:15 returns 12.
        """
        _, mins, _, _ = self.to_parts()
        return mins

    @property
    def second(self) -> int:
        """Return the seconds part of the timecode.

        A timecode of 02:12:49:15 returns 49.
        """
        _, _, secs, _ = self.to_parts()
        return secs

    @property
    def frame(self) -> int:
        """Return the frames part of the timecode.

        A timecode of 02:12:49:15 returns 15.
        """
        _, _, _, frs = self.to_parts()
        return frs

    @property
    def seconds(self) -> float:
        """Return the timecode in seconds.

        The frame count is split into fields without the drop frame
        adjustment and counted with the time base, so a 29.97 DF Timecode
        made from 90 seconds returns 90.0 even though it shows 00:01:30;02.
        Use :attr:`real_seconds` for the elapsed real time.

        Returns:
            float: The seconds.
        """
        hrs, mins, secs, frs = frames_to_parts(self._frames, self._rate.time_base)
        return hrs * 3600 + mins * 60 + secs + frs / self._rate.time_base

    @property
    def real_seconds(self) -> float:
        """Return the real time duration of the frames of this Timecode.

        For NTSC rates this differs from :attr:`seconds`, 2700 frames at
        29.97 fps last 90.09 seconds.

        Returns:
            float: The frame count divided by the fps.
        """
        return self._frames / self._rate.fps

    def add(self, frames: int) -> Timecode:
        """Return a new Timecode with the given frames added to this one."""
        return __class__(self._rate, self._frames + frames)

    def sub(self, frames: int) -> Timecode:
        """Return a new Timecode with the given frames subtracted from this one.

        Args:
            frames (int): The number of frames to subtract.

        Raises:
            NegativeResultError: If the result would be negative.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        if frames > self._frames:
            raise NegativeResultError(
                "Resulting timecode would have a negative value: "
                f"{self._frames - frames}"
            )
        return __class__(self._rate, self._frames - frames)

    def with_rate(self, rate: Rate) -> Timecode:
        """Return a new Timecode with the same frame count and another rate."""
        return __class__(rate, self._frames)

    def _frames_of(self, other: int | Timecode, operator: str) -> int:
        """Return the frame count of an arithmetic or comparison operand.

        Raises:
            TimecodeError: If other is a Timecode of another rate.
        """
        if isinstance(other, Timecode):
            if other.rate != self._rate:
                raise TimecodeError(
                    f"Can not use {operator!r} with Timecodes of different rates: "
                    f"{self._rate} and {other.rate}"
                )
            return other.frames
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TypeError(
            f"{operator!r} not supported between instances of 'Timecode' and "
            f"'{other.__class__.__name__}'"
        )

    def __add__(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames added.

        Args:
            other (int | Timecode): Either an int value or a Timecode of the
                same rate in which the frames are used for the calculation.

        Raises:
            TimecodeError: If other is a Timecode of another rate.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self.add(self._frames_of(other, "+"))

    def __sub__(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames subtracted.

        Args:
            other (int | Timecode): Either an int value or a Timecode of the
                same rate in which the frames are used for the calculation.

        Raises:
            TimecodeError: If other is a Timecode of another rate.
            NegativeResultError: If the result would be negative.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self.sub(self._frames_of(other, "-"))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timecode):
            return self._rate == other.rate and self._frames == other.frames
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._rate, self._frames))

    def __lt__(self, other: int | Timecode) -> bool:
        return self._frames < self._frames_of(other, "<")

    def __le__(self, other: int | Timecode) -> bool:
        return self._frames <= self._frames_of(other, "<=")

    def __gt__(self, other: int | Timecode) -> bool:
        return self._frames > self._frames_of(other, ">")

    def __ge__(self, other: int | Timecode) -> bool:
        return self._frames >= self._frames_of(other, ">=")

    def __int__(self) -> int:
        return self._frames

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds)."""
        return self.seconds

    def __str__(self) -> str:
        """Return the Timecode as a string.

        Returns:
            str: "hh:mm:ss:ff", or "hh:mm:ss;ff" for drop frame rates.
        """
        return format_parts(*self.to_parts(), drop_frame=self._rate.drop_frame)

    def __repr__(self) -> str:
        # use frames= as that is agnostic to drop_frame
        return f"{__class__.__name__}({self._rate!r}, frames={self._frames})"
####


#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    The builder holds a Rate, and calling it creates Timecodes of that rate
    from a timecode string, a frame count or seconds.

    Args:
        rate (Rate): The rate of the Timecodes created by this builder.
    """

    def __init__(self, rate: Rate) -> None:
        self.rate = rate

    def __call__(
        self,
        timecode: str | None = None,
        frames: int | None = None,
        seconds: float | None = None,
    ) -> Timecode:
        """Create a Timecode of the pre-configured rate.

        The following order of priority applies: timecode, frames, seconds.
        If none is given the Timecode is 00:00:00:00.

        Args:
            timecode (str): A timecode string to parse.
            frames (int): A frame count.
            seconds (float): Seconds, converted with the time base.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        if timecode is not None:
            return Timecode.parse(self.rate, timecode)
        if frames is not None:
            return Timecode.from_frames(self.rate, frames)
        if seconds is not None:
            return Timecode.from_seconds(self.rate, seconds)
        return Timecode(self.rate)
####

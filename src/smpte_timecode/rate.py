"""Rate class describing the frame cadence of a Timecode."""

from __future__ import annotations

import logging
import math

from .errors import InvalidRateError, ParseError
from .helpers import RATE_PATTERN, drop_frames_per_minute, round_fps, round_half_up

logger = logging.getLogger(__name__)


#%%
class Rate:
    """A frame rate and drop frame setting.

    Rates are immutable values, two rates are equal when their fps and drop
    frame settings are equal.

    Args:
        fps (float): The frame rate. It is rounded to two decimal places and
            must be at least 1 after rounding.
        drop_frame (bool): If True, timecodes of this rate use SMPTE drop
            frame numbering, which skips frame numbers at every minute except
            each tenth minute.

    Raises:
        InvalidRateError: If the rounded fps is smaller than 1.
    """

    def __init__(self, fps: float, drop_frame: bool = False) -> None:
        if not math.isfinite(fps):
            raise InvalidRateError(f"Rate must be a finite number, got: {fps}")

        rounded = round_fps(fps)
        if rounded < 1:
            raise InvalidRateError(f"Rate must be at least 1 fps but got: {rounded}")
        if rounded != fps:
            logger.debug("Rounded frame rate %s to %s", fps, rounded)

        self._fps = rounded
        self._time_base = round_half_up(rounded)
        self._drop_frame = bool(drop_frame)

    @classmethod
    def parse(cls, rate: str, drop_frame: bool = False) -> Rate:
        """Create a Rate from a fractional string like "30000/1001".

        Args:
            rate (str): The rate as "NUMERATOR/DENOMINATOR".
            drop_frame (bool): Use drop frame numbering.

        Raises:
            ParseError: If the string is malformed or the denominator is 0.
            InvalidRateError: If the resulting rate is smaller than 1 fps.

        Returns:
            Rate: The parsed rate.
        """
        match = RATE_PATTERN.fullmatch(rate)
        if match is None:
            raise ParseError(f"Unable to parse rate: {rate!r}")

        try:
            numerator, denominator = map(int, match.groups())
        except ValueError as err:
            raise ParseError(f"Unable to parse rate: {rate!r}: {err}") from err
        if denominator == 0:
            raise ParseError(f"Rate can not have a denominator of 0: {rate!r}")

        try:
            fps = numerator / denominator
        except OverflowError as err:
            raise ParseError(f"Unable to parse rate: {rate!r}: {err}") from err

        return cls(fps, drop_frame)

    @property
    def fps(self) -> float:
        """Return the frame rate rounded to two decimal places."""
        return self._fps

    @property
    def time_base(self) -> int:
        """Return the number of frames in one second of timecode.

        Returns:
            int: The fps rounded to the nearest integer, 30 for 29.97.
        """
        return self._time_base

    @property
    def drop_frame(self) -> bool:
        """Return True if this rate uses SMPTE drop frame numbering."""
        return self._drop_frame

    @property
    def drop_frames(self) -> int:
        """Return the number of frame numbers skipped per minute.

        Returns:
            int: 0 for non-drop rates, 2 for 29.97 DF, 4 for 59.94 DF.
        """
        if not self._drop_frame:
            return 0
        return drop_frames_per_minute(self._fps)

    def with_drop_frame(self, drop_frame: bool) -> Rate:
        """Return a copy of this rate with the given drop frame setting."""
        return __class__(self._fps, drop_frame)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rate):
            return (self._fps, self._drop_frame) == (other._fps, other._drop_frame)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._fps, self._drop_frame))

    def __str__(self) -> str:
        """Return the catalog style name of this rate, e.g. "29.97DF"."""
        return f"{self._fps:g}{'DF' if self._drop_frame else ''}"

    def __repr__(self) -> str:
        return f"{__class__.__name__}({self._fps}, drop_frame={self._drop_frame})"
####


# SMPTE 29.97 fps NDF
R2997 = Rate(29.97)
# SMPTE 29.97 fps DF
R2997DF = Rate(29.97, drop_frame=True)
# SMPTE 30 fps NDF
R30 = Rate(30)
# SMPTE 59.94 fps NDF
R5994 = Rate(59.94)
# SMPTE 59.94 fps DF
R5994DF = Rate(59.94, drop_frame=True)
# SMPTE 60 fps NDF
R60 = Rate(60)
# EBU 25 fps NDF
R25 = Rate(25)
# EBU 50 fps NDF
R50 = Rate(50)
# Film 23.98 fps NDF
R2398 = Rate(23.98)
# Film 24 fps NDF
R24 = Rate(24)
# High frame rate 120 fps NDF
R120 = Rate(120)
# SMPTE 240 fps NDF
R240 = Rate(240)

STANDARD_RATES: dict[str, Rate] = {
    str(rate): rate
    for rate in (
        R2398, R24, R25, R2997, R2997DF, R30,
        R50, R5994, R5994DF, R60, R120, R240,
    )
}


def rate_from_name(name: str) -> Rate:
    """Return a Rate for the given name.

    Catalog names like "25", "29.97DF" or "59.94df" are looked up in
    STANDARD_RATES. Other names are parsed as "NUMERATOR/DENOMINATOR" or
    as a decimal fps, both optionally followed by "DF".

    Args:
        name (str): The rate name.

    Raises:
        ParseError: If the name is not a catalog name, a fraction or a
            number.
        InvalidRateError: If the rate is smaller than 1 fps.

    Returns:
        Rate: The matching rate.
    """
    key = name.strip().upper()
    if key in STANDARD_RATES:
        return STANDARD_RATES[key]

    drop_frame = key.endswith("DF")
    if drop_frame:
        key = key[:-2].rstrip()

    if "/" in key:
        return Rate.parse(key, drop_frame)

    try:
        fps = float(key)
    except ValueError:
        raise ParseError(f"Unable to parse rate: {name!r}") from None
    return Rate(fps, drop_frame)

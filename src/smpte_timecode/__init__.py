"""SMPTE and EBU timecodes with drop frame support."""

import logging

from .counter import TimecodeCounter
from .errors import (
    InvalidRateError,
    NegativeResultError,
    ParseError,
    RangeError,
    TimecodeError,
)
from .rate import (
    R24,
    R25,
    R30,
    R50,
    R60,
    R120,
    R240,
    R2398,
    R2997,
    R2997DF,
    R5994,
    R5994DF,
    STANDARD_RATES,
    Rate,
    rate_from_name,
)
from .timecode import Timecode, TimecodeBuilder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidRateError",
    "NegativeResultError",
    "ParseError",
    "R120",
    "R2398",
    "R24",
    "R240",
    "R25",
    "R2997",
    "R2997DF",
    "R30",
    "R50",
    "R5994",
    "R5994DF",
    "R60",
    "RangeError",
    "Rate",
    "STANDARD_RATES",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeCounter",
    "TimecodeError",
    "rate_from_name",
]

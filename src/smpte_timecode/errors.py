"""Exceptions raised by the timecode classes."""


#%%
class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


#%%
class InvalidRateError(TimecodeError, ValueError):
    """Raised when a frame rate rounds to less than 1 fps."""


#%%
class ParseError(TimecodeError, ValueError):
    """Raised when a rate or timecode string can not be parsed."""


#%%
class RangeError(TimecodeError, ValueError):
    """Raised when a timecode field, frame count or seconds value is out of range."""


#%%
class NegativeResultError(TimecodeError, ValueError):
    """Raised when a subtraction would result in a negative timecode."""

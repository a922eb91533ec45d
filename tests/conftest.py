"""
Test Configuration
==================

Pytest fixtures shared by the smpte_timecode tests.
"""

import pytest

from smpte_timecode import R30, R2997DF, R5994DF, Rate, TimecodeCounter


@pytest.fixture(
    params=[23.98, 24, 25, 29.97, 30, 50, 59.94, 60, 120, 240],
    ids=lambda fps: f"{fps}NDF",
)
def non_drop_rate(request):
    """Provide each non-drop rate."""
    return Rate(request.param)


@pytest.fixture(
    params=[R2997DF, R5994DF, Rate(23.98, drop_frame=True)],
    ids=str,
)
def drop_frame_rate(request):
    """Provide each drop frame rate."""
    return request.param


@pytest.fixture
def counter_30():
    """Provide a 30 fps non-drop counter at 00:00:00:00."""
    return TimecodeCounter(R30)


@pytest.fixture
def counter_2997df():
    """Provide a 29.97 fps drop frame counter at 00:00:00;00."""
    return TimecodeCounter(R2997DF)

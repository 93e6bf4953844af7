import math
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from pv_calculator.engine import CheckStatus, get_check_status


@pytest.mark.parametrize("percent, expected", [
    (90.0, CheckStatus.GOOD),
    (100.0, CheckStatus.GOOD),
    (110.0, CheckStatus.GOOD),
    (110.0001, CheckStatus.WARNING),
    (120.0, CheckStatus.WARNING),
    (120.0001, CheckStatus.BAD),
    (89.9999, CheckStatus.WARNING),
    (80.0, CheckStatus.WARNING),
    (79.9999, CheckStatus.BAD),
    (0.0, CheckStatus.BAD),
    (500.0, CheckStatus.BAD),
    (-5.0, CheckStatus.BAD),
])
def test_check_status_bands(percent, expected):
    assert get_check_status(percent) == expected


def test_nan_is_bad():
    assert get_check_status(math.nan) == CheckStatus.BAD
    assert get_check_status(math.inf) == CheckStatus.BAD


def test_bands_partition_without_gaps():
    """Walk [0, 150] in small steps: every value lands in exactly the band its range says."""
    for i in range(0, 15001):
        percent = i / 100
        status = get_check_status(percent)
        in_good = 90 <= percent <= 110
        in_warning = 80 <= percent < 90 or 110 < percent <= 120
        assert not (in_good and in_warning)
        if in_good:
            assert status == CheckStatus.GOOD
        elif in_warning:
            assert status == CheckStatus.WARNING
        else:
            assert status == CheckStatus.BAD


def test_status_serializes_as_plain_string():
    assert CheckStatus.WARNING.value == "warning"
    assert CheckStatus.GOOD == "good"

from datetime import time

import pytest

from src.leave_analyzer.leave_analyzer.reports.calculator.standard_calculator import StandardWorkedHoursCalculator


@pytest.mark.parametrize(
    "in_time, out_time, hours",
    [
        (time(10, 0), time(18, 30), 8.5),
        (time(9, 0), time(13, 0), 4.0),
        (time(9, 15), time(9, 45), 0.5),
        (time(8, 0), time(8, 0), 0.0),
    ],
)
def test_exact_difference_when_out_after_in(in_time, out_time, hours):
    assert StandardWorkedHoursCalculator().worked_hours(in_time, out_time) == pytest.approx(hours)


def test_out_before_in_is_clamped_to_zero():
    assert StandardWorkedHoursCalculator().worked_hours(time(18, 0), time(9, 0)) == 0


@pytest.mark.parametrize("in_time, out_time", [(None, time(18, 0)), (time(9, 0), None), (None, None)])
def test_missing_time_is_zero(in_time, out_time):
    assert StandardWorkedHoursCalculator().worked_hours(in_time, out_time) == 0

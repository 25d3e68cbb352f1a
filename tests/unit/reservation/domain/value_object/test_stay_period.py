from datetime import date

import pytest

from hotel_reservation.reservation.domain.value_object.stay_period import (
    StayPeriod,
    periods_overlap,
)


class TestStayPeriod:
    def test_valid_stay_period(self):
        stay_period = StayPeriod(check_in=date(2024, 1, 1), check_out=date(2024, 1, 3))
        assert stay_period.check_in == date(2024, 1, 1)
        assert stay_period.check_out == date(2024, 1, 3)

    def test_nights_calculation(self):
        stay_period = StayPeriod(check_in=date(2024, 1, 1), check_out=date(2024, 1, 3))
        assert stay_period.nights() == 2

    def test_nights_across_month_end(self):
        stay_period = StayPeriod(check_in=date(2024, 2, 28), check_out=date(2024, 3, 1))
        assert stay_period.nights() == 2

    def test_checkout_before_checkin_raises_error(self):
        with pytest.raises(
            ValueError, match="Check-in date must precede check-out date"
        ):
            StayPeriod(check_in=date(2024, 1, 3), check_out=date(2024, 1, 1))

    def test_same_date_raises_error(self):
        with pytest.raises(
            ValueError, match="Check-in date must precede check-out date"
        ):
            StayPeriod(check_in=date(2024, 1, 1), check_out=date(2024, 1, 1))


class TestOverlap:
    @pytest.fixture
    def period(self):
        return StayPeriod(check_in=date(2025, 1, 1), check_out=date(2025, 1, 5))

    @pytest.mark.parametrize(
        "check_in, check_out",
        [
            (date(2025, 1, 3), date(2025, 1, 8)),
            (date(2024, 12, 28), date(2025, 1, 2)),
            (date(2025, 1, 2), date(2025, 1, 3)),
            (date(2024, 12, 1), date(2025, 2, 1)),
            (date(2025, 1, 1), date(2025, 1, 5)),
        ],
    )
    def test_overlapping_periods(self, period, check_in, check_out):
        assert period.overlaps(check_in, check_out)

    @pytest.mark.parametrize(
        "check_in, check_out",
        [
            (date(2025, 1, 5), date(2025, 1, 10)),
            (date(2024, 12, 25), date(2025, 1, 1)),
            (date(2025, 2, 1), date(2025, 2, 3)),
        ],
    )
    def test_touching_or_disjoint_periods_do_not_overlap(
        self, period, check_in, check_out
    ):
        assert not period.overlaps(check_in, check_out)

    def test_periods_overlap_is_symmetric(self):
        a = (date(2025, 1, 1), date(2025, 1, 5))
        b = (date(2025, 1, 4), date(2025, 1, 6))
        assert periods_overlap(*a, *b) == periods_overlap(*b, *a) is True

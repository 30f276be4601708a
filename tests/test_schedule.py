"""Tests for schedule generation and status classification."""

from datetime import date, datetime

import pytest

from ro_track.billing.schedule import end_of_month, extend_schedule, generate_schedule
from ro_track.billing.status import classify, is_overdue, start_of_day
from ro_track.models import Payment, PaymentStatus


class TestEndOfMonth:
    """Tests for calendar-correct month ends."""

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [
            (2024, 0, date(2024, 1, 31)),
            (2024, 1, date(2024, 2, 29)),
            (2023, 1, date(2023, 2, 28)),
            (2024, 3, date(2024, 4, 30)),
            (2024, 11, date(2024, 12, 31)),
        ],
    )
    def test_end_of_month(self, year: int, month: int, expected: date) -> None:
        assert end_of_month(year, month) == expected


class TestGenerateSchedule:
    """Tests for generate_schedule."""

    def test_starts_at_installation_month(self) -> None:
        """Test months before installation are never created."""
        payments = generate_schedule(date(2023, 5, 15), 1, today=date(2024, 1, 1))

        assert payments[0].key == (2023, 4)
        assert all(p.key >= (2023, 4) for p in payments)

    def test_ends_december_of_horizon(self) -> None:
        """Test schedule runs through December of current year + horizon."""
        payments = generate_schedule(date(2023, 5, 15), 1, today=date(2024, 1, 1))

        assert payments[-1].key == (2025, 11)
        # May-Dec 2023, all of 2024 and 2025
        assert len(payments) == 8 + 12 + 12

    def test_all_pending_and_empty(self) -> None:
        """Test records start Pending with no date, amount or notes."""
        payments = generate_schedule(date(2024, 3, 1), 0, today=date(2024, 3, 1))

        assert len(payments) == 10
        for payment in payments:
            assert payment.status == PaymentStatus.PENDING
            assert payment.payment_date is None
            assert payment.amount is None
            assert payment.notes is None

    @pytest.mark.parametrize(
        "installation_date",
        [date(2020, 1, 1), date(2022, 12, 31), date(2024, 2, 29), date(2024, 6, 1)],
    )
    def test_one_record_per_month(self, installation_date: date) -> None:
        """Test exactly one record per month, in order, without gaps."""
        payments = generate_schedule(installation_date, 2, today=date(2024, 6, 1))
        keys = [p.key for p in payments]

        assert len(keys) == len(set(keys))
        assert keys == sorted(keys)
        expected = (2026 - installation_date.year) * 12 + 12 - (installation_date.month - 1)
        assert len(keys) == expected

    def test_installation_after_cutoff_is_empty(self) -> None:
        """Test a future installation beyond the horizon yields nothing."""
        assert generate_schedule(date(2030, 1, 1), 0, today=date(2024, 6, 1)) == []

    def test_accepts_datetime(self) -> None:
        """Test installation timestamps anchor on their month."""
        payments = generate_schedule(datetime(2024, 11, 20, 18, 30), 0, today=date(2024, 6, 1))

        assert [p.key for p in payments] == [(2024, 10), (2024, 11)]

    def test_regeneration_is_equivalent(self) -> None:
        """Test the same inputs reproduce the same months."""
        first = generate_schedule(date(2023, 1, 15), 5, today=date(2024, 6, 1))
        second = generate_schedule(date(2023, 1, 15), 5, today=date(2024, 6, 1))

        assert [p.key for p in first] == [p.key for p in second]


class TestExtendSchedule:
    """Tests for extend_schedule."""

    def test_adds_missing_months_only(self, make_customer) -> None:
        """Test extension appends new months and keeps paid records."""
        customer = make_customer(installation_date=date(2024, 1, 10), today=date(2024, 6, 1))
        customer.payments = generate_schedule(date(2024, 1, 10), 0, today=date(2024, 6, 1))
        paid = customer.payment_for(2024, 0)
        paid.status = PaymentStatus.PAID
        paid.amount = 300
        paid.notes = "cash"

        added = extend_schedule(customer, 0, today=date(2025, 2, 1))

        assert added == 12
        assert customer.payment_for(2024, 0) is paid
        assert paid.status == PaymentStatus.PAID
        assert paid.notes == "cash"
        assert customer.payments[-1].key == (2025, 11)

    def test_extend_is_idempotent(self, make_customer) -> None:
        """Test extending twice adds nothing the second time."""
        customer = make_customer()
        extend_schedule(customer, 2, today=date(2024, 6, 1))

        assert extend_schedule(customer, 2, today=date(2024, 6, 1)) == 0

    def test_keeps_chronological_order(self, make_customer) -> None:
        """Test a gap is filled in order."""
        customer = make_customer(installation_date=date(2024, 1, 10))
        customer.payments = [p for p in customer.payments if p.key != (2024, 3)]

        assert extend_schedule(customer, 1, today=date(2024, 6, 1)) == 1
        keys = [p.key for p in customer.payments]
        assert keys == sorted(keys)


class TestStartOfDay:
    """Tests for start_of_day."""

    def test_datetime_normalized(self) -> None:
        assert start_of_day(datetime(2024, 6, 1, 23, 59)) == date(2024, 6, 1)

    def test_date_unchanged(self) -> None:
        assert start_of_day(date(2024, 6, 1)) == date(2024, 6, 1)


class TestClassify:
    """Tests for classify."""

    def test_paid_is_always_paid(self) -> None:
        """Test Paid wins regardless of dates."""
        payment = Payment(year=2020, month=0, status=PaymentStatus.PAID)

        assert classify(payment, date(2024, 6, 1)) == PaymentStatus.PAID

    def test_last_day_of_month_is_pending(self) -> None:
        """Test a month is not overdue on its own last day."""
        payment = Payment(year=2024, month=1)

        assert classify(payment, date(2024, 2, 29)) == PaymentStatus.PENDING
        assert classify(payment, datetime(2024, 2, 29, 23, 59, 59)) == PaymentStatus.PENDING

    def test_day_after_month_end_is_overdue(self) -> None:
        """Test the month becomes overdue the next day."""
        payment = Payment(year=2024, month=1)

        assert classify(payment, date(2024, 3, 1)) == PaymentStatus.OVERDUE

    def test_future_month_is_pending(self) -> None:
        assert classify(Payment(year=2025, month=0), date(2024, 6, 1)) == PaymentStatus.PENDING

    def test_classify_does_not_mutate(self) -> None:
        """Test Overdue is never written back to the record."""
        payment = Payment(year=2023, month=0)

        classify(payment, date(2024, 6, 1))

        assert payment.status == PaymentStatus.PENDING

    def test_is_overdue_matches_classify(self) -> None:
        payment = Payment(year=2024, month=4)

        assert is_overdue(payment, date(2024, 6, 1)) is True
        assert is_overdue(payment, date(2024, 5, 31)) is False

from datetime import date, datetime, timezone
from unittest import TestCase

from pydantic import ValidationError

from core.exceptions import InvalidRecordError
from core.models import BusinessEntry, Goal, GoalPriority, GoalType
from core.utils.clock import as_utc, resolve_now


class GoalRecordTests(TestCase):
    def test_accepts_dashboard_field_names(self):
        goal = Goal.model_validate(
            {
                "id": "abc123",
                "title": "Grow sales",
                "type": "sales",
                "target": 250,
                "createdAt": "2024-01-01T08:30:00Z",
                "deadline": "2024-03-01",
            }
        )
        self.assertEqual(goal.type, GoalType.SALES)
        self.assertEqual(goal.priority, GoalPriority.MEDIUM)
        self.assertEqual(goal.created_at, datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc))
        self.assertEqual(goal.deadline, datetime(2024, 3, 1, tzinfo=timezone.utc))

    def test_naive_and_date_values_become_utc(self):
        goal = Goal(
            id=1,
            type="revenue",
            target=10,
            created_at=datetime(2024, 1, 1, 12, 0),
            deadline=date(2024, 2, 1),
        )
        self.assertEqual(goal.created_at.tzinfo, timezone.utc)
        self.assertEqual(goal.deadline, datetime(2024, 2, 1, tzinfo=timezone.utc))

    def test_unknown_type_is_rejected(self):
        with self.assertRaises(ValidationError):
            Goal(id=1, type="profit", target=10,
                 created_at=datetime(2024, 1, 1), deadline=datetime(2024, 2, 1))


class BusinessEntryRecordTests(TestCase):
    def test_derived_figures(self):
        entry = BusinessEntry(date=date(2024, 1, 5), price=20, sales=3, expenses=5)
        self.assertEqual(entry.revenue, 60)
        self.assertEqual(entry.cost, 15)
        self.assertEqual(entry.profit, 45)
        self.assertEqual(entry.date, datetime(2024, 1, 5, tzinfo=timezone.utc))

    def test_camel_case_fields(self):
        entry = BusinessEntry.model_validate(
            {"date": "2024-01-05", "price": 1, "sales": 1,
             "productName": "Soap", "marketingSpend": 30, "unitsReturned": 2}
        )
        self.assertEqual(entry.product_name, "Soap")
        self.assertEqual(entry.marketing_spend, 30)
        self.assertEqual(entry.units_returned, 2)

    def test_rejects_out_of_range_values(self):
        for bad in ({"price": -1}, {"sales": -2}, {"rating": 6}):
            fields = {"date": "2024-01-05", "price": 1, "sales": 1, **bad}
            with self.assertRaises(ValidationError):
                BusinessEntry(**fields)


class ClockTests(TestCase):
    def test_as_utc_converts_offsets(self):
        from datetime import timedelta

        lagos = timezone(timedelta(hours=1))
        value = as_utc(datetime(2024, 1, 1, 1, 0, tzinfo=lagos))
        self.assertEqual(value, datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc))
        self.assertEqual(value.tzinfo, timezone.utc)

    def test_as_utc_rejects_other_values(self):
        with self.assertRaises(InvalidRecordError):
            as_utc("2024-01-01")

    def test_resolve_now(self):
        fixed = datetime(2024, 5, 1, tzinfo=timezone.utc)
        self.assertEqual(resolve_now(fixed), fixed)
        self.assertEqual(resolve_now().tzinfo, timezone.utc)

from unittest import mock

from django.test import SimpleTestCase
from ninja.testing import TestClient

from config.api import api
from core.exceptions import UnknownGoalTypeError


GOAL = {
    "id": "g1",
    "title": "Hit 1k revenue",
    "type": "revenue",
    "target": 1000,
    "createdAt": "2024-01-01T00:00:00Z",
    "deadline": "2024-01-31",
    "priority": "high",
}

ENTRY = {"date": "2024-01-02T10:00:00Z", "price": 100, "sales": 5, "region": "Lagos"}


class GoalEndpointTests(SimpleTestCase):
    """
    The API evaluates the posted records only; no database is touched, so
    SimpleTestCase is enough.
    """

    def setUp(self):
        self.client = TestClient(api)
        self.payload = {"goals": [GOAL], "entries": [ENTRY], "now": "2024-01-11T00:00:00Z"}

    def test_health_check(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_evaluate(self):
        response = self.client.post("/goals/evaluate", json=self.payload)
        self.assertEqual(response.status_code, 200)

        body = response.json()
        self.assertEqual(body["status"], "success")
        result = body["data"][0]
        self.assertEqual(result["goal_id"], "g1")
        self.assertEqual(result["progress_percent"], 50)
        self.assertEqual(result["status"], "in-progress")
        self.assertEqual(result["badge_tier"], "Halfway Hero")
        self.assertEqual(result["priority_tone"], "warning")
        self.assertEqual(result["days_remaining"], 20)

    def test_evaluate_after_deadline(self):
        self.payload["now"] = "2024-02-15T00:00:00Z"
        response = self.client.post("/goals/evaluate", json=self.payload)
        self.assertEqual(response.json()["data"][0]["status"], "overdue")

    def test_summary(self):
        response = self.client.post("/goals/summary", json=self.payload)
        data = response.json()["data"]
        self.assertEqual(data["goal_count"], 1)
        self.assertEqual(data["average_progress"], 50.0)
        self.assertEqual(
            data["insights"],
            [{"type": "overview", "text": "You have 1 active goals with 50.0% average progress."}],
        )

    def test_summary_without_goals(self):
        response = self.client.post("/goals/summary", json={"goals": [], "entries": [ENTRY]})
        self.assertEqual(response.json()["data"]["insights"], [])

    def test_chart(self):
        response = self.client.post("/goals/chart", json=self.payload)
        self.assertEqual(
            response.json()["data"],
            [{"goal": "Hit 1k revenue", "target": 1000.0, "progress": 50, "status": "in-progress"}],
        )

    def test_badge(self):
        response = self.client.get("/goals/badge?percent=92")
        self.assertEqual(response.json()["data"], {"percent": 92, "badge_tier": "Almost There"})

    def test_invalid_goal_type_is_rejected(self):
        bad_goal = dict(GOAL, type="profit")
        response = self.client.post("/goals/evaluate", json={"goals": [bad_goal], "entries": []})
        self.assertEqual(response.status_code, 422)

    def test_evaluation_errors_use_error_envelope(self):
        with mock.patch(
            "features.goals.endpoints.evaluate_goals",
            side_effect=UnknownGoalTypeError("profit"),
        ):
            with self.assertLogs("features.goals.endpoints", level="ERROR"):
                response = self.client.post("/goals/evaluate", json=self.payload)
        body = response.json()
        self.assertEqual(body["status"], "error")
        self.assertIn("Unknown goal type", body["message"])


class AnalyticsEndpointTests(SimpleTestCase):
    def setUp(self):
        self.client = TestClient(api)

    def test_profit_loss(self):
        entries = [dict(ENTRY, expenses=40, marketingSpend=100, productName="Juice", sales=10)]
        response = self.client.post("/analytics/profit-loss", json={"entries": entries})
        self.assertEqual(response.status_code, 200)

        data = response.json()["data"]
        self.assertEqual(data["summary"]["net_profit"], 500.0)
        self.assertTrue(data["summary"]["is_profitable"])
        self.assertEqual([i["type"] for i in data["insights"]], ["success", "success"])
        self.assertEqual(data["chart"][0]["product"], "Juice")
        self.assertEqual([s["name"] for s in data["breakdown"]], ["Net Profit", "Total Costs"])

    def test_profit_loss_without_entries(self):
        response = self.client.post("/analytics/profit-loss", json={"entries": []})
        data = response.json()["data"]
        self.assertIsNone(data["summary"])
        self.assertEqual(data["insights"], [])

    def test_insights(self):
        response = self.client.post("/analytics/insights", json={"entries": [ENTRY]})
        body = response.json()
        self.assertEqual(body["count"], 4)
        self.assertEqual(body["data"][0]["type"], "insight")

import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from portfolio_analytics.api.routes import get_analytics
from portfolio_analytics.config import AnalyticsConfig, SnapshotPaths
from portfolio_analytics.main import app
from portfolio_analytics.services.analytics import PortfolioAnalytics


class RoutesTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.holdings_path = root / "holding.json"
        self.timeline_path = root / "performance-timeline.json"
        self.holdings_path.write_text(json.dumps([
            {"symbol": "TCS", "sector": "Technology", "marketCap": "Large", "value": 300, "gainLossPercent": "5%"},
            {"symbol": "SBIN", "sector": "Banking", "marketCap": "Large", "value": 100, "gainLossPercent": "-2%"},
        ]), encoding="utf-8")
        self.timeline_path.write_text(json.dumps([
            {"date": "2024-01-01", "portfolio": 100, "nifty50": 100, "gold": 100},
            {"date": "2024-02-01", "portfolio": 110, "nifty50": 105, "gold": 99},
        ]), encoding="utf-8")
        config = AnalyticsConfig(snapshot_paths=SnapshotPaths(
            holdings=str(self.holdings_path), timeline=str(self.timeline_path),
        ))
        app.dependency_overrides[get_analytics] = lambda: PortfolioAnalytics(config)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def test_holdings(self):
        r = self.client.get("/api/portfolio/holdings")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([h["symbol"] for h in r.json()], ["TCS", "SBIN"])

    def test_allocation(self):
        r = self.client.get("/api/portfolio/allocation")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["bySector"]["Technology"], {"value": 300, "percentage": 75.0})

    def test_performance(self):
        r = self.client.get("/api/portfolio/performance")
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(len(body["timeline"]), 2)
        self.assertEqual(body["returns"]["portfolio"]["1month"], 10.0)
        self.assertEqual(body["returns"]["gold"]["1month"], -1.0)

    def test_summary(self):
        r = self.client.get("/api/portfolio/summary")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["topPerformer"]["symbol"], "TCS")

    def test_dashboard(self):
        r = self.client.get("/api/portfolio/dashboard")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["summary"]["totalValue"], 400)

    def test_unreadable_snapshot(self):
        self.holdings_path.write_text("not json", encoding="utf-8")
        r = self.client.get("/api/portfolio/summary")
        self.assertEqual(r.status_code, 500)
        self.assertEqual(r.json()["message"], "Failed to calculate portfolio summary")

    def test_empty_holdings_is_success_shaped(self):
        self.holdings_path.write_text("[]", encoding="utf-8")
        r = self.client.get("/api/portfolio/holdings")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"message": "No portfolio holdings found", "data": []})

    def test_health(self):
        r = self.client.get("/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"ok": True, "snapshots": {"holdings": True, "timeline": True}})
        self.timeline_path.unlink()
        self.assertFalse(self.client.get("/health").json()["ok"])


if __name__ == "__main__":
    unittest.main()

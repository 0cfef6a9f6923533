import unittest

from portfolio_analytics.pipeline.validation import validate_holdings_snapshot, validate_timeline_snapshot


class HoldingsValidationTests(unittest.TestCase):
    def test_valid(self):
        ok, reasons = validate_holdings_snapshot([{"Symbol": "TCS"}, {"symbol": "INFY"}])
        self.assertTrue(ok)
        self.assertEqual(reasons, [])

    def test_reasons(self):
        ok, reasons = validate_holdings_snapshot([None, {"name": "No Symbol"}])
        self.assertFalse(ok)
        self.assertEqual(reasons, ["holdings[0] is not an object", "holdings[1] missing symbol"])

    def test_not_a_list(self):
        self.assertEqual(validate_holdings_snapshot({}), (False, ["holdings is not a list"]))


class TimelineValidationTests(unittest.TestCase):
    def test_valid(self):
        ok, _ = validate_timeline_snapshot([
            {"date": "2024-01-01", "portfolio": 1, "nifty50": 2, "gold": 3.5},
        ])
        self.assertTrue(ok)

    def test_reasons(self):
        ok, reasons = validate_timeline_snapshot([
            {"date": "2024-01-01", "portfolio": 1, "nifty50": 2, "gold": 3},
            {"date": "2024-01-01", "portfolio": 1, "nifty50": 2, "gold": 3},
            {"date": "soon", "portfolio": "1", "nifty50": 2, "gold": 3},
        ])
        self.assertFalse(ok)
        self.assertIn("timeline[1] duplicate date 2024-01-01", reasons)
        self.assertIn("timeline[2] missing or invalid date", reasons)
        self.assertIn("timeline[2].portfolio is not a number", reasons)


if __name__ == "__main__":
    unittest.main()

import unittest

from portfolio_analytics.pipeline.allocation import allocation_by_key
from portfolio_analytics.pipeline.normalize import Holding


def _h(sector, value, market_cap="Large"):
    return Holding(symbol=sector[:3] if sector else "", sector=sector, market_cap=market_cap, value=value)


class AllocationTests(unittest.TestCase):
    def test_groups_and_percentages(self):
        holdings = [_h("Tech", 300.0), _h("Bank", 100.0), _h("Tech", 100.0)]
        out = allocation_by_key(holdings, "sector")
        self.assertEqual(list(out.keys()), ["Tech", "Bank"])
        self.assertEqual(out["Tech"], {"value": 400, "percentage": 80.0})
        self.assertEqual(out["Bank"], {"value": 100, "percentage": 20.0})

    def test_percentages_sum_to_hundred(self):
        holdings = [_h("A", 1.0), _h("B", 1.0), _h("C", 1.0), _h("D", 2.5), _h("E", 7.13)]
        out = allocation_by_key(holdings, "sector")
        self.assertAlmostEqual(sum(g["percentage"] for g in out.values()), 100.0, delta=0.011)

    def test_excluded_values_do_not_count(self):
        holdings = [_h("Tech", 100.0), _h("Bank", 0.0), _h("Energy", -50.0), _h("", 500.0)]
        out = allocation_by_key(holdings, "sector")
        self.assertEqual(out, {"Tech": {"value": 100, "percentage": 100.0}})

    def test_market_cap_key_and_alias(self):
        holdings = [_h("Tech", 150.0, "Large"), _h("Bank", 50.0, "Small")]
        by_attr = allocation_by_key(holdings, "market_cap")
        by_wire = allocation_by_key(holdings, "marketCap")
        self.assertEqual(by_attr, by_wire)
        self.assertEqual(by_attr["Large"]["percentage"], 75.0)

    def test_mapping_input_with_unparseable_value(self):
        holdings = [
            {"sector": "Tech", "value": "250.4"},
            {"sector": "Bank", "value": "abc"},
            {"sector": "Bank", "value": None},
        ]
        out = allocation_by_key(holdings, "sector")
        self.assertEqual(out, {"Tech": {"value": 250, "percentage": 100.0}})

    def test_value_rounds_half_up(self):
        out = allocation_by_key([_h("Tech", 0.5), _h("Bank", 2.5)], "sector")
        self.assertEqual(out["Tech"]["value"], 1)
        self.assertEqual(out["Bank"]["value"], 3)

    def test_percentage_ties_round_half_up(self):
        out = allocation_by_key([_h("Tech", 1.0), _h("Bank", 799.0)], "sector")
        self.assertEqual(out["Tech"]["percentage"], 0.13)
        self.assertEqual(out["Bank"]["percentage"], 99.88)

    def test_no_qualifying_holdings(self):
        self.assertEqual(allocation_by_key([], "sector"), {})
        self.assertEqual(allocation_by_key([_h("Tech", 0.0)], "sector"), {})


if __name__ == "__main__":
    unittest.main()

import math
import unittest

from gobench_json.parsing import METRIC_UNITS, SUPPORTED_UNITS, extract_metrics, parse_float
from gobench_json.domain import BenchmarkResult


def _fields(line: str):
    return line.split()


class TestUnitRegistry(unittest.TestCase):
    def test_registry_covers_the_four_units(self) -> None:
        self.assertEqual({"ns/op", "B/op", "allocs/op", "MB/s"}, SUPPORTED_UNITS)

    def test_registry_targets_result_fields(self) -> None:
        for unit, m in METRIC_UNITS.items():
            self.assertEqual(unit, m.unit)
            self.assertTrue(
                hasattr(BenchmarkResult("BenchmarkX", 1), m.attr),
                f"{unit!r} maps to unknown attribute {m.attr!r}",
            )


class TestParseFloat(unittest.TestCase):
    def test_valid_numbers(self) -> None:
        self.assertEqual(105.0, parse_float("105"))
        self.assertEqual(0.25, parse_float("0.2500"))
        self.assertEqual(1500.0, parse_float("1.5e3"))
        self.assertEqual(-3.0, parse_float("-3"))

    def test_invalid_numbers_return_none(self) -> None:
        for tok in ["", "abc", "ns/op", "1_000", "1,5", "\u0661\u0662"]:
            with self.subTest(tok=tok):
                self.assertIsNone(parse_float(tok))

    def test_special_values_parse(self) -> None:
        self.assertTrue(math.isnan(parse_float("NaN")))
        self.assertTrue(math.isinf(parse_float("+Inf")))
        self.assertTrue(math.isinf(parse_float("-infinity")))

    def test_out_of_range_literal_is_rejected(self) -> None:
        self.assertIsNone(parse_float("1e400"))
        self.assertIsNone(parse_float("-1.5e309"))
        self.assertEqual(1.7e308, parse_float("1.7e308"))

    def test_out_of_range_value_skips_only_that_pair(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 1e400 ns/op 16 B/op"))
        self.assertEqual({"bytes_per_op": 16.0}, out)


class TestExtractMetrics(unittest.TestCase):
    def test_exact_unit_dispatch(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 5 ns/op 6 B/op 7 allocs/op 8 MB/s"))
        self.assertEqual(
            {
                "nanos_per_op": 5.0,
                "bytes_per_op": 6.0,
                "allocs_per_op": 7,
                "megabytes_per_second": 8.0,
            },
            out,
        )

    def test_unknown_units_are_ignored(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 5 ops/sec 6 ns/OP 7 b/op"))
        self.assertEqual({}, out)

    def test_last_duplicate_wins(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 5 ns/op 7 ns/op"))
        self.assertEqual({"nanos_per_op": 7.0}, out)

    def test_bad_value_skips_only_that_pair(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 abc ns/op 16 B/op"))
        self.assertEqual({"bytes_per_op": 16.0}, out)

    def test_pairs_are_not_realigned_after_a_bad_token(self) -> None:
        # "junk 7" is consumed as a pair, leaving "B/op" without a partner.
        out = extract_metrics(_fields("BenchmarkX 10 5 ns/op junk 7 B/op"))
        self.assertEqual({"nanos_per_op": 5.0}, out)

    def test_trailing_value_without_unit_is_ignored(self) -> None:
        out = extract_metrics(_fields("BenchmarkX 10 5 ns/op 9"))
        self.assertEqual({"nanos_per_op": 5.0}, out)

    def test_allocs_truncate_toward_zero(self) -> None:
        self.assertEqual({"allocs_per_op": 3}, extract_metrics(_fields("B 1 3.9 allocs/op")))
        self.assertEqual({"allocs_per_op": -2}, extract_metrics(_fields("B 1 -2.7 allocs/op")))

    def test_non_finite_allocs_are_skipped(self) -> None:
        self.assertEqual({}, extract_metrics(_fields("B 1 NaN allocs/op")))
        self.assertEqual({}, extract_metrics(_fields("B 1 Inf allocs/op")))


if __name__ == "__main__":
    unittest.main()

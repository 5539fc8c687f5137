from __future__ import annotations

import datetime as dt
import random
import unittest

from phaseline.model import Phase
from phaseline.rows import assign_rows, max_overlap


def _ph(pid: str, start, end, name: str = "") -> Phase:
    return Phase(id=pid, name=name, start=start, end=end, progress=0)


def _d(month: int, day: int) -> dt.date:
    return dt.date(2026, month, day)


def _random_phases(rng: random.Random, n: int) -> list[Phase]:
    out = []
    for i in range(n):
        start = _d(1, 1) + dt.timedelta(days=rng.randint(0, 90))
        end = start + dt.timedelta(days=rng.randint(0, 30))
        out.append(_ph(f"p{i}", start, end))
    return out


class TestRowAssignmentContract(unittest.TestCase):
    def test_sequential_and_overlapping_scenario(self) -> None:
        phases = [
            _ph("P1", _d(1, 1), _d(1, 10)),
            _ph("P2", _d(1, 5), _d(1, 15)),
            _ph("P3", _d(1, 11), _d(1, 20)),
        ]
        ra = assign_rows(phases)
        self.assertEqual(ra.rows, {"P1": 0, "P2": 1, "P3": 0})
        self.assertEqual(ra.total_rows, 2)
        self.assertEqual(ra.skipped, ())

    def test_identical_ranges_each_get_a_row(self) -> None:
        phases = [_ph(f"x{i}", _d(1, 1), _d(1, 31)) for i in range(3)]
        ra = assign_rows(phases)
        self.assertEqual(ra.total_rows, 3)
        self.assertEqual(sorted(ra.rows.values()), [0, 1, 2])
        # Equal starts keep input order.
        self.assertEqual(ra.rows, {"x0": 0, "x1": 1, "x2": 2})

    def test_inverted_range_occupies_one_row_without_error(self) -> None:
        phases = [_ph("bad", _d(2, 10), _d(2, 1))]
        ra = assign_rows(phases)
        self.assertEqual(ra.rows, {"bad": 0})
        self.assertEqual(ra.total_rows, 1)

    def test_inverted_range_is_zero_width_at_start(self) -> None:
        # Zero-width at Feb 10 does not block a phase starting Feb 11.
        phases = [
            _ph("bad", _d(2, 10), _d(2, 1)),
            _ph("next", _d(2, 11), _d(2, 20)),
        ]
        ra = assign_rows(phases)
        self.assertEqual(ra.rows, {"bad": 0, "next": 0})
        self.assertEqual(ra.total_rows, 1)

    def test_empty_project_reserves_one_row(self) -> None:
        ra = assign_rows([])
        self.assertEqual(ra.rows, {})
        self.assertEqual(ra.total_rows, 1)

    def test_malformed_phases_are_skipped_not_parked_on_row_zero(self) -> None:
        phases = [
            _ph("nostart", None, _d(1, 5)),
            _ph("ok", _d(1, 1), _d(1, 10)),
            _ph("noend", _d(1, 2), None),
        ]
        ra = assign_rows(phases)
        self.assertEqual(ra.rows, {"ok": 0})
        self.assertEqual(ra.skipped, ("nostart", "noend"))
        self.assertIsNone(ra.row_of("nostart"))
        self.assertEqual(ra.total_rows, 1)

    def test_only_malformed_phases_still_one_row(self) -> None:
        ra = assign_rows([_ph("a", None, None)])
        self.assertEqual(ra.rows, {})
        self.assertEqual(ra.total_rows, 1)

    def test_touching_endpoints_default_is_strict(self) -> None:
        phases = [
            _ph("a", _d(1, 1), _d(1, 10)),
            _ph("b", _d(1, 10), _d(1, 20)),
        ]
        self.assertEqual(assign_rows(phases).rows, {"a": 0, "b": 1})
        self.assertEqual(assign_rows(phases, share_row_on_touch=True).rows, {"a": 0, "b": 0})

    def test_unsorted_input_is_sorted_by_start(self) -> None:
        phases = [
            _ph("late", _d(3, 1), _d(3, 10)),
            _ph("early", _d(1, 1), _d(1, 10)),
            _ph("mid", _d(1, 5), _d(2, 1)),
        ]
        ra = assign_rows(phases)
        self.assertEqual(ra.rows, {"early": 0, "mid": 1, "late": 0})

    def test_lowest_free_row_is_reused(self) -> None:
        phases = [
            _ph("a", _d(1, 1), _d(1, 5)),
            _ph("b", _d(1, 2), _d(1, 30)),
            _ph("c", _d(1, 3), _d(1, 4)),
            _ph("d", _d(1, 10), _d(1, 12)),
        ]
        ra = assign_rows(phases)
        # d fits on row 0 (a ended Jan 5) even though row 2 (c) is also free.
        self.assertEqual(ra.rows, {"a": 0, "b": 1, "c": 2, "d": 0})
        self.assertEqual(ra.total_rows, 3)

    def test_no_overlap_minimality_and_determinism_randomized(self) -> None:
        rng = random.Random(20260101)
        for _ in range(200):
            phases = _random_phases(rng, rng.randint(0, 14))
            ra = assign_rows(phases)

            for i, a in enumerate(phases):
                for b in phases[i + 1:]:
                    if ra.rows[a.id] == ra.rows[b.id]:
                        self.assertTrue(
                            a.end < b.start or b.end < a.start,
                            f"{a} and {b} share row {ra.rows[a.id]}",
                        )

            self.assertEqual(ra.total_rows, max(max_overlap(phases), 1))
            self.assertEqual(assign_rows(phases), ra)

    def test_max_overlap_counts_inclusive_days(self) -> None:
        phases = [
            _ph("a", _d(1, 1), _d(1, 10)),
            _ph("b", _d(1, 10), _d(1, 12)),
            _ph("c", _d(1, 11), _d(1, 12)),
        ]
        self.assertEqual(max_overlap(phases), 2)
        self.assertEqual(assign_rows(phases).total_rows, 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)

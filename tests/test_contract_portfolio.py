from __future__ import annotations

import datetime as dt
import unittest

from phaseline.model import Phase, Project
from phaseline.portfolio import (
    active_phase_on,
    daily_overview,
    filter_projects,
    sort_projects,
    split_archived,
)


def _projects() -> list:
    return [
        Project("1", code="beta", priority="Low", status="Active", streams=("Core",)),
        Project("2", code="Alpha", priority="High", status="Planning", streams=()),
        Project("3", code="gamma", priority="", status="Active", streams=("Apps", "Core")),
        Project("4", code="delta", priority="Medium", status="Done", streams=("Apps",), archived=True),
    ]


class TestPortfolioContract(unittest.TestCase):
    def test_split_archived(self) -> None:
        active, archived = split_archived(_projects())
        self.assertEqual([p.id for p in active], ["1", "2", "3"])
        self.assertEqual([p.id for p in archived], ["4"])

    def test_sort_by_code_is_case_insensitive(self) -> None:
        ids = [p.id for p in sort_projects(_projects(), "code_asc")]
        self.assertEqual(ids, ["2", "1", "4", "3"])
        ids = [p.id for p in sort_projects(_projects(), "code_desc")]
        self.assertEqual(ids, ["3", "4", "1", "2"])

    def test_sort_by_priority(self) -> None:
        # Missing priority ranks as Medium; ties keep input order.
        ids = [p.id for p in sort_projects(_projects(), "priority_high")]
        self.assertEqual(ids, ["2", "3", "4", "1"])
        ids = [p.id for p in sort_projects(_projects(), "priority_low")]
        self.assertEqual(ids, ["1", "3", "4", "2"])

    def test_sort_by_stream_puts_unassigned_last(self) -> None:
        ids = [p.id for p in sort_projects(_projects(), "stream")]
        self.assertEqual(ids, ["4", "3", "1", "2"])

    def test_sort_by_status(self) -> None:
        ids = [p.id for p in sort_projects(_projects(), "status")]
        self.assertEqual(ids, ["1", "3", "4", "2"])

    def test_unknown_sort_key_keeps_order(self) -> None:
        ids = [p.id for p in sort_projects(_projects(), "whatever")]
        self.assertEqual(ids, ["1", "2", "3", "4"])

    def test_filters(self) -> None:
        ps = _projects()
        self.assertEqual([p.id for p in filter_projects(ps)], ["1", "2", "3", "4"])
        self.assertEqual([p.id for p in filter_projects(ps, priorities=["Medium"])], ["3", "4"])
        self.assertEqual([p.id for p in filter_projects(ps, statuses=["Active"])], ["1", "3"])
        self.assertEqual([p.id for p in filter_projects(ps, streams=["Apps"])], ["3", "4"])
        self.assertEqual(
            [p.id for p in filter_projects(ps, statuses=["Active"], streams=["Apps"])],
            ["3"],
        )

    def test_daily_overview(self) -> None:
        d = dt.date
        a = Project("A", (Phase("a1", "Design", d(2026, 1, 1), d(2026, 1, 10)),
                          Phase("a2", "Development", d(2026, 1, 11), d(2026, 1, 31))))
        b = Project("B", (Phase("b1", "UAT", d(2026, 2, 1), d(2026, 2, 5)),))
        c = Project("C", (Phase("c1", "SIT", None, d(2026, 1, 20)),))

        self.assertEqual(active_phase_on(a, d(2026, 1, 10)).id, "a1")  # type: ignore[union-attr]
        self.assertEqual(active_phase_on(a, d(2026, 1, 11)).id, "a2")  # type: ignore[union-attr]
        self.assertIsNone(active_phase_on(b, d(2026, 1, 11)))

        out = daily_overview([a, b, c], d(2026, 1, 15))
        self.assertEqual([(p.id, ph.id) for p, ph in out], [("A", "a2")])


if __name__ == "__main__":
    unittest.main(verbosity=2)

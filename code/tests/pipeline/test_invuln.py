"""Tests for invulnerability window queries."""

from jizoku.pipeline.invuln import (
    ALL_TARGETS,
    InvulnerabilityWindows,
    InvulnWindow,
    merge_intervals,
    overlap_ms,
)


class TestMergeIntervals:
    def test_overlapping_merged(self):
        assert merge_intervals([(15, 25), (10, 20)]) == [(10, 25)]

    def test_touching_merged(self):
        assert merge_intervals([(0, 10), (10, 20)]) == [(0, 20)]

    def test_disjoint_kept(self):
        assert merge_intervals([(30, 40), (0, 10)]) == [(0, 10), (30, 40)]

    def test_empty_intervals_dropped(self):
        assert merge_intervals([(5, 5), (10, 8)]) == []


class TestOverlap:
    def test_partial(self):
        assert overlap_ms([(10, 20)], 5, 15) == 5

    def test_outside(self):
        assert overlap_ms([(10, 20)], 20, 30) == 0

    def test_inverted_query_is_zero(self):
        assert overlap_ms([(10, 20)], 30, 0) == 0


class TestInvulnerabilityWindows:
    def test_total_merges_overlaps(self):
        invuln = InvulnerabilityWindows(
            [InvulnWindow(10000, 20000), InvulnWindow(15000, 25000)], 100000,
        )
        assert invuln.get_invulnerable_uptime() == 15000

    def test_total_clipped_to_fight(self):
        invuln = InvulnerabilityWindows([InvulnWindow(90000, 120000)], 100000)
        assert invuln.get_invulnerable_uptime() == 10000

    def test_bounded_query(self):
        invuln = InvulnerabilityWindows([InvulnWindow(10000, 20000)], 100000)
        assert invuln.get_invulnerable_uptime(ALL_TARGETS, 5000, 25000) == 10000
        assert invuln.get_invulnerable_uptime(ALL_TARGETS, 15000, 17000) == 2000

    def test_untargetable_subset(self):
        invuln = InvulnerabilityWindows(
            [InvulnWindow(0, 10000, untargetable=True), InvulnWindow(20000, 30000)],
            100000,
        )
        assert invuln.get_untargetable_uptime(ALL_TARGETS, 0, 100000) == 10000
        assert invuln.get_invulnerable_uptime() == 20000

    def test_target_scope(self):
        invuln = InvulnerabilityWindows(
            [InvulnWindow(0, 10000), InvulnWindow(30000, 40000, target_id=5)],
            100000,
        )
        assert invuln.get_invulnerable_uptime(ALL_TARGETS) == 10000
        assert invuln.get_invulnerable_uptime(5) == 20000
        assert invuln.get_invulnerable_uptime(6) == 10000

    def test_no_windows(self):
        invuln = InvulnerabilityWindows([], 100000)
        assert invuln.get_invulnerable_uptime() == 0
        assert invuln.get_untargetable_uptime(ALL_TARGETS, 0, 100000) == 0

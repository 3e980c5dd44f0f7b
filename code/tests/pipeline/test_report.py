"""Tests for clip severity and summary formatting."""

from jizoku.pipeline.report import (
    MAJOR,
    MEDIUM,
    MINOR,
    clip_severity,
    format_clip_summary,
    format_duration,
    format_uptime_lines,
)


def sample_metrics():
    return {
        "dots": [
            {"status_id": 1214, "ability_name": "Bio III", "uptime_ms": 95000,
             "uptime_pct": 95.0, "clip_ms": 15000},
            {"status_id": 1215, "ability_name": "Miasma III", "uptime_ms": 90000,
             "uptime_pct": 90.0, "clip_ms": 0},
        ],
        "cooldown_effect": {"status_id": 1228, "ability_name": "Shadow Flare",
                            "uptime_ms": 15000, "max_uptime_pct": 50.0},
        "invulnerable_ms": 0,
        "max_clip_ms": 15000,
        "clip_severity": MEDIUM,
    }


class TestFormatDuration:
    def test_minutes_and_seconds(self):
        assert format_duration(75000) == "1m 15s"

    def test_zero(self):
        assert format_duration(0) == "0m 0s"

    def test_truncates_ms(self):
        assert format_duration(9999) == "0m 9s"


class TestClipSeverity:
    def test_default_tiers(self):
        assert clip_severity(0) == MINOR
        assert clip_severity(9999) == MINOR
        assert clip_severity(10000) == MEDIUM
        assert clip_severity(29999) == MEDIUM
        assert clip_severity(30000) == MAJOR

    def test_custom_thresholds(self):
        assert clip_severity(5000, minor_threshold_ms=2000, major_threshold_ms=4000) == MAJOR
        assert clip_severity(3000, minor_threshold_ms=2000, major_threshold_ms=4000) == MEDIUM


class TestFormatClipSummary:
    def test_two_dots(self):
        assert format_clip_summary(sample_metrics()) == (
            "0m 15s of Bio III and 0m 0s of Miasma III lost to early refreshes."
        )

    def test_single_dot(self):
        metrics = sample_metrics()
        metrics["dots"] = metrics["dots"][:1]
        assert format_clip_summary(metrics) == "0m 15s of Bio III lost to early refreshes."

    def test_no_dots(self):
        assert format_clip_summary({"dots": []}) == "No DoTs tracked."


class TestFormatUptimeLines:
    def test_lines(self):
        assert format_uptime_lines(sample_metrics()) == [
            "Bio III uptime: 95.0%",
            "Miasma III uptime: 90.0%",
            "Shadow Flare uptime (of max): 50.0%",
        ]

    def test_missing_percentages(self):
        metrics = sample_metrics()
        metrics["dots"][0]["uptime_pct"] = None
        metrics["cooldown_effect"]["max_uptime_pct"] = None
        lines = format_uptime_lines(metrics)
        assert lines[0] == "Bio III uptime: n/a"
        assert lines[2] == "Shadow Flare uptime (of max): n/a"

    def test_no_cooldown_effect(self):
        metrics = sample_metrics()
        metrics["cooldown_effect"] = None
        assert len(format_uptime_lines(metrics)) == 2

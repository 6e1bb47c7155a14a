"""Analytics Store — tests for event tracking, rings, stats and popularity.

Tests cover:
    - IP anonymization (IPv4 last octet, redaction otherwise) and referrer domains
    - Popular content ranking (count desc, recency tie-break) and totals
    - Move-to-front rings bounded by capacity; referrer ring dedup
    - Event log eviction keeps total views
    - Time range filtering with a manual UTC clock
    - stats(): type/resource/day/hour breakdowns, top resources, recent events
    - stats() totals and summary are read from one snapshot under concurrent writes
"""

import threading

import pytest
from pydantic import ValidationError

from portfolio_mcp.core.analytics_store import (
    EPOCH,
    AnalyticsStore,
    anonymize_ip,
    extract_domain,
    resolve_time_range,
)


def test_anonymize_ipv4_zeroes_last_octet():
    assert anonymize_ip("192.168.1.42") == "192.168.1.0"
    assert anonymize_ip("192.168.001.005") == "192.168.001.0"


def test_anonymize_other_addresses_redacts_second_half():
    assert anonymize_ip("2001:db8::1") == "2001:xxxx"
    assert anonymize_ip("not-an-ip") == "not-xxxx"


def test_extract_domain():
    assert extract_domain("https://dribbble.com/shots/1") == "dribbble.com"
    assert extract_domain("no scheme here") is None


def test_resolve_time_range(utc_clock):
    now = utc_clock()
    assert (now - resolve_time_range("week", now)).days == 7
    assert resolve_time_range("all", now) == EPOCH


def test_track_stores_anonymized_event(analytics):
    event = analytics.track(
        "view", "project", "p1", user_agent="pytest", ip="10.1.2.3",
        metadata={"source": "grid"},
    )
    assert event.ip == "10.1.2.0"
    assert event.metadata == {"source": "grid"}
    assert analytics.events() == [event]
    assert len(analytics) == 1


def test_track_rejects_empty_resource_and_unknown_type(analytics):
    with pytest.raises(ValidationError):
        analytics.track("view", "")
    with pytest.raises(ValueError):
        analytics.track("hover", "project")
    assert len(analytics) == 0


def test_popular_projects_ranked_by_interactions(analytics):
    for _ in range(3):
        analytics.track("view", "project", "p1")
    analytics.track("click", "project", "p2")

    popular = analytics.popular("projects", limit=10, time_range="all")

    assert [i["resourceId"] for i in popular["popularItems"]] == ["p1", "p2"]
    assert [i["interactions"] for i in popular["popularItems"]] == [3, 1]
    assert popular["totalInteractions"] == 4
    assert popular["contentType"] == "projects"
    assert popular["timeRange"]["period"] == "all"


def test_popular_ties_broken_by_recency(analytics, utc_clock):
    analytics.track("view", "skill", "older")
    utc_clock.advance(minutes=5)
    analytics.track("view", "skill", "newer")

    items = analytics.popular("skills", time_range="day")["popularItems"]
    assert [i["resourceId"] for i in items] == ["newer", "older"]


def test_popular_counts_events_without_resource_id_in_total(analytics):
    analytics.track("view", "page")
    analytics.track("view", "page", "home")
    popular = analytics.popular("pages")
    assert popular["totalInteractions"] == 2
    assert len(popular["popularItems"]) == 1


def test_popular_respects_limit(analytics):
    for rid in ("a", "b", "c"):
        analytics.track("view", "project", rid)
    assert len(analytics.popular(limit=2)["popularItems"]) == 2


def test_recent_rings_move_to_front_and_cap(utc_clock):
    store = AnalyticsStore(ring_capacity=3, clock=utc_clock)
    for rid in ("p1", "p2", "p3", "p4"):
        store.track("view", "project", rid)
    store.track("view", "project", "p2")
    store.track("view", "skill", "s1")

    summary = store.summary()
    assert summary["recentProjects"] == ["p2", "p4", "p3"]
    assert summary["recentSkills"] == ["s1"]


def test_referrer_ring_admits_each_domain_once(analytics):
    analytics.track("view", "page", referrer="https://a.example/x")
    analytics.track("view", "page", referrer="https://b.example/y")
    analytics.track("view", "page", referrer="https://a.example/z")
    assert analytics.summary()["topReferrers"] == ["b.example", "a.example"]


def test_eviction_keeps_total_views(utc_clock):
    store = AnalyticsStore(max_events=3, clock=utc_clock)
    for i in range(5):
        store.track("view", "project", f"p{i}")
    store.track("click", "project", "p0")

    summary = store.summary()
    assert summary["storedEvents"] == 3
    assert summary["totalViews"] == 5
    assert [e.resource_id for e in store.events()] == ["p3", "p4", "p0"]


def test_time_range_excludes_older_events(analytics, utc_clock):
    analytics.track("view", "project", "old")
    utc_clock.advance(days=2)
    analytics.track("view", "project", "new")

    day = analytics.popular("projects", time_range="day")["popularItems"]
    week = analytics.popular("projects", time_range="week")["popularItems"]
    assert [i["resourceId"] for i in day] == ["new"]
    assert {i["resourceId"] for i in week} == {"old", "new"}


def test_stats_breakdowns(analytics, utc_clock):
    analytics.track("view", "project", "p1")
    analytics.track("view", "project", "p1")
    utc_clock.advance(hours=13)
    analytics.track("download", "skill", "s1")

    result = analytics.stats("week")
    stats = result["stats"]
    assert stats["totalEvents"] == 3
    assert stats["eventTypes"] == {"view": 2, "download": 1}
    assert stats["resourceTypes"] == {"project": 2, "skill": 1}
    assert stats["dailyBreakdown"] == {"2024-06-01": 2, "2024-06-02": 1}
    assert stats["hourlyBreakdown"] == {"12": 2, "1": 1}
    assert stats["topResources"] == {"project:p1": 2, "skill:s1": 1}
    assert result["timeRange"]["period"] == "week"
    assert result["summary"]["totalViews"] == 2
    assert "recentEvents" not in result


def test_stats_filters_by_event_type_and_includes_recent_events(analytics, utc_clock):
    analytics.track("view", "project", "p1")
    utc_clock.advance(seconds=1)
    analytics.track("share", "project", "p2")
    utc_clock.advance(seconds=1)
    analytics.track("view", "project", "p3")

    result = analytics.stats("day", event_type="view", include_events=True)
    assert result["stats"]["totalEvents"] == 2
    assert [e["resourceId"] for e in result["recentEvents"]] == ["p3", "p1"]


def test_stats_totals_and_summary_share_one_snapshot(analytics):
    def write():
        for _ in range(2000):
            analytics.track("view", "project", "p1")

    writer = threading.Thread(target=write)
    writer.start()
    try:
        while writer.is_alive():
            result = analytics.stats("all")
            assert result["stats"]["totalEvents"] == result["summary"]["storedEvents"]
    finally:
        writer.join()


def test_store_rejects_invalid_bounds():
    with pytest.raises(ValueError):
        AnalyticsStore(max_events=0)
    with pytest.raises(ValueError):
        AnalyticsStore(ring_capacity=0)

"""Analytics Store — bounded in-memory event log with rolling popularity rings.

Invariants:
    - Every stored event has a non-empty resource and an already-anonymized ip
    - The event log never holds more than max_events; the oldest event is
      evicted first
    - Project/skill rings are move-to-front, deduplicated, at most ring_capacity
    - The referrer ring only admits unseen domains (first-seen order, newest first)
    - All reads and writes run under one lock

Design Decisions:
    - Injected object instead of module-level arrays: each app (and each test)
      owns its own store
    - deque(maxlen=...) bounds memory; total_views counts every view ever
      tracked, including events since evicted from the log
    - Day and hour breakdowns are computed in UTC so results do not depend on
      the host timezone
    - Linear move-to-front on a 10-slot list: fine at this capacity
"""

import logging
import threading
from collections import Counter, deque
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from urllib.parse import urlsplit

from portfolio_mcp.core.domain_types import (
    TIME_RANGE_DAYS,
    ContentType,
    EventType,
    TimeRange,
)
from portfolio_mcp.schemas.portfolio import AnalyticsEvent

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
RECENT_EVENTS_LIMIT = 20
TOP_RESOURCES_LIMIT = 10


def anonymize_ip(ip: str) -> str:
    """Zero the last part of a dotted quad; redact the second half of anything else.

    The quad is not parsed as an address, so leading zeros survive.
    """
    parts = ip.split(".")
    if len(parts) == 4:
        return ".".join(parts[:3] + ["0"])
    return ip[: len(ip) // 2] + "xxxx"


def extract_domain(url: str) -> str | None:
    """Hostname of an absolute URL, or None when there is none."""
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def resolve_time_range(
    time_range: TimeRange | str, now: datetime,
) -> datetime:
    """Cutoff instant for a trailing time range keyword. ALL → epoch."""
    days = TIME_RANGE_DAYS.get(TimeRange(time_range))
    if days is None:
        return EPOCH
    return now - timedelta(days=days)


def _touch(ring: list[str], item: str, capacity: int) -> None:
    if item in ring:
        ring.remove(item)
    ring.insert(0, item)
    del ring[capacity:]


class AnalyticsStore:
    """Interaction log plus most-recently-seen rankings."""

    def __init__(
        self,
        max_events: int = 10_000,
        ring_capacity: int = 10,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        if ring_capacity <= 0:
            raise ValueError("ring_capacity must be positive")
        self.max_events = max_events
        self.ring_capacity = ring_capacity
        self._clock = clock
        self._events: deque[AnalyticsEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()
        self._total_views = 0
        self._recent_projects: list[str] = []
        self._recent_skills: list[str] = []
        self._recent_referrers: list[str] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    # ─── Writes ──────────────────────────────────────────────────

    def track(
        self,
        event_type: EventType | str,
        resource: str,
        resource_id: str | None = None,
        user_agent: str | None = None,
        ip: str | None = None,
        referrer: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> AnalyticsEvent:
        """Record one interaction and update the rolling rings."""
        event = AnalyticsEvent(
            type=EventType(event_type),
            resource=resource,
            resource_id=resource_id,
            user_agent=user_agent,
            ip=anonymize_ip(ip) if ip else None,
            referrer=referrer,
            timestamp=self._clock(),
            metadata=dict(metadata or {}),
        )
        with self._lock:
            self._events.append(event)
            self._update_rings(event)

        logger.info(
            f"Analytics event tracked: {event.type.value} {event.resource}",
            extra={"event_type": event.type.value},
        )
        return event

    def _update_rings(self, event: AnalyticsEvent) -> None:
        if event.type == EventType.VIEW:
            self._total_views += 1

        if event.resource_id:
            if event.resource == "project":
                _touch(self._recent_projects, event.resource_id, self.ring_capacity)
            elif event.resource == "skill":
                _touch(self._recent_skills, event.resource_id, self.ring_capacity)

        if event.referrer:
            domain = extract_domain(event.referrer)
            if domain and domain not in self._recent_referrers:
                self._recent_referrers.insert(0, domain)
                del self._recent_referrers[self.ring_capacity:]

    # ─── Reads ───────────────────────────────────────────────────

    def events(self) -> list[AnalyticsEvent]:
        """Snapshot of the stored events, oldest first."""
        with self._lock:
            return list(self._events)

    def summary(self) -> dict[str, Any]:
        """Rolling counters and rings, newest first."""
        with self._lock:
            return self._summary()

    def _summary(self) -> dict[str, Any]:
        return {
            "totalViews": self._total_views,
            "storedEvents": len(self._events),
            "recentProjects": list(self._recent_projects),
            "recentSkills": list(self._recent_skills),
            "topReferrers": list(self._recent_referrers),
        }

    def stats(
        self,
        time_range: TimeRange | str = TimeRange.MONTH,
        event_type: EventType | str | None = None,
        include_events: bool = False,
    ) -> dict[str, Any]:
        """Aggregate events inside a trailing time range."""
        period = TimeRange(time_range)
        now = self._clock()
        start = resolve_time_range(period, now)
        wanted = EventType(event_type) if event_type is not None else None
        with self._lock:
            selected = self._select(start, lambda e: wanted is None or e.type == wanted)
            summary = self._summary()

        event_types: Counter[str] = Counter()
        resource_types: Counter[str] = Counter()
        daily: Counter[str] = Counter()
        hourly: Counter[str] = Counter()
        resources: Counter[str] = Counter()
        for event in selected:
            moment = event.timestamp.astimezone(timezone.utc)
            event_types[event.type.value] += 1
            resource_types[event.resource] += 1
            daily[moment.strftime("%Y-%m-%d")] += 1
            hourly[str(moment.hour)] += 1
            if event.resource_id:
                resources[f"{event.resource}:{event.resource_id}"] += 1

        result: dict[str, Any] = {
            "stats": {
                "totalEvents": len(selected),
                "eventTypes": dict(event_types),
                "resourceTypes": dict(resource_types),
                "dailyBreakdown": dict(daily),
                "hourlyBreakdown": dict(hourly),
                "topResources": dict(resources.most_common(TOP_RESOURCES_LIMIT)),
            },
            "timeRange": _time_range_view(start, now, period),
            "summary": summary,
        }
        if include_events:
            newest = sorted(selected, key=lambda e: e.timestamp, reverse=True)
            result["recentEvents"] = [
                e.to_wire() for e in newest[:RECENT_EVENTS_LIMIT]
            ]
        return result

    def popular(
        self,
        content_type: ContentType | str = ContentType.PROJECTS,
        limit: int = 10,
        time_range: TimeRange | str = TimeRange.MONTH,
    ) -> dict[str, Any]:
        """Most-interacted resources of one kind, count desc then recency desc."""
        kind = ContentType(content_type)
        period = TimeRange(time_range)
        now = self._clock()
        start = resolve_time_range(period, now)
        with self._lock:
            selected = self._select(start, lambda e: e.resource == kind.resource)

        counts: Counter[str] = Counter()
        last_seen: dict[str, datetime] = {}
        for event in selected:
            if not event.resource_id:
                continue
            counts[event.resource_id] += 1
            previous = last_seen.get(event.resource_id)
            if previous is None or event.timestamp > previous:
                last_seen[event.resource_id] = event.timestamp

        ranked = sorted(
            counts,
            key=lambda rid: (-counts[rid], -last_seen[rid].timestamp()),
        )[:limit]

        return {
            "popularItems": [
                {
                    "resourceId": rid,
                    "interactions": counts[rid],
                    "lastInteraction": last_seen[rid].isoformat(),
                }
                for rid in ranked
            ],
            "contentType": kind.value,
            "timeRange": _time_range_view(start, now, period),
            "totalInteractions": len(selected),
        }

    def _select(
        self, start: datetime, keep: Callable[[AnalyticsEvent], bool],
    ) -> list[AnalyticsEvent]:
        # caller holds the lock
        return [e for e in self._events if e.timestamp >= start and keep(e)]


def _time_range_view(start: datetime, end: datetime, period: TimeRange) -> dict:
    return {
        "start": start.isoformat(),
        "end": end.isoformat(),
        "period": period.value,
    }

# src/subshift/api/metrics.py
from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class MetricKey:
    name: str
    labels: Tuple[Tuple[str, str], ...] = ()

    def render_prom(self) -> str:
        if not self.labels:
            return self.name
        inner = ",".join([f'{k}="{v}"' for k, v in self.labels])
        return f"{self.name}{{{inner}}}"


class Metrics:
    """
    Process-local counter registry rendered in Prometheus text format.
    Counters only; no histograms or gauges.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Counter[MetricKey] = Counter()

    def inc(self, name: str, *, labels: Dict[str, str] | None = None, value: int = 1) -> None:
        key = MetricKey(name=name, labels=tuple(sorted((labels or {}).items())))
        with self._lock:
            self._counters[key] += int(value)

    def snapshot(self) -> Dict[MetricKey, int]:
        with self._lock:
            return dict(self._counters)

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()

    def to_prometheus_text(self) -> str:
        snap = self.snapshot()
        lines: list[str] = []
        for k in sorted(snap.keys(), key=lambda x: (x.name, x.labels)):
            lines.append(f"{k.render_prom()} {snap[k]}")
        return "\n".join(lines) + ("\n" if lines else "")


_registry = Metrics()


def metrics() -> Metrics:
    return _registry


def inc_http_request(method: str, route: str, status: int) -> None:
    # route is a template such as "/api/shift", keeping label cardinality bounded
    metrics().inc(
        "subshift_http_requests_total",
        labels={"method": method, "route": route, "status": str(status)},
    )


def inc_file_decoded(outcome: str) -> None:
    metrics().inc("subshift_files_decoded_total", labels={"outcome": outcome})


def inc_cues_shifted(mode: str, count: int) -> None:
    metrics().inc("subshift_cues_shifted_total", labels={"mode": mode}, value=count)


def inc_file_encoded() -> None:
    metrics().inc("subshift_files_encoded_total")

"""Minimal in-process counters and timing histograms.

No external dependencies; one lock per store keeps it safe under the
FastAPI threadpool.
"""

from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional, Tuple, List
import threading
import time


_COUNTERS_LOCK = threading.Lock()
_HISTOGRAMS_LOCK = threading.Lock()

_LabelsKey = Tuple[Tuple[str, str], ...]

_COUNTERS: Dict[Tuple[str, _LabelsKey], int] = {}

# Pipeline stages are sub-millisecond on small inputs, requests are not
_DEFAULT_BINS: List[float] = [1, 5, 10, 50, 100, 500, 1000, 5000]
_HISTOGRAMS: Dict[str, Dict[_LabelsKey, Dict[str, Any]]] = {}


def _labels_key(labels: Optional[Dict[str, str]]) -> _LabelsKey:
    if not labels:
        return tuple()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


def inc_counter(metric: str, labels: Optional[Dict[str, str]] = None, amount: int = 1) -> None:
    key = (metric, _labels_key(labels))
    with _COUNTERS_LOCK:
        _COUNTERS[key] = _COUNTERS.get(key, 0) + amount


def record_timing(metric: str, value_ms: float, labels: Optional[Dict[str, str]] = None) -> None:
    if value_ms is None:
        return
    lk = _labels_key(labels)
    idx = len(_DEFAULT_BINS)
    for i, b in enumerate(_DEFAULT_BINS):
        if value_ms <= b:
            idx = i
            break
    with _HISTOGRAMS_LOCK:
        series = _HISTOGRAMS.setdefault(metric, {})
        entry = series.get(lk)
        if entry is None:
            entry = {"counts": [0] * (len(_DEFAULT_BINS) + 1), "sum_ms": 0.0}
            series[lk] = entry
        entry["counts"][idx] += 1
        entry["sum_ms"] += float(value_ms)


@contextmanager
def timed(metric: str, labels: Optional[Dict[str, str]] = None) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        record_timing(metric, (time.perf_counter() - start) * 1000.0, labels)


def get_metrics_snapshot() -> Dict[str, Any]:
    with _COUNTERS_LOCK:
        counters = [
            {"name": name, "labels": dict(lk), "value": value}
            for (name, lk), value in _COUNTERS.items()
        ]
    with _HISTOGRAMS_LOCK:
        histograms = [
            {
                "name": name,
                "labels": dict(lk),
                "bins_ms": list(_DEFAULT_BINS),
                "counts": list(entry["counts"]),
                "sum_ms": entry["sum_ms"],
            }
            for name, series in _HISTOGRAMS.items()
            for lk, entry in series.items()
        ]
    return {"counters": counters, "histograms": histograms}


def reset_metrics() -> None:
    with _COUNTERS_LOCK:
        _COUNTERS.clear()
    with _HISTOGRAMS_LOCK:
        _HISTOGRAMS.clear()

import json

from vacation_finder.obs.context import clear_context, request_id_var, search_id_var
from vacation_finder.obs.logger import log_event
from vacation_finder.obs.metrics import (
    get_metrics_snapshot,
    inc_counter,
    record_timing,
    timed,
)
from vacation_finder.types import Season


def test_log_event_is_one_json_line(capsys):
    request_id_var.set("req-1")
    try:
        log_event("step", level="DEBUG", season=Season.WINTER, count=2)
    finally:
        clear_context()
    out = capsys.readouterr().out.strip()
    assert "\n" not in out
    payload = json.loads(out)
    assert payload["event"] == "step"
    assert payload["level"] == "DEBUG"
    assert payload["request_id"] == "req-1"
    assert payload["search_id"] is None
    assert payload["season"] == "winter"
    assert payload["count"] == 2


def test_context_clears():
    search_id_var.set("abc")
    clear_context()
    assert search_id_var.get() is None


def test_counters_accumulate_by_labels():
    inc_counter("hits", {"stage": "a"})
    inc_counter("hits", {"stage": "a"}, amount=4)
    inc_counter("hits", {"stage": "b"})
    counters = {tuple(c["labels"].items()): c["value"] for c in get_metrics_snapshot()["counters"]}
    assert counters[(("stage", "a"),)] == 5
    assert counters[(("stage", "b"),)] == 1


def test_timing_bins():
    record_timing("lat", 0.5)
    record_timing("lat", 7)
    record_timing("lat", 99999)
    record_timing("lat", None)
    h = get_metrics_snapshot()["histograms"][0]
    assert h["counts"][0] == 1
    assert h["counts"][2] == 1
    assert h["counts"][-1] == 1
    assert sum(h["counts"]) == 3


def test_timed_records_even_on_error():
    try:
        with timed("work_ms", {"stage": "x"}):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    h = get_metrics_snapshot()["histograms"]
    assert h[0]["name"] == "work_ms"
    assert sum(h[0]["counts"]) == 1

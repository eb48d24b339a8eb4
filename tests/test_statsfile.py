import json
import time

import pytest

from falcosink.engine import FalcoError
from falcosink.statsfile import CaptureStats, StatsFileWriter


class FakeInspector:
    def __init__(self, samples):
        self._samples = list(samples)

    def get_capture_stats(self):
        return self._samples.pop(0)


def _wait_sample(writer, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if writer.handle():
            return True
        time.sleep(0.005)
    return False


def _records(path):
    lines = path.read_text(encoding="utf-8").splitlines()
    assert all(line.endswith("},") for line in lines)
    return [json.loads(line[:-1]) for line in lines]


def test_first_sample_delta_equals_current(tmp_path):
    out = tmp_path / "stats.json"
    stats = CaptureStats(n_evts=100, n_drops=0, n_preemptions=3)
    with StatsFileWriter(FakeInspector([stats]), out, 10, environ={}) as writer:
        assert _wait_sample(writer)
    (record,) = _records(out)
    assert record["sample"] == 1
    assert record["cur"] == {"events": 100, "drops": 0, "preemptions": 3}
    assert record["delta"] == record["cur"]
    assert record["drop_pct"] == 0


def test_second_sample_delta_is_difference(tmp_path):
    out = tmp_path / "stats.json"
    first = CaptureStats(n_evts=100, n_drops=10, n_preemptions=1)
    second = CaptureStats(n_evts=250, n_drops=40, n_preemptions=4)
    with StatsFileWriter(FakeInspector([first, second]), out, 10, environ={}) as writer:
        assert _wait_sample(writer)
        assert _wait_sample(writer)
    records = _records(out)
    assert [r["sample"] for r in records] == [1, 2]
    assert records[1]["delta"] == {
        "events": second.n_evts - first.n_evts,
        "drops": second.n_drops - first.n_drops,
        "preemptions": second.n_preemptions - first.n_preemptions,
    }
    assert records[1]["cur"]["events"] == second.n_evts


def test_zero_events_gives_zero_drop_pct(tmp_path):
    out = tmp_path / "stats.json"
    with StatsFileWriter(FakeInspector([CaptureStats()]), out, 10, environ={}) as writer:
        assert _wait_sample(writer)
    line = out.read_text(encoding="utf-8")
    assert line.endswith('"drop_pct": 0},\n')


def test_extra_environment_keys_are_added(tmp_path):
    out = tmp_path / "stats.json"
    env = {"FALCO_STATS_EXTRA_run": "abc", "OTHER": "x"}
    with StatsFileWriter(FakeInspector([CaptureStats()]), out, 10, environ=env) as writer:
        assert _wait_sample(writer)
    (record,) = _records(out)
    assert list(record)[:2] == ["sample", "run"]
    assert record["run"] == "abc"
    assert "OTHER" not in record


def test_appends_to_existing_file(tmp_path):
    out = tmp_path / "stats.json"
    out.write_text("existing\n", encoding="utf-8")
    with StatsFileWriter(FakeInspector([CaptureStats()]), out, 10, environ={}) as writer:
        assert _wait_sample(writer)
    assert out.read_text(encoding="utf-8").startswith("existing\n{")


def test_zero_interval_never_samples(tmp_path):
    out = tmp_path / "stats.json"
    with StatsFileWriter(FakeInspector([]), out, 0, environ={}) as writer:
        time.sleep(0.05)
        assert writer.handle() is False
    assert out.read_text(encoding="utf-8") == ""


def test_handle_after_close_writes_nothing(tmp_path):
    out = tmp_path / "stats.json"
    writer = StatsFileWriter(FakeInspector([CaptureStats()]), out, 10, environ={})
    writer.close()
    time.sleep(0.03)
    assert writer.handle() is False


def test_unopenable_file_raises(tmp_path):
    with pytest.raises(FalcoError):
        StatsFileWriter(FakeInspector([]), tmp_path / "missing" / "stats.json", 10, environ={})


def test_negative_interval_raises(tmp_path):
    with pytest.raises(FalcoError):
        StatsFileWriter(FakeInspector([]), tmp_path / "stats.json", -1, environ={})
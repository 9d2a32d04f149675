"""Tests for SortingEngine dispatch, descriptors, statistics ownership and export."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from sortscope import (
    RunResult, SortingEngine, Statistics, dump_run, get_complexity, get_description, get_info,
)

from conftest import ALL_KEYS


class TestDispatch:
    def test_unknown_algorithm_falls_back_to_bubble(self, engine, caplog):
        with caplog.at_level(logging.WARNING, logger="sortscope"):
            result = engine.run("bogo", [3, 1, 2])

        assert result.algorithm == "bubble"
        assert result.sorted_sequence == (1, 2, 3)
        assert "bogo" in caplog.text

    def test_fallback_log_matches_bubble(self, engine):
        assert engine.run("nope", [4, 2, 3, 1]).action_log == engine.run("bubble", [4, 2, 3, 1]).action_log

    def test_known_algorithm_is_reported(self, engine):
        assert engine.run("heap", [2, 1]).algorithm == "heap"

    def test_debug_record_per_run(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="sortscope"):
            engine.run("merge", [2, 1])
        assert any("merge sorted 2 elements" in r.getMessage() for r in caplog.records)


class TestInputs:
    def test_accepts_numpy_arrays(self, engine):
        arr = np.array([5, 3, 9, 1])
        result = engine.run("quick", arr)
        assert result.sorted_sequence == (1, 3, 5, 9)
        assert all(type(v) is int for v in result.sorted_sequence)
        assert arr.tolist() == [5, 3, 9, 1]

    def test_accepts_tuples_and_floats(self, engine):
        result = engine.run("insertion", (2.5, -1.0, 0.25))
        assert result.sorted_sequence == (-1.0, 0.25, 2.5)

    def test_radix_rejection_clears_previous_stats(self, engine):
        engine.run("bubble", [2, 1])
        assert engine.get_stats().comparisons == 1
        with pytest.raises(ValueError):
            engine.run("radix", [1, -2])
        assert engine.get_stats() == Statistics()


class TestStatistics:
    def test_zero_before_first_run(self, engine):
        assert engine.get_stats() == Statistics()

    def test_stats_belong_to_the_latest_run_only(self, engine):
        first = engine.run("bubble", [3, 2, 1])
        second = engine.run("selection", [1, 2])
        assert engine.get_stats() == second.stats
        assert engine.get_stats().comparisons == 1
        assert first.stats.comparisons == 3

    def test_engines_are_independent(self):
        a, b = SortingEngine(), SortingEngine()
        a.run("merge", [4, 3, 2, 1])
        b.run("bubble", [1, 2])
        assert a.get_stats().peak_memory == 4
        assert b.get_stats().comparisons == 1

    def test_one_engine_per_thread(self):
        values = list(range(40, 0, -1))

        def work(key):
            eng = SortingEngine()
            result = eng.run(key, values)
            return result, eng.get_stats()

        with ThreadPoolExecutor(max_workers=4) as pool:
            outcomes = list(pool.map(work, ALL_KEYS))

        for result, stats in outcomes:
            assert list(result.sorted_sequence) == sorted(values)
            assert result.stats == stats


class TestDescriptors:
    def test_complexity_lookup(self, engine):
        assert engine.get_complexity("merge") == {"time": "O(n log n)", "space": "O(n)"}
        assert get_complexity("quick") == {"time": "O(n log n) avg", "space": "O(log n) avg"}

    def test_unknown_ids_get_sentinels(self, engine):
        assert engine.get_complexity("bogo") == {"time": "Unknown", "space": "Unknown"}
        assert engine.get_description("bogo") == "No description available."
        assert get_info("bogo") is None

    def test_sentinel_is_not_shared(self):
        get_complexity("bogo")["time"] = "O(1)"
        assert get_complexity("bogo")["time"] == "Unknown"

    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_every_algorithm_is_described(self, key):
        assert get_description(key) != "No description available."
        assert "Unknown" not in get_complexity(key).values()
        assert get_info(key).key == key

    def test_stability_flags(self):
        assert get_info("merge").stable
        assert get_info("radix").stable
        assert not get_info("quick").stable
        assert not get_info("heap").stable


class TestExport:
    def test_dump_run_writes_json(self, engine, tmp_path):
        values = [2, 1]
        result = engine.run("merge", values)
        path = tmp_path / "run.json"

        dump_run(result, path, values)

        data = json.loads(path.read_text())
        assert data["algorithm"] == "merge"
        assert data["input"] == [2, 1]
        assert data["sorted"] == [1, 2]
        assert data["stats"]["peak_memory"] == 2
        assert data["actions"][0] == {
            "kind": "memory_alloc", "indices": [], "size": 1, "total": 1,
            "description": "Allocating memory", "notation": "new Array(1)",
        }
        assert len(data["actions"]) == len(result.action_log)

    def test_run_result_is_immutable(self, engine):
        result = engine.run("bubble", [1])
        assert isinstance(result, RunResult)
        with pytest.raises(AttributeError):
            result.algorithm = "quick"

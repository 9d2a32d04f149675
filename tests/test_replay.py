"""Tests for headless replay, frame iteration and metric curves."""

import numpy as np
import pytest

from sortscope import Action, ActionKind, iter_frames, metric_curves, replay, run

from conftest import ALL_KEYS


class TestIterFrames:
    def test_one_frame_per_action(self):
        values = [4, 1, 3, 2]
        result = run("heap", values)
        frames = list(iter_frames(values, result.action_log))
        assert len(frames) == len(result.action_log)

    def test_active_indices_follow_the_action(self):
        values = [3, 1, 2]
        result = run("bubble", values)
        for _, active, action in iter_frames(values, result.action_log):
            assert active == list(action.indices)

    def test_final_state_is_sorted_and_input_untouched(self):
        values = [5, 3, 1, 4, 2]
        result = run("cocktail", values)
        state = values
        for state, _, _ in iter_frames(values, result.action_log):
            pass
        assert state == [1, 2, 3, 4, 5]
        assert values == [5, 3, 1, 4, 2]

    def test_swap_frames_show_the_logged_values(self):
        values = [9, 4, 7, 1]
        result = run("selection", values)
        for state, _, action in iter_frames(values, result.action_log):
            if action.kind is ActionKind.SWAP:
                i, j = action.indices
                assert (state[i], state[j]) == action.values


class TestReplay:
    def test_empty_log_returns_a_copy(self):
        values = [3, 1, 2]
        outcome = replay(values, [])
        assert outcome.sequence == [3, 1, 2]
        assert outcome.sequence is not values
        assert outcome.stats.comparisons == 0

    def test_partial_log_stops_midway(self):
        values = [2, 1]
        result = run("merge", values)
        # allocations and copies only, nothing written yet
        outcome = replay(values, result.action_log[:4])
        assert outcome.sequence == [2, 1]
        assert outcome.stats.current_memory == 2

    @pytest.mark.parametrize("action", [
        Action(ActionKind.SWAP, (0,)),
        Action(ActionKind.COMPARE, (0, 5)),
        Action(ActionKind.ASSIGN, (0,), ()),
        Action(ActionKind.MEMORY_ALLOC),
        Action("swap", (0, 1)),
    ])
    def test_malformed_actions_are_rejected(self, action):
        with pytest.raises(ValueError):
            replay([1, 2], [action])


class TestMetricCurves:
    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_curves_end_at_the_run_statistics(self, key):
        values = [12, 3, 45, 7, 3, 0, 9, 21]
        result = run(key, values)
        curves = metric_curves(result.action_log)

        n = len(result.action_log)
        for name in ("comparisons", "swaps", "accesses", "memory"):
            assert curves[name].shape == (n + 1,)
            assert curves[name][0] == 0

        assert curves["comparisons"][-1] == result.stats.comparisons
        assert curves["swaps"][-1] == result.stats.swaps
        assert curves["accesses"][-1] == result.stats.accesses
        assert curves["memory"][-1] == 0
        assert curves["memory"].max() == result.stats.peak_memory

    def test_curves_never_decrease(self):
        result = run("quick", [5, 1, 4, 2, 3])
        curves = metric_curves(result.action_log)
        for name in ("comparisons", "swaps", "accesses"):
            assert np.all(np.diff(curves[name]) >= 0)

    def test_memory_curve_follows_allocations(self):
        result = run("merge", [2, 1])
        memory = metric_curves(result.action_log)["memory"]
        # alloc 1, alloc 1, access, access, assign, assign, free 1, free 1
        assert memory.tolist() == [0, 1, 2, 2, 2, 2, 2, 1, 0]

    def test_empty_log(self):
        curves = metric_curves([])
        assert curves["comparisons"].tolist() == [0]

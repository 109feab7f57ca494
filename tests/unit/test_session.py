"""Tests for VisualizerSession: the control surface a presentation adapter drives."""

import pytest

from algotrace.playback import PlaybackError
from algotrace.run_types import PlaybackState
from algotrace.session import VisualizerSession
from algotrace.structures import BinaryTree, Graph
from algotrace.trace_types import SortStep


def _make_session(scheduler, rng, algorithm="bubble", size=None):
    seen: list[int] = []
    session = VisualizerSession(
        algorithm,
        scheduler,
        rng=rng,
        size=size,
        on_step=lambda index, step: seen.append(index),
    )
    return session, seen


class TestSessionSetup:
    def test_sorting_preview_is_loaded(self, scheduler, rng):
        session, seen = _make_session(scheduler, rng)
        assert session.state == PlaybackState.PAUSED
        assert isinstance(session.current_step, SortStep)
        assert list(session.current_step.array) == session.structure
        assert len(session.structure) == 20
        assert seen == [0]

    def test_graph_session_defaults_start(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "bfs-graph")
        assert isinstance(session.structure, Graph)
        assert session.start_node == "node-0"
        assert session.state == PlaybackState.IDLE
        assert session.cursor.delay_ms == 1000

    def test_tree_session(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "inorder", size=6)
        assert isinstance(session.structure, BinaryTree)
        assert len(session.structure) == 6
        assert session.start_node is None
        assert session.cursor.delay_ms == 800

    def test_unknown_algorithm_raises(self, scheduler, rng):
        with pytest.raises(ValueError):
            VisualizerSession("bogo", scheduler, rng=rng)

    def test_explicit_delay_overrides_default(self, scheduler, rng):
        session = VisualizerSession("quick", scheduler, rng=rng, delay_ms=5)
        assert session.cursor.delay_ms == 5


class TestSessionPlayback:
    def test_start_plays_fresh_trace(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=5)
        trace = session.start()
        assert session.state == PlaybackState.PLAYING
        assert session.trace is trace
        assert session.current_step == trace[0]

    def test_playback_reaches_sorted_array(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=5)
        session.start()
        scheduler.advance(60.0)
        assert session.state == PlaybackState.PAUSED
        assert list(session.current_step.array) == sorted(session.structure)

    def test_start_while_playing_restarts(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=5)
        session.start()
        scheduler.advance(0.2)
        session.start()
        assert session.cursor.index == 0
        assert scheduler.pending == 1

    def test_pause_and_reset(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=5)
        session.start()
        scheduler.advance(0.2)
        session.pause()
        paused_at = session.cursor.index
        scheduler.advance(5.0)
        assert session.cursor.index == paused_at > 0
        session.reset()
        assert session.cursor.index == 0
        assert session.state == PlaybackState.PAUSED

    def test_tree_result_after_completion(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "inorder", size=6)
        session.start()
        assert session.result == []
        scheduler.advance(60.0)
        assert session.result == sorted(node.value for node in session.structure.nodes)

    def test_graph_result_uses_selected_start(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "bfs-graph", size=5)
        session.select_start("node-3")
        trace = session.start()
        assert trace[1].current == "node-3"
        scheduler.advance(120.0)
        assert len(session.result) == 5

    def test_sorting_has_no_result(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=4)
        session.start()
        scheduler.advance(60.0)
        assert session.result == []


class TestSessionControls:
    def test_regenerate_replaces_structure_and_stops(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=8)
        before = list(session.structure)
        session.start()
        session.regenerate()
        assert session.structure != before
        assert session.trace is None
        assert session.state == PlaybackState.PAUSED
        assert scheduler.pending == 0

    def test_select_algorithm_same_family_keeps_structure(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=8)
        before = list(session.structure)
        session.select_algorithm("merge")
        assert session.algorithm == "merge"
        assert session.structure == before
        assert session.state == PlaybackState.PAUSED

    def test_select_algorithm_other_family_regenerates(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng)
        session.start()
        session.select_algorithm("dfs-graph")
        assert isinstance(session.structure, Graph)
        assert session.start_node == "node-0"
        assert session.cursor.delay_ms == 1000
        assert session.state == PlaybackState.IDLE
        assert scheduler.pending == 0

    def test_select_start_validates_node(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "dfs-graph", size=4)
        with pytest.raises(ValueError, match="not found"):
            session.select_start("node-99")
        assert session.start_node == "node-0"

    def test_select_start_rejected_for_non_graph(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "preorder")
        with pytest.raises(ValueError, match="does not take a start node"):
            session.select_start("node-0")

    def test_set_size_regenerates(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng)
        session.set_size(12)
        assert len(session.structure) == 12

    def test_set_speed_changes_delay(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng)
        assert session.cursor.delay_ms == 51
        session.set_speed(100)
        assert session.cursor.delay_ms == 1

    def test_set_speed_rejected_outside_sorting(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, "bfs-tree")
        with pytest.raises(ValueError, match="Speed control"):
            session.set_speed(10)

    def test_cursor_rejects_start_without_pause(self, scheduler, rng):
        session, _ = _make_session(scheduler, rng, size=5)
        session.start()
        with pytest.raises(PlaybackError):
            session.cursor.start(session.trace.steps)

"""Tests for the static algorithm table and tracer dispatch."""

import pytest

from algotrace import constants
from algotrace.registry import algorithms_for, all_algorithms, get_algorithm, get_tracer
from algotrace.run_types import AlgorithmFamily
from algotrace.sorting import quick_sort


class TestRegistry:
    def test_every_supported_key_is_registered(self):
        assert [info.key for info in all_algorithms()] == list(constants.SUPPORTED_ALGORITHMS)

    def test_families(self):
        assert algorithms_for(AlgorithmFamily.SORTING) == ["bubble", "quick", "merge"]
        assert algorithms_for(AlgorithmFamily.GRAPH) == ["bfs-graph", "dfs-graph"]
        assert algorithms_for(AlgorithmFamily.TREE) == ["inorder", "preorder", "postorder", "bfs-tree"]

    def test_metadata(self):
        info = get_algorithm("bubble")
        assert info.name == "Bubble Sort"
        assert info.complexity == "O(n²)"
        assert info.default_delay_ms == 51
        assert get_algorithm("postorder").complexity == "O(n)"

    def test_only_graph_algorithms_require_start(self):
        assert [i.key for i in all_algorithms() if i.requires_start] == ["bfs-graph", "dfs-graph"]

    def test_default_delays_per_family(self):
        assert get_algorithm("dfs-graph").default_delay_ms == 1000
        assert get_algorithm("bfs-tree").default_delay_ms == 800

    def test_get_tracer(self):
        assert get_tracer("quick") is quick_sort

    def test_unknown_key_lists_available(self):
        with pytest.raises(ValueError, match="Available"):
            get_tracer("heap")

"""Tests for the algotrace command line entry point."""

import json

import pytest

from algotrace.cli import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["bubble"])
        assert args.algorithm == "bubble"
        assert args.size is None
        assert args.delay is None
        assert not args.json

    def test_short_options(self):
        args = build_parser().parse_args(["quick", "-n", "9", "-s", "3", "-v"])
        assert (args.size, args.seed, args.verbose) == (9, 3, True)


class TestMain:
    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "bubble" in out
        assert "bfs-tree" in out
        assert "O(V + E)" in out

    def test_dump_with_values(self, capsys):
        assert main(["bubble", "--values", "5,1,4,2,8"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "═══ Bubble Sort (15 steps) ═══"
        assert lines[-1].endswith("sorted [1, 2, 4, 5, 8]")

    def test_json_tree_values(self, capsys):
        assert main(["inorder", "--values", "5,3,8,1,4", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["steps"][-1]["order"] == [1, 3, 4, 5, 8]

    def test_size_and_seed_are_repeatable(self, capsys):
        main(["merge", "--size", "6", "--seed", "3", "--json"])
        first = json.loads(capsys.readouterr().out)
        main(["merge", "--size", "6", "--seed", "3", "--json"])
        second = json.loads(capsys.readouterr().out)
        assert first == second
        assert len(first["steps"][0]["array"]) == 6

    def test_graph_start_option(self, capsys):
        assert main(["dfs-graph", "--seed", "2", "--size", "5", "--start", "node-4", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["steps"][1]["current"] == "node-4"

    def test_stats(self, capsys):
        assert main(["quick", "--values", "3,1,2", "--stats"]) == 0
        assert "Trace Statistics" in capsys.readouterr().out

    def test_play(self, capsys):
        assert main(["quick", "--values", "3,1,2", "--play", "--delay", "1"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "═══ Quick Sort (6 steps) ═══"
        assert "[5] sorted [1, 2, 3]" in out

    def test_invalid_start_fails(self, capsys):
        assert main(["bfs-graph", "--seed", "1", "--start", "node-99"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_algorithm_fails(self, capsys):
        assert main(["bogo"]) == 1
        assert "Unsupported algorithm" in capsys.readouterr().err

    def test_values_rejected_for_graphs(self, capsys):
        assert main(["bfs-graph", "--values", "1,2"]) == 1
        assert "--values" in capsys.readouterr().err

    def test_missing_algorithm_exits(self):
        with pytest.raises(SystemExit):
            main([])

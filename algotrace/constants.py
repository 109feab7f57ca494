"""Named constants: algorithm keys, value ranges, layout geometry and delays."""

from __future__ import annotations

# Algorithm keys
ALGO_BUBBLE = "bubble"
ALGO_QUICK = "quick"
ALGO_MERGE = "merge"
ALGO_BFS_GRAPH = "bfs-graph"
ALGO_DFS_GRAPH = "dfs-graph"
ALGO_INORDER = "inorder"
ALGO_PREORDER = "preorder"
ALGO_POSTORDER = "postorder"
ALGO_BFS_TREE = "bfs-tree"

SUPPORTED_ALGORITHMS: tuple[str, ...] = (
    ALGO_BUBBLE,
    ALGO_QUICK,
    ALGO_MERGE,
    ALGO_BFS_GRAPH,
    ALGO_DFS_GRAPH,
    ALGO_INORDER,
    ALGO_PREORDER,
    ALGO_POSTORDER,
    ALGO_BFS_TREE,
)

NODE_ID_TEMPLATE = "node-{index}"

# Array generation
DEFAULT_ARRAY_SIZE = 20
MIN_ARRAY_SIZE = 5
MAX_ARRAY_SIZE = 50
ARRAY_MIN_VALUE = 10
ARRAY_MAX_VALUE = 309

# Graph generation and circular layout
DEFAULT_GRAPH_NODES = 8
GRAPH_EXTRA_EDGE_SPAN = 5
GRAPH_CENTER_X = 300.0
GRAPH_CENTER_Y = 200.0
GRAPH_RADIUS = 120.0

# Tree generation and layout
DEFAULT_TREE_VALUES = 15
TREE_MIN_VALUE = 1
TREE_MAX_VALUE = 100
TREE_ROOT_X = 400.0
TREE_ROOT_Y = 50.0
TREE_BASE_SPACING = 400.0
TREE_LEVEL_HEIGHT = 80.0

# Playback delays (milliseconds)
DEFAULT_SORT_SPEED = 50
MIN_SORT_SPEED = 1
MAX_SORT_SPEED = 100
SORT_SPEED_CEILING = 101
GRAPH_DELAY_MS = 1000
TREE_DELAY_MS = 800

# Step kinds
STEP_COMPARE = "compare"
STEP_SWAP = "swap"
STEP_PIVOT = "pivot"
STEP_SORTED = "sorted"
STEP_WRITE = "write"
STEP_ENTER = "enter"
STEP_VISIT = "visit"
STEP_FRONTIER = "frontier"

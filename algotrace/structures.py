"""Structure data types — graphs as pydantic records, trees as a node arena."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel


class Position(BaseModel):
    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


class GraphNode(BaseModel):
    id: str
    value: int
    position: Position = Position(x=0.0, y=0.0)


class GraphEdge(BaseModel):
    """Undirected edge; source/target only record insertion orientation."""

    source: str
    target: str

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def same_pair(self, other: GraphEdge) -> bool:
        return {self.source, self.target} == {other.source, other.target}


class Graph(BaseModel):
    """Undirected graph.

    Edges are expected to reference existing node ids. The generator
    guarantees this; traversals do not re-check it.
    """

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return any(node.id == node_id for node in self.nodes)

    def node(self, node_id: str) -> GraphNode:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    def __str__(self) -> str:
        lines = [f"[{node.id}] value={node.value} @ {node.position}" for node in self.nodes]
        lines.extend(f"  {edge.source} -- {edge.target}" for edge in self.edges)
        return "\n".join(lines)


@dataclass
class TreeNode:
    id: str
    value: int
    left: int | None = None  # index into BinaryTree.nodes
    right: int | None = None
    position: Position | None = None
    depth: int = 0


@dataclass
class BinaryTree:
    """Binary tree stored as an arena; child links are indices into ``nodes``."""

    nodes: list[TreeNode] = field(default_factory=list)
    root: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    @property
    def root_node(self) -> TreeNode | None:
        if self.root is None:
            return None
        return self.nodes[self.root]

    def node_at(self, index: int) -> TreeNode:
        return self.nodes[index]

    def children(self, index: int) -> list[int]:
        node = self.nodes[index]
        return [child for child in (node.left, node.right) if child is not None]

    def find(self, node_id: str) -> TreeNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        if self.root is None:
            return "(empty tree)"
        return "\n".join(self._render())

    def _render(self) -> list[str]:
        lines: list[str] = []
        pending = [self.root]
        while pending:
            index = pending.pop()
            node = self.nodes[index]
            lines.append(f"{'  ' * node.depth}[{node.id}] {node.value}")
            pending.extend(reversed(self.children(index)))
        return lines

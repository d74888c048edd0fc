"""Co-star graph builder and shortest collaboration path engine."""

from costar.graph import GraphBuilder
from costar.models import Edge, Segment
from costar.pathfinder import shortest_path
from costar.priority_queue import IndexedPriorityQueue
from costar.readonly import ReadonlyGraph

__all__ = ["Edge", "GraphBuilder", "IndexedPriorityQueue", "ReadonlyGraph", "Segment", "shortest_path"]

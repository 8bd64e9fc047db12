"""
Dijkstra's single-source shortest paths on top of the indexed heap.

The graph is a mapping from node to an iterable of (neighbor, weight)
pairs. Every node reached for the first time is added to the frontier;
a shorter path found later lowers its priority with change_priority.
"""

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Tuple

from indexed_heap.exceptions import ValueNotFoundError
from indexed_heap.heap import Heap
from indexed_heap.logger import logger

Graph = Mapping[Hashable, Iterable[Tuple[Hashable, float]]]


def shortest_paths(graph: Graph, source: Hashable) -> Tuple[Dict[Hashable, float], Dict[Hashable, Hashable]]:
  distances: Dict[Hashable, float] = {}
  predecessors: Dict[Hashable, Hashable] = {}
  tentative: Dict[Hashable, float] = {source: 0}
  frontier = Heap()
  frontier.add(source, 0)
  while frontier:
    node = frontier.poll()
    distances[node] = tentative.pop(node)
    for neighbor, weight in graph.get(node, ()):
      if weight < 0:
        raise ValueError(f"Negative edge weight {weight} from {node} to {neighbor}")
      if neighbor in distances:
        continue
      candidate = distances[node] + weight
      if neighbor not in tentative:
        tentative[neighbor] = candidate
        predecessors[neighbor] = node
        frontier.add(neighbor, candidate)
      elif candidate < tentative[neighbor]:
        tentative[neighbor] = candidate
        predecessors[neighbor] = node
        frontier.change_priority(neighbor, candidate)
  logger().debug(f"Shortest paths from {source}: {len(distances)} nodes settled")
  return distances, predecessors


def shortest_path(graph: Graph, source: Hashable, target: Hashable) -> List[Any]:
  distances, predecessors = shortest_paths(graph, source)
  if target not in distances:
    raise ValueNotFoundError(f"{target} is not reachable from {source}")
  path = [target]
  while path[-1] != source:
    path.append(predecessors[path[-1]])
  path.reverse()
  return path

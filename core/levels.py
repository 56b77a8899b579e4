"""Level assignment for the todo dependency graph.

level(todo) is the length of the longest dependency chain ending at the todo:
0 without resolvable dependencies, otherwise 1 + max(level(dependency)).

Cycles are legal input. Todos that depend on each other form a group that is
finalized together (Tarjan-style DFS): the edges inside the group are ignored
and every member receives 1 + the highest level among the group's outside
dependencies (or 0). A <-> B therefore gives level 0 to both, and C -> A gives
C level 1.
"""

from typing import Dict, Iterator, List, Set, Tuple

from .graph_model import TodoGraph


def assign_levels(graph: TodoGraph) -> Dict[str, int]:
    """Return {todo_id: level} for every node of the graph.

    Depth-first over the dependency relation with two structures: `visiting`
    holds todos on the open traversal path, `completed` caches final levels.
    Reaching a todo that is still visiting stops the descent there and only
    records that a cycle is open; no level on that path is cached until the
    whole cycle has been explored. The walk keeps its own stack, so long
    chains do not depend on the interpreter recursion limit.
    """
    deps = graph.dependency_map()
    completed: Dict[str, int] = {}
    order: Dict[str, int] = {}
    low: Dict[str, int] = {}
    path: List[str] = []
    visiting: Set[str] = set()

    def enter(todo_id: str) -> Tuple[str, Iterator[str]]:
        order[todo_id] = low[todo_id] = len(order)
        path.append(todo_id)
        visiting.add(todo_id)
        return todo_id, iter(deps.get(todo_id, []))

    for root in graph.node_ids():
        if root in order:
            continue
        stack = [enter(root)]
        while stack:
            current, pending = stack[-1]
            descended = False
            for dep in pending:
                if dep not in order:
                    stack.append(enter(dep))
                    descended = True
                    break
                if dep in visiting:
                    low[current] = min(low[current], order[dep])
            if descended:
                continue

            stack.pop()
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[current])
            if low[current] != order[current]:
                continue

            group: List[str] = []
            while True:
                member = path.pop()
                visiting.discard(member)
                group.append(member)
                if member == current:
                    break
            members = set(group)
            level = 0
            for member in group:
                for dep in deps.get(member, []):
                    if dep not in members:
                        level = max(level, completed[dep] + 1)
            for member in group:
                completed[member] = level
    return completed


def cyclic_todo_ids(graph: TodoGraph, levels: Dict[str, int]) -> Set[str]:
    """Todos sitting on at least one dependency cycle.

    An edge whose target does not end up strictly right of its source can only
    come from a cycle, so both of its ends are reported.
    """
    flagged: Set[str] = set()
    for edge in graph.edges:
        if levels.get(edge.target, 0) <= levels.get(edge.source, 0):
            flagged.add(edge.source)
            flagged.add(edge.target)
    return flagged


__all__ = ["assign_levels", "cyclic_todo_ids"]

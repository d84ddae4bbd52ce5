"""Tree walker over declarative element trees.

Yields ``(container, index, node)`` so callers can replace
``container[index]`` while walking. A replaced node is not yielded again;
its children are still walked before the walk moves to the next sibling.
"""

from collections.abc import Mapping, MutableSequence
from typing import Iterator, Sequence, Tuple

from ..modules.types import Node

DEFAULT_CHILD_FIELDS: Tuple[str, ...] = ("children", "tabs")

Visit = Tuple[MutableSequence, int, Node]


def every_child(
    nodes: MutableSequence, child_fields: Sequence[str] = DEFAULT_CHILD_FIELDS
) -> Iterator[Visit]:
    """
    Walk every node reachable from ``nodes``, depth first.

    Children are visited in child-field order, then index order. Length is
    re-read on every step, so a container may be edited in place.

    Args:
        nodes: Root sequence of nodes
        child_fields: Node fields holding child sequences

    Yields:
        (containing sequence, index, node) triples
    """
    index = 0
    while index < len(nodes):
        yield nodes, index, nodes[index]

        # Read back the slot: the caller may have replaced it
        current = nodes[index]
        if isinstance(current, Mapping):
            for field in child_fields:
                children = current.get(field)
                if isinstance(children, MutableSequence):
                    yield from every_child(children, child_fields)
        index += 1

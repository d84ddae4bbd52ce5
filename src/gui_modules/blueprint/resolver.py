"""Handler Resolver - swaps symbolic handler names for callables."""

from collections.abc import MutableMapping
from typing import Any, MutableSequence, Sequence

from ..core.errors import UnknownHandler
from ..core.logging_config import get_logger
from ..modules.types import Handler, HandlerTable, Node
from .walker import DEFAULT_CHILD_FIELDS, every_child

logger = get_logger(__name__)

HANDLER_FIELD = "handler"


def _lookup(handlers: HandlerTable, name: Any) -> Handler:
    handler = handlers.get(name) if isinstance(name, str) else None
    if handler is None:
        raise UnknownHandler(name)
    return handler


def resolve_handlers(
    definition: MutableSequence[Node],
    handlers: HandlerTable,
    child_fields: Sequence[str] = DEFAULT_CHILD_FIELDS,
) -> int:
    """
    Replace every symbolic ``handler`` reference in the tree with its callable.

    A handler field is either one name or a mapping of event kind to name;
    mapping entries are resolved in place. Values that are already callables
    are left untouched; any other value must name a handler.

    Args:
        definition: Root sequence of nodes, mutated in place
        handlers: Handler table to resolve against
        child_fields: Node fields holding child sequences

    Returns:
        Number of names resolved

    Raises:
        UnknownHandler: A value does not name an entry in the handler table
    """
    resolved = 0
    for _, _, node in every_child(definition, child_fields):
        if not isinstance(node, MutableMapping):
            continue
        given: Any = node.get(HANDLER_FIELD)
        if given is None or callable(given):
            continue

        if isinstance(given, MutableMapping):
            for event, name in list(given.items()):
                if callable(name):
                    continue
                given[event] = _lookup(handlers, name)
                resolved += 1
        else:
            node[HANDLER_FIELD] = _lookup(handlers, given)
            resolved += 1

    logger.debug("handlers_resolved", count=resolved)
    return resolved

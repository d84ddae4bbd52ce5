"""Module Expander - replaces module nodes with their built subtrees."""

from collections.abc import MutableMapping
from typing import MutableSequence, Sequence

from ..core.errors import NoModuleName, UnknownModule
from ..core.logging_config import get_logger
from ..modules.registry import ModuleRegistry
from ..modules.types import HandlerTable, Node
from ..modules.validate import validate_module_params
from ..monitoring import metrics_collector
from .walker import DEFAULT_CHILD_FIELDS, every_child

logger = get_logger(__name__)

MODULE_NODE_TYPE = "module"


class ModuleExpander:
    """Expands module nodes in place, merging module handlers into a handler table"""

    def __init__(
        self,
        registry: ModuleRegistry,
        child_fields: Sequence[str] = DEFAULT_CHILD_FIELDS,
    ):
        self.registry = registry
        self.child_fields = tuple(child_fields)

    def expand(self, definition: MutableSequence[Node], handlers: HandlerTable) -> int:
        """
        Replace every module node in ``definition`` with its expansion.

        Module handlers are added to ``handlers`` only when the name is free;
        a taken name is logged and the existing entry kept.

        Args:
            definition: Root sequence of nodes, mutated in place
            handlers: Handler table to extend

        Returns:
            Number of module nodes expanded

        Raises:
            NoModuleName: Module node without module_type
            UnknownModule: module_type not in the registry
            ParameterError: Parameters do not match the schema
        """
        expanded = 0
        for container, index, node in every_child(definition, self.child_fields):
            if not isinstance(node, MutableMapping) or node.get("type") != MODULE_NODE_TYPE:
                continue

            module_type = node.get("module_type")
            if not module_type:
                raise NoModuleName()

            module = self.registry.get(module_type)
            if module is None:
                raise UnknownModule(module_type)

            validate_module_params(module, node)

            for key, handler in module.handlers.items():
                if key not in handlers:
                    handlers[key] = handler
                else:
                    logger.warning("module_handler_overridden", module_type=module_type, handler=key)
                    metrics_collector.record_handler_collision("module")

            container[index] = module.build_func(node)
            expanded += 1

        logger.debug("modules_expanded", count=expanded)
        return expanded


def expand_modules(
    definition: MutableSequence[Node],
    handlers: HandlerTable,
    registry: ModuleRegistry,
    child_fields: Sequence[str] = DEFAULT_CHILD_FIELDS,
) -> int:
    """Convenience function to expand a tree with a one-off expander"""
    return ModuleExpander(registry, child_fields).expand(definition, handlers)

"""
Blueprint Processing
Expands module nodes and resolves handler names in declarative trees
"""

from .walker import every_child, DEFAULT_CHILD_FIELDS
from .expander import ModuleExpander, expand_modules, MODULE_NODE_TYPE
from .resolver import resolve_handlers, HANDLER_FIELD

__all__ = [
    "every_child",
    "DEFAULT_CHILD_FIELDS",
    "ModuleExpander",
    "expand_modules",
    "MODULE_NODE_TYPE",
    "resolve_handlers",
    "HANDLER_FIELD",
]

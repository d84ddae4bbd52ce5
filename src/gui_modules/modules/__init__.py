"""
Module System
Reusable, parameterized subtree generators
"""

from .types import (
    Node,
    Handler,
    HandlerTable,
    ModuleDefinition,
    ParameterSpec,
    STRUCTURAL_KEYS,
    TYPE_NAMES,
    type_name,
)
from .validate import validate_module_params, check_module_params
from .registry import ModuleRegistry, resolve_provider

__all__ = [
    "Node",
    "Handler",
    "HandlerTable",
    "ModuleDefinition",
    "ParameterSpec",
    "STRUCTURAL_KEYS",
    "TYPE_NAMES",
    "type_name",
    "validate_module_params",
    "check_module_params",
    "ModuleRegistry",
    "resolve_provider",
]

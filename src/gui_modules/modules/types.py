"""
Module Type Definitions
Schema and definition types for reusable GUI modules
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Node = one declarative element description (a plain dict)
Node = Dict[str, Any]
Handler = Callable[..., Any]
HandlerTable = Dict[str, Handler]

# Keys every module node carries that are not module parameters
STRUCTURAL_KEYS = frozenset({"type", "module_type"})

# Type vocabulary shared by declarative trees and parameter schemas
TYPE_NAMES = frozenset({"nil", "boolean", "number", "string", "table", "function"})


def type_name(value: Any) -> str:
    """Name of a value's type in the declarative vocabulary."""
    if value is None:
        return "nil"
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (Mapping, list, tuple)):
        return "table"
    if callable(value):
        return "function"
    return "userdata"


class ParameterSpec(BaseModel):
    """Accepted types for one module parameter"""
    model_config = ConfigDict(frozen=True)

    type: List[str] = Field(..., min_length=1, description="Accepted type names")
    is_optional: bool = False
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Union[str, Any]) -> Any:
        """Accept a single type name as shorthand."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("type")
    @classmethod
    def validate_type_names(cls, v: List[str]) -> List[str]:
        """Reject names outside the vocabulary."""
        unknown = [name for name in v if name not in TYPE_NAMES]
        if unknown:
            raise ValueError(f"Unknown type names: {unknown}")
        return v


class ModuleDefinition(BaseModel):
    """A reusable subtree generator with its parameter schema and handlers"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    module_type: str = Field(..., min_length=1, description="Unique module identifier")
    parameters: Dict[str, ParameterSpec] = Field(default_factory=dict)
    handlers: Dict[str, Handler] = Field(default_factory=dict)
    build_func: Callable[[Node], Node]
    description: str = ""


__all__ = [
    "Node",
    "Handler",
    "HandlerTable",
    "STRUCTURAL_KEYS",
    "TYPE_NAMES",
    "type_name",
    "ParameterSpec",
    "ModuleDefinition",
]

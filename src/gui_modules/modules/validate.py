"""Module parameter validation, raising and Result-pattern forms."""

from typing import Any, Dict, Mapping

from returns.result import Failure, Result, Success

from ..core.errors import ParameterError, ParameterExtra, ParameterInvalidType, ParameterMissing
from .types import STRUCTURAL_KEYS, ModuleDefinition, ParameterSpec, type_name


def validate_module_params(module: ModuleDefinition, params: Mapping[str, Any]) -> None:
    """
    Validate a module node's parameters against the module's schema.

    Extra and mistyped parameters are reported as soon as the scan reaches
    them; missing required parameters only after the whole scan.

    Args:
        module: Module definition holding the schema
        params: The module node (structural keys are skipped)

    Raises:
        ParameterExtra: Parameter not declared by the module
        ParameterInvalidType: Parameter value of an unaccepted type
        ParameterMissing: Required parameter never supplied
    """
    schema = module.parameters
    missing: Dict[str, ParameterSpec] = dict(schema)

    for key, value in params.items():
        if key in STRUCTURAL_KEYS:
            continue
        missing.pop(key, None)

        spec = schema.get(key)
        if spec is None:
            raise ParameterExtra(module.module_type, key)

        actual = type_name(value)
        if actual not in spec.type:
            raise ParameterInvalidType(module.module_type, key, actual)

    for key, spec in missing.items():
        if not spec.is_optional:
            raise ParameterMissing(module.module_type, key)


def check_module_params(
    module: ModuleDefinition, params: Mapping[str, Any]
) -> Result[None, ParameterError]:
    """
    Validate module parameters (Result pattern version).

    Returns:
        Success(None) or Failure carrying the first parameter error
    """
    try:
        validate_module_params(module, params)
        return Success(None)
    except ParameterError as e:
        return Failure(e)

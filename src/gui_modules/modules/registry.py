"""
Module Registry
Read-only lookup of module definitions, loaded once from startup settings
"""

import importlib
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional

from pydantic import ValidationError

from ..core.errors import InvalidModuleProvider
from ..core.logging_config import get_logger
from .types import ModuleDefinition

logger = get_logger(__name__)

DEFAULT_ATTRIBUTE = "MODULE"


def resolve_provider(reference: str) -> ModuleDefinition:
    """
    Resolve a provider reference to a module definition.

    Args:
        reference: "package.module" or "package.module:attr" (attr defaults to MODULE)

    Returns:
        The module definition the reference points at

    Raises:
        InvalidModuleProvider: Import failed or the target is not a definition
    """
    module_path, _, attribute = reference.partition(":")
    attribute = attribute or DEFAULT_ATTRIBUTE

    try:
        provider_module = importlib.import_module(module_path)
    except ImportError as e:
        raise InvalidModuleProvider(reference, f"cannot import '{module_path}': {e}") from e

    target = getattr(provider_module, attribute, None)
    if target is None:
        raise InvalidModuleProvider(reference, f"'{module_path}' has no attribute '{attribute}'")

    # Factories are called once
    if callable(target) and not isinstance(target, (ModuleDefinition, Mapping)):
        target = target()

    if isinstance(target, ModuleDefinition):
        return target
    if isinstance(target, Mapping):
        try:
            return ModuleDefinition(**target)
        except ValidationError as e:
            raise InvalidModuleProvider(reference, str(e)) from e

    raise InvalidModuleProvider(reference, f"unsupported provider type '{type(target).__name__}'")


class ModuleRegistry:
    """
    Registry of module definitions keyed by module_type.
    Populated at construction and never mutated afterwards.
    """

    def __init__(self, definitions: Iterable[ModuleDefinition] = ()):
        self._modules: Dict[str, ModuleDefinition] = {}

        for definition in definitions:
            if definition.module_type in self._modules:
                logger.warning("duplicate_module_type", module_type=definition.module_type)
                continue
            self._modules[definition.module_type] = definition

        logger.info("module_registry_initialized", modules=len(self._modules))

    @classmethod
    def from_references(cls, references: Iterable[str]) -> "ModuleRegistry":
        """Build a registry from provider references."""
        return cls(resolve_provider(ref) for ref in references)

    def get(self, module_type: str) -> Optional[ModuleDefinition]:
        """Get module definition by type"""
        return self._modules.get(module_type)

    def module_types(self) -> List[str]:
        """List registered module types"""
        return sorted(self._modules)

    def __contains__(self, module_type: Any) -> bool:
        return module_type in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[ModuleDefinition]:
        return iter(self._modules.values())

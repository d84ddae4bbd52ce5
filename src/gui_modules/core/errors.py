"""Error taxonomy for module expansion, handler resolution and window setup.

Every error carries the fields that identify the offending definition and a
``locale_key`` naming the host's message key for it.
"""

from typing import Any


class GuiModuleError(Exception):
    """Base for all setup and build failures."""

    locale_key = "gui-errors.generic"


class ParameterError(GuiModuleError):
    """A module node's parameters do not match the module's schema."""

    def __init__(self, module_type: str, key: str, message: str):
        self.module_type = module_type
        self.key = key
        super().__init__(message)


class ParameterExtra(ParameterError):
    locale_key = "gui-errors.parameter-extra"

    def __init__(self, module_type: str, key: str):
        super().__init__(module_type, key, f"Module '{module_type}' got unexpected parameter '{key}'")


class ParameterInvalidType(ParameterError):
    locale_key = "gui-errors.parameter-invalid-type"

    def __init__(self, module_type: str, key: str, actual_type: str):
        self.actual_type = actual_type
        super().__init__(
            module_type,
            key,
            f"Module '{module_type}' parameter '{key}' has invalid type '{actual_type}'",
        )


class ParameterMissing(ParameterError):
    locale_key = "gui-errors.parameter-missing"

    def __init__(self, module_type: str, key: str):
        super().__init__(module_type, key, f"Module '{module_type}' is missing required parameter '{key}'")


class NoModuleName(GuiModuleError):
    locale_key = "gui-errors.no-module-name"

    def __init__(self) -> None:
        super().__init__("Module node has no 'module_type'")


class UnknownModule(GuiModuleError):
    locale_key = "gui-errors.unknown-module"

    def __init__(self, module_type: str):
        self.module_type = module_type
        super().__init__(f"Unknown module type '{module_type}'")


class UnknownHandler(GuiModuleError):
    locale_key = "gui-errors.unknown-handler"

    def __init__(self, handler_name: Any):
        self.handler_name = handler_name
        super().__init__(f"Unknown handler '{handler_name}'")


class UndefinedNamespace(GuiModuleError):
    locale_key = "gui-errors.undefined-namespace"

    def __init__(self, namespace: str, reason: str = "is not defined"):
        self.namespace = namespace
        super().__init__(f"Namespace '{namespace}' {reason}")


class NamespaceAlreadyRegistered(GuiModuleError):
    locale_key = "gui-errors.namespace-already-registered"

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"Namespace '{namespace}' is already registered")


class InvalidModuleProvider(GuiModuleError):
    locale_key = "gui-errors.invalid-module-provider"

    def __init__(self, reference: Any, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Invalid module provider '{reference}': {reason}")

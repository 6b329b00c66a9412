"""
Custom exception classes for input rendering errors.

This module provides the exception family raised while resolving, building
and composing form inputs. Every error carries a context dictionary and a
list of recovery suggestions so callers can report failures uniformly.
"""

from typing import Optional, Dict, Any, List


class FormwrightError(Exception):
    """
    Base exception for input rendering errors.

    Attributes:
        message: Error message
        context: Additional context information
        recovery_suggestions: List of suggested recovery actions
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None,
                 recovery_suggestions: Optional[List[str]] = None):
        self.message = message
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def get_full_details(self) -> Dict[str, Any]:
        """Get complete error details including context and suggestions."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context,
            'recovery_suggestions': self.recovery_suggestions
        }


class UnresolvedTypeError(FormwrightError, RuntimeError):
    """
    Exception raised when no input implementation exists for a type.

    The render call is aborted; no partial markup is produced.
    """

    def __init__(self, type_name: Any, attribute_name: Optional[str] = None,
                 message: Optional[str] = None):
        self.type_name = type_name
        self.attribute_name = attribute_name

        if message is None:
            message = f"No input found for type {type_name!r}"

        context = {
            'type_name': str(type_name),
            'attribute_name': attribute_name
        }

        recovery_suggestions = [
            "Check the spelling of the 'as' option",
            "Register a custom input class with register_input()",
        ]

        super().__init__(message, context, recovery_suggestions)


class UnsupportedTypeError(UnresolvedTypeError):
    """Exception raised when an explicit type is outside the known set of input types."""

    def __init__(self, type_name: Any, attribute_name: Optional[str] = None):
        super().__init__(
            type_name,
            attribute_name,
            message=f"Unsupported input type {type_name!r} for attribute {attribute_name!r}"
        )


class MappingNotFoundError(UnresolvedTypeError):
    """
    Exception raised when the mapping table has no entry for a sub-type.

    Raised for unknown column types and for mapping inputs created without
    a sub-type name.
    """

    def __init__(self, mapping_name: Any, attribute_name: Optional[str] = None):
        self.mapping_name = mapping_name
        label = "nil" if mapping_name is None else mapping_name
        super().__init__(
            mapping_name,
            attribute_name,
            message=f"Could not find method for {label}"
        )


class UnknownComponentError(FormwrightError):
    """Exception raised when a component sequence names an unregistered component."""

    def __init__(self, component_name: Any, available: Optional[List[str]] = None):
        self.component_name = component_name
        self.available = sorted(available or [])

        message = f"Unknown component {component_name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"

        context = {
            'component_name': str(component_name),
            'available_components': self.available
        }

        recovery_suggestions = [
            "Check the 'components' option for typos",
            "Register the component with register_component() before rendering",
        ]

        super().__init__(message, context, recovery_suggestions)


class MalformedCollectionError(FormwrightError, ValueError):
    """Exception raised when collection entries cannot be normalized."""

    def __init__(self, item: Any, index: int, reason: str):
        self.item = item
        self.index = index
        self.reason = reason

        message = f"Malformed collection entry at index {index}: {reason}"

        context = {
            'item': repr(item),
            'index': index,
            'reason': reason
        }

        recovery_suggestions = [
            "Use either scalars or [label, value] pairs, not both",
            "Pass label_method/value_method for domain objects",
        ]

        super().__init__(message, context, recovery_suggestions)


class ConfigurationLoadError(FormwrightError):
    """
    Exception raised when a configuration or locale file cannot be loaded.

    This includes YAML parsing errors, missing files and permission issues.
    """

    def __init__(self, config_path: Any, original_error: Exception,
                 message: Optional[str] = None):
        self.config_path = config_path
        self.original_error = original_error

        if message is None:
            message = f"Failed to load configuration from {config_path}: {str(original_error)}"

        context = {
            'config_path': str(config_path),
            'original_error_type': type(original_error).__name__,
            'original_error_message': str(original_error)
        }

        recovery_suggestions = [
            "Check that the file exists and is readable",
            "Verify YAML syntax is correct",
        ]

        super().__init__(message, context, recovery_suggestions)

"""
formwright: form input rendering.

Decides which control to emit for a model attribute, derives its HTML
attributes from introspected metadata and composes label, control, hint and
error into markup.
"""

from .config_loader import configure_logging, get_default_config, load_config
from .exceptions import (
    ConfigurationLoadError, FormwrightError, MalformedCollectionError, MappingNotFoundError,
    UnknownComponentError, UnresolvedTypeError, UnsupportedTypeError,
)
from .form_builder import FormBuilder, render_input
from .i18n import DictTranslator, NullTranslator, TranslationCache, Translator
from .metadata import (
    AttributeMetadataAdapter, MetadataAdapter, NullMetadataAdapter, PydanticMetadataAdapter,
    SchemaMetadataAdapter, Validation,
)
from .nodes import Fragment, Node, Text, to_html
from .registry import ResolvedType, resolve

__version__ = '0.1.0'

__all__ = [
    'FormBuilder',
    'render_input',
    'ResolvedType',
    'resolve',
    'Node',
    'Text',
    'Fragment',
    'to_html',
    'MetadataAdapter',
    'NullMetadataAdapter',
    'AttributeMetadataAdapter',
    'SchemaMetadataAdapter',
    'PydanticMetadataAdapter',
    'Validation',
    'Translator',
    'NullTranslator',
    'DictTranslator',
    'TranslationCache',
    'load_config',
    'get_default_config',
    'configure_logging',
    'FormwrightError',
    'UnresolvedTypeError',
    'UnsupportedTypeError',
    'MappingNotFoundError',
    'UnknownComponentError',
    'MalformedCollectionError',
    'ConfigurationLoadError',
]

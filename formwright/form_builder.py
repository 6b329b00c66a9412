"""
Public entry point for rendering form inputs.

``FormBuilder`` binds a model object (or a bare form name) to its metadata
adapter, translator, translation cache and configuration, and renders one
attribute per ``input`` call:

    builder = FormBuilder(user)
    html = to_html(builder.input('name', hint='Your full name'))

Each call resolves the input type, instantiates the registered variant,
runs the component pipeline and wraps the result. Nothing is retained
between calls except the injected translation cache.
"""

from datetime import datetime
import logging
from typing import Any, Callable, Dict, Optional

from .components import compose, merge_html
from .config_loader import get_config_value, get_default_config
from .i18n import NullTranslator, TranslationCache, Translator
from .metadata import MetadataAdapter, adapter_for
from .models import InputRequest
from .naming import object_name_for
from .nodes import Fragment, Node
from .registry import resolve, variant_for
from . import inputs  # noqa: F401  registers the input variants

logger = logging.getLogger(__name__)


class FormBuilder:
    """
    Renders inputs for one object.

    Args:
        obj: Model object, model class, dict, or a string naming a bare form
        object_name: Override for the id/name prefix
        metadata: Metadata adapter; picked from the object when omitted
        translator: Translation lookup; defaults to returning defaults
        cache: Shared translation cache
        config: Configuration dictionary (see config_loader)
        locale: Locale for lookups; defaults to ``i18n.locale`` from config
        clock: Callable returning the current datetime
    """

    def __init__(self, obj: Any, object_name: Optional[str] = None,
                 metadata: Optional[MetadataAdapter] = None,
                 translator: Optional[Translator] = None,
                 cache: Optional[TranslationCache] = None,
                 config: Optional[Dict[str, Any]] = None,
                 locale: Optional[str] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.object = obj
        self.object_name = object_name_for(obj, object_name)
        self.metadata = metadata if metadata is not None else adapter_for(obj)
        self.translator = translator if translator is not None else NullTranslator()
        self.cache = cache if cache is not None else TranslationCache()
        self.config = config if config is not None else get_default_config()
        self.locale = locale or get_config_value(self.config, 'i18n', 'locale', 'en')
        self._clock = clock or datetime.now

    def setting(self, key: str, default: Any = None) -> Any:
        """Read a value from the ``inputs`` configuration section."""
        return get_config_value(self.config, 'inputs', key, default)

    def now(self) -> datetime:
        return self._clock()

    def build_input(self, attribute: str, **options: Any):
        """
        Resolve and instantiate the input for an attribute without rendering it.

        Raises:
            UnsupportedTypeError: If the ``as`` option names an unknown type
            MappingNotFoundError: If no mapping exists for the column type
        """
        explicit_type = options.pop('as', None)
        request = InputRequest(
            obj=self.object,
            attribute_name=attribute,
            explicit_type=explicit_type,
            options=options,
        )
        attribute = request.attribute_name

        has_collection = request.options.get('collection') is not None
        if not has_collection and explicit_type is None:
            has_collection = self.metadata.choices(self.object, attribute) is not None

        resolution = resolve(
            request.explicit_type,
            self.metadata.column_type(self.object, attribute),
            attribute,
            is_association=self.metadata.is_association(self.object, attribute),
            has_collection=has_collection,
        )
        input_class = variant_for(resolution.type)
        logger.debug(f"Building {input_class.__name__} for '{self.object_name}.{attribute}'")
        return input_class(self, request, resolution)

    def input(self, attribute: str, **options: Any) -> Node:
        """
        Render one attribute: label, control, hint and error inside a wrapper.

        Args:
            attribute: Attribute name
            **options: Rendering options (``as``, ``collection``, ``input_html``, ...)

        Returns:
            Wrapper node, or a bare fragment when ``wrapper`` is False
        """
        input_obj = self.build_input(attribute, **options)
        fragment = compose(input_obj.components(), input_obj)
        return self.wrap(input_obj, fragment)

    def wrap(self, input_obj, fragment: Fragment) -> Node:
        if input_obj.options.get('wrapper') is False:
            return fragment

        classes = [self.setting('wrapper_class')] + input_obj.requirement_classes()
        if input_obj.errors:
            classes.append(self.setting('error_class'))
        wrapper = Node(self.setting('wrapper_tag'), {'class': classes}, [fragment])
        merge_html(wrapper, input_obj.options.get('wrapper_html'))
        return wrapper


def render_input(obj: Any, attribute: str, options: Optional[Dict[str, Any]] = None,
                 **builder_kwargs: Any) -> Node:
    """
    Render a single input without keeping a builder around.

    Args:
        obj: Model object or bare form name
        attribute: Attribute name
        options: Rendering options
        **builder_kwargs: Passed to FormBuilder

    Returns:
        Rendered node
    """
    builder = FormBuilder(obj, **builder_kwargs)
    return builder.input(attribute, **dict(options or {}))

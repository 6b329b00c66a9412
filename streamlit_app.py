"""
Streamlit preview app for formwright.
Loads a field schema, renders every field through FormBuilder and shows the
generated markup next to a live preview.
"""

import streamlit as st
from pathlib import Path
import logging
from typing import Any, Dict, List, Optional, Tuple

import yaml

from formwright.config_loader import configure_logging, get_config_value, load_config
from formwright.exceptions import FormwrightError
from formwright.form_builder import FormBuilder
from formwright.i18n import DictTranslator, NullTranslator, TranslationCache
from formwright.metadata import SchemaMetadataAdapter
from formwright.nodes import to_html

logger = logging.getLogger(__name__)

SCHEMAS_DIR = Path("schemas")
DEFAULT_OBJECT_NAME = "record"

# Schema keys passed through as input options
FIELD_OPTION_KEYS = ('label', 'hint', 'placeholder', 'prompt', 'include_blank', 'as')


def list_schemas(schemas_dir: Path = SCHEMAS_DIR) -> List[Path]:
    """List the YAML schema files available for preview."""
    if not schemas_dir.exists():
        logger.warning(f"Schemas directory not found: {schemas_dir}")
        return []
    return sorted(schemas_dir.glob("*.yaml"))


def load_schema(schema_path: Path) -> Dict[str, Any]:
    """
    Load a field schema from YAML.

    Raises:
        ValueError: If the file does not hold a mapping with a 'fields' key
    """
    with open(schema_path, 'r', encoding='utf-8') as f:
        schema = yaml.safe_load(f)
    if not isinstance(schema, dict) or 'fields' not in schema:
        raise ValueError(f"Schema {schema_path} must contain a 'fields' mapping")
    return schema


def field_options(field_config: Dict[str, Any]) -> Dict[str, Any]:
    """Extract rendering options from a schema field definition."""
    options = {key: field_config[key] for key in FIELD_OPTION_KEYS if key in field_config}
    if 'help' in field_config and 'hint' not in options:
        options['hint'] = field_config['help']
    if field_config.get('readonly'):
        options['disabled'] = True
    return options


def build_preview(schema: Dict[str, Any], data: Optional[Dict[str, Any]] = None,
                  config: Optional[Dict[str, Any]] = None,
                  errors: Optional[Dict[str, List[str]]] = None,
                  translator=None, cache=None) -> List[Tuple[str, str]]:
    """
    Render every schema field.

    Args:
        schema: Schema dictionary with a 'fields' mapping
        data: Current values keyed by field name
        config: formwright configuration
        errors: Error messages keyed by field name
        translator: Translation lookup
        cache: Shared translation cache

    Returns:
        List of (field_name, html) pairs in schema order
    """
    adapter = SchemaMetadataAdapter(schema, errors=errors)
    builder = FormBuilder(
        dict(data or {}),
        object_name=schema.get('object_name', DEFAULT_OBJECT_NAME),
        metadata=adapter,
        translator=translator,
        cache=cache,
        config=config,
    )

    rendered = []
    for field_name, field_config in adapter.fields.items():
        options = field_options(field_config or {})
        rendered.append((field_name, to_html(builder.input(field_name, **options))))
    logger.debug(f"Rendered {len(rendered)} preview fields")
    return rendered


def load_translator(config: Dict[str, Any]):
    """Build a translator from the configured locale files."""
    paths = get_config_value(config, 'i18n', 'locale_paths', [])
    if not paths:
        return NullTranslator()
    return DictTranslator.from_yaml(*paths)


def main():
    """Main application entry point."""
    config = load_config()
    configure_logging(config)

    st.set_page_config(page_title="formwright preview", page_icon="📝", layout="wide")
    st.title("📝 formwright preview")

    schemas = list_schemas()
    if not schemas:
        st.error("❌ No schemas found in the schemas/ directory")
        st.stop()

    selected = st.sidebar.selectbox("Schema", schemas, format_func=lambda p: p.name)

    if 'translation_cache' not in st.session_state:
        st.session_state.translation_cache = TranslationCache()
    if st.sidebar.button("🔄 Reload translations"):
        st.session_state.translation_cache.clear()

    try:
        schema = load_schema(selected)
        translator = load_translator(config)
        rendered = build_preview(schema, schema.get('sample_data'), config,
                                 translator=translator, cache=st.session_state.translation_cache)
    except (FormwrightError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to render schema {selected}: {e}")
        st.error(f"❌ Failed to render schema: {e}")
        st.stop()

    for field_name, html in rendered:
        with st.expander(field_name, expanded=True):
            col1, col2 = st.columns(2)
            with col1:
                st.markdown(html, unsafe_allow_html=True)
            with col2:
                st.code(html, language="html")


if __name__ == "__main__":
    main()

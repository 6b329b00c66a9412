"""
Configuration loading utilities for formwright.

This module provides functionality to load and validate the input rendering
configuration (default sizes, priority lists, component order, locale) with
fallback to defaults, and to configure logging from it.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging
from copy import deepcopy

logger = logging.getLogger(__name__)

DEFAULT_COMPONENTS = ['label', 'input', 'hint', 'error']


def deep_merge(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dictionaries, with update_dict taking precedence.

    Args:
        base_dict: Base dictionary (defaults)
        update_dict: Dictionary to merge in (user config)

    Returns:
        Merged dictionary
    """
    result = deepcopy(base_dict)

    for key, value in update_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def get_default_config() -> Dict[str, Any]:
    """
    Get default configuration.

    Returns:
        Dictionary with default configuration
    """
    return {
        'inputs': {
            'default_input_size': 50,
            'required_by_default': True,
            'browser_validations': True,
            'components': list(DEFAULT_COMPONENTS),
            'boolean_components': ['input', 'label', 'hint', 'error'],
            'country_priority': None,
            'time_zone_priority': None,
            'wrapper_tag': 'div',
            'wrapper_class': 'input',
            'error_class': 'field_with_errors',
            'collection_separator': '-------------'
        },
        'i18n': {
            'locale': 'en',
            'locale_paths': []
        },
        'logging': {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    }


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load formwright configuration.

    Args:
        config_path: Optional path to config file (defaults to config.yaml)

    Returns:
        Complete configuration dictionary
    """
    if config_path is None:
        config_path = Path("config.yaml")
    config_path = Path(config_path)

    default_config = get_default_config()

    if not config_path.exists():
        logger.warning(f"Configuration file not found: {config_path}")
        logger.info("Using default configuration")
        return default_config

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)

        if user_config is None:
            logger.warning(f"Configuration file is empty: {config_path}")
            return default_config

        if not isinstance(user_config, dict):
            logger.error(f"Configuration file is not a valid dictionary: {config_path}")
            logger.info("Using default configuration")
            return default_config

        config = deep_merge(default_config, user_config)

        if not validate_config(config):
            logger.info("Using default configuration")
            return default_config

        logger.info(f"Successfully loaded configuration from {config_path}")
        return config

    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {config_path}: {e}")
        logger.info("Using default configuration")
        return default_config

    except (IOError, OSError) as e:
        logger.error(f"Failed to read configuration file {config_path}: {e}")
        logger.info("Using default configuration")
        return default_config


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure and value types.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if configuration is valid, False otherwise
    """
    required_sections = ['inputs', 'i18n', 'logging']

    for section in required_sections:
        if not isinstance(config.get(section), dict):
            logger.warning(f"Missing required configuration section: {section}")
            return False

    inputs = config['inputs']

    size = inputs.get('default_input_size')
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        logger.warning(f"Invalid default_input_size: {size!r}")
        return False

    for key in ('components', 'boolean_components'):
        components = inputs.get(key)
        if not isinstance(components, list) or not components:
            logger.warning(f"Invalid component list for {key}: {components!r}")
            return False

    for key in ('country_priority', 'time_zone_priority'):
        priority = inputs.get(key)
        if priority is not None and not isinstance(priority, (list, str)):
            logger.warning(f"Invalid priority setting for {key}: {priority!r}")
            return False

    if not isinstance(config['i18n'].get('locale'), str):
        logger.warning("i18n.locale must be a string")
        return False

    return True


def get_config_value(config: Optional[Dict[str, Any]], section: str, key: str,
                     default: Any = None) -> Any:
    """
    Get a configuration value with fallback to the defaults.

    Args:
        config: Configuration dictionary or None for defaults
        section: Configuration section name
        key: Key within the section
        default: Value returned when neither config nor defaults define it

    Returns:
        Configuration value
    """
    for source in (config or {}, get_default_config()):
        section_values = source.get(section)
        if isinstance(section_values, dict) and key in section_values:
            return section_values[key]
    return default


def get_logging_level(level_str: str) -> int:
    """Map string logging level to logging constant."""
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.INFO)


def configure_logging(config: Optional[Dict[str, Any]] = None) -> int:
    """
    Configure logging from the logging section of the configuration.

    Args:
        config: Configuration dictionary

    Returns:
        The numeric logging level that was applied
    """
    level_str = get_config_value(config, 'logging', 'level', 'INFO')
    log_format = get_config_value(config, 'logging', 'format')
    level = get_logging_level(level_str)
    logging.basicConfig(level=level, format=log_format)
    logger.info(f"Logging configured to level: {level_str}")
    return level

"""
Unit tests for translation lookup and the translation cache.
"""

import pytest
import tempfile
import yaml
from pathlib import Path

from formwright.exceptions import ConfigurationLoadError
from formwright.i18n import DictTranslator, NullTranslator, TranslationCache, lookup_chain


class TestDictTranslator:
    """Test cases for DictTranslator."""

    def test_nested_lookup(self):
        translator = DictTranslator({'en': {'formwright': {'labels': {'user': {'name': 'Name'}}}}})
        assert translator.translate('formwright.labels.user.name', 'en') == 'Name'

    def test_missing_key_returns_default(self):
        """Test that missing keys never raise."""
        translator = DictTranslator({'en': {'formwright': {}}})
        assert translator.translate('formwright.labels.user.name', 'en', 'Fallback') == 'Fallback'
        assert translator.translate('formwright.labels', 'fr') is None

    def test_branch_is_not_a_translation(self):
        translator = DictTranslator({'en': {'formwright': {'labels': {'user': {'name': 'Name'}}}}})
        assert translator.translate('formwright.labels', 'en', 'x') == 'x'

    def test_store_translations_merges(self):
        translator = DictTranslator({'en': {'a': {'b': '1'}}})
        translator.store_translations('en', {'a': {'c': '2'}})
        assert translator.translate('a.b', 'en') == '1'
        assert translator.translate('a.c', 'en') == '2'
        assert translator.locales == ['en']

    def test_from_yaml(self):
        """Test loading locale files keyed by locale name."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / 'pt-BR.yaml'
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump({'pt-BR': {'formwright': {'yes': 'Sim'}}}, f, allow_unicode=True)

            translator = DictTranslator.from_yaml(path)

        assert translator.translate('formwright.yes', 'pt-BR') == 'Sim'

    def test_from_yaml_missing_file(self):
        with pytest.raises(ConfigurationLoadError):
            DictTranslator.from_yaml('/nonexistent/locale.yaml')

    def test_from_yaml_invalid_content(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / 'bad.yaml'
            path.write_text('- just\n- a list\n', encoding='utf-8')
            with pytest.raises(ConfigurationLoadError):
                DictTranslator.from_yaml(path)

    def test_bundled_locales(self):
        """Test that the shipped locale files load."""
        locales_dir = Path(__file__).parent / 'locales'
        translator = DictTranslator.from_yaml(locales_dir / 'en.yaml', locales_dir / 'pt-BR.yaml')
        assert translator.translate('formwright.yes', 'en') == 'Yes'
        assert translator.translate('formwright.no', 'pt-BR') == 'Não'


class TestLookupChain:
    """Test cases for lookup_chain()."""

    def test_first_found_wins(self):
        translator = DictTranslator({'en': {'k': {'specific': 'S', 'generic': 'G'}}})
        assert lookup_chain(translator, ['k.specific', 'k.generic'], 'en') == 'S'
        assert lookup_chain(translator, ['k.missing', 'k.generic'], 'en') == 'G'

    def test_default_when_nothing_found(self):
        assert lookup_chain(NullTranslator(), ['a', 'b'], 'en', 'D') == 'D'


class TestTranslationCache:
    """Test cases for TranslationCache."""

    def test_fetch_computes_once(self):
        cache = TranslationCache()
        calls = []

        def compute():
            calls.append(1)
            return 'value'

        assert cache.fetch('key', 'en', compute) == 'value'
        assert cache.fetch('key', 'en', compute) == 'value'
        assert len(calls) == 1

    def test_get_put(self):
        cache = TranslationCache()
        assert cache.get('key', 'en', 'missing') == 'missing'
        cache.put('key', 'en', 'v')
        assert cache.get('key', 'en') == 'v'
        assert 'key' in cache

    def test_invalidate_and_clear(self):
        cache = TranslationCache()
        cache.put('a', 'en', 1)
        cache.put('a', 'pt-BR', 2)
        cache.put('b', 'en', 3)
        cache.invalidate('a')
        assert 'a' not in cache
        assert cache.get('b', 'en') == 3
        cache.invalidate('never-set')
        cache.clear()
        assert 'b' not in cache

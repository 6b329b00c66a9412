"""
Unit tests for the component pipeline, labels and naming helpers.
"""

import pytest

from formwright.components import (
    available_components, compose, merge_html, register_component, unregister_component,
)
from formwright.exceptions import UnknownComponentError
from formwright.i18n import DictTranslator
from formwright.naming import FieldNaming, humanize, object_name_for, sanitize_value, underscore
from formwright.nodes import Node, Text

from test_fixtures import User, element_tags, input_for, make_builder


@pytest.fixture
def name_input(user):
    return make_builder(user).build_input('name', **{'as': 'string'})


class TestCompose:
    """Test cases for compose()."""

    def test_default_order(self, name_input):
        """Test label, input, hint, error order."""
        name_input.options['hint'] = 'Full name'
        name_input.errors = ["can't be blank"]
        fragment = compose(['label', 'input', 'hint', 'error'], name_input)
        assert element_tags(fragment) == ['label', 'input', 'span', 'span']

    def test_user_order_is_authoritative(self, name_input):
        """Test that the given sequence is rendered as-is."""
        fragment = compose(['input', 'label'], name_input)
        assert element_tags(fragment) == ['input', 'label']

    def test_duplicates_render_each_time(self, name_input):
        """Test that repeated names render once per occurrence."""
        fragment = compose(['label', 'input', 'label'], name_input)
        assert element_tags(fragment) == ['label', 'input', 'label']

    def test_unknown_component_raises_before_rendering(self, name_input):
        """Test that validation happens before any generator runs."""
        calls = []
        register_component('tracker', lambda input_obj: calls.append(input_obj))
        try:
            with pytest.raises(UnknownComponentError) as exc_info:
                compose(['tracker', 'bogus'], name_input)
        finally:
            unregister_component('tracker')

        assert calls == []
        assert exc_info.value.component_name == 'bogus'
        assert 'label' in exc_info.value.available

    def test_custom_component(self, user):
        """Test rendering a registered custom component."""
        register_component('counter', lambda input_obj: Node('span', {'class': 'counter'}, [Text('0/100')]))
        try:
            node = input_for(user, 'name', 'string', components=['input', 'counter'])
        finally:
            unregister_component('counter')

        assert element_tags(node) == ['input', 'span']
        assert node.find('span', class_='counter').text_content() == '0/100'
        assert 'counter' not in available_components()

    def test_single_component_name(self, user):
        """Test that a bare string names one component."""
        node = input_for(user, 'name', 'string', components='input')
        assert element_tags(node) == ['input']

    def test_empty_components_render_nothing(self, name_input):
        assert compose([], name_input).children == []


class TestLabel:
    """Test cases for label rendering."""

    def test_required_label(self, user):
        """Test the required mark and label classes."""
        node = input_for(user, 'name', 'string')
        label = node.find('label', for_='user_name')
        assert label.classes == ['string', 'required']
        abbr = label.find('abbr', title='required')
        assert abbr.text_content() == '*'
        assert label.text_content() == '* Name'

    def test_optional_label(self, user):
        """Test an optional label with a humanized attribute."""
        node = input_for(user, 'credit_limit', 'decimal')
        label = node.find('label')
        assert label.classes == ['decimal', 'optional']
        assert label.find('abbr') is None
        assert label.text_content() == 'Credit limit'

    def test_label_option(self, user):
        node = input_for(user, 'name', 'string', label='Your name')
        assert node.find('label').text_content() == '* Your name'

    def test_label_false(self, user):
        """Test that label False suppresses the label."""
        node = input_for(user, 'name', 'string', label=False)
        assert node.find('label') is None

    def test_label_html(self, user):
        node = input_for(user, 'name', 'string', label_html={'class': 'big', 'data-x': '1'})
        label = node.find('label')
        assert label.classes == ['string', 'required', 'big']
        assert label.attributes['data-x'] == '1'

    def test_translated_label(self, user):
        """Test object-specific label translations and the defaults fallback."""
        translator = DictTranslator({'en': {'formwright': {'labels': {
            'user': {'name': 'Nome'},
            'defaults': {'age': 'Idade'},
        }}}})
        name_node = input_for(user, 'name', 'string', builder_kwargs={'translator': translator})
        age_node = input_for(user, 'age', 'integer', builder_kwargs={'translator': translator})
        assert name_node.find('label').text_content() == '* Nome'
        assert age_node.find('label').text_content() == 'Idade'

    def test_translated_required_mark(self, user):
        translator = DictTranslator({'en': {'formwright': {'required': {'text': 'obrigatório', 'mark': '!'}}}})
        node = input_for(user, 'name', 'string', builder_kwargs={'translator': translator})
        abbr = node.find('abbr')
        assert abbr.attributes['title'] == 'obrigatório'
        assert abbr.text_content() == '!'

    def test_humanize_strips_id(self, user):
        node = input_for(user, 'company_id', collection=[1, 2])
        assert node.find('label').text_content() == 'Company'


class TestHintAndError:
    """Test cases for hint and error components."""

    def test_no_hint_by_default(self, user):
        node = input_for(user, 'name', 'string')
        assert node.find('span', class_='hint') is None

    def test_hint_option(self, user):
        node = input_for(user, 'name', 'string', hint='Full name please', hint_html={'id': 'name-hint'})
        hint = node.find('span', class_='hint')
        assert hint.text_content() == 'Full name please'
        assert hint.attributes['id'] == 'name-hint'

    def test_translated_hint(self, user):
        translator = DictTranslator({'en': {'formwright': {'hints': {'user': {'name': 'As on your ID'}}}}})
        node = input_for(user, 'name', 'string', builder_kwargs={'translator': translator})
        assert node.find('span', class_='hint').text_content() == 'As on your ID'

    def test_translated_hint_defaults(self, user):
        """Test the attribute-level hint key under defaults."""
        translator = DictTranslator({'en': {'formwright': {'hints': {'defaults': {'name': 'Any name'}}}}})
        node = input_for(user, 'name', 'string', builder_kwargs={'translator': translator})
        assert node.find('span', class_='hint').text_content() == 'Any name'

    def test_hint_false(self, user):
        node = input_for(user, 'name', 'string', hint=False)
        assert node.find('span', class_='hint') is None

    def test_first_error_rendered(self):
        """Test that only the first error message is shown."""
        node = input_for(User(errors={'name': ["can't be blank", 'is too short']}), 'name', 'string')
        errors = node.find_all('span', class_='error')
        assert len(errors) == 1
        assert errors[0].text_content() == "can't be blank"

    def test_error_false(self):
        node = input_for(User(errors={'name': 'is invalid'}), 'name', 'string', error=False)
        assert node.find('span', class_='error') is None


class TestMergeHtml:
    """Test cases for merge_html()."""

    def test_classes_appended(self):
        node = Node('input', {'class': ['string']})
        merge_html(node, {'class': 'a b'})
        assert node.classes == ['string', 'a', 'b']

    def test_attributes_overridden_and_removed(self):
        node = Node('input', {'size': '50', 'required': True})
        merge_html(node, {'size': 20, 'required': False})
        assert node.attributes == {'size': '20'}

    def test_none_is_noop(self):
        node = Node('input', {'id': 'x'})
        merge_html(node, None)
        assert node.attributes == {'id': 'x'}


class TestNaming:
    """Test cases for id and name conventions."""

    def test_ids_and_names(self):
        naming = FieldNaming('user', 'name')
        assert naming.id == 'user_name'
        assert naming.name == 'user[name]'
        assert naming.collection_name() == 'user[name][]'
        assert naming.position_id(4) == 'user_name_4i'
        assert naming.position_name(4) == 'user[name(4i)]'

    def test_item_ids(self):
        naming = FieldNaming('user', 'active')
        assert naming.item_id(True) == 'user_active_true'
        assert naming.item_id('New York') == 'user_active_new_york'

    def test_bare_attribute(self):
        naming = FieldNaming('', 'q')
        assert (naming.id, naming.name) == ('q', 'q')

    @pytest.mark.parametrize("value,expected", [
        ('user', 'user'),
        (User(), 'user'),
        (User, 'user'),
        (None, ''),
    ])
    def test_object_name_for(self, value, expected):
        assert object_name_for(value) == expected

    def test_object_name_override(self):
        assert object_name_for(User(), 'member') == 'member'

    def test_object_name_from_class_name(self):
        class ShippingAddress:
            pass

        assert object_name_for(ShippingAddress()) == 'shipping_address'

    def test_helpers(self):
        assert underscore('ShippingAddress') == 'shipping_address'
        assert humanize('born_at') == 'Born at'
        assert sanitize_value('a b/c') == 'a_bc'

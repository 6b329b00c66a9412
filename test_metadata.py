"""
Unit tests for metadata adapters.
"""

import pytest
from datetime import date

from pydantic import ValidationError

from formwright.metadata import (
    AttributeMetadataAdapter, NullMetadataAdapter, PydanticMetadataAdapter, SchemaMetadataAdapter,
    Validation, adapter_for, validations_from_config,
)

from test_fixtures import Account, User, ValidatingUser, input_for


class TestValidationsFromConfig:
    """Test cases for validation declaration shapes."""

    def test_kind_bound_mapping(self):
        result = validations_from_config({'presence': True, 'greater_than': 1})
        assert result == [Validation(kind='presence'), Validation(kind='greater_than', bound=1)]

    def test_presence_false_skipped(self):
        assert validations_from_config({'presence': False}) == []

    def test_list_of_shapes(self):
        result = validations_from_config(['presence', {'kind': 'less_than', 'bound': 5},
                                          Validation(kind='greater_than', bound=0), 42])
        assert [v.kind for v in result] == ['presence', 'less_than', 'greater_than']

    def test_empty(self):
        assert validations_from_config(None) == []


class TestNullMetadataAdapter:
    """Test that the null adapter knows nothing and never raises."""

    def test_everything_absent(self):
        adapter = NullMetadataAdapter()
        assert adapter.column_type('project', 'name') is None
        assert adapter.column_limit('project', 'name') is None
        assert adapter.validations('project', 'name') == []
        assert adapter.current_value('project', 'name') is None
        assert adapter.is_association('project', 'name') is False
        assert adapter.choices('project', 'name') is None
        assert adapter.errors('project', 'name') == []
        assert adapter.supports_validations('project') is False


class TestAttributeMetadataAdapter:
    """Test cases for plain object introspection."""

    def test_columns(self, user):
        adapter = AttributeMetadataAdapter()
        assert adapter.column_type(user, 'name') == 'string'
        assert adapter.column_limit(user, 'name') == 100
        assert adapter.column_type(user, 'description') == 'text'
        assert adapter.column_limit(user, 'description') is None
        assert adapter.column_type(user, 'unknown') is None

    def test_validations(self, validating_user):
        adapter = AttributeMetadataAdapter()
        kinds = [v.kind for v in adapter.validations(validating_user, 'age')]
        assert kinds == ['greater_than_or_equal_to', 'less_than_or_equal_to']
        assert adapter.supports_validations(validating_user)

    def test_no_validations_declared(self):
        class Plain:
            pass

        assert AttributeMetadataAdapter().supports_validations(Plain()) is False

    def test_current_value_and_errors(self):
        user = User(name='Ada', errors={'name': 'is taken'})
        adapter = AttributeMetadataAdapter()
        assert adapter.current_value(user, 'name') == 'Ada'
        assert adapter.current_value(user, 'missing') is None
        assert adapter.errors(user, 'name') == ['is taken']
        assert adapter.errors(user, 'age') == []

    def test_dict_objects(self):
        adapter = AttributeMetadataAdapter()
        assert adapter.current_value({'name': 'Ada'}, 'name') == 'Ada'

    def test_associations(self, user):
        adapter = AttributeMetadataAdapter()
        assert adapter.is_association(user, 'company')
        assert not adapter.is_association(user, 'name')


class TestSchemaMetadataAdapter:
    """Test cases for YAML field schemas."""

    @pytest.fixture
    def schema(self):
        return {
            'fields': {
                'title': {'type': 'string', 'required': True, 'max_length': 80},
                'notes': {'type': 'string', 'multiline': True},
                'amount': {'type': 'number', 'min_value': 0, 'max_value': 1000},
                'count': {'type': 'integer', 'exclusive_min': 0, 'default': 1},
                'status': {'type': 'enum', 'choices': ['open', 'closed']},
            }
        }

    def test_requires_fields(self):
        with pytest.raises(ValueError):
            SchemaMetadataAdapter({'title': 'no fields'})

    def test_column_types(self, schema):
        adapter = SchemaMetadataAdapter(schema)
        assert adapter.column_type({}, 'title') == 'string'
        assert adapter.column_type({}, 'notes') == 'text'
        assert adapter.column_type({}, 'amount') == 'float'
        assert adapter.column_type({}, 'count') == 'integer'
        assert adapter.column_type({}, 'missing') is None

    def test_limits_and_validations(self, schema):
        adapter = SchemaMetadataAdapter(schema)
        assert adapter.column_limit({}, 'title') == 80
        assert [v.kind for v in adapter.validations({}, 'title')] == ['presence']
        amount = adapter.validations({}, 'amount')
        assert [(v.kind, v.bound) for v in amount] == [
            ('greater_than_or_equal_to', 0), ('less_than_or_equal_to', 1000)
        ]

    def test_current_value_falls_back_to_default(self, schema):
        adapter = SchemaMetadataAdapter(schema)
        assert adapter.current_value({'count': 5}, 'count') == 5
        assert adapter.current_value({}, 'count') == 1

    def test_choices_render_select(self, schema):
        """Test that schema choices resolve the field to a select."""
        adapter = SchemaMetadataAdapter(schema)
        node = input_for({'status': 'closed'}, 'status',
                         builder_kwargs={'metadata': adapter, 'object_name': 'ticket'})
        assert node.find('select', id='ticket_status') is not None
        assert node.find('option', value='closed', selected=True) is not None

    def test_number_constraints_rendered(self, schema):
        adapter = SchemaMetadataAdapter(schema)
        node = input_for({}, 'amount', builder_kwargs={'metadata': adapter, 'object_name': 'ticket'})
        assert node.find('input', type='number', min='0', max='1000') is not None
        assert node.find('input', step=True) is None

    def test_errors(self, schema):
        adapter = SchemaMetadataAdapter(schema, errors={'title': ['is required']})
        assert adapter.errors({}, 'title') == ['is required']


class TestPydanticMetadataAdapter:
    """Test cases for pydantic model introspection."""

    def test_column_types(self):
        adapter = PydanticMetadataAdapter()
        assert adapter.column_type(Account, 'username') == 'string'
        assert adapter.column_type(Account, 'age') == 'integer'
        assert adapter.column_type(Account, 'balance') == 'decimal'
        assert adapter.column_type(Account, 'newsletter') == 'boolean'
        assert adapter.column_type(Account, 'joined_on') == 'date'
        assert adapter.column_type(Account, 'wake_up') == 'time'
        assert adapter.column_type(Account, 'missing') is None

    def test_limit_and_validations(self):
        adapter = PydanticMetadataAdapter()
        assert adapter.column_limit(Account, 'username') == 30
        kinds = {(v.kind, v.bound) for v in adapter.validations(Account, 'age')}
        assert kinds == {('presence', None), ('greater_than_or_equal_to', 18),
                         ('less_than_or_equal_to', 120)}
        balance = adapter.validations(Account, 'balance')
        assert [(v.kind, v.bound) for v in balance] == [('greater_than', 0)]

    def test_current_values(self):
        adapter = PydanticMetadataAdapter()
        account = Account(username='ada', age=36, joined_on=date(2020, 1, 2))
        assert adapter.current_value(account, 'joined_on') == date(2020, 1, 2)
        assert adapter.current_value(Account, 'plan') == 'free'
        assert adapter.current_value(Account, 'username') is None

    def test_literal_choices(self):
        assert PydanticMetadataAdapter().choices(Account, 'plan') == ['free', 'pro']

    def test_errors_from_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Account(username='ada', age=3)
        adapter = PydanticMetadataAdapter(exc_info.value)
        assert len(adapter.errors(Account, 'age')) == 1
        assert adapter.errors(Account, 'username') == []

    def test_renders_pydantic_model(self):
        """Test rendering inputs for a pydantic model instance."""
        account = Account(username='ada', age=36)
        username = input_for(account, 'username')
        assert username.find('input', id='account_username', maxlength='30', required=True) is not None
        age = input_for(account, 'age')
        assert age.find('input', type='number', min='18', max='120', step='1', value='36') is not None
        plan = input_for(account, 'plan')
        assert plan.find('option', value='free', selected=True) is not None

    def test_adapter_for(self):
        assert isinstance(adapter_for('project'), NullMetadataAdapter)
        assert isinstance(adapter_for(None), NullMetadataAdapter)
        assert isinstance(adapter_for(Account), PydanticMetadataAdapter)
        assert isinstance(adapter_for(ValidatingUser()), AttributeMetadataAdapter)

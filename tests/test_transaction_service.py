"""
Test suite for transaction decoding, validation and create/update submission.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from models.transaction import Transaction
from services.errors import ApiError, ValidationError
from services.transaction_service import (
    TransactionService,
    parse_amount,
    validate_transaction_fields,
)

WHEN = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)

RECORD = {
    '_id': '665f1c',
    'title': 'Salary',
    'amount': 1000,
    'type': 'income',
    'date': '2024-05-15T14:30:00.000Z',
    'category': 'Work',
}


@pytest.fixture
def api_mock():
    return MagicMock()


@pytest.fixture
def service(api_mock):
    return TransactionService(api_mock)


class TestTransactionModel:
    """Test decoding and encoding of API records."""

    def test_from_dict(self):
        tx = Transaction.from_dict(RECORD)
        assert tx.id == '665f1c'
        assert tx.amount == 1000.0
        assert tx.date == WHEN
        assert tx.category == 'Work'

    def test_accepts_plain_id(self):
        record = dict(RECORD)
        del record['_id']
        record['id'] = 7
        assert Transaction.from_dict(record).id == '7'

    def test_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            Transaction.from_dict(dict(RECORD, type='transfer'))

    def test_payload_has_no_id(self):
        payload = Transaction.from_dict(RECORD).to_payload()
        assert payload == {
            'title': 'Salary',
            'amount': 1000.0,
            'type': 'income',
            'category': 'Work',
            'date': '2024-05-15T14:30:00.000Z',
        }


class TestValidation:
    """Test form validation rules."""

    def test_valid_fields(self):
        assert validate_transaction_fields('Rent', '300', 'expense', 'Home', WHEN) == {}

    def test_all_problems_reported(self):
        errors = validate_transaction_fields('  ', 'abc', 'gift', '', None)
        assert set(errors) == {'title', 'amount', 'type', 'category', 'date'}

    @pytest.mark.parametrize('value', ['0', '-5', '', 'nan', 'inf', None, 'ten'])
    def test_invalid_amounts(self, value):
        assert parse_amount(value) is None

    @pytest.mark.parametrize('value, expected', [('12.50', 12.5), (' 3 ', 3.0), (7, 7.0)])
    def test_valid_amounts(self, value, expected):
        assert parse_amount(value) == expected


class TestList:
    """Test fetching the collection."""

    def test_decodes_records_in_order(self, service, api_mock):
        api_mock.list_transactions.return_value = [RECORD, dict(RECORD, _id='2', title='Rent', type='expense')]
        result = service.list_transactions()
        assert [tx.id for tx in result] == ['665f1c', '2']

    def test_malformed_record_is_an_api_error(self, service, api_mock):
        api_mock.list_transactions.return_value = [{'_id': '1', 'type': 'income'}]
        with pytest.raises(ApiError):
            service.list_transactions()

    def test_api_errors_propagate(self, service, api_mock):
        api_mock.list_transactions.side_effect = ApiError('down')
        with pytest.raises(ApiError):
            service.list_transactions()


class TestCreateAndUpdate:
    """Test submissions."""

    def test_create_sends_trimmed_payload(self, service, api_mock):
        api_mock.create_transaction.return_value = None
        assert service.create(' Rent ', '300', 'expense', ' Home ', WHEN) is None
        api_mock.create_transaction.assert_called_once_with({
            'title': 'Rent',
            'amount': 300.0,
            'type': 'expense',
            'category': 'Home',
            'date': '2024-05-15T14:30:00.000Z',
        })

    def test_create_returns_echoed_record(self, service, api_mock):
        api_mock.create_transaction.return_value = RECORD
        assert service.create('Salary', 1000, 'income', 'Work', WHEN).id == '665f1c'

    def test_invalid_create_is_not_submitted(self, service, api_mock):
        with pytest.raises(ValidationError) as exc_info:
            service.create('', '0', 'expense', 'Home', WHEN)
        assert set(exc_info.value.errors) == {'title', 'amount'}
        api_mock.create_transaction.assert_not_called()

    def test_update_returns_server_record(self, service, api_mock):
        api_mock.update_transaction.return_value = dict(RECORD, title='Bonus', amount=50)
        tx = service.update('665f1c', 'Bonus', '50', 'income', 'Work', WHEN)
        assert tx.title == 'Bonus'
        assert tx.amount == 50.0
        assert api_mock.update_transaction.call_args[0][0] == '665f1c'

    def test_invalid_update_is_not_submitted(self, service, api_mock):
        with pytest.raises(ValidationError):
            service.update('1', 'Rent', '-1', 'expense', 'Home', WHEN)
        api_mock.update_transaction.assert_not_called()

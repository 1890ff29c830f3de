"""
Shared pytest fixtures for the FinSync client tests.
"""

import os
import sys
import time
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import requests

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.transaction import Transaction
from services.api_client import ApiClient
from services.token_store import MemoryTokenStore

# Wednesday 2024-05-15 14:30 UTC; the week window starts Sunday 2024-05-12 14:30
NOW = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)


def make_tx(tx_id='1', title='Salary', amount=100.0, type_='income',
            date=None, category='General'):
    """Build a Transaction with sensible defaults."""
    return Transaction(
        id=tx_id,
        title=title,
        amount=amount,
        type=type_,
        date=date or NOW,
        category=category,
    )


def make_response(status_code=200, json_data=None):
    """Create a mock requests.Response; json_data=None means an empty body."""
    response = MagicMock()
    response.status_code = status_code
    if json_data is None:
        response.content = b''
        response.json.side_effect = ValueError('No JSON body')
    else:
        response.content = b'{}'
        response.json.return_value = json_data
    if status_code >= 400:
        error = requests.HTTPError(f'{status_code} Client Error', response=response)
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def token_store():
    return MemoryTokenStore('test-token')


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(token_store, session):
    return ApiClient('http://api.test/api', token_store, session=session)


@pytest.fixture
def sample_transactions():
    return [
        make_tx('1', 'Salary', 1000.0, 'income', NOW),
        make_tx('2', 'Rent', 300.0, 'expense', NOW - timedelta(days=1)),
        make_tx('3', 'Groceries', 80.5, 'expense', NOW - timedelta(days=20)),
        make_tx('4', 'Freelance', 250.0, 'income', datetime(2023, 12, 1, tzinfo=timezone.utc)),
        make_tx('5', 'rent deposit', 50.0, 'expense', NOW - timedelta(days=3)),
    ]


@pytest.fixture
def new_york_tz():
    """Run the test with America/New_York as the process timezone."""
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset is not available on this platform')
    previous = os.environ.get('TZ')
    os.environ['TZ'] = 'America/New_York'
    time.tzset()
    yield
    if previous is None:
        del os.environ['TZ']
    else:
        os.environ['TZ'] = previous
    time.tzset()

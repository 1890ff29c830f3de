"""
Tests for how form entries are built.
Entries bound to a textvariable never show a placeholder, so none is passed.
"""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip('tkinter')

from ui.components import auth_dialogs, transaction_form  # noqa: E402


class TestBoundEntries:
    """Test the entry helpers of the auth dialogs and the transaction form."""

    def test_auth_field_binds_variable_without_placeholder(self):
        dialog = MagicMock(_field_errors={})
        var = MagicMock()
        with patch.object(auth_dialogs, 'ctk') as ctk_mock:
            next_row = auth_dialogs._AuthDialog._field(dialog, 2, 'Email', 'email', var)
        _, kwargs = ctk_mock.CTkEntry.call_args
        assert kwargs['textvariable'] is var
        assert 'placeholder_text' not in kwargs
        assert next_row == 5
        assert 'email' in dialog._field_errors

    def test_auth_password_field_is_masked(self):
        dialog = MagicMock(_field_errors={})
        with patch.object(auth_dialogs, 'ctk') as ctk_mock:
            auth_dialogs._AuthDialog._field(dialog, 0, 'Password', 'password', MagicMock(), show='•')
        _, kwargs = ctk_mock.CTkEntry.call_args
        assert kwargs['show'] == '•'

    def test_transaction_entry_row_binds_variable_without_placeholder(self):
        form = MagicMock()
        var = MagicMock()
        with patch.object(transaction_form, 'ctk') as ctk_mock:
            transaction_form.TransactionForm._entry_row(form, 0, 'Title:', 'title', var)
        _, kwargs = ctk_mock.CTkEntry.call_args
        assert kwargs['textvariable'] is var
        assert 'placeholder_text' not in kwargs
        form._error_row.assert_called_once_with(1, 'title')

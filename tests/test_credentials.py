"""Tests for binance_client/credentials.py"""

import dataclasses

import pytest

from binance_client.credentials import Credentials


class TestCredentials:
    def test_presence_checks(self):
        creds = Credentials(api_key="key", secret_key="secret")
        assert creds.has_api_key()
        assert creds.has_secret_key()

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_count_as_absent(self, value):
        creds = Credentials(api_key=value, secret_key=value)
        assert not creds.has_api_key()
        assert not creds.has_secret_key()

    def test_key_without_secret(self):
        creds = Credentials(api_key="key")
        assert creds.has_api_key()
        assert not creds.has_secret_key()

    def test_is_immutable(self):
        creds = Credentials(api_key="key", secret_key="secret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            creds.api_key = "other"

    def test_repr_masks_values(self):
        text = repr(Credentials(api_key="visible-key", secret_key="visible-secret"))
        assert "visible-key" not in text
        assert "visible-secret" not in text
        assert "***" in text

    def test_repr_shows_missing_values(self):
        assert repr(Credentials()) == "Credentials(api_key=None, secret_key=None)"

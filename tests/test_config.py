"""
Test suite for config module

Tests environment-driven ledger settings.
"""

import pytest
from pydantic import ValidationError

from bank_ledger import config as config_module
from bank_ledger.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:
    """Test LedgerConfig defaults and overrides"""

    def test_defaults(self, monkeypatch):
        """Test default values"""
        for name in ["LEDGER_BANK_NAME", "LEDGER_ID_SEQUENCE_START", "LEDGER_LOG_LEVEL"]:
            monkeypatch.delenv(name, raising=False)

        config = LedgerConfig(_env_file=None)

        assert config.bank_name == "Demo Bank"
        assert config.id_sequence_start == 1000
        assert config.savings_prefix == "SAV"
        assert config.current_prefix == "CUR"
        assert config.customer_prefix == "CUST"
        assert config.log_format == "json"
        assert config.log_file is None

    def test_environment_overrides(self, monkeypatch):
        """Test LEDGER_ prefixed environment variables"""
        monkeypatch.setenv("LEDGER_BANK_NAME", "River Bank")
        monkeypatch.setenv("ledger_id_sequence_start", "5000")

        config = LedgerConfig(_env_file=None)

        assert config.bank_name == "River Bank"
        assert config.id_sequence_start == 5000

    def test_negative_sequence_rejected(self):
        """Test sequence start validation"""
        with pytest.raises(ValidationError):
            LedgerConfig(id_sequence_start=-1)

    def test_reload_config(self, monkeypatch):
        """Test global instance reload"""
        original = get_config()
        monkeypatch.setenv("LEDGER_BANK_NAME", "Reloaded Bank")
        try:
            reloaded = reload_config()
            assert reloaded.bank_name == "Reloaded Bank"
            assert get_config() is reloaded
        finally:
            monkeypatch.setattr(config_module, "config", original)

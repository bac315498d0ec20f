"""Tests for config.py — ListDeltaConfig validation."""

import pytest

from listdelta.config import ListDeltaConfig
from listdelta.observability import NoopMetricsHook


class TestListDeltaConfig:
    def test_defaults(self):
        config = ListDeltaConfig()
        assert config.metrics is None
        assert config.debug_dump_ops is False
        assert config.log_name == "listdelta"

    def test_accepts_metrics_hook(self):
        hook = NoopMetricsHook()
        assert ListDeltaConfig(metrics=hook).metrics is hook

    def test_rejects_non_hook_metrics(self):
        with pytest.raises(ValueError, match="metrics must implement"):
            ListDeltaConfig(metrics=object())

    def test_rejects_empty_log_name(self):
        with pytest.raises(ValueError, match="log_name"):
            ListDeltaConfig(log_name="")

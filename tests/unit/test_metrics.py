"""Unit tests for metrics module."""

import asyncio
from unittest.mock import patch

import pytest

from bank_account.infrastructure.metrics import (
    ACCOUNT_OPERATIONS_TOTAL,
    BALANCE_SYNC_DURATION_SECONDS,
    BALANCE_SYNC_TOTAL,
    start_metrics_server,
    track_sync_duration,
)


class TestMetricDefinitions:
    """Tests for metric definitions."""

    def test_account_operations_total_labels(self) -> None:
        """Test ACCOUNT_OPERATIONS_TOTAL has correct labels."""
        assert "operation" in ACCOUNT_OPERATIONS_TOTAL._labelnames
        assert "status" in ACCOUNT_OPERATIONS_TOTAL._labelnames

    def test_balance_sync_total_labels(self) -> None:
        """Test BALANCE_SYNC_TOTAL has correct labels."""
        assert "outcome" in BALANCE_SYNC_TOTAL._labelnames

    def test_balance_sync_duration_buckets(self) -> None:
        """Test BALANCE_SYNC_DURATION_SECONDS has correct buckets."""
        expected_buckets = [0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
        # prometheus_client adds +Inf bucket automatically
        assert list(BALANCE_SYNC_DURATION_SECONDS._upper_bounds[:-1]) == expected_buckets


class TestTrackSyncDuration:
    """Tests for track_sync_duration decorator."""

    @pytest.mark.asyncio
    async def test_decorator_returns_result(self) -> None:
        """Test decorator returns function result."""

        @track_sync_duration
        async def sample_function() -> str:
            return "result"

        assert await sample_function() == "result"

    @pytest.mark.asyncio
    async def test_decorator_observes_duration(self) -> None:
        """Test decorator observes duration to histogram."""
        with patch("bank_account.infrastructure.metrics.BALANCE_SYNC_DURATION_SECONDS") as mock_histogram:

            @track_sync_duration
            async def sample_function() -> str:
                await asyncio.sleep(0.01)
                return "result"

            await sample_function()

            mock_histogram.observe.assert_called_once()
            duration = mock_histogram.observe.call_args[0][0]
            assert duration >= 0.01

    @pytest.mark.asyncio
    async def test_decorator_observes_duration_on_exception(self) -> None:
        """Test decorator observes duration even on exception."""
        with patch("bank_account.infrastructure.metrics.BALANCE_SYNC_DURATION_SECONDS") as mock_histogram:

            @track_sync_duration
            async def failing_function() -> str:
                raise ValueError("Test error")

            with pytest.raises(ValueError, match="Test error"):
                await failing_function()

            mock_histogram.observe.assert_called_once()

    def test_decorator_preserves_name(self) -> None:
        """Test decorator keeps the wrapped function's metadata."""

        @track_sync_duration
        async def named_function() -> None:
            """Docstring."""

        assert named_function.__name__ == "named_function"
        assert named_function.__doc__ == "Docstring."


class TestStartMetricsServer:
    """Tests for start_metrics_server."""

    def test_starts_http_exporter(self) -> None:
        """Test exporter is started on the requested address."""
        with patch("bank_account.infrastructure.metrics.start_http_server") as mock_start:
            start_metrics_server(host="127.0.0.1", port=9100)

        mock_start.assert_called_once_with(9100, addr="127.0.0.1")

"""Unit tests for the pair column probe."""

from unittest.mock import MagicMock

import structlog
from structlog.testing import capture_logs

from typed_pair.infrastructure.database.observability import DefaultPairColumnProbe


class TestDefaultPairColumnProbe:
    """Tests for the structlog-backed probe."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultPairColumnProbe()
        assert probe._logger is not None

    def test_default_logger_is_tagged_with_component(self):
        """Events from the default logger should carry the component name."""
        probe = DefaultPairColumnProbe()

        with capture_logs() as logs:
            probe.null_loaded("Pair")

        assert logs == [
            {
                "event": "pair_null_loaded",
                "pair_type": "Pair",
                "component": "pair_column",
                "log_level": "debug",
            }
        ]

    def test_pair_bound_logs_debug(self):
        """pair_bound should log the pair type and stored size."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPairColumnProbe(logger=mock_logger)

        probe.pair_bound("Pair[int, str]", 25)

        mock_logger.debug.assert_called_once_with(
            "pair_bound",
            pair_type="Pair[int, str]",
            size=25,
        )

    def test_pair_bind_failed_logs_error(self):
        """pair_bind_failed should log the error and its type."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPairColumnProbe(logger=mock_logger)

        probe.pair_bind_failed("Pair", ValueError("cannot encode"))

        mock_logger.error.assert_called_once_with(
            "pair_bind_failed",
            pair_type="Pair",
            error="cannot encode",
            error_type="ValueError",
        )

    def test_pair_loaded_logs_debug(self):
        """pair_loaded should log the source type."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPairColumnProbe(logger=mock_logger)

        probe.pair_loaded("Pair", "bytes")

        mock_logger.debug.assert_called_once_with(
            "pair_loaded",
            pair_type="Pair",
            source_type="bytes",
        )

    def test_null_loaded_logs_debug(self):
        """null_loaded should log at debug level."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPairColumnProbe(logger=mock_logger)

        probe.null_loaded("Pair")

        mock_logger.debug.assert_called_once_with(
            "pair_null_loaded",
            pair_type="Pair",
        )

    def test_pair_load_failed_logs_error(self):
        """pair_load_failed should log the error and its type."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPairColumnProbe(logger=mock_logger)

        probe.pair_load_failed("Pair", TypeError("unexpected"))

        mock_logger.error.assert_called_once_with(
            "pair_load_failed",
            pair_type="Pair",
            error="unexpected",
            error_type="TypeError",
        )

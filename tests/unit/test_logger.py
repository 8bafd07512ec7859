import logging
from unittest.mock import patch

from holdings.logging.logger import Log


class TestLog:
    def test_appends_context_pairs(self) -> None:
        with patch.object(Log._logger, "log") as mock_log:
            Log.error("Statement failed", stage="rasterized", error="RenderError")

        mock_log.assert_called_once_with(
            logging.ERROR, "Statement failed [stage=rasterized error=RenderError]"
        )

    def test_plain_message_without_context(self) -> None:
        with patch.object(Log._logger, "log") as mock_log:
            Log.info("Store reset")

        mock_log.assert_called_once_with(logging.INFO, "Store reset")

"""Tests for the timing helper."""

import logging

from msascore.timing import time_it


class TestTimeIt:
    """Tests for the time_it context manager."""

    def test_logs_with_title(self, caplog):
        """With a logger the titled message is logged at INFO."""
        logger = logging.getLogger("msascore.test")
        with caplog.at_level(logging.INFO, logger="msascore.test"):
            with time_it("Scoring", logger):
                pass
        assert "Scoring finished in" in caplog.text

    def test_stderr_without_logger(self, capsys):
        """Without a logger the message goes to stderr."""
        with time_it():
            pass
        assert capsys.readouterr().err.startswith("Finished in")

    def test_block_runs(self, capsys):
        """With run=False the block still runs but nothing is reported."""
        ran = []
        with time_it(run=False):
            ran.append(True)
        assert ran == [True]
        assert capsys.readouterr().err == ""

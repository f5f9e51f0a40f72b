"""
Tests for the Demo Entry Point

Tests for logging setup and the demo workflow against a fake server.
"""

import logging
import pytest
import sys
from pathlib import Path
from unittest.mock import patch

import httpx

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from placeholder_client.api.client import ApiClient
from placeholder_client.config import Config, LogConfig
from placeholder_client import main as main_module


COMMENT = {"postId": 1, "id": 1, "name": "n", "email": "Eliseo@gardner.biz", "body": "b"}


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/comments":
        return httpx.Response(200, json=[COMMENT, {**COMMENT, "id": 2}])
    if request.url.path == "/comments/1":
        return httpx.Response(200, json=COMMENT)
    return httpx.Response(404, json={})


class TestRun:
    """Tests for the demo workflow."""

    def test_run_success(self):
        """Both requests succeed against a healthy server."""
        client = ApiClient(transport=httpx.MockTransport(handler))

        result = main_module.run(client)

        assert result.success
        assert result.comment_count == 2
        assert result.detail.email == "Eliseo@gardner.biz"
        assert result.errors == []

    def test_run_reports_failures(self):
        """A missing comment is reported without stopping the run."""
        client = ApiClient(transport=httpx.MockTransport(handler))

        result = main_module.run(client, comment_id=2)

        assert not result.success
        assert result.comment_count == 2
        assert result.detail is None
        assert result.errors == ["no_response: HTTP 404"]


class TestSetupLogging:
    """Tests for logging configuration."""

    @pytest.fixture
    def logger(self, tmp_path):
        """Configure logging into a temporary directory."""
        cfg = Config(log=LogConfig(log_directory=tmp_path / "logs"))
        logger = main_module.setup_logging("DEBUG", cfg)
        yield logger, cfg
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)

    def test_handlers_installed(self, logger):
        """Console and file handlers are attached."""
        log, _ = logger

        assert log.name == "placeholder_client"
        assert log.level == logging.DEBUG
        kinds = {type(h) for h in log.handlers}
        assert logging.FileHandler in kinds
        assert logging.StreamHandler in kinds

    def test_client_logs_reach_file(self, logger):
        """Client log records end up in the log file."""
        log, cfg = logger

        ApiClient(transport=httpx.MockTransport(handler)).fetch_comment(1)
        for h in log.handlers:
            h.flush()

        text = cfg.log.log_file_path.read_text(encoding="utf-8")
        assert "GET https://jsonplaceholder.typicode.com/comments/1" in text


class TestMain:
    """Tests for the main() exit codes."""

    def test_exit_codes(self):
        """main() exits 0 on success and 1 on failure."""
        ok = main_module.RunResult(True, 2, None, [], 0.1)
        bad = main_module.RunResult(False, 0, None, ["network_error: down"], 0.1)

        with patch.object(main_module, "setup_logging", return_value=logging.getLogger("test")):
            with patch.object(main_module, "run", return_value=ok):
                with pytest.raises(SystemExit) as exc_info:
                    main_module.main()
                assert exc_info.value.code == 0

            with patch.object(main_module, "run", return_value=bad):
                with pytest.raises(SystemExit) as exc_info:
                    main_module.main()
                assert exc_info.value.code == 1

    def test_keyboard_interrupt(self):
        """Ctrl+C exits with 130."""
        with patch.object(main_module, "setup_logging", return_value=logging.getLogger("test")):
            with patch.object(main_module, "run", side_effect=KeyboardInterrupt):
                with pytest.raises(SystemExit) as exc_info:
                    main_module.main()
        assert exc_info.value.code == 130


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

"""Server entry point tests."""

from unittest.mock import patch

from editsync.core.config.settings import settings
from editsync.main import run


class TestRun:
    """run() tests."""

    def test_serves_app_with_uvicorn(self) -> None:
        """uvicorn is started on the configured host and port."""
        # Given
        with patch("editsync.main.uvicorn.run") as uvicorn_run:
            # When
            run()

        # Then
        uvicorn_run.assert_called_once_with(
            "editsync.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=settings.debug,
        )

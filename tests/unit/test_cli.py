"""Tests for CLI module."""

import json
import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest

from build_status.backends.loading import BackendNotFoundError
from build_status.cli import format_output, log_builds_summary, main, run
from build_status.errors import AuthenticationError
from build_status.models.build import Build, Commit
from build_status.models.filter import BuildFilter

STARTED = datetime(2099, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def build() -> Build:
    """Create a successful build."""
    return Build(
        repository="api",
        branch="main",
        started=STARTED,
        state="success",
        commit=Commit(created=STARTED, author="Jane Doe", hash="abc123"),
    )


def test_log_builds_summary(caplog: pytest.LogCaptureFixture, build: Build) -> None:
    """Logs each build with its state symbol and author."""
    with caplog.at_level(logging.INFO):
        log_builds_summary(logging.getLogger(), [build])

    assert "Build Status Summary:" in caplog.text
    assert "✅ api/main: success" in caplog.text
    assert "Author: Jane Doe" in caplog.text


def test_log_builds_summary_without_author(caplog: pytest.LogCaptureFixture) -> None:
    """Omits the author line when the author is unknown."""
    build = Build(repository="web", branch="dev", started=None, state="failed")

    with caplog.at_level(logging.INFO):
        log_builds_summary(logging.getLogger(), [build])

    assert "❌ web/dev: failed" in caplog.text
    assert "Author:" not in caplog.text


def test_format_output_empty() -> None:
    """Returns empty totals when no builds."""
    assert format_output([]) == {
        "total": 0,
        "success": 0,
        "failed": 0,
        "started": 0,
        "canceled": 0,
        "unknown": 0,
        "builds": [],
    }


def test_format_output_serializes_build(build: Build) -> None:
    """Formats timestamps as ISO 8601 strings."""
    output = format_output([build])

    assert output["total"] == 1
    assert output["success"] == 1
    assert output["builds"][0] == {
        "repository": "api",
        "branch": "main",
        "started": "2099-01-01T12:00:00+00:00",
        "state": "success",
        "commit": {
            "created": "2099-01-01T12:00:00+00:00",
            "author": "Jane Doe",
            "hash": "abc123",
        },
    }


def test_format_output_counts_every_state() -> None:
    """State counts add up to the total."""
    builds = [
        Build(repository="r", branch=state, started=None, state=state)
        for state in ("success", "failed", "started", "canceled", "unknown", "unknown")
    ]

    output = format_output(builds)

    assert output["canceled"] == 1
    assert output["unknown"] == 2
    counts = ("success", "failed", "started", "canceled", "unknown")
    assert sum(output[key] for key in counts) == output["total"] == 6


def test_format_output_missing_fields() -> None:
    """Keeps missing timestamps and commit fields as null."""
    output = format_output(
        [Build(repository="web", branch="dev", started=None, state="started")]
    )

    assert output["started"] == 1
    assert output["builds"][0]["started"] is None
    assert output["builds"][0]["commit"] == {
        "created": None,
        "author": None,
        "hash": None,
    }


class TestRun:
    """Tests for run function."""

    async def test_prints_builds_and_returns_zero(
        self, build: Build, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Returns 0 and prints the builds as JSON."""
        with patch(
            "build_status.cli.fetch_builds",
            new_callable=AsyncMock,
            return_value=[build],
        ) as mock_fetch:
            exit_code = await run(
                mode="travis",
                backend_config_json='{"token": "test"}',
                branch="main",
                repositories="api,web",
            )

        assert exit_code == 0
        mock_fetch.assert_called_once_with(
            "travis",
            {"token": "test"},
            BuildFilter(branch="main", repositories="api,web"),
        )
        output = json.loads(capsys.readouterr().out)
        assert output["total"] == 1
        assert output["builds"][0]["repository"] == "api"

    async def test_returns_one_on_backend_error(
        self, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Returns 1 and logs the message when the pipeline fails."""
        with patch(
            "build_status.cli.fetch_builds",
            new_callable=AsyncMock,
            side_effect=AuthenticationError("Invalid API token (401 nope)"),
        ):
            exit_code = await run(mode="circle", backend_config_json="{}")

        assert exit_code == 1
        assert "Invalid API token (401 nope)" in caplog.text
        assert capsys.readouterr().out == ""

    async def test_returns_one_on_unknown_mode(self) -> None:
        """Returns 1 when the mode names no backend."""
        with patch(
            "build_status.cli.fetch_builds",
            new_callable=AsyncMock,
            side_effect=BackendNotFoundError("Backend 'x' not found"),
        ):
            exit_code = await run(mode="x", backend_config_json="{}")

        assert exit_code == 1

    async def test_returns_one_on_invalid_config(self) -> None:
        """Returns 1 when the backend configuration does not validate."""
        exit_code = await run(mode="jenkins", backend_config_json="{}")

        assert exit_code == 1


class TestMain:
    """Tests for main entry point."""

    def test_passes_arguments_to_run(self) -> None:
        """Parses arguments and exits with the code from run."""
        argv = [
            "build-status",
            "--mode",
            "jenkins",
            "--backend-config",
            '{"url": "http://jenkins.test"}',
            "--branch",
            "^main$",
            "--repositories",
            "api",
        ]
        with (
            patch("sys.argv", argv),
            patch(
                "build_status.cli.run", new_callable=AsyncMock, return_value=0
            ) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        mock_run.assert_called_once_with(
            mode="jenkins",
            backend_config_json='{"url": "http://jenkins.test"}',
            branch="^main$",
            repositories="api",
        )

    def test_defaults_to_circle(self) -> None:
        """Uses the circle backend when no mode is given."""
        with (
            patch("sys.argv", ["build-status"]),
            patch(
                "build_status.cli.run", new_callable=AsyncMock, return_value=1
            ) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
        assert mock_run.call_args.kwargs["mode"] == "circle"

    def test_lists_backends(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the registered backends and exits."""
        with (
            patch("sys.argv", ["build-status", "--list-backends"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        options = json.loads(capsys.readouterr().out)
        assert set(options) == {"circle", "travis", "jenkins"}

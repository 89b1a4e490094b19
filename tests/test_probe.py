"""Tests for ffprobe duration measurement (subprocess mocked)."""

import subprocess
from unittest.mock import patch

import pytest

from transcode_worker.errors import ProbeError
from transcode_worker.probe import build_ffprobe_command, parse_duration, probe_duration


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.mark.parametrize(
    ("output", "expected"),
    [("12.1", 13), ("12.0", 12), ("45.6\n", 46), ("0.000", 0), ("7", 7)],
)
def test_parse_duration_rounds_up(output: str, expected: int) -> None:
    assert parse_duration(output) == expected


@pytest.mark.parametrize("output", ["", "N/A", "abc", "nan", "inf", "-1.5"])
def test_parse_duration_rejects_unusable_output(output: str) -> None:
    with pytest.raises(ProbeError):
        parse_duration(output)


def test_build_ffprobe_command_requests_bare_duration() -> None:
    cmd = build_ffprobe_command("/tmp/talk.mp3", ffprobe_path="/usr/local/bin/ffprobe")
    assert cmd == [
        "/usr/local/bin/ffprobe",
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=nw=1:nk=1",
        "/tmp/talk.mp3",
    ]


def test_probe_duration_parses_stdout() -> None:
    with patch("transcode_worker.probe.subprocess.run", return_value=_completed(stdout="12.1\n")) as mock_run:
        assert probe_duration("/tmp/talk.mp3", ffprobe_path="ffprobe") == 13
    mock_run.assert_called_once()
    assert mock_run.call_args[0][0][-1] == "/tmp/talk.mp3"
    assert mock_run.call_args[1]["capture_output"] is True


def test_probe_duration_nonzero_exit_raises_with_stderr() -> None:
    with patch(
        "transcode_worker.probe.subprocess.run",
        return_value=_completed(returncode=1, stderr="Invalid data found"),
    ):
        with pytest.raises(ProbeError, match="Invalid data found"):
            probe_duration("/tmp/talk.mp3", ffprobe_path="ffprobe")


def test_probe_duration_unparseable_output_raises() -> None:
    with patch("transcode_worker.probe.subprocess.run", return_value=_completed(stdout="N/A\n")):
        with pytest.raises(ProbeError):
            probe_duration("/tmp/talk.mp3", ffprobe_path="ffprobe")


def test_probe_duration_missing_executable_raises() -> None:
    with patch("transcode_worker.probe.subprocess.run", side_effect=FileNotFoundError("ffprobe")):
        with pytest.raises(ProbeError, match="could not be started"):
            probe_duration("/tmp/talk.mp3", ffprobe_path="ffprobe")

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from tests.fixtures.commands import RecordingRunner
from ts_backend_starter import process


def test_resolve_command_uses_path(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: f"/usr/bin/{name}")
    assert process.resolve_command(["npm", "install"]) == ["/usr/bin/npm", "install"]


def test_resolve_command_missing_executable(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: None)
    with pytest.raises(FileNotFoundError):
        process.resolve_command(["npm", "install"])


def test_resolve_command_rejects_empty():
    with pytest.raises(ValueError):
        process.resolve_command([])


def test_run_command_returns_exit_code(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    seen = {}

    def fake_run(command, cwd, check):
        seen.update(command=command, cwd=cwd, check=check)
        return subprocess.CompletedProcess(command, 3)

    monkeypatch.setattr(process.shutil, "which", lambda name: f"/bin/{name}")
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    assert process.run_command(["npm", "run", "dev"], tmp_path) == 3
    assert seen == {"command": ["/bin/npm", "run", "dev"], "cwd": str(tmp_path), "check": False}


def test_run_best_effort_success(tmp_path: Path):
    runner = RecordingRunner()
    assert process.run_best_effort(["npm", "install"], tmp_path, runner=runner)
    assert runner.calls == [(["npm", "install"], tmp_path)]


def test_run_best_effort_non_zero_exit(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    runner = RecordingRunner({"npm install": 1})
    with caplog.at_level(logging.INFO, logger="ts_backend_starter.process"):
        assert not process.run_best_effort(["npm", "install"], tmp_path, runner=runner)
    assert "exited with code 1" in caplog.text


def test_run_best_effort_missing_executable(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    def missing(command, cwd):
        raise FileNotFoundError("executable not found: npm")

    with caplog.at_level(logging.INFO, logger="ts_backend_starter.process"):
        assert not process.run_best_effort(["npm", "install"], tmp_path, runner=missing)
    assert "could not run npm install" in caplog.text


def test_run_best_effort_does_not_warn(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    runner = RecordingRunner({"npm install": 1})
    with caplog.at_level(logging.INFO, logger="ts_backend_starter.process"):
        process.run_best_effort(["npm", "install"], tmp_path, runner=runner)
    assert caplog.records
    assert all(record.levelno < logging.WARNING for record in caplog.records)

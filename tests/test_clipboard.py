"""Tests for the clipboard sink."""

import subprocess

from chromacle import clipboard


def _recording_run(calls):
    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, 0)
    return fake_run


def test_no_tool_returns_false(monkeypatch):
    monkeypatch.setattr(clipboard, "_copy_command", lambda: None)
    assert clipboard.copy_to_clipboard("hi") is False


def test_launch_failure_returns_false(monkeypatch):
    def boom(*args, **kwargs):
        raise FileNotFoundError("pbcopy")

    monkeypatch.setattr(clipboard, "_copy_command", lambda: ["pbcopy"])
    monkeypatch.setattr(clipboard.subprocess, "run", boom)
    assert clipboard.copy_to_clipboard("hi") is False


def test_hung_tool_returns_false(monkeypatch):
    def hang(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr(clipboard, "_copy_command", lambda: ["xclip"])
    monkeypatch.setattr(clipboard.subprocess, "run", hang)
    assert clipboard.copy_to_clipboard("hi") is False


def test_text_written_to_tool_and_waited_on(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "_copy_command", lambda: ["pbcopy"])
    monkeypatch.setattr(clipboard.subprocess, "run", _recording_run(calls))
    assert clipboard.copy_to_clipboard("🎨 hi") is True
    cmd, kwargs = calls[0]
    assert cmd == ["pbcopy"]
    assert kwargs["input"] == "🎨 hi".encode("utf-8")
    assert kwargs["timeout"] == clipboard.COPY_TIMEOUT_S


def test_windows_clip_gets_utf16(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "_copy_command", lambda: ["clip"])
    monkeypatch.setattr(clipboard.subprocess, "run", _recording_run(calls))
    assert clipboard.copy_to_clipboard("🎨 hi") is True
    assert calls[0][1]["input"].decode("utf-16") == "🎨 hi"

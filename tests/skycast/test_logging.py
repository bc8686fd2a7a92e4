"""Tests for api_logging.py: async decorators and file logging."""

from __future__ import annotations

import logging
import os
from types import SimpleNamespace

import pytest

from skycast.api_logging import log_engine_call, log_upstream_call


class _FakeEngine:
    """Minimal class to test logging decorators."""

    @log_upstream_call
    async def get_payload(self, url: str) -> dict:
        return {"current": {}, "hourly": {}}

    @log_upstream_call
    async def get_failing(self, url: str) -> dict:
        raise ValueError("upstream error")

    @log_engine_call
    async def fetch(self, name: str, degraded: bool = False) -> SimpleNamespace:
        return SimpleNamespace(degraded=degraded)

    @log_engine_call
    async def fetch_failing(self) -> None:
        raise RuntimeError("engine error")


@pytest.fixture
def fake_engine():
    return _FakeEngine()


def _read_log(log_dir) -> str:
    return (log_dir / "api_calls.log").read_text(encoding="utf-8")


class TestLogUpstreamCall:
    @pytest.mark.asyncio
    async def test_returns_result(self, fake_engine) -> None:
        assert await fake_engine.get_payload("https://x") == {"current": {}, "hourly": {}}

    @pytest.mark.asyncio
    async def test_logs_call_and_ok(self, fake_engine, _isolate_api_log) -> None:
        await fake_engine.get_payload("https://x")
        content = _read_log(_isolate_api_log)
        assert "CALL: _FakeEngine.get_payload('https://x')" in content
        assert "OK: _FakeEngine.get_payload('https://x') -> 2 keys" in content

    @pytest.mark.asyncio
    async def test_logs_failure(self, fake_engine, _isolate_api_log) -> None:
        with pytest.raises(ValueError, match="upstream error"):
            await fake_engine.get_failing("https://y")
        content = _read_log(_isolate_api_log)
        assert "FAIL: _FakeEngine.get_failing('https://y')" in content
        assert "ValueError" in content

    def test_preserves_function_name(self, fake_engine) -> None:
        assert fake_engine.get_payload.__name__ == "get_payload"


class TestLogEngineCall:
    @pytest.mark.asyncio
    async def test_logs_live(self, fake_engine, _isolate_api_log) -> None:
        await fake_engine.fetch("London")
        content = _read_log(_isolate_api_log)
        assert "ENGINE CALL: _FakeEngine.fetch('London')" in content
        assert "ENGINE OK: _FakeEngine.fetch -> live" in content

    @pytest.mark.asyncio
    async def test_logs_fallback(self, fake_engine, _isolate_api_log) -> None:
        await fake_engine.fetch("London", degraded=True)
        content = _read_log(_isolate_api_log)
        assert "ENGINE CALL: _FakeEngine.fetch('London', degraded=True)" in content
        assert "ENGINE OK: _FakeEngine.fetch -> fallback" in content

    @pytest.mark.asyncio
    async def test_logs_failure(self, fake_engine, _isolate_api_log) -> None:
        with pytest.raises(RuntimeError, match="engine error"):
            await fake_engine.fetch_failing()
        content = _read_log(_isolate_api_log)
        assert "ENGINE FAIL: _FakeEngine.fetch_failing -> RuntimeError" in content

    @pytest.mark.asyncio
    async def test_creates_log_directory(self, tmp_path, monkeypatch) -> None:
        """Log directory is created on first use."""
        import skycast.api_logging as mod

        new_dir = tmp_path / "nested" / "logs"
        monkeypatch.setenv("SKYCAST_LOG_DIR", str(new_dir))
        monkeypatch.setattr(mod, "_logger", None)

        await _FakeEngine().fetch("Tokyo")

        assert (new_dir / "api_calls.log").exists()


class TestLogSetup:
    def test_log_dir_read_at_first_use(self, tmp_path, monkeypatch) -> None:
        import skycast.api_logging as mod

        monkeypatch.setenv("SKYCAST_LOG_DIR", str(tmp_path / "late"))
        assert mod.log_file_path() == str(tmp_path / "late" / "api_calls.log")

    def test_default_log_dir(self, tmp_path, monkeypatch) -> None:
        import skycast.api_logging as mod

        monkeypatch.delenv("SKYCAST_LOG_DIR")
        monkeypatch.chdir(tmp_path)
        assert mod.log_file_path() == os.path.join(os.getcwd(), "logs", "api_calls.log")

    @pytest.mark.asyncio
    async def test_foreign_handler_keeps_file_log(self, fake_engine, _isolate_api_log) -> None:
        named_logger = logging.getLogger("skycast.api")
        foreign = logging.StreamHandler()
        named_logger.addHandler(foreign)
        try:
            await fake_engine.fetch("London")
        finally:
            named_logger.removeHandler(foreign)
        assert "ENGINE OK: _FakeEngine.fetch -> live" in _read_log(_isolate_api_log)

    @pytest.mark.asyncio
    async def test_file_handler_not_duplicated(self, fake_engine, _isolate_api_log) -> None:
        import skycast.api_logging as mod

        await fake_engine.fetch("London")
        mod._logger = None
        await fake_engine.fetch("London")

        file_handlers = [
            h for h in logging.getLogger("skycast.api").handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert _read_log(_isolate_api_log).count("ENGINE CALL") == 2

    @pytest.mark.asyncio
    async def test_unwritable_log_dir_does_not_fail_call(self, fake_engine, tmp_path, monkeypatch) -> None:
        import skycast.api_logging as mod

        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.setenv("SKYCAST_LOG_DIR", str(blocker / "logs"))
        monkeypatch.setattr(mod, "_logger", None)

        assert await fake_engine.get_payload("https://x") == {"current": {}, "hourly": {}}
        result = await fake_engine.fetch("London")

        assert result.degraded is False
        assert not (blocker / "logs").exists()

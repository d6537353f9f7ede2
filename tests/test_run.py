"""Tests for the uvicorn entrypoint's exit behaviour."""

import pytest

import run


def test_startup_failure_keeps_exit_status(monkeypatch):
    async def fail_to_bind():
        # What uvicorn does when the port is already in use.
        raise SystemExit(1)

    monkeypatch.setattr(run, "run_api", fail_to_bind)
    with pytest.raises(SystemExit) as exc:
        run.main()
    assert exc.value.code == 1


def test_ctrl_c_stops_quietly(monkeypatch):
    async def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(run, "run_api", interrupted)
    run.main()

"""Smoke tests for the UI module and CLI (no display required)."""

from __future__ import annotations

from pathlib import Path

import pytest

from honeyfield.ui.pygame_client import PygameRenderer


def test_pygame_renderer_importable() -> None:
    """PygameRenderer class is importable without initialising pygame."""
    assert PygameRenderer is not None


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from honeyfield.__main__ import main

    assert callable(main)


def test_headless_run_prints_monitors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    from honeyfield.__main__ import main

    config = tmp_path / "run.yaml"
    config.write_text("seed: 5\ninitial_bees: 10\n")
    main(["-c", str(config), "--headless", "3"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("day=0 ")
    assert lines[-1].startswith("day=3 ")
    assert "bees=" in lines[-1]

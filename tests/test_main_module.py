import json
import os
from pathlib import Path

import pytest

from belabot import main as main_module
from belabot.configuration.settings_store import CONFIG_FILE_NAME


@pytest.fixture()
def quiet_report(monkeypatch):
    reported = []
    monkeypatch.setattr(main_module, "report_settings", reported.append)
    return reported


def test_resolve_base_dir_prefers_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("BELABOT_HOME", str(tmp_path))
    assert main_module.resolve_base_dir() == tmp_path.resolve()


def test_resolve_base_dir_defaults_to_checkout(monkeypatch):
    monkeypatch.delenv("BELABOT_HOME", raising=False)
    assert (main_module.resolve_base_dir() / "src" / "belabot").is_dir()


def test_load_environment_reads_config_override(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("BELABOT_CONFIG", raising=False)
    (tmp_path / ".env").write_text("BELABOT_CONFIG=elsewhere.json\n", encoding="utf-8")

    try:
        assert main_module.load_environment(tmp_path) == Path("elsewhere.json")
    finally:
        os.environ.pop("BELABOT_CONFIG", None)


@pytest.mark.asyncio
async def test_async_main_loads_existing_config(workdir: Path, monkeypatch, quiet_report):
    monkeypatch.delenv("BELABOT_CONFIG", raising=False)
    (workdir / CONFIG_FILE_NAME).write_text(json.dumps({"twitch": {"channel": "Chan"}}), encoding="utf-8")

    assert await main_module.async_main() == 0
    assert quiet_report[0].twitch.channel == "chan"


@pytest.mark.asyncio
async def test_async_main_reports_broken_config(workdir: Path, monkeypatch, quiet_report):
    monkeypatch.delenv("BELABOT_CONFIG", raising=False)
    (workdir / CONFIG_FILE_NAME).write_text("{oops", encoding="utf-8")

    assert await main_module.async_main() == 1
    assert quiet_report == []


@pytest.mark.asyncio
async def test_async_main_uses_config_override(workdir: Path, monkeypatch, quiet_report):
    override = workdir / "import.json"
    override.write_text(json.dumps({"twitch": {"admins": ["Mod"]}}), encoding="utf-8")
    monkeypatch.setenv("BELABOT_CONFIG", str(override))

    assert await main_module.async_main() == 0
    assert quiet_report[0].twitch.admins == ["mod"]
    assert (workdir / CONFIG_FILE_NAME).exists()


def test_main_changes_into_base_dir(workdir: Path, monkeypatch, tmp_path_factory):
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("BELABOT_HOME", str(home))

    async def fake_async_main():
        return 0 if Path.cwd() == home.resolve() else 1

    monkeypatch.setattr(main_module, "async_main", fake_async_main)

    assert main_module.main() == 0


def test_main_returns_zero_on_ctrl_c(workdir: Path, monkeypatch):
    monkeypatch.setenv("BELABOT_HOME", str(workdir))

    async def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "async_main", interrupted)

    assert main_module.main() == 0

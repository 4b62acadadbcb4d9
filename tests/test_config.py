from pathlib import Path

from nssh.config import Settings, load_settings


def test_paths_default_under_home(tmp_path: Path) -> None:
    settings = load_settings(tmp_path)
    assert settings.dsh_dir == tmp_path / ".dsh"
    assert settings.last_file == tmp_path / ".nssh-last"
    assert settings.screenrc == tmp_path / ".screenrc-main"
    assert settings.ssh_program == "ssh"
    assert settings.hostname_env == "LC_UI_HOSTNAME"


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("NSSH_HOME", str(tmp_path))
    monkeypatch.setenv("NSSH_LAST_FILE", str(tmp_path / "cursor"))
    monkeypatch.setenv("NSSH_SKIP_DISABLED", "true")
    monkeypatch.setenv("NSSH_SCREEN_LISTS", '["a", "b"]')
    settings = Settings()
    assert settings.home == tmp_path
    assert settings.last_file == tmp_path / "cursor"
    assert settings.dsh_dir == tmp_path / ".dsh"
    assert settings.skip_disabled is True
    assert settings.screen_lists == ["a", "b"]


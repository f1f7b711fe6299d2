from pathlib import Path

from pytest_mock import MockerFixture

from fifoqueues.config import (
    ContainerSettings,
    GeneralSettings,
    Settings,
    field_names,
    load_config,
)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Tests that a missing config file yields default settings."""
    path = tmp_path / "config.toml"
    settings = load_config(path)
    assert settings == Settings()
    assert settings.containers.default_capacity == 16
    assert not path.exists()


def test_file_overrides_defaults(tmp_path: Path) -> None:
    """Tests that values in the TOML file are merged over the defaults."""
    path = tmp_path / "config.toml"
    path.write_text(
        '[general]\nlog_level_console = "DEBUG"\n\n'
        "[containers]\ndefault_capacity = 64\n",
        encoding="utf-8",
    )
    settings = load_config(path)
    assert settings.general.log_level_console == "DEBUG"
    assert settings.general.log_level_file == GeneralSettings().log_level_file
    assert settings.containers.default_capacity == 64


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    """Tests that unknown sections and keys do not break loading."""
    path = tmp_path / "config.toml"
    path.write_text(
        "containers = 5\n\n[unknown]\nkey = 1\n", encoding="utf-8"
    )
    settings = load_config(path)
    assert settings == Settings()


def test_invalid_toml_falls_back_to_defaults(tmp_path: Path) -> None:
    """Tests that a malformed file is reported and defaults are used."""
    path = tmp_path / "config.toml"
    path.write_text("[containers\ndefault_capacity = ", encoding="utf-8")
    assert load_config(path) == Settings()


def test_get_instance_is_cached(mocker: MockerFixture) -> None:
    """Tests that the singleton is loaded once and can be reset."""
    mocker.patch.object(Settings, "_instance", None)
    loaded = Settings(containers=ContainerSettings(default_capacity=8))
    load = mocker.patch("fifoqueues.config.load_config", return_value=loaded)

    assert Settings.get_instance() is loaded
    assert Settings.get_instance() is loaded
    load.assert_called_once()

    Settings.reset_instance()
    Settings.get_instance()
    assert load.call_count == 2


def test_field_names() -> None:
    """Tests the dataclass field helper."""
    assert field_names(Settings()) == ["general", "containers"]
    assert field_names(ContainerSettings()) == ["default_capacity"]


def test_classvar_key_in_file_is_ignored(tmp_path: Path) -> None:
    """Tests that the singleton slot cannot be overwritten from the file."""
    path = tmp_path / "config.toml"
    path.write_text('_instance = "oops"\n', encoding="utf-8")
    settings = load_config(path)
    assert "_instance" not in vars(settings)
    assert settings == Settings()

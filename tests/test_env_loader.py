import os
from pathlib import Path

import pytest

from ft_config.config import EnvLoader, export_to_environ
from ft_config.exceptions import LoadEnvError


def test_env_loader_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FOO=file\nBAR=file\n")

    monkeypatch.setenv("BAR", "env")

    loader = EnvLoader(env_file)
    data = loader.load({"BAR": "override", "BAZ": "override"})

    assert data["FOO"] == "file"
    assert data["BAR"] == "override"
    assert data["BAZ"] == "override"


def test_env_loader_env_beats_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FTC_SHARED=file\n")
    monkeypatch.setenv("FTC_SHARED", "env")

    assert EnvLoader(env_file).load()["FTC_SHARED"] == "env"


def test_env_loader_without_file_ignores_cwd_dotenv(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".env").write_text("FTC_CWD_ONLY=file\n")
    monkeypatch.chdir(tmp_path)

    for empty in (None, ""):
        loader = EnvLoader(empty)
        assert loader.env_file is None
        assert "FTC_CWD_ONLY" not in loader.load()
        assert loader.read_file() == {}


def test_env_loader_exports_without_overriding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FTC_EXPORTED=file\nFTC_ALREADY_SET=file\n")
    monkeypatch.setenv("FTC_ALREADY_SET", "env")
    monkeypatch.delenv("FTC_EXPORTED", raising=False)

    EnvLoader(env_file).load()

    assert os.environ["FTC_EXPORTED"] == "file"
    assert os.environ["FTC_ALREADY_SET"] == "env"


def test_env_loader_export_disabled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FTC_NOT_EXPORTED=file\n")
    monkeypatch.delenv("FTC_NOT_EXPORTED", raising=False)

    data = EnvLoader(env_file, export=False).load()

    assert data["FTC_NOT_EXPORTED"] == "file"
    assert "FTC_NOT_EXPORTED" not in os.environ


def test_read_file_handles_quotes_comments_and_export(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment line\n"
        "export EXPORTED=yes\n"
        'QUOTED="hello world"\n'
        "SINGLE='x=y'\n"
        "EMPTY=\n"
        "NO_VALUE\n"
    )

    values = EnvLoader(env_file).read_file()

    assert values["EXPORTED"] == "yes"
    assert values["QUOTED"] == "hello world"
    assert values["SINGLE"] == "x=y"
    assert values["EMPTY"] == ""
    assert "NO_VALUE" not in values


def test_missing_file_raises_load_env_error(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent.env"

    with pytest.raises(LoadEnvError) as exc_info:
        EnvLoader(missing).load()

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert exc_info.value.details["path"] == str(missing)


def test_directory_path_raises_load_env_error(tmp_path: Path) -> None:
    with pytest.raises(LoadEnvError) as exc_info:
        EnvLoader(tmp_path).load()

    assert isinstance(exc_info.value.__cause__, OSError)


def test_parse_error_raises_and_exports_nothing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text('FTC_BEFORE_ERROR=1\nFTC_BROKEN="unterminated\n')
    monkeypatch.delenv("FTC_BEFORE_ERROR", raising=False)

    with pytest.raises(LoadEnvError) as exc_info:
        EnvLoader(env_file).load()

    assert "line" in exc_info.value.details
    assert "FTC_BEFORE_ERROR" not in os.environ


def test_export_to_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FTC_KEEP", "original")
    monkeypatch.delenv("FTC_NEW", raising=False)

    export_to_environ({"FTC_KEEP": "replaced", "FTC_NEW": "added"})

    assert os.environ["FTC_KEEP"] == "original"
    assert os.environ["FTC_NEW"] == "added"

"""Tests for ConfigService and the declarative mapper"""

import pytest

from ft_config import new_service
from ft_config.config import ConfigService, DeclarativeMapper, freeze_mapping
from ft_config.exceptions import (
    EmptyKeyError,
    InvalidValueError,
    KeyNotFoundError,
    LoadEnvError,
    NoMappingError,
)
from ft_config.store import ConfigStore

MAPPING = {
    "SupabaseKey": "SUPABASE_ANON_KEY",
    "DatabaseURL": "DATABASE_URL",
    "Port": "PORT",
}


@pytest.fixture
def clean_mapping_env(monkeypatch):
    for env_name in MAPPING.values():
        monkeypatch.delenv(env_name, raising=False)


class TestFreezeMapping:
    """Mapping table validation and copy-in"""

    def test_returns_read_only_copy(self):
        source = dict(MAPPING)
        frozen = freeze_mapping(source)

        source["Extra"] = "EXTRA"
        assert "Extra" not in frozen
        with pytest.raises(TypeError):
            frozen["Extra"] = "EXTRA"  # type: ignore[index]

    def test_empty_logical_key_rejected(self):
        with pytest.raises(EmptyKeyError):
            freeze_mapping({"": "PORT"})

    def test_empty_env_name_rejected(self):
        with pytest.raises(EmptyKeyError):
            freeze_mapping({"Port": ""})

    def test_non_string_entries_rejected(self):
        with pytest.raises(InvalidValueError):
            freeze_mapping({"Port": 8080})  # type: ignore[dict-item]

    def test_not_a_mapping_rejected(self):
        with pytest.raises(InvalidValueError):
            freeze_mapping([("Port", "PORT")])  # type: ignore[arg-type]


class TestDeclarativeMapper:
    """Soft-missing population into a store"""

    def test_apply_hits_and_misses(self):
        mapper = DeclarativeMapper({"Key": "K1", "Other": "K2"})
        store = ConfigStore()

        unresolved = mapper.apply({"K1": "v1"}, store)

        assert store.get_all() == {"Key": "v1"}
        assert unresolved == ["K2"]

    def test_apply_never_uses_wrong_key(self):
        mapper = DeclarativeMapper({"Key": "K1"})
        store = ConfigStore()

        mapper.apply({"Key": "wrong", "K2": "wrong"}, store)

        assert not store.has("Key")


class TestConfigService:
    """ConfigService lifecycle"""

    def test_load_from_file(self, write_env, clean_mapping_env):
        path = write_env(
            "SUPABASE_ANON_KEY=abc123\n"
            "DATABASE_URL=postgres://localhost:5432/db\n"
            "PORT=8080\n"
        )
        service = new_service(MAPPING)

        service.load(str(path))

        assert service.get("SupabaseKey") == "abc123"
        assert service.get("DatabaseURL") == "postgres://localhost:5432/db"
        assert service.get("Port") == "8080"
        assert service.get_all() == {
            "SupabaseKey": "abc123",
            "DatabaseURL": "postgres://localhost:5432/db",
            "Port": "8080",
        }

    def test_load_from_environment(self, monkeypatch, clean_mapping_env):
        monkeypatch.setenv("PORT", "9000")
        service = new_service(MAPPING)

        service.load()

        assert service.get("Port") == "9000"

    def test_missing_entries_are_soft(self, monkeypatch, clean_mapping_env):
        monkeypatch.setenv("PORT", "9000")
        service = new_service(MAPPING)

        service.load("")

        assert not service.has("SupabaseKey")
        assert service.get_or_default("SupabaseKey", "anon") == "anon"
        with pytest.raises(KeyNotFoundError):
            service.get("SupabaseKey")

    def test_manual_set_survives_reload_when_unresolved(self, monkeypatch, clean_mapping_env):
        service = new_service(MAPPING)
        service.set("SupabaseKey", "manual")

        service.load("")

        assert service.get("SupabaseKey") == "manual"

    def test_reload_overwrites_resolved_keys(self, monkeypatch, clean_mapping_env):
        service = new_service(MAPPING)
        service.set("Port", "manual")
        monkeypatch.setenv("PORT", "8080")

        service.load("")

        assert service.get("Port") == "8080"

    def test_store_operations(self):
        service = new_service(MAPPING)
        service.set("Extra", "1")
        assert service.has("Extra")

        service.delete("Extra")
        service.delete("Extra")
        assert not service.has("Extra")

        service.set("A", "1")
        service.clear()
        assert service.get_all() == {}

    def test_empty_key_rejected(self):
        service = new_service(MAPPING)
        with pytest.raises(EmptyKeyError):
            service.get("")
        with pytest.raises(EmptyKeyError):
            service.set("", "x")

    def test_config_handle_is_backing_store(self):
        service = new_service(MAPPING)
        service.config.set("Port", "1")

        assert isinstance(service.config, ConfigStore)
        assert service.get("Port") == "1"

    def test_services_do_not_share_stores(self):
        first = new_service(MAPPING)
        second = new_service(MAPPING)
        first.set("Port", "1")

        assert not second.has("Port")

    def test_mapping_copied_on_construction(self):
        mapping = dict(MAPPING)
        service = ConfigService(mapping)

        mapping["Port"] = "OTHER_PORT"
        assert service.mapping["Port"] == "PORT"

    def test_load_env_error_leaves_store_untouched(self, tmp_path):
        service = new_service(MAPPING)
        service.set("Port", "1")

        with pytest.raises(LoadEnvError):
            service.load(str(tmp_path / "nonexistent.env"))

        assert service.get_all() == {"Port": "1"}

    def test_overrides(self, clean_mapping_env):
        service = new_service(MAPPING)
        service.load("", overrides={"PORT": "7000"})
        assert service.get("Port") == "7000"


class TestEmptyMapping:
    """NoMappingError is opt-in"""

    def test_empty_mapping_allowed_by_default(self):
        service = new_service({})
        service.load("")
        assert service.get_all() == {}

    def test_strict_rejects_empty_mapping(self):
        service = new_service({}, strict=True)
        with pytest.raises(NoMappingError):
            service.load("")


class TestServiceLogging:
    """Diagnostics use the Service.Load operation"""

    def test_verbose_service(self, monkeypatch, clean_mapping_env, recorder):
        monkeypatch.setenv("PORT", "8080")
        service = new_service(MAPPING, verbose=True, logger=recorder)

        service.load("")

        messages = recorder.messages()
        assert "[ft_config] [Service.Load] Loaded PORT -> Port" in messages
        assert (
            "[ft_config] [Service.Load] Unresolved: SUPABASE_ANON_KEY, DATABASE_URL" in messages
        )
        assert messages[-1] == "[ft_config] [Service.Load] Loaded 1 of 3 mapped keys"

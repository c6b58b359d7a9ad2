"""Unit tests for services/config_service.py.

Uses a real ConfigService; the autouse ``isolated_dirs`` fixture points
platformdirs at a temporary directory.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from taskpad_cli.models.config_models import DEFAULT_DATE_FORMAT, AppConfig
from taskpad_cli.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc() -> ConfigService:
    service = ConfigService()
    _ = service.config
    return service


class TestConfigServiceInit:
    def test_dirs_created(self, svc, isolated_dirs):
        assert svc.config_dir == isolated_dirs / "config"
        assert svc.config_dir.is_dir()
        assert svc.data_dir.is_dir()

    def test_first_run_writes_defaults(self, svc):
        assert svc.config_path.exists()
        on_disk = json.loads(svc.config_path.read_text())
        assert on_disk["ui"]["default_sort"] == "newest"
        assert on_disk["ui"]["date_format"] == DEFAULT_DATE_FORMAT

    def test_config_file_is_private(self, svc):
        assert svc.config_path.stat().st_mode & 0o777 == 0o600

    def test_invalid_config_falls_back_to_defaults(self, isolated_dirs):
        path = isolated_dirs / "config" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('{"ui": {"default_sort": "sideways"}}')

        service = ConfigService()
        assert service.config == AppConfig()
        # the broken file is left for the user to fix
        assert "sideways" in path.read_text()


class TestGetSet:
    def test_get_nested(self, svc):
        assert svc.get("output.format") == "pretty"
        assert svc.get("ui.default_filter") == "all"

    def test_get_unknown_returns_none(self, svc):
        assert svc.get("ui.nope") is None
        assert svc.get("nope") is None

    def test_set_persists(self, svc):
        svc.set("ui.default_sort", "oldest")
        reloaded = ConfigService()
        assert reloaded.get("ui.default_sort") == "oldest"

    def test_set_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.set("ui.nope", "x")
        with pytest.raises(KeyError):
            svc.set("nope.deeper", "x")

    def test_set_invalid_value(self, svc):
        with pytest.raises(ValidationError):
            svc.set("ui.default_filter", "someday")
        assert svc.get("ui.default_filter") == "all"

    def test_reset_single_key(self, svc):
        svc.set("output.format", "json")
        svc.set("ui.default_sort", "oldest")
        svc.reset("output.format")
        assert svc.get("output.format") == "pretty"
        assert svc.get("ui.default_sort") == "oldest"

    def test_reset_all(self, svc):
        svc.set("output.color", False)
        svc.reset()
        assert svc.config == AppConfig()


class TestStoragePath:
    def test_default_under_data_dir(self, svc):
        assert svc.storage_path == svc.data_dir / "local_storage.json"

    def test_configured_path(self, svc, tmp_path):
        target = tmp_path / "elsewhere" / "tasks.json"
        svc.set("storage.path", str(target))
        assert svc.storage_path == target


def test_get_config_service_is_cached():
    assert get_config_service() is get_config_service()

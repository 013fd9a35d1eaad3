"""Unit tests for config.py — AppConfig and load_config()."""

import os
from unittest.mock import patch

import pytest

from org_folders.config import DEFAULT_ORG_ID, AppConfig, load_config

# ---------------------------------------------------------------------------
# AppConfig tests
# ---------------------------------------------------------------------------


class TestAppConfig:
    def test_defaults_use_sample_source(self) -> None:
        config = AppConfig()
        assert config.data_source == "sample"
        assert config.storage_connection_string == ""

    def test_default_org_id(self) -> None:
        assert AppConfig().default_org_id == "c1556e17-b7c0-45a3-a6ae-9546248fb17a"

    def test_paging_defaults(self) -> None:
        config = AppConfig()
        assert config.default_page_size == 10
        assert config.max_page_size == 100

    def test_is_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(AttributeError):
            config.data_source = "blob"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# load_config tests
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_defaults_with_empty_environment(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()
        assert config == AppConfig()

    def test_reads_blob_settings_from_env(self) -> None:
        env = {
            "OF_DATA_SOURCE": "blob",
            "AzureWebJobsStorage": "DefaultEndpointsProtocol=https;AccountName=test",
            "OF_FOLDERS_CONTAINER": "folders",
            "OF_FOLDERS_BLOB": "org/all.json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()
        assert config.data_source == "blob"
        assert config.storage_connection_string == env["AzureWebJobsStorage"]
        assert config.folders_container == "folders"
        assert config.folders_blob == "org/all.json"

    def test_reads_integers_from_env(self) -> None:
        env = {
            "OF_SAMPLE_SIZE": "15",
            "OF_SAMPLE_SEED": "7",
            "OF_DEFAULT_PAGE_SIZE": "5",
            "OF_MAX_PAGE_SIZE": "50",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()
        assert config.sample_size == 15
        assert config.sample_seed == 7
        assert config.default_page_size == 5
        assert config.max_page_size == 50

    def test_reads_default_org_id_from_env(self) -> None:
        org_id = "0b4c5d6e-0000-4000-8000-000000000001"
        with patch.dict(os.environ, {"OF_DEFAULT_ORG_ID": org_id}, clear=True):
            config = load_config()
        assert config.default_org_id == org_id
        assert config.default_org_id != DEFAULT_ORG_ID

    def test_raises_value_error_on_non_integer(self) -> None:
        with patch.dict(os.environ, {"OF_MAX_PAGE_SIZE": "lots"}, clear=True), pytest.raises(
            ValueError
        ):
            load_config()

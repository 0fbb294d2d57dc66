import json
from datetime import date

import pytest
from goodconf import GoodConfConfigDict

from dateversionlib.config import AppConfig
from dateversionlib.config.config import set_config

DAY = date(2025, 12, 26)


@pytest.fixture(autouse=True)
def patch_config(monkeypatch):
    # make sure none of the configured files are loaded.
    monkeypatch.setattr(AppConfig, "model_config", GoodConfConfigDict(default_files=[]))
    for var in ["DATEVERSION_CONFIG_YAML", "DATEVERSION_SILENT"]:
        monkeypatch.delenv(var, raising=False)

    data = AppConfig(
        project_path=".",
        silent=False,
        override_commit_count=None,
        default_release_type="dev",
        manifest_file="package.json",
        create_artifact=False,
        artifact_path="src/version.ts",
    )

    assert data.underlying_file is None

    set_config(data)

    from dateversionlib.config import get_config

    assert get_config().default_release_type == "dev"


@pytest.fixture
def project_dir(tmp_path):
    manifest = {"name": "x", "version": "0.0.1", "private": True}
    (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return tmp_path


@pytest.fixture
def day():
    return DAY

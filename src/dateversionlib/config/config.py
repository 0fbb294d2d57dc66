from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

from goodconf import Field, GoodConf, GoodConfConfigDict
from goodconf import _load_config
from pydantic import field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_RELEASE_TYPE = "dev"
DEFAULT_MANIFEST_FILE = "package.json"
DEFAULT_ARTIFACT_PATH = "src/version.ts"

DATEVERSION_DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATEVERSION_VERBOSE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class AppConfig(GoodConf):
    """dateversionlib config file"""

    model_config = GoodConfConfigDict(
        env_prefix="DATEVERSION_",
        file_env_var="DATEVERSION_CONFIG_YAML",
        default_files=[".dateversion.yaml", os.path.expanduser("~/.dateversion.yaml")],
    )

    project_path: str = Field(
        default_factory=lambda: ".",
        description="Directory holding the manifest and the git history to count.",
    )

    silent: bool = Field(
        default_factory=lambda: False,
        description="Suppress non-essential output.",
    )

    override_commit_count: Optional[int] = Field(
        default_factory=lambda: None,
        description="Fixed build number, bypasses the git query if set.",
    )

    default_release_type: str = Field(
        default_factory=lambda: DEFAULT_RELEASE_TYPE,
        description="Release type used if none is given. Empty means clean format.",
    )

    manifest_file: str = Field(
        default_factory=lambda: DEFAULT_MANIFEST_FILE,
        description="Manifest file relative to project_path.",
    )

    create_artifact: bool = Field(
        default_factory=lambda: False,
        description="Write the build metadata artifact after generating.",
    )

    artifact_path: str = Field(
        default_factory=lambda: DEFAULT_ARTIFACT_PATH,
        description="Artifact file relative to project_path.",
    )

    @field_validator("override_commit_count")
    def override_not_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("override_commit_count must be a non-negative integer")
        return v

    @field_validator("default_release_type")
    def release_type_without_whitespace(cls, v):
        if v.strip() and any(c.isspace() for c in v):
            raise ValueError("default_release_type must not contain whitespace")
        return v

    def __init__(
        self, load: bool = False, config_file: str | None = None, **kwargs
    ) -> None:
        super().__init__(load, config_file, **kwargs)
        self.model_config["explicit_config_file"] = config_file

    def is_loaded(self) -> bool:
        return hasattr(self, "project_path")

    @property
    def underlying_file(self) -> Optional[str]:
        env_overwrite_file_env = self.model_config.get("file_env_var")
        env_overwrite_file = (
            os.environ.get(env_overwrite_file_env) if env_overwrite_file_env else None
        )
        explicit_config_file = self.model_config.get("explicit_config_file")

        if explicit_config_file is not None:
            return explicit_config_file
        elif env_overwrite_file_env and env_overwrite_file:
            return env_overwrite_file
        else:
            default_files = self.model_config.get("default_files", [])
            for f in default_files:
                if os.path.exists(f):
                    return f

        logger.debug("No config file found in default locations.")
        return None

    def text(self) -> str:
        if self.underlying_file:
            with open(self.underlying_file, "r") as f:
                return f.read()
        else:
            return ""

    def path(self):
        return self.underlying_file

    def get_project_path(self) -> str:
        return os.path.abspath(os.path.expanduser(self.project_path))

    def load_partial(self, filename: Optional[str] = None) -> Tuple[bool, List[str]]:
        """Loads the config file field by field and keeps the defaults for
        every field the file does not set."""
        errors = []

        self._init_with_field_defaults()

        config_file = filename or self.underlying_file

        if config_file and os.path.exists(config_file):
            raw_config = _load_config(config_file)
        else:
            logger.debug(f"Config file not found: {config_file}. Using defaults.")
            raw_config = {}

        if raw_config and not isinstance(raw_config, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping.")

        for field_name, value in (raw_config or {}).items():
            if field_name not in type(self).model_fields:
                errors.append(f"{field_name}: unknown setting")
                continue
            try:
                setattr(self, field_name, value)
            except Exception as e:
                errors.append(f"{field_name}: {str(e)}")

        return len(errors) == 0, errors

    def _init_with_field_defaults(self):
        """Initialize config using field default factories."""
        defaults = self.__class__.get_initial()

        super().__init__(**defaults)


def get_config() -> AppConfig:
    if not _app_config.is_loaded():
        _app_config.load_partial()
    return _app_config


def set_config(cfg: AppConfig):
    global _app_config
    _app_config = cfg


_app_config = AppConfig(load=False)

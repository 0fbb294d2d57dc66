# flake8: noqa: F401
from .config import (
    DATEVERSION_DEFAULT_DATETIME_FORMAT,
    DATEVERSION_VERBOSE_DATETIME_FORMAT,
    DEFAULT_ARTIFACT_PATH,
    DEFAULT_MANIFEST_FILE,
    DEFAULT_RELEASE_TYPE,
    AppConfig,
    get_config,
    set_config,
)
from .errors import ConfigError

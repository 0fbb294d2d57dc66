# flake8: noqa: F401
from .version_file import (
    BuildInfo,
    create_version_file,
    get_build_date_string,
    get_version_display_string,
    language_for_path,
    render_version_file,
    supported_languages,
)

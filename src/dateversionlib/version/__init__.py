# flake8: noqa: F401
from .assembler import (
    AssemblyResult,
    VersionRequest,
    assemble,
    assemble_version,
    date_version,
    is_clean_release_type,
    try_assemble,
    validate_release_type,
)
from .generate import (
    VersionInfo,
    VersionOptions,
    generate_and_update_version,
    generate_version,
    get_project_version,
    get_version_info,
)
from .resolver import BuildNumberResult, resolve_build_number

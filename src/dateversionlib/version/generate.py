import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

from ..artifact import create_version_file
from ..config import get_config
from ..manifest import get_manifest_version, update_manifest_version
from ..scm import CommitCounter
from ..utils.date import today as local_today
from ..utils.logging import silenced
from .assembler import VersionRequest, date_version, try_assemble, validate_release_type
from .resolver import BuildNumberResult, resolve_build_number

logger = logging.getLogger(__name__)


@dataclass
class VersionOptions:
    project_path: Optional[str] = None
    silent: Optional[bool] = None
    override_commit_count: Optional[int] = None

    @classmethod
    def from_config(cls, **overrides) -> "VersionOptions":
        """Options of the loaded config, explicit overrides (not None) win."""
        cfg = get_config()
        opts = cls(
            project_path=cfg.get_project_path(),
            silent=cfg.silent,
            override_commit_count=cfg.override_commit_count,
        )
        for k, v in overrides.items():
            if v is not None:
                setattr(opts, k, v)
        return opts

    def resolved(self) -> "VersionOptions":
        return VersionOptions.from_config(**asdict(self))


@dataclass(frozen=True)
class VersionInfo:
    version: str
    date_version: str
    release_type: str
    build_number: int
    timestamp: str
    override_used: bool = False

    def as_dict(self) -> dict:
        return asdict(self)


def _release_type_or_default(release_type: Optional[str]) -> str:
    if release_type is None:
        return get_config().default_release_type
    return release_type


def _build_version(
    release_type: Optional[str],
    options: Optional[VersionOptions],
    today: Optional[date],
    counter: Optional[CommitCounter],
):
    opts = (options or VersionOptions()).resolved()
    release_type = validate_release_type(_release_type_or_default(release_type))
    day = today or local_today()

    logger.info(f"Generating version of type '{release_type}' for {day}")

    result: BuildNumberResult = resolve_build_number(
        day, opts.project_path, override=opts.override_commit_count, counter=counter
    )
    if result.override_used:
        logger.warning(
            f"Using commit count override {result.build_number} "
            "instead of the git history."
        )
    elif not result.source_available:
        logger.info(
            f"Git history not available in {opts.project_path}, using build number 0"
        )

    assembled = try_assemble(VersionRequest(release_type, day, result.build_number))
    if not assembled.ok:
        logger.error(f"Failed to assemble version: {assembled.error}")
        return None

    return VersionInfo(
        version=assembled.version,
        date_version=date_version(day),
        release_type=release_type,
        build_number=result.build_number,
        timestamp=datetime.now().astimezone().isoformat(),
        override_used=result.override_used,
    )


def get_version_info(
    release_type: Optional[str] = None,
    options: Optional[VersionOptions] = None,
    today: Optional[date] = None,
    counter: Optional[CommitCounter] = None,
) -> Optional[VersionInfo]:
    """Generates a version and returns it together with its parts.

    Returns:
        Optional[VersionInfo]: None if no version could be produced
    """
    opts = (options or VersionOptions()).resolved()
    with silenced(opts.silent):
        try:
            return _build_version(release_type, opts, today, counter)
        except Exception as e:
            logger.error(f"Version generation failed: {e}")
            return None


def generate_version(
    release_type: Optional[str] = None,
    options: Optional[VersionOptions] = None,
    today: Optional[date] = None,
    counter: Optional[CommitCounter] = None,
) -> Optional[str]:
    """Generates a version string for today, e.g. 25.12.26-dev.3

    The build number is the count of todays commits in the git history of
    the project, or the configured override. If the history is not available
    the build number is 0.

    Args:
        release_type (str, optional): Label such as dev, beta. Empty selects
            the clean format YY.MM.DD.N. Defaults to the configured type.
        options (VersionOptions, optional): project path, silence, override
        today (date, optional): Day to version, defaults to the local date
        counter (CommitCounter, optional): Source of the commit count

    Returns:
        Optional[str]: The version or None if generation failed
    """
    info = get_version_info(release_type, options, today, counter)
    return info.version if info is not None else None


def get_project_version(
    project_path: Optional[str] = None, manifest_file: Optional[str] = None
) -> Optional[str]:
    cfg = get_config()
    return get_manifest_version(
        project_path or cfg.get_project_path(), manifest_file or cfg.manifest_file
    )


def generate_and_update_version(
    release_type: Optional[str] = None,
    options: Optional[VersionOptions] = None,
    create_artifact: Optional[bool] = None,
    today: Optional[date] = None,
    counter: Optional[CommitCounter] = None,
) -> Optional[str]:
    """Generates a version, writes it to the manifest and optionally
    writes the build metadata file.

    Returns:
        Optional[str]: The version, None if generation failed. A failed
        manifest or artifact write is logged but does not discard the version.
    """
    cfg = get_config()
    opts = (options or VersionOptions()).resolved()
    version = generate_version(release_type, opts, today, counter)
    if version is None:
        return None

    with silenced(opts.silent):
        if not update_manifest_version(version, opts.project_path, cfg.manifest_file):
            logger.warning(
                f"{cfg.manifest_file} not found or failed to update in {opts.project_path}"
            )

        if create_artifact if create_artifact is not None else cfg.create_artifact:
            if not create_version_file(version, opts.project_path, cfg.artifact_path):
                logger.warning(f"Failed to create version file {cfg.artifact_path}")

    return version

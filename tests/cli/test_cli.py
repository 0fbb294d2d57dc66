import json

import pytest
from click.testing import CliRunner

from dateversionlib.cli.common import parse_version_arguments
from dateversionlib.cli.main import cli
from dateversionlib.utils.date import today
from dateversionlib.utils.errors import InvalidBuildNumberError, InvalidReleaseTypeError
from dateversionlib.version.assembler import date_version


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


def _invoke(*args):
    return CliRunner().invoke(cli, list(args))


class TestParseVersionArguments:
    def test_type_only(self):
        assert parse_version_arguments("beta", None) == ("beta", None)

    def test_type_and_count(self):
        assert parse_version_arguments("beta", "10") == ("beta", 10)

    def test_lone_number_is_clean_override(self):
        assert parse_version_arguments("5", None) == ("", 5)

    def test_numeric_type_with_count_stays_type(self):
        assert parse_version_arguments("0", "5") == ("0", 5)

    def test_nothing(self):
        assert parse_version_arguments(None, None) == (None, None)

    @pytest.mark.parametrize("count", ["-1", "abc", "1.5"])
    def test_bad_count(self, count):
        with pytest.raises(InvalidBuildNumberError):
            parse_version_arguments("dev", count)

    def test_whitespace_type(self):
        with pytest.raises(InvalidReleaseTypeError):
            parse_version_arguments("dev build", None)

    def test_negative_lone_count(self):
        with pytest.raises(InvalidBuildNumberError):
            parse_version_arguments("-5", None)

    @pytest.mark.parametrize("release_type", ["--dryrun", "-x", "-"])
    def test_dash_type(self, release_type):
        with pytest.raises(InvalidReleaseTypeError):
            parse_version_arguments(release_type, None)


def test_help():
    result = _invoke("--help")
    assert result.exit_code == 0
    assert "generate" in result.output


def test_generate_help_short_flag():
    result = _invoke("generate", "-h")
    assert result.exit_code == 0
    assert "RELEASE_TYPE" in result.output


def test_generate_with_override(project_dir):
    result = _invoke("generate", "beta", "10", "-p", str(project_dir))

    assert result.exit_code == 0, result.output
    expected = f"{date_version(today())}-beta.10"
    assert _last_line(result.output) == expected

    data = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
    assert data["version"] == expected
    assert data["name"] == "x"
    assert "Using commit count override 10" in result.output


def test_generate_with_override_silent_has_no_warning(project_dir):
    result = _invoke("generate", "beta", "10", "-p", str(project_dir), "-s")

    assert result.exit_code == 0, result.output
    assert "override" not in result.output
    assert result.output.strip() == f"{date_version(today())}-beta.10"


def test_generate_default_type_outside_repository(tmp_path):
    result = _invoke("generate", "-p", str(tmp_path / "missing"), "--silent")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{date_version(today())}-dev.0"


def test_generate_lone_number(project_dir):
    result = _invoke("generate", "7", "-p", str(project_dir), "-s")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{date_version(today())}.7"


def test_generate_dry_run_writes_nothing(project_dir):
    before = (project_dir / "package.json").read_bytes()
    result = _invoke("generate", "dev", "2", "-p", str(project_dir), "--dry-run")

    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == f"{date_version(today())}-dev.2"
    assert (project_dir / "package.json").read_bytes() == before


def test_generate_artifact(project_dir):
    result = _invoke(
        "generate", "dev", "1", "-p", str(project_dir), "--artifact", "--silent"
    )

    assert result.exit_code == 0, result.output
    content = (project_dir / "src" / "version.ts").read_text(encoding="utf-8")
    assert f'BUILD_VERSION = "{result.output.strip()}"' in content


def test_generate_whitespace_type_fails(project_dir):
    before = (project_dir / "package.json").read_bytes()
    result = _invoke("generate", "dev build", "-p", str(project_dir))

    assert result.exit_code == 1
    assert "Invalid release type" in result.output
    assert (project_dir / "package.json").read_bytes() == before


@pytest.mark.parametrize("count", ["-5", "five"])
def test_generate_bad_count_fails(project_dir, count):
    before = (project_dir / "package.json").read_bytes()
    result = _invoke("generate", "dev", count, "-p", str(project_dir))

    assert result.exit_code == 1
    assert "Invalid commit count" in result.output
    assert (project_dir / "package.json").read_bytes() == before


def test_generate_lone_negative_count_fails(project_dir):
    before = (project_dir / "package.json").read_bytes()
    result = _invoke("generate", "-5", "-p", str(project_dir), "-s")

    assert result.exit_code == 1
    assert "Invalid commit count" in result.output
    assert (project_dir / "package.json").read_bytes() == before


def test_generate_mistyped_flag_fails(project_dir):
    before = (project_dir / "package.json").read_bytes()
    result = _invoke("generate", "--dryrun", "-p", str(project_dir), "-s")

    assert result.exit_code == 1
    assert "Invalid release type" in result.output
    assert (project_dir / "package.json").read_bytes() == before


def test_generate_missing_manifest_still_prints_version(tmp_path):
    result = _invoke("generate", "beta", "3", "-p", str(tmp_path))

    assert result.exit_code == 0, result.output
    assert "not found or failed to update" in result.output
    assert _last_line(result.output) == f"{date_version(today())}-beta.3"


def test_current(project_dir):
    result = _invoke("current", "-p", str(project_dir))
    assert result.exit_code == 0
    assert result.output.strip() == "0.0.1"


def test_current_without_manifest(tmp_path):
    result = _invoke("current", "-p", str(tmp_path))
    assert result.exit_code == 1


def test_info_json(tmp_path):
    result = _invoke("info", "", "-p", str(tmp_path), "--json")

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["release_type"] == ""
    assert data["date_version"] == date_version(today())
    assert data["version"] == f"{date_version(today())}.0"


def test_info_lone_number_is_clean_override(tmp_path):
    result = _invoke("info", "5", "-p", str(tmp_path))

    assert result.exit_code == 0, result.output
    assert f"version: {date_version(today())}.5" in result.output
    assert "release_type:" in [line.strip() for line in result.output.splitlines()]
    assert "build_number: 5" in result.output
    assert "override_used: True" in result.output


def test_commit_count_outside_repository(tmp_path):
    result = _invoke("commit-count", "-p", str(tmp_path / "missing"), "--date", "2025-12-26")
    assert result.exit_code == 0
    assert result.output.strip() == "0"


def test_commit_count_bad_date(tmp_path):
    result = _invoke("commit-count", "-p", str(tmp_path), "--date", "26.12.2025")
    assert result.exit_code == 1


def test_config_file_defaults(tmp_path):
    cfg = tmp_path / "dv.yaml"
    cfg.write_text("default_release_type: nightly\nsilent: true\n")

    result = _invoke(
        "--config-file", str(cfg), "generate", "-p", str(tmp_path / "missing")
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{date_version(today())}-nightly.0"


def test_missing_config_file(tmp_path):
    result = _invoke("--config-file", str(tmp_path / "nope.yaml"), "version")
    assert result.exit_code == 10


def test_version_command():
    result = _invoke("version")
    assert result.exit_code == 0
    assert result.output.strip()

"""
Format Profile — Section labels and markers of an audit export.

Profiles are YAML files under profiles/. The bundled profile is
neu_web_audit; any other YAML file can be loaded by path.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import yaml

# Bundled profile directory
PROFILES_DIR = Path(__file__).parent / "profiles"

DEFAULT_PROFILE = "neu_web_audit"


@dataclass(frozen=True)
class FormatProfile:
    """Concrete syntax of one audit export format."""
    name: str = DEFAULT_PROFILE
    version: str = "1.0"
    description: str = ""

    # Section labels
    graduation_label: str = "Graduation Date:"
    catalog_label: str = "CATALOG YEAR:"
    major_label: str = "Major:"
    minor_label: str = "Minor:"
    nupath_label: str = "NUpath"
    course_list_label: str = "SELECT FROM:"
    earned_label: str = "EARNED:"
    attempted_label: str = "ATTEMPTED:"

    # Markers
    honors_marker: str = "(HON)"
    in_progress_marker: str = "IP"
    range_marker: str = "TO"
    connector_markers: tuple[str, ...] = ("OR", "AND")

    # strptime format of the graduation date
    date_format: str = "%m/%d/%y"


def parse_profile(data: dict) -> FormatProfile:
    """
    Build a profile from parsed YAML. Missing keys keep their defaults.

    Raises:
        ValueError: If the document or one of its sections is not a mapping
    """
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    defaults = FormatProfile()
    info = data.get("profile", {}) or {}
    sections = data.get("sections", {}) or {}
    markers = data.get("markers", {}) or {}
    formats = data.get("formats", {}) or {}
    for section in (info, sections, markers, formats):
        if not isinstance(section, dict):
            raise ValueError(f"Profile section must be a mapping, got {type(section).__name__}")

    connectors = markers.get("connectors", defaults.connector_markers)
    if isinstance(connectors, str):
        connectors = [connectors]

    return FormatProfile(
        name=info.get("name", defaults.name),
        version=str(info.get("version", defaults.version)),
        description=info.get("description", defaults.description),
        graduation_label=sections.get("graduation_date", defaults.graduation_label),
        catalog_label=sections.get("catalog_year", defaults.catalog_label),
        major_label=sections.get("major", defaults.major_label),
        minor_label=sections.get("minor", defaults.minor_label),
        nupath_label=sections.get("nupath", defaults.nupath_label),
        course_list_label=sections.get("course_list", defaults.course_list_label),
        earned_label=sections.get("earned", defaults.earned_label),
        attempted_label=sections.get("attempted", defaults.attempted_label),
        honors_marker=markers.get("honors", defaults.honors_marker),
        in_progress_marker=markers.get("in_progress", defaults.in_progress_marker),
        range_marker=markers.get("range", defaults.range_marker),
        connector_markers=tuple(connectors),
        date_format=formats.get("date", defaults.date_format),
    )


def load_profile(name: str = DEFAULT_PROFILE) -> FormatProfile:
    """
    Load a bundled profile by name.

    Raises:
        FileNotFoundError: If no bundled profile has this name
    """
    path = PROFILES_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")
    return load_profile_from_path(path)


def load_profile_from_path(path: Union[str, Path]) -> FormatProfile:
    """
    Load a profile from an arbitrary YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or not a profile mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Profile is not valid YAML: {path}: {e}") from e

    if data is None:
        data = {}

    return parse_profile(data)


def list_profiles() -> list[str]:
    """List bundled profile names."""
    return sorted(p.stem for p in PROFILES_DIR.glob("*.yaml"))


# Cache for loaded profiles
_cache: dict[str, FormatProfile] = {}


def get_profile(name_or_path: str = None, use_cache: bool = True) -> FormatProfile:
    """
    Get a profile by bundled name or YAML path, using cache by default.

    With no argument, NUAUDIT_PROFILE is consulted before falling
    back to the bundled default.
    """
    if name_or_path is None:
        name_or_path = os.environ.get("NUAUDIT_PROFILE", DEFAULT_PROFILE)

    if use_cache and name_or_path in _cache:
        return _cache[name_or_path]

    if name_or_path.endswith((".yaml", ".yml")):
        profile = load_profile_from_path(name_or_path)
    else:
        profile = load_profile(name_or_path)

    _cache[name_or_path] = profile
    return profile


def clear_cache() -> None:
    """Clear the profile cache."""
    _cache.clear()

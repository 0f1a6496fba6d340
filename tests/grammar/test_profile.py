"""
Tests for format profile loading.
"""

import pytest

from nuaudit.grammar.parser import parse_document
from nuaudit.grammar.profile import (
    DEFAULT_PROFILE,
    FormatProfile,
    get_profile,
    list_profiles,
    load_profile,
    load_profile_from_path,
)


class TestBundledProfile:
    """The shipped neu_web_audit profile."""

    def test_listed(self):
        assert DEFAULT_PROFILE in list_profiles()

    def test_matches_defaults(self):
        profile = load_profile(DEFAULT_PROFILE)
        defaults = FormatProfile()
        assert profile.graduation_label == defaults.graduation_label
        assert profile.in_progress_marker == "IP"
        assert profile.honors_marker == "(HON)"
        assert profile.date_format == "%m/%d/%y"

    def test_unknown_name(self):
        with pytest.raises(FileNotFoundError):
            load_profile("no_such_profile")


class TestProfileLoading:
    """Custom profiles from YAML files."""

    def test_missing_keys_fall_back(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("profile:\n  name: custom\nsections:\n  graduation_date: 'Expected Graduation:'\n")

        profile = load_profile_from_path(path)
        assert profile.name == "custom"
        assert profile.graduation_label == "Expected Graduation:"
        assert profile.catalog_label == "CATALOG YEAR:"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_profile_from_path(tmp_path / "missing.yaml")

    def test_get_profile_by_path_is_cached(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("profile:\n  name: custom\n")
        assert get_profile(str(path)) is get_profile(str(path))

    def test_env_selects_profile(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("profile:\n  name: from_env\n")
        monkeypatch.setenv("NUAUDIT_PROFILE", str(path))
        assert get_profile().name == "from_env"

    def test_custom_labels_drive_grammar(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("sections:\n  graduation_date: 'Expected Graduation:'\n")
        profile = load_profile_from_path(path)

        tree = parse_document("Expected Graduation: 12/15/23\n", profile)
        assert tree.children[0].date.text == "12/15/23"

    def test_custom_connectors(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("markers:\n  connectors: OU\n")
        assert load_profile_from_path(path).connector_markers == ("OU",)


class TestInvalidProfiles:
    """Files that are not profile mappings."""

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_profile_from_path(path)

    def test_section_not_mapping(self, tmp_path):
        path = tmp_path / "bad_section.yaml"
        path.write_text("sections:\n  - major\n")
        with pytest.raises(ValueError, match="section"):
            load_profile_from_path(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("sections: [unclosed\n")
        with pytest.raises(ValueError, match="not valid YAML"):
            load_profile_from_path(path)

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_profile_from_path(path) == FormatProfile()

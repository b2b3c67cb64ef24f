"""Tests for ProfileLoader."""

import tempfile
from pathlib import Path

import pytest

from profilekit.errors import ReadOnlyProfileError
from profilekit.profiles.loader import ProfileLoader, load_profile
from profilekit.profiles.memory import MemoryProfile


class TestProfileLoader:
    """Tests for ProfileLoader."""

    def test_load_and_save_profile(self):
        original = MemoryProfile(
            "app.ini",
            sections={
                "Window": {"Width": 800, "Maximized": False},
                "Recent": {"File1": "a.txt", "Ratio": 0.75},
            },
        )

        loader = ProfileLoader()

        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "nested" / "app.yaml"
            loader.save_file(original, filepath)

            loaded = loader.load_file(filepath)

            assert loaded.name == original.name
            assert loaded.read_only is False
            assert loaded.to_dict() == original.to_dict()

    def test_load_from_string(self):
        yaml_content = """
name: settings.ini
sections:
  Window:
    Width: 800
    Title: Main
  Options:
    Enabled: true
"""
        loader = ProfileLoader()
        profile = loader.load_from_string(yaml_content)

        assert profile.name == "settings.ini"
        assert profile.get_value("Window", "Width") == 800
        assert profile.get_typed_value("Options", "Enabled", bool) is True
        assert profile.get_section_names() == ["Window", "Options"]

    def test_load_read_only(self):
        yaml_content = """
name: locked
read_only: true
sections:
  A:
    x: 1
"""
        profile = ProfileLoader().load_from_string(yaml_content)

        assert profile.read_only is True
        assert profile.get_value("A", "x") == 1
        with pytest.raises(ReadOnlyProfileError):
            profile.set_value("A", "x", 2)

    def test_read_only_must_be_boolean(self):
        with pytest.raises(ValueError):
            ProfileLoader().load_from_string('name: p\nread_only: "false"\n')
        with pytest.raises(ValueError):
            ProfileLoader().load_from_string("name: p\nread_only: 1\n")

    def test_save_keeps_lock(self):
        frozen = MemoryProfile("p", sections={"A": {"x": 1}}).clone_read_only()
        loader = ProfileLoader()

        assert loader._profile_to_dict(frozen)["read_only"] is True

    def test_load_defaults(self):
        profile = ProfileLoader().load_from_string("")
        assert profile.name == profile.default_name
        assert profile.get_section_names() == []

    def test_null_values_are_skipped(self):
        profile = ProfileLoader().load_from_string("name: p\nsections:\n  A:\n    x: null\n    y: 2\n")
        assert profile.get_entry_names("A") == ["y"]

    def test_invalid_document(self):
        with pytest.raises(ValueError):
            ProfileLoader().load_from_string("- a\n- b\n")
        with pytest.raises(ValueError):
            ProfileLoader().load_from_string("name: p\nsections:\n  A: 3\n")

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ProfileLoader().load_file("/nonexistent/profile.yaml")


class TestLoadProfile:
    """Tests for load_profile convenience function."""

    def test_load_profile_function(self):
        yaml_content = """
name: convenience_test
sections:
  Main:
    Count: 3
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "test.yaml"
            filepath.write_text(yaml_content)

            profile = load_profile(filepath)
            assert profile.name == "convenience_test"
            assert profile.get_typed_value("Main", "Count", "uint8") == 3

"""Unit tests for reader adapters."""

from __future__ import annotations

import json
import sys
import tomllib
from pathlib import Path
from textwrap import dedent

import pytest

from closestdata.adapters.readers import (
    JsonReader,
    MarkerReader,
    PythonModuleReader,
    TomlReader,
)


@pytest.mark.readers
@pytest.mark.tier(1)
class TestJsonReader:
    """Tests for JsonReader."""

    def test_reads_whole_document(self, tmp_path: Path) -> None:
        """Without a key the whole document is returned."""
        path = tmp_path / ".babelrc"
        path.write_text(json.dumps({"presets": ["env"]}))

        assert JsonReader(".babelrc").read(str(path)) == {"presets": ["env"]}

    def test_reads_sub_key(self, tmp_path: Path) -> None:
        """A key selects one section of a manifest."""
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "app", "babel": {"presets": []}}))

        assert JsonReader("package.json", key="babel").read(str(path)) == {"presets": []}

    def test_reads_dotted_sub_key(self, tmp_path: Path) -> None:
        """Dotted keys descend through nested objects."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"tools": {"lint": {"strict": True}}}))

        assert JsonReader("settings.json", key="tools.lint").read(str(path)) == {
            "strict": True
        }

    def test_missing_key_is_no_data(self, tmp_path: Path) -> None:
        """A manifest without the section yields None."""
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "app"}))

        assert JsonReader("package.json", key="babel").read(str(path)) is None

    def test_key_through_non_object_is_no_data(self, tmp_path: Path) -> None:
        """A key path crossing a scalar yields None."""
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"babel": "not-an-object"}))

        assert JsonReader("package.json", key="babel.presets").read(str(path)) is None

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        """Decode errors propagate to the caller."""
        path = tmp_path / ".babelrc"
        path.write_text("{not json")

        with pytest.raises(json.JSONDecodeError):
            JsonReader(".babelrc").read(str(path))


@pytest.mark.readers
@pytest.mark.tier(1)
class TestTomlReader:
    """Tests for TomlReader."""

    def test_reads_tool_table(self, tmp_path: Path) -> None:
        """A dotted key selects a tool table in pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text(
            dedent(
                """\
                [project]
                name = "demo"

                [tool.black]
                line-length = 88
                """
            )
        )

        reader = TomlReader("pyproject.toml", key="tool.black")

        assert reader.read(str(path)) == {"line-length": 88}

    def test_missing_table_is_no_data(self, tmp_path: Path) -> None:
        """A pyproject.toml without the tool table yields None."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "demo"\n')

        assert TomlReader("pyproject.toml", key="tool.black").read(str(path)) is None

    def test_whole_document(self, tmp_path: Path) -> None:
        """Without a key the whole document is returned."""
        path = tmp_path / "conf.toml"
        path.write_text("a = 1\n")

        assert TomlReader("conf.toml").read(str(path)) == {"a": 1}

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Decode errors propagate to the caller."""
        path = tmp_path / "conf.toml"
        path.write_text("a = \n")

        with pytest.raises(tomllib.TOMLDecodeError):
            TomlReader("conf.toml").read(str(path))


@pytest.mark.readers
@pytest.mark.tier(1)
class TestPythonModuleReader:
    """Tests for PythonModuleReader."""

    def test_reads_attribute(self, tmp_path: Path) -> None:
        """The configured attribute is returned."""
        path = tmp_path / "settings.py"
        path.write_text('config = {"filename": "settings.py"}\n')

        reader = PythonModuleReader("settings.py", attribute="config")

        assert reader.read(str(path)) == {"filename": "settings.py"}

    def test_missing_attribute_is_no_data(self, tmp_path: Path) -> None:
        """A module without the attribute yields None."""
        path = tmp_path / "settings.py"
        path.write_text("other = 1\n")

        assert PythonModuleReader("settings.py", attribute="config").read(str(path)) is None

    def test_without_attribute_returns_public_names(self, tmp_path: Path) -> None:
        """Underscore names are left out of the namespace."""
        path = tmp_path / "settings.py"
        path.write_text("DEBUG = True\n_private = 1\n")

        assert PythonModuleReader("settings.py").read(str(path)) == {"DEBUG": True}

    def test_module_not_left_in_sys_modules(self, tmp_path: Path) -> None:
        """The throwaway module is removed after execution."""
        path = tmp_path / "settings.py"
        path.write_text("config = 1\n")
        PythonModuleReader("settings.py", attribute="config").read(str(path))

        assert not [m for m in sys.modules if m.startswith("_closestdata_config_")]

    def test_errors_in_module_propagate(self, tmp_path: Path) -> None:
        """Exceptions raised by the module reach the caller."""
        path = tmp_path / "settings.py"
        path.write_text("raise RuntimeError('bad config')\n")

        with pytest.raises(RuntimeError, match="bad config"):
            PythonModuleReader("settings.py").read(str(path))

    def test_syntax_errors_propagate(self, tmp_path: Path) -> None:
        """A module that does not compile raises SyntaxError."""
        path = tmp_path / "settings.py"
        path.write_text("def (\n")

        with pytest.raises(SyntaxError):
            PythonModuleReader("settings.py").read(str(path))


@pytest.mark.readers
@pytest.mark.tier(0)
class TestMarkerReader:
    """Tests for MarkerReader."""

    def test_returns_containing_directory(self, tmp_path: Path) -> None:
        """The data is the directory holding the marker."""
        (tmp_path / ".git").mkdir()

        assert MarkerReader(".git").read(str(tmp_path / ".git")) == tmp_path


@pytest.mark.readers
@pytest.mark.tier(0)
class TestReaderBasename:
    """Tests for basename validation shared by all reader adapters."""

    @pytest.mark.parametrize(
        "reader_type", [JsonReader, TomlReader, PythonModuleReader, MarkerReader]
    )
    def test_empty_basename_rejected(self, reader_type: type) -> None:
        """An empty basename would match the directory itself."""
        with pytest.raises(ValueError, match="basename cannot be empty"):
            reader_type("")

    def test_keyed_reader_with_empty_basename_rejected(self) -> None:
        """A key does not make an empty basename valid."""
        with pytest.raises(ValueError, match="basename cannot be empty"):
            JsonReader("", key="babel")

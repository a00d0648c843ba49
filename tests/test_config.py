from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from md2docx.config import (
    ConfigError,
    FormattingOptions,
    apply_overrides,
    build_config,
    load_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_dotfile(base: Path, body: str) -> Path:
    path = base / ".md2docx.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.md2docx]
        strip_bold = true
        strip_italic = true
        strip_code = false
        render_tables_as_text = true
        """,
    )

    assert load_config(tmp_path) == FormattingOptions(
        strip_bold=True, strip_italic=True, render_tables_as_text=True
    )


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [md2docx]
        strip_code = true
        """,
    )
    nested = tmp_path / "child"
    nested.mkdir()

    assert load_config(nested) == FormattingOptions(strip_code=True)


def test_dotfile_accepts_tool_table(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [tool.md2docx]
        strip_italic = true
        """,
    )

    assert load_config(tmp_path).strip_italic is True


def test_pyproject_without_table_falls_through_to_parent(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.md2docx]
        strip_bold = true
        """,
    )
    child = tmp_path / "child"
    child.mkdir()
    _write_pyproject(
        child,
        """
        [project]
        name = "other"
        """,
    )

    assert load_config(child).strip_bold is True


def test_invalid_toml_is_skipped(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("not = [valid", encoding="utf-8")

    assert load_config(tmp_path) == FormattingOptions()


def test_unknown_keys_raise(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.md2docx]
        strip_everything = true
        """,
    )

    with pytest.raises(ConfigError, match="strip_everything"):
        load_config(tmp_path)


def test_non_mapping_table_raises(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool]
        md2docx = 3
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_validate_config_rejects_non_booleans():
    with pytest.raises(ConfigError, match="strip_bold"):
        validate_config(FormattingOptions(strip_bold="yes"))


def test_apply_overrides_ignores_none():
    options = FormattingOptions(strip_bold=True)

    assert apply_overrides(options, strip_bold=None, strip_code=None) is options
    assert apply_overrides(options, strip_bold=False) == FormattingOptions()


def test_build_config_overrides_file_values(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.md2docx]
        strip_bold = true
        render_tables_as_text = true
        """,
    )

    options = build_config(tmp_path, strip_bold=False, strip_code=True)

    assert options == FormattingOptions(strip_code=True, render_tables_as_text=True)


def test_build_config_validates_file_values(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.md2docx]
        strip_code = "sometimes"
        """,
    )

    with pytest.raises(ConfigError):
        build_config(tmp_path)


def test_strips_all_markers():
    assert not FormattingOptions(strip_bold=True, strip_italic=True).strips_all_markers
    assert FormattingOptions(strip_bold=True, strip_italic=True, strip_code=True).strips_all_markers

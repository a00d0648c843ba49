"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path


@dataclass(frozen=True)
class FormattingOptions:
    """Formatting switches read at the moment of each conversion or copy action.

    Attributes:
        strip_bold: Emit bold spans as plain text and drop their markers.
        strip_italic: Emit italic spans as plain text and drop their markers.
        strip_code: Emit inline code spans as plain text and drop their backticks.
        render_tables_as_text: Collect pipe-delimited regions as tables. For the
            email target this re-flows them into fixed-width text.

    Examples:
        FormattingOptions(strip_bold=True, render_tables_as_text=True)
    """

    strip_bold: bool = False
    strip_italic: bool = False
    strip_code: bool = False
    render_tables_as_text: bool = False

    @property
    def strips_all_markers(self) -> bool:
        return self.strip_bold and self.strip_italic and self.strip_code


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`strip_bold` must be a boolean")
    """


_OPTION_NAMES = tuple(option.name for option in fields(FormattingOptions))
_MISSING = object()


def load_config(search_path: Path) -> FormattingOptions:
    """Load formatting options from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.md2docx]`` table from `pyproject.toml` and the ``[md2docx]`` or
    ``[tool.md2docx]`` table from `.md2docx.toml` when present. TOML files that
    cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        FormattingOptions: Loaded options, or defaults when no configuration exists.

    Raises:
        ConfigError: If a table is present but not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "md2docx")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".md2docx.toml",
            table_paths=[("md2docx",), ("tool", "md2docx")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return FormattingOptions()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> FormattingOptions | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> FormattingOptions:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    unknown = sorted(set(raw_config) - set(_OPTION_NAMES))
    if unknown:
        raise ConfigError(
            f"Unsupported `[{table_display}]` keys in {config_file}: {', '.join(unknown)}"
        )

    return FormattingOptions(**raw_config)


def validate_config(options: FormattingOptions) -> None:
    """Validate a `FormattingOptions` instance.

    Raises:
        ConfigError: If any switch is not a boolean.
    """
    for name in _OPTION_NAMES:
        if not isinstance(getattr(options, name), bool):
            raise ConfigError(f"`{name}` must be a boolean")


def apply_overrides(options: FormattingOptions, **overrides: object) -> FormattingOptions:
    """Apply override values to `FormattingOptions`.

    Args:
        options: Base options to update.
        overrides: Override values keyed by option name; values set to None are
            ignored.

    Returns:
        FormattingOptions: New options with the overrides applied, or `options`
        itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `FormattingOptions`.

    Examples:
        updated = apply_overrides(options, strip_bold=True, strip_code=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return options
    return replace(options, **changes)


def build_config(search_path: Path, **overrides: object) -> FormattingOptions:
    """Load, override, and validate formatting options.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        options = build_config(Path.cwd(), render_tables_as_text=True)
    """
    options = load_config(search_path)
    options = apply_overrides(options, **overrides)
    validate_config(options)
    return options

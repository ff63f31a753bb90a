"""Config utility for persistent fileconverter settings.

Provides functions to read and write settings in
~/.config/fileconverter/config.toml (or $XDG_CONFIG_HOME/fileconverter). Uses
tomli/tomli-w for TOML parsing and writing.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, Iterable, Tuple, TypeVar, cast

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "fileconverter"
CONFIG_FILE = CONFIG_DIR / "config.toml"

OPTICAL_DRIVES_KEY = "drives.optical"

T = TypeVar("T")

_TRUTHY = {"1", "true", "yes", "on"}


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="drives.optical" will attempt
    ``data["drives"]["optical"]`` returning None if any level is missing.
    """

    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "FILECONVERTER_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "drives.optical" -> "FILECONVERTER_DRIVES_OPTICAL".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce_env(env_val: str, default: T) -> T:
    if isinstance(default, bool):
        return cast(T, env_val.lower() in _TRUTHY)
    if isinstance(default, int):
        try:
            return cast(T, int(env_val))
        except ValueError:
            return default
    if isinstance(default, float):
        with contextlib.suppress(ValueError):
            return cast(T, float(env_val))
        return default
    return cast(T, env_val)


def _coerce_file(file_val: Any, default: T) -> T:
    if isinstance(default, bool):
        if isinstance(file_val, bool):
            return cast(T, file_val)
        if isinstance(file_val, str):
            return cast(T, file_val.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(file_val, int):
            return cast(T, file_val)
        if isinstance(file_val, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(file_val))
        return default
    if isinstance(default, float):
        if isinstance(file_val, (int, float)):
            return cast(T, float(file_val))
        if isinstance(file_val, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(file_val))
        return default
    return cast(T, file_val)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"drives.optical"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value, coerced to the type of *default* when possible.
    """

    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce_env(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce_file(file_val, default)

    return default


def set_setting(key: str, value: Any) -> None:
    """Persist *value* under the dotted *key* in config.toml."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    *parents, leaf = key.split(".")
    current = data
    for part in parents:
        current = current.setdefault(part, {})
    current[leaf] = value
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def parse_drive_letters(value: Any) -> Tuple[str, ...]:
    """Turn ``"E,F"``, ``"EF"`` or ``["E", "F"]`` into ``("E", "F")``.

    Anything that is not a letter is ignored. Order is kept, duplicates dropped.
    Values that are neither a string nor a list (e.g. ``optical = 5`` in the
    config file) yield no letters.
    """
    if isinstance(value, str):
        chars = value
    elif isinstance(value, (list, tuple, set, frozenset)):
        chars = "".join(str(item) for item in value)
    else:
        return ()
    letters = [char for char in chars if char.isascii() and char.isalpha()]
    return tuple(dict.fromkeys(letters))


def get_optical_drive_letters(cli_value: str | None = None) -> Tuple[str, ...]:
    """Return the configured optical drive letters (empty when unset)."""
    raw = resolve_setting(OPTICAL_DRIVES_KEY, default="", cli_value=cli_value)
    return parse_drive_letters(raw)


def set_optical_drive_letters(letters: str | Iterable[str]) -> Tuple[str, ...]:
    """Store the optical drive letters in config.toml and return them."""
    parsed = parse_drive_letters(letters)
    set_setting(OPTICAL_DRIVES_KEY, list(parsed))
    return parsed

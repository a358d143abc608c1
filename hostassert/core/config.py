# SPDX-License-Identifier: MIT
"""Check definition loading.

A check file is TOML holding an array of ``checks`` tables:

    [[checks]]
    type = "file-exists"
    label = "hosts file"

    [checks.args]
    name = "/etc/hosts"

    [[checks]]
    type = "ulimit"
    args = { item = "nofile", limit = 4096, type = "soft" }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_list, get_str

__all__ = [
    "CheckDefinition",
    "ConfigError",
    "parse_definitions",
    "load_definitions",
]


def _empty_args() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a check file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class CheckDefinition:
    """One declared check: a type name plus its raw arguments.

    Attributes:
        type: Registered checker type name
        args: Raw arguments (read-only)
        label: Optional display label
    """

    type: str
    args: Mapping[str, object] = field(default_factory=_empty_args)
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))

    @property
    def display_name(self) -> str:
        return self.label or self.type


def parse_definitions(
    data: Mapping[str, object], path: Path | None = None
) -> Result[tuple[CheckDefinition, ...], ConfigError]:
    """Build check definitions from a parsed TOML document."""
    if "checks" not in data:
        return Ok(())

    entries = get_list(data, "checks")
    if entries is None:
        return Err(ConfigError("'checks' must be an array of tables", path=path))

    definitions: list[CheckDefinition] = []
    for index, entry in enumerate(entries):
        table = as_str_dict(entry)
        if table is None:
            return Err(ConfigError(f"checks[{index}]: must be a table", path=path))

        type_name = get_str(table, "type")
        if type_name is None:
            return Err(ConfigError(f"checks[{index}]: missing 'type'", path=path))

        args: StrDict = {}
        if "args" in table:
            raw_args = as_str_dict(table["args"])
            if raw_args is None:
                return Err(
                    ConfigError(f"checks[{index}] ({type_name}): 'args' must be a table", path=path)
                )
            args = raw_args

        definitions.append(
            CheckDefinition(type=type_name, args=args, label=get_str(table, "label"))
        )

    return Ok(tuple(definitions))


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Check file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Check file is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading check file: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Check file root must be a TOML table", path=path))
    return Ok(data)


def load_definitions(path: Path) -> Result[tuple[CheckDefinition, ...], ConfigError]:
    """Load check definitions from a TOML file.

    Args:
        path: Path to the check file

    Returns:
        Ok(definitions) in file order, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return parse_definitions(result.value, path=path)

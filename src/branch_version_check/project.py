"""Read the declared project version from ``pyproject.toml``."""

import logging
import pathlib
import tomllib
import typing

from branch_version_check import errors

LOGGER = logging.getLogger(__name__)


def _table_value(data: typing.Any, *keys: str) -> typing.Any:
    """Walk nested TOML tables, returning None when a level is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def read_project_version(path: pathlib.Path) -> str:
    """Return the version declared in a ``pyproject.toml`` file.

    Looks at ``[project].version`` first and ``[tool.poetry].version``
    second.

    Raises:
        TaskExecutionError: If the file can not be read or parsed, or
            declares no static version.

    """
    try:
        with path.open('rb') as handle:
            data = tomllib.load(handle)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise errors.TaskExecutionError(
            f'Unable to read project version from {path}: {exc}'
        ) from exc

    version = _table_value(data, 'project', 'version')
    if version is None:
        version = _table_value(data, 'tool', 'poetry', 'version')
    if not isinstance(version, str):
        raise errors.TaskExecutionError(f'No version declared in {path}')
    LOGGER.debug('Read project version %s from %s', version, path)
    return version

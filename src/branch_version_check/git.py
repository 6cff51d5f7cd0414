"""Git operations used to discover the branch being built."""

import asyncio
import logging
import pathlib
import typing

from branch_version_check import errors

LOGGER = logging.getLogger(__name__)


class BranchNameProvider(typing.Protocol):
    """Async callable returning the name of the current branch."""

    async def __call__(self) -> str: ...


async def _run_git_command(
    command: list[str], cwd: pathlib.Path
) -> tuple[int, str, str]:
    """Run a git command and return its exit code, stdout and stderr."""
    LOGGER.debug('Running %s in %s', ' '.join(command), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise errors.TaskExecutionError(
            f'Unable to run {command[0]}: {exc}'
        ) from exc
    stdout, stderr = await process.communicate()
    return (
        process.returncode,
        stdout.decode('utf-8', errors='replace'),
        stderr.decode('utf-8', errors='replace'),
    )


async def get_current_branch(
    working_directory: pathlib.Path, executable: str = 'git'
) -> str:
    """Return the short name of the branch HEAD points to.

    The output is returned as git wrote it, trailing newline included.

    Raises:
        TaskExecutionError: If git is missing or HEAD is not a branch,
            e.g. a detached checkout or a directory outside a repository.

    """
    returncode, stdout, stderr = await _run_git_command(
        [executable, 'symbolic-ref', '--short', 'HEAD'], working_directory
    )
    if returncode != 0:
        raise errors.TaskExecutionError(
            f'git symbolic-ref failed with exit code {returncode}: '
            f'{stderr.strip()}'
        )
    LOGGER.debug('Current branch: %s', stdout.strip())
    return stdout

"""Command line interface for the branch version check.

Exit codes distinguish a failed check from a check that could not run:
``0`` on success or when skipped, ``1`` when the project version does not
match the branch, ``3`` when configuration, git or the output file fail.
"""

import argparse
import asyncio
import logging
import pathlib
import tomllib
import typing

import pydantic

from branch_version_check import errors, models, task, version

LOGGER = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_VERIFICATION_FAILURE = 1
EXIT_EXECUTION_FAILURE = 3

# Maps argparse destinations to configuration fields
ARGUMENT_FIELDS = {
    'branch': 'branch_name',
    'output': 'output_file',
    'project_dir': 'project_dir',
    'project_version': 'version',
    'pyproject': 'pyproject',
    'skip': 'skip',
}


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='branch-version-check',
        description=task.CheckExpectedBranchVersionTask.description,
    )
    parser.add_argument(
        '-c',
        '--config',
        type=pathlib.Path,
        help='TOML configuration file',
    )
    parser.add_argument(
        '--project-version',
        help='Project version, defaults to the version in pyproject.toml',
    )
    parser.add_argument(
        '--branch',
        help='Branch name, defaults to the branch HEAD points to',
    )
    parser.add_argument(
        '--output',
        type=pathlib.Path,
        help='Result file, defaults to build/check-expected-branch-version',
    )
    parser.add_argument(
        '--project-dir',
        type=pathlib.Path,
        help='Project directory, defaults to the working directory',
    )
    parser.add_argument(
        '--pyproject',
        type=pathlib.Path,
        help='pyproject.toml to read the version from',
    )
    parser.add_argument(
        '--git-executable',
        help='git executable used to discover the branch',
    )
    parser.add_argument(
        '--skip',
        nargs='?',
        const='',
        metavar='VALUE',
        help='Bypass the check unless VALUE is "false"',
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument(
        '-V', '--version', action='version', version=version.version
    )
    return parser.parse_args(args)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(levelname)-8s %(name)s: %(message)s',
    )


def load_configuration(args: argparse.Namespace) -> models.Configuration:
    """Build the configuration from the optional file and CLI overrides.

    Raises:
        OSError: The configuration file can not be read.
        UnicodeDecodeError: The configuration file is not UTF-8.
        tomllib.TOMLDecodeError: The configuration file is not valid TOML.
        pydantic.ValidationError: The merged values are invalid.

    """
    data: dict[str, typing.Any] = {}
    if args.config:
        with args.config.open('rb') as handle:
            data = tomllib.load(handle)
    for argument, field in ARGUMENT_FIELDS.items():
        value = getattr(args, argument)
        if value is not None:
            data[field] = value
    if args.git_executable:
        git = data.get('git', {})
        if isinstance(git, dict):
            data['git'] = {**git, 'executable': args.git_executable}
    return models.Configuration.model_validate(data)


def main(args: list[str] | None = None) -> int:
    parsed = parse_args(args)
    configure_logging(parsed.verbose)

    try:
        configuration = load_configuration(parsed)
    except (
        OSError,
        UnicodeDecodeError,
        tomllib.TOMLDecodeError,
        pydantic.ValidationError,
    ) as err:
        LOGGER.error('Invalid configuration: %s', err)
        return EXIT_EXECUTION_FAILURE

    check_task = task.CheckExpectedBranchVersionTask(
        configuration, parsed.verbose
    )
    try:
        asyncio.run(check_task.run())
    except errors.VerificationError as err:
        LOGGER.error('%s', err)
        return EXIT_VERIFICATION_FAILURE
    except errors.TaskExecutionError as err:
        LOGGER.error(
            'Unable to complete %s: %s',
            check_task.name,
            err,
            exc_info=parsed.verbose,
        )
        return EXIT_EXECUTION_FAILURE
    return EXIT_SUCCESS

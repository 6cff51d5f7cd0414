"""Task that runs the branch version check and persists its result.

The task resolves the project version and branch name, runs the checker,
writes the result message to the output file and only then signals a
mismatch, so the artifact exists on every outcome.
"""

import functools
import typing

from branch_version_check import (
    checker,
    errors,
    git,
    mixins,
    models,
    project,
)

VersionProvider = typing.Callable[[], str]


class CheckExpectedBranchVersionTask(mixins.LoggerMixin):
    """Check if the project version matches the branch version.

    Version and branch name come from the configuration when set,
    otherwise from ``pyproject.toml`` and git. Both providers can be
    replaced, which keeps the task testable without a repository.
    """

    name = 'check-expected-branch-version'
    description = 'Check if the project version matches the branch version'

    def __init__(
        self,
        configuration: models.Configuration,
        verbose: bool = False,
        branch_provider: git.BranchNameProvider | None = None,
        version_provider: VersionProvider | None = None,
    ) -> None:
        super().__init__(verbose)
        self._set_task_logger(self.name)
        self.configuration = configuration
        self.branch_provider = branch_provider or functools.partial(
            git.get_current_branch,
            configuration.project_dir,
            configuration.git.executable,
        )
        self.version_provider = version_provider or functools.partial(
            project.read_project_version, configuration.pyproject
        )

    @staticmethod
    def should_run(skip_flag: str | None) -> bool:
        """Return True when the skip flag is absent or ``false``.

        Any other value, the empty string included, bypasses the check.
        """
        return skip_flag is None or skip_flag.lower() == 'false'

    async def run(self) -> models.CheckResult | None:
        """Run the check unless the configured skip flag bypasses it.

        Returns:
            The check result, or None when the task was bypassed.

        """
        if not self.should_run(self.configuration.skip):
            self.logger.info(
                'Skipping %s, skip flag is %r',
                self.name,
                self.configuration.skip,
            )
            return None
        return await self.execute()

    async def execute(self) -> models.CheckResult:
        """Run the check and write its message to the output file.

        Raises:
            VerificationError: The project version does not match the
                branch version. Raised after the output is written.
            TaskExecutionError: An input could not be resolved or the
                output could not be written.

        """
        version = self._resolve_version()
        branch_name = await self._resolve_branch_name()
        result = checker.check(version, branch_name)
        self._write_output(result.message)

        match result.outcome:
            case models.CheckOutcome.skipped:
                self.logger.warning('%s', result.message)
            case models.CheckOutcome.matched:
                self.logger.info(
                    'Project version %s matches branch %s',
                    version,
                    branch_name.strip(),
                )
            case models.CheckOutcome.mismatched:
                raise errors.VerificationError(result)
        return result

    def _resolve_version(self) -> str:
        if self.configuration.version is not None:
            return self.configuration.version
        return self.version_provider()

    async def _resolve_branch_name(self) -> str:
        if self.configuration.branch_name is not None:
            return self.configuration.branch_name
        return await self.branch_provider()

    def _write_output(self, content: str) -> None:
        path = self.configuration.output_file
        self.logger.debug('Writing result to %s', path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as exc:
            raise errors.TaskExecutionError(
                f'Unable to write {path}: {exc}'
            ) from exc

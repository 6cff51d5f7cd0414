"""Configuration models with Pydantic validation.

Values not supplied explicitly fall back to environment variables so the
check can be driven from CI without a configuration file. Paths that
depend on the project directory are derived after validation.
"""

import os
import pathlib
import typing

import pydantic

DEFAULT_OUTPUT_FILE = pathlib.Path('build') / 'check-expected-branch-version'

ENVIRONMENT_VARIABLES = {
    'branch_name': 'BRANCH_NAME',
    'skip': 'SKIP_CHECK_EXPECTED_BRANCH_VERSION',
    'version': 'PROJECT_VERSION',
}


class GitConfiguration(pydantic.BaseModel):
    """Git configuration used to discover the current branch."""

    executable: str = 'git'


class Configuration(pydantic.BaseModel):
    """Main application configuration.

    ``version`` and ``branch_name`` override the values that would
    otherwise be read from ``pyproject.toml`` and git. ``skip`` holds the
    raw bypass flag; only an absent value or ``false`` lets the check run.
    """

    branch_name: str | None = None
    git: GitConfiguration = pydantic.Field(default_factory=GitConfiguration)
    output_file: pathlib.Path | None = None
    project_dir: pathlib.Path = pathlib.Path('.')
    pyproject: pathlib.Path | None = None
    skip: str | None = None
    version: str | None = None

    @pydantic.model_validator(mode='before')
    @classmethod
    def _set_values_from_env(cls, data: typing.Any) -> typing.Any:
        if isinstance(data, dict):
            for field, env_var in ENVIRONMENT_VARIABLES.items():
                if data.get(field) is None and env_var in os.environ:
                    data[field] = os.environ[env_var]
        return data

    @pydantic.field_validator('skip', mode='before')
    @classmethod
    def _skip_from_bool(cls, value: typing.Any) -> typing.Any:
        # TOML booleans map onto the flag's literal values
        if isinstance(value, bool):
            return str(value).lower()
        return value

    @pydantic.model_validator(mode='after')
    def _set_project_paths(self) -> typing.Self:
        if self.output_file is None:
            self.output_file = self.project_dir / DEFAULT_OUTPUT_FILE
        if self.pyproject is None:
            self.pyproject = self.project_dir / 'pyproject.toml'
        return self

"""Branch version check result models.

A check produces exactly one of three outcomes. Each result knows the
text that is written to the output artifact for it, so the task that
persists results never formats messages itself.
"""

import enum
import typing

import pydantic


class CheckOutcome(enum.StrEnum):
    """Terminal outcomes of a branch version check."""

    skipped = 'skipped'
    matched = 'matched'
    mismatched = 'mismatched'


class Skipped(pydantic.BaseModel):
    """The branch is not a ``major.minor.x`` release branch.

    Not a failure: unversioned branches such as ``main`` are expected.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    outcome: typing.Literal[CheckOutcome.skipped] = CheckOutcome.skipped
    branch_name: str

    @property
    def reason(self) -> str:
        return (
            f'Branch version [{self.branch_name}] does not match *.x, '
            f'ignoring'
        )

    @property
    def message(self) -> str:
        return self.reason


class Matched(pydantic.BaseModel):
    """Project version agrees with the branch on major and minor."""

    model_config = pydantic.ConfigDict(frozen=True)

    outcome: typing.Literal[CheckOutcome.matched] = CheckOutcome.matched
    version: str

    @property
    def message(self) -> str:
        return self.version


class Mismatched(pydantic.BaseModel):
    """Project version disagrees with the release branch."""

    model_config = pydantic.ConfigDict(frozen=True)

    outcome: typing.Literal[CheckOutcome.mismatched] = (
        CheckOutcome.mismatched
    )
    version: str
    branch_version: str

    @property
    def message(self) -> str:
        return (
            f'Project version [{self.version}] does not match branch '
            f'version [{self.branch_version}]. Please verify that the '
            f'branch contains the right version.'
        )


CheckResult = typing.Annotated[
    Skipped | Matched | Mismatched, pydantic.Field(discriminator='outcome')
]

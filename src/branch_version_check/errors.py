"""Exceptions raised while checking the branch version.

A :class:`VerificationError` means the check ran and the project failed
it. A :class:`TaskExecutionError` means the check could not complete.
"""

from branch_version_check import models


class BranchVersionCheckError(Exception):
    """Base class for branch version check errors."""


class VerificationError(BranchVersionCheckError):
    """The project version does not match the release branch."""

    def __init__(self, result: models.Mismatched) -> None:
        super().__init__(result.message)
        self.result = result


class TaskExecutionError(BranchVersionCheckError):
    """Infrastructure fault such as an unwritable output file."""

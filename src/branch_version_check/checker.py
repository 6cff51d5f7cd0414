"""Compare a project version with the version implied by a branch name.

Release maintenance branches are named ``major.minor.x``. Any other
branch name is ignored. On a release branch the project version must
share the branch's major and minor segments, compared as literal
strings so ``6.3`` and ``06.3`` are different versions.
"""

import logging
import re

from branch_version_check import models

LOGGER = logging.getLogger(__name__)

BRANCH_VERSION_PATTERN = re.compile(r'^[0-9]+\.[0-9]+\.x$')


def check(version: str, branch_name: str) -> models.CheckResult:
    """Check ``version`` against ``branch_name``.

    Args:
        version: The declared project version, e.g. ``6.3.1``.
        branch_name: The current branch, surrounding whitespace allowed.

    Returns:
        ``Skipped`` when the branch is not a release branch, otherwise
        ``Matched`` or ``Mismatched``.

    """
    branch_version = branch_name.strip()
    if not BRANCH_VERSION_PATTERN.fullmatch(branch_version):
        return models.Skipped(branch_name=branch_version)
    if not versions_match(version, branch_version):
        return models.Mismatched(
            version=version, branch_version=branch_version
        )
    return models.Matched(version=version)


def versions_match(project_version: str, branch_version: str) -> bool:
    """Return True when both share the first two dot-separated segments.

    A value with fewer than two segments never matches.
    """
    project_parts = project_version.split('.')
    branch_parts = branch_version.split('.')
    if len(project_parts) < 2 or len(branch_parts) < 2:
        LOGGER.debug(
            'Not enough segments to compare %r with %r',
            project_version,
            branch_version,
        )
        return False
    return project_parts[:2] == branch_parts[:2]

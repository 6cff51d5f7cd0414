from branch_version_check.models.check import (
    CheckOutcome,
    CheckResult,
    Matched,
    Mismatched,
    Skipped,
)
from branch_version_check.models.configuration import (
    Configuration,
    GitConfiguration,
)

__all__ = [
    'CheckOutcome',
    'CheckResult',
    'Configuration',
    'GitConfiguration',
    'Matched',
    'Mismatched',
    'Skipped',
]

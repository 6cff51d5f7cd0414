"""Tests for configuration and result models."""

import os
import pathlib

import pydantic

from branch_version_check import models
from tests import base


class ConfigurationTestCase(base.TestCase):
    """Test cases for the Configuration model."""

    def test_defaults(self) -> None:
        configuration = models.Configuration()
        self.assertIsNone(configuration.version)
        self.assertIsNone(configuration.branch_name)
        self.assertIsNone(configuration.skip)
        self.assertEqual(configuration.git.executable, 'git')
        self.assertEqual(
            configuration.output_file,
            pathlib.Path('build/check-expected-branch-version'),
        )
        self.assertEqual(
            configuration.pyproject, pathlib.Path('pyproject.toml')
        )

    def test_paths_derived_from_project_dir(self) -> None:
        configuration = models.Configuration(project_dir='/src/example')
        self.assertEqual(
            configuration.output_file,
            pathlib.Path('/src/example/build/check-expected-branch-version'),
        )
        self.assertEqual(
            configuration.pyproject,
            pathlib.Path('/src/example/pyproject.toml'),
        )

    def test_paths_derived_with_model_validate(self) -> None:
        """Test derived paths are set when loading from a mapping."""
        configuration = models.Configuration.model_validate(
            {'project_dir': '/src/example'}
        )
        self.assertEqual(
            configuration.pyproject,
            pathlib.Path('/src/example/pyproject.toml'),
        )

    def test_explicit_paths_preserved(self) -> None:
        configuration = models.Configuration(
            project_dir='/src/example', output_file='/tmp/result.txt'
        )
        self.assertEqual(
            configuration.output_file, pathlib.Path('/tmp/result.txt')
        )

    def test_values_from_environment(self) -> None:
        os.environ.update(
            {
                'BRANCH_NAME': '6.3.x',
                'PROJECT_VERSION': '6.3.1',
                'SKIP_CHECK_EXPECTED_BRANCH_VERSION': 'true',
            }
        )
        configuration = models.Configuration()
        self.assertEqual(configuration.branch_name, '6.3.x')
        self.assertEqual(configuration.version, '6.3.1')
        self.assertEqual(configuration.skip, 'true')

    def test_explicit_values_win_over_environment(self) -> None:
        os.environ['PROJECT_VERSION'] = '6.3.1'
        configuration = models.Configuration(version='7.0.0')
        self.assertEqual(configuration.version, '7.0.0')

    def test_git_section(self) -> None:
        configuration = models.Configuration.model_validate(
            {'git': {'executable': '/usr/bin/git'}}
        )
        self.assertEqual(configuration.git.executable, '/usr/bin/git')

    def test_invalid_value_raises(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            models.Configuration(git={'executable': ['git']})


class CheckResultTestCase(base.TestCase):
    """Test cases for the check result models."""

    def test_discriminated_by_outcome(self) -> None:
        adapter = pydantic.TypeAdapter(models.CheckResult)
        result = adapter.validate_python(
            {
                'outcome': 'mismatched',
                'version': '6.4.0',
                'branch_version': '6.3.x',
            }
        )
        self.assertIsInstance(result, models.Mismatched)

    def test_results_are_frozen(self) -> None:
        result = models.Matched(version='6.3.1')
        with self.assertRaises(pydantic.ValidationError):
            result.version = '6.4.0'

    def test_outcomes(self) -> None:
        self.assertEqual(
            models.Skipped(branch_name='main').outcome,
            models.CheckOutcome.skipped,
        )
        self.assertEqual(
            models.Matched(version='1.0.0').outcome, 'matched'
        )


class SkipFlagTestCase(base.TestCase):
    """Test cases for the skip flag field."""

    def test_boolean_values_become_literals(self) -> None:
        self.assertEqual(models.Configuration(skip=False).skip, 'false')
        self.assertEqual(models.Configuration(skip=True).skip, 'true')

    def test_string_values_preserved(self) -> None:
        self.assertEqual(models.Configuration(skip='FALSE').skip, 'FALSE')
        self.assertEqual(models.Configuration(skip='').skip, '')

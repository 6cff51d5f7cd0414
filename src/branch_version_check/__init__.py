"""Verify a project's version matches its release branch naming."""

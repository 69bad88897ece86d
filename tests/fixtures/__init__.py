"""Shared test fixtures package.

Sample groups and foreign names used across the unit tests. Fixtures are
registered by importing them into ``tests/conftest.py``.
"""

"""Shared helpers for the test suite (no tests here)."""

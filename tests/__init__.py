"""Test suite for jcheck."""

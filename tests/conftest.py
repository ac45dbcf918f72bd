"""Shared pytest configuration for context-tree tests."""

pytest_plugins = ["context_tree.integrations.pytest_plugin"]

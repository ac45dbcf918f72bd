from context_tree.integrations.pytest_plugin.plugin import (
    context_root,
    context_tree_settings,
)

__all__ = ["context_root", "context_tree_settings"]

from context_tree.context import Context, ContextResolver
from context_tree.exceptions import (
    ContextNotFoundError,
    ContextTreeConfigurationError,
    ContextTreeError,
    MissingRequiredContextsError,
)
from context_tree.node import ContextNode, Node
from context_tree.policies import MissingContextsPolicy
from context_tree.required import check_required, required_contexts, requires
from context_tree.resolvers import ContextResolvers, resolvers
from context_tree.settings import ContextTreeSettings, get_settings

__all__ = [
    "Context",
    "ContextNode",
    "ContextNotFoundError",
    "ContextResolver",
    "ContextResolvers",
    "ContextTreeConfigurationError",
    "ContextTreeError",
    "ContextTreeSettings",
    "MissingContextsPolicy",
    "MissingRequiredContextsError",
    "Node",
    "check_required",
    "get_settings",
    "required_contexts",
    "requires",
    "resolvers",
]

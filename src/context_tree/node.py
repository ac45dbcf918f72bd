from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeAlias

from context_tree.context import Context
from context_tree.resolvers import ContextResolvers

ParentContext: TypeAlias = "ContextNode | Sequence[ContextNode] | None"


class ContextNode(Protocol):
    """Describe the attributes the resolution engine reads from a node.

    Every attribute is optional at runtime: a node without ``context`` is a root,
    a node without ``context_type`` satisfies no key by itself, and a node
    without ``context_resolvers`` supplies no resolvers. Application classes do
    not need to inherit from this protocol.
    """

    context: ParentContext
    context_type: Context[Any] | None
    context_resolvers: ContextResolvers | None


class Node:
    """Plain node implementation for scripts, tests, and ad hoc scopes.

    Examples:
        .. code-block:: python

            root = Node(context_resolvers=ContextResolvers.of(Config.resolves_to(load_config)))
            request = Node(context=root, context_type=Request)
            handler = Node(context=[request, root])

    """

    def __init__(
        self,
        context: ParentContext = None,
        context_type: Context[Any] | None = None,
        context_resolvers: ContextResolvers | None = None,
    ) -> None:
        self.context = context
        self.context_type = context_type
        self.context_resolvers = context_resolvers

    def __repr__(self) -> str:
        context_type = self.context_type.name if self.context_type is not None else None
        return f"Node(context_type={context_type!r})"


__all__ = ["ContextNode", "Node", "ParentContext"]

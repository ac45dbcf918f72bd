from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from context_tree.context import Context


class ContextTreeError(Exception):
    """Represent a base class for all context-tree failures.

    Catch this type when you want to handle any context-tree error path without
    matching each concrete exception class individually.
    """


class ContextTreeConfigurationError(ContextTreeError):
    """Signal an invalid argument passed to a resolver table or declaration.

    Raised by ``ContextResolvers.add`` when the argument is not a
    ``ContextResolver``, by ``remove``/``find`` when the key is not a
    ``Context``, and by ``requires`` when a declared key is not a ``Context``.
    """


class ContextNotFoundError(ContextTreeError):
    """Signal that no node reachable from the start node supplies a context.

    Raised by ``Context.resolve``. Use ``Context.resolve_maybe`` instead when
    absence is an expected outcome.

    Typical fixes include registering a resolver on an ancestor
    (``node.context_resolvers.add(key.resolves_to(...))``) or declaring
    ``context_type = key`` on the ancestor that should satisfy it.
    """

    def __init__(self, context: Context[Any]) -> None:
        self.context = context
        super().__init__(f"Cannot find context {context.name}")


class MissingRequiredContextsError(ContextTreeError):
    """Signal that declared required contexts do not resolve from an instance.

    Raised by ``check_required`` under ``MissingContextsPolicy.RAISE``. The
    ``missing`` attribute keeps the unresolved keys in declaration order.
    """

    def __init__(self, owner_name: str, missing: Sequence[Context[Any]]) -> None:
        self.owner_name = owner_name
        self.missing = tuple(missing)
        super().__init__(format_missing_message(owner_name, self.missing))


def format_missing_message(owner_name: str, missing: Sequence[Context[Any]]) -> str:
    """Build the diagnostic text shared by the raising and logging policies."""
    names = ", ".join(context.name for context in missing)
    return f"Missing required contexts for instance of class '{owner_name}': {names}"

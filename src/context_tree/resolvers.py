from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from context_tree.context import Context, ContextResolver
from context_tree.exceptions import ContextTreeConfigurationError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ContextResolvers:
    """Hold the resolvers a single node supplies, keyed by context identity.

    The table is mutated in place and may change between resolutions. Adding a
    resolver for a key that already has one replaces it. Lookups walk the
    requested key's lineage, so a resolver registered for a broad key also
    serves every partial key derived from it, while a resolver registered for
    the narrow key itself wins over the broad one.
    """

    def __init__(self) -> None:
        self._resolvers: dict[Context[Any], Callable[[], Any]] = {}

    @classmethod
    def of(cls, *resolvers: ContextResolver[Any]) -> ContextResolvers:
        """Build a table from ``key.resolves_to(...)`` pairs.

        Later pairs for the same key replace earlier ones.
        """
        context_resolvers = cls()
        for resolver in resolvers:
            context_resolvers.add(resolver)
        return context_resolvers

    def __len__(self) -> int:
        return len(self._resolvers)

    def __contains__(self, context: object) -> bool:
        return context in self._resolvers

    def __repr__(self) -> str:
        names = ", ".join(context.name for context in self._resolvers)
        return f"ContextResolvers([{names}])"

    def add(self, resolver: ContextResolver[Any]) -> None:
        """Register ``resolver``, replacing any resolver for the same key.

        Args:
            resolver: Pair created by ``Context.resolves_to``.

        Raises:
            ContextTreeConfigurationError: If ``resolver`` is not a ``ContextResolver``.

        """
        if not isinstance(resolver, ContextResolver):
            msg = f"Expected a ContextResolver created by Context.resolves_to, got {resolver!r}."
            raise ContextTreeConfigurationError(msg)

        self._resolvers[resolver.context] = resolver.resolver
        logger.debug("Added resolver for context %r", resolver.context.name)

    def remove(self, context: Context[Any]) -> None:
        """Drop the resolver registered for exactly ``context``, if any."""
        _validate_context(context)
        if self._resolvers.pop(context, None) is not None:
            logger.debug("Removed resolver for context %r", context.name)

    def find(self, context: Context[T]) -> Callable[[], T] | None:
        """Return the resolver for ``context`` or its nearest ancestor key.

        Args:
            context: Key being looked up.

        Returns:
            The registered resolver, or ``None`` when no key in the lineage has one.

        """
        _validate_context(context)
        for key in context.lineage():
            resolver = self._resolvers.get(key)
            if resolver is not None:
                return resolver
        return None


def resolvers(items: Iterable[ContextResolver[Any]]) -> ContextResolvers:
    """Build a ``ContextResolvers`` table from an iterable of pairs."""
    return ContextResolvers.of(*items)


def _validate_context(context: object) -> None:
    if not isinstance(context, Context):
        msg = f"Expected a Context key, got {context!r}."
        raise ContextTreeConfigurationError(msg)


__all__ = ["ContextResolvers", "resolvers"]

from __future__ import annotations

import functools
import weakref
from collections.abc import Callable
from typing import Any


class IdentityResolver:
    """Return a node through a weak reference.

    Produced for self-type matches. Holding the resolver does not keep the node
    alive; calling it after the node was collected raises ``ReferenceError``.
    """

    __slots__ = ("_ref",)

    def __init__(self, ref: weakref.ReferenceType[Any]) -> None:
        self._ref = ref

    def __call__(self) -> Any:
        node = self._ref()
        if node is None:
            msg = "The node this resolver returns has been garbage collected."
            raise ReferenceError(msg)
        return node

    def __repr__(self) -> str:
        return f"IdentityResolver({self._ref()!r})"


class IdentityResolverCache:
    """Memoize one ``IdentityResolver`` per node, keyed by ``id(node)``.

    Entries are evicted by the weakref callback when the node is collected, so
    the cache is a non-owning back-reference. Nodes without weakref support get
    a fresh, uncached resolver on every call.
    """

    def __init__(self) -> None:
        self._resolvers: dict[int, IdentityResolver] = {}

    def __len__(self) -> int:
        return len(self._resolvers)

    def __contains__(self, node: object) -> bool:
        resolver = self._resolvers.get(id(node))
        return resolver is not None and resolver._ref() is node

    def get(self, node: object) -> Callable[[], Any]:
        """Return the cached resolver for ``node``, creating it on first use.

        Args:
            node: Node the resolver should return.

        Returns:
            A zero-argument callable returning ``node``.

        """
        key = id(node)
        resolver = self._resolvers.get(key)
        if resolver is not None and resolver._ref() is node:
            return resolver

        try:
            ref = weakref.ref(node, functools.partial(self._evict, key))
        except TypeError:
            return functools.partial(_identity, node)

        resolver = IdentityResolver(ref)
        self._resolvers[key] = resolver
        return resolver

    def clear(self) -> None:
        self._resolvers.clear()

    def _evict(self, key: int, ref: weakref.ReferenceType[Any]) -> None:
        resolver = self._resolvers.get(key)
        if resolver is not None and resolver._ref is ref:
            del self._resolvers[key]


def _identity(node: Any) -> Any:
    return node


__all__ = ["IdentityResolver", "IdentityResolverCache"]

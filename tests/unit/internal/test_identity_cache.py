from __future__ import annotations

import gc
import weakref

import pytest

from context_tree import Context, Node
from context_tree._internal.identity_cache import IdentityResolver, IdentityResolverCache
from context_tree._internal.lookup import identity_resolvers


class _SlottedNode:
    __slots__ = ("context", "context_type")

    def __init__(self, context_type: Context[object]) -> None:
        self.context = None
        self.context_type = context_type


def test_get_returns_the_same_resolver_for_the_same_node() -> None:
    cache = IdentityResolverCache()
    node = Node()

    first = cache.get(node)
    second = cache.get(node)

    assert first is second
    assert first() is node
    assert node in cache
    assert len(cache) == 1


def test_distinct_nodes_get_distinct_resolvers() -> None:
    cache = IdentityResolverCache()
    first, second = Node(), Node()

    assert cache.get(first) is not cache.get(second)
    assert len(cache) == 2


def test_cache_does_not_keep_nodes_alive() -> None:
    cache = IdentityResolverCache()
    node = Node()
    resolver = cache.get(node)
    node_ref = weakref.ref(node)

    del node
    gc.collect()

    assert node_ref() is None
    assert len(cache) == 0
    with pytest.raises(ReferenceError):
        resolver()


def test_non_weakrefable_nodes_get_uncached_resolvers() -> None:
    cache = IdentityResolverCache()
    node = _SlottedNode(Context("Slotted"))

    first = cache.get(node)
    second = cache.get(node)

    assert first() is node
    assert second() is node
    assert not isinstance(first, IdentityResolver)
    assert len(cache) == 0


def test_clear_drops_every_entry() -> None:
    cache = IdentityResolverCache()
    node = Node()
    cache.get(node)

    cache.clear()

    assert node not in cache


def test_engine_resolution_does_not_pin_nodes() -> None:
    context = Context[Node]("Scope")
    scope = Node(context_type=context)
    leaf = Node(context=scope)
    scope_ref = weakref.ref(scope)

    resolved = context.resolve(leaf)
    assert resolved is scope
    assert scope in identity_resolvers

    del resolved, scope, leaf
    gc.collect()

    assert scope_ref() is None


def test_engine_resolves_non_weakrefable_self_types() -> None:
    context = Context[object]("Slotted")
    node = _SlottedNode(context)

    assert context.resolve(node) is node

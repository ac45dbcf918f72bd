from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from context_tree._internal.identity_cache import IdentityResolverCache

if TYPE_CHECKING:
    from context_tree.context import Context

logger = logging.getLogger(__name__)

identity_resolvers = IdentityResolverCache()


def iter_parents(node: object) -> Iterator[Any]:
    """Yield the parents of ``node`` in enumeration order.

    ``context`` may be ``None``, a single parent, or a ``list``/``tuple`` of
    parents. ``None`` entries inside a collection are skipped.

    Args:
        node: Node whose ``context`` attribute is read.

    """
    parents = getattr(node, "context", None)
    if parents is None:
        return
    if isinstance(parents, (list, tuple)):
        for parent in parents:
            if parent is not None:
                yield parent
        return
    yield parents


def find_resolver(context: Context[Any], instance: object) -> Callable[[], Any] | None:
    """Search ``instance`` and its ancestors for a resolver of ``context``.

    The node graph is walked breadth-first, so the closest matching node wins
    and siblings at the same depth are tried in parent enumeration order. Each
    node is visited at most once, which keeps diamond-shaped ancestries finite.

    At every node a self-type match (``node.context_type`` is ``context`` or one
    of its ancestor keys) takes precedence over the node's resolver table.

    Args:
        context: Key being looked up.
        instance: Node the search starts from.

    Returns:
        A zero-argument resolver, or ``None`` when nothing reachable matches.

    """
    if instance is None:
        return None

    lineage = tuple(context.lineage())
    queue: deque[Any] = deque((instance,))
    visited = {id(instance)}

    while queue:
        node = queue.popleft()

        context_type = getattr(node, "context_type", None)
        if context_type is not None and any(context_type is key for key in lineage):
            return identity_resolvers.get(node)

        context_resolvers = getattr(node, "context_resolvers", None)
        if context_resolvers is not None:
            resolver = context_resolvers.find(context)
            if resolver is not None:
                return resolver

        for parent in iter_parents(node):
            parent_id = id(parent)
            if parent_id not in visited:
                visited.add(parent_id)
                queue.append(parent)

    logger.debug(
        "No resolver for context %r starting from %s (%d nodes visited)",
        context.name,
        type(instance).__qualname__,
        len(visited),
    )
    return None


__all__ = ["find_resolver", "identity_resolvers", "iter_parents"]

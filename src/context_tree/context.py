from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from context_tree._internal.lookup import find_resolver
from context_tree.exceptions import ContextNotFoundError

if TYPE_CHECKING:
    from context_tree.resolvers import ContextResolvers

T = TypeVar("T")
P = TypeVar("P")


@dataclass(frozen=True, eq=False)
class ContextResolver(Generic[T]):
    """Pair a context key with the zero-argument callable producing its value.

    Instances are created by ``Context.resolves_to`` and consumed by
    ``ContextResolvers.add``.
    """

    context: Context[T]
    resolver: Callable[[], T]


@dataclass(frozen=True, eq=False)
class Context(Generic[T]):
    """Identify a typed lookup slot in the node graph.

    Keys are compared by identity; ``name`` is a diagnostic label and does not
    need to be unique. A key created with ``partial`` keeps a reference to the
    broader key it was derived from, and every lookup for the narrow key also
    accepts matches for that broader key.

    Examples:
        .. code-block:: python

            Database = Context[Db]("Database")
            ReadOnlyDatabase = Database.partial("ReadOnlyDatabase")

            root = Node(context_resolvers=Context.resolvers([
                Database.resolves_to(lambda: db),
            ]))
            ReadOnlyDatabase.resolve(Node(context=root))  # -> db

    """

    name: str
    parent: Context[Any] | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        return f"Context({self.name!r})"

    @staticmethod
    def resolvers(resolvers: Iterable[ContextResolver[Any]]) -> ContextResolvers:
        """Build a resolver table from ``key.resolves_to(...)`` pairs."""
        from context_tree.resolvers import ContextResolvers  # noqa: PLC0415

        return ContextResolvers.of(*resolvers)

    def lineage(self) -> Iterator[Context[Any]]:
        """Yield this key followed by its ancestor keys, narrowest first."""
        context: Context[Any] | None = self
        while context is not None:
            yield context
            context = context.parent

    def partial(self, name: str) -> Context[P]:
        """Derive a narrower key that falls back to this key during lookups.

        Args:
            name: Diagnostic name of the derived key.

        Returns:
            A new key whose ``parent`` is this key.

        """
        return Context(name, parent=self)

    def resolves_to(self, resolver: Callable[[], T]) -> ContextResolver[T]:
        return ContextResolver(self, resolver)

    def find_resolver(self, instance: object) -> Callable[[], T] | None:
        """Return the resolver the nearest matching node supplies, or ``None``.

        See ``context_tree._internal.lookup.find_resolver`` for the search order.
        """
        return find_resolver(self, instance)

    def resolve(self, instance: object) -> T:
        """Resolve this key as seen from ``instance``.

        Args:
            instance: Node the search starts from.

        Raises:
            ContextNotFoundError: If no reachable node supplies the key.

        """
        resolver = self.find_resolver(instance)
        if resolver is None:
            raise ContextNotFoundError(self)
        return resolver()

    def resolve_maybe(self, instance: object) -> T | None:
        """Resolve this key as seen from ``instance``, returning ``None`` if absent.

        A resolver that itself returns ``None`` is indistinguishable from a
        missing one here; use ``find_resolver`` when the difference matters.
        """
        resolver = self.find_resolver(instance)
        if resolver is None:
            return None
        return resolver()


__all__ = ["Context", "ContextResolver"]

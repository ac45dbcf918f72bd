from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from context_tree.context import Context
from context_tree.exceptions import (
    ContextTreeConfigurationError,
    MissingRequiredContextsError,
    format_missing_message,
)
from context_tree.policies import MissingContextsPolicy
from context_tree.settings import get_settings

C = TypeVar("C", bound=type[Any])

logger = logging.getLogger(__name__)

_REQUIRED_CONTEXTS: weakref.WeakKeyDictionary[type[Any], tuple[Context[Any], ...]] = (
    weakref.WeakKeyDictionary()
)


def requires(*contexts: Context[Any]) -> Callable[[C], C]:
    """Declare the contexts instances of the decorated class must be able to resolve.

    Declarations are inherited: a subclass requires its own contexts followed by
    those of its bases. Classes may instead expose a ``required_contexts``
    sequence on the class or instance; decorator declarations take precedence.

    Examples:
        .. code-block:: python

            @requires(Database, CurrentUser)
            class OrdersPage:
                def __init__(self, parent: Node) -> None:
                    self.context = parent
                    check_required(self)

    Args:
        *contexts: Keys every instance must resolve.

    Raises:
        ContextTreeConfigurationError: If any argument is not a ``Context``.

    """
    _validate_contexts(contexts, source="requires()")

    def decorator(cls: C) -> C:
        _REQUIRED_CONTEXTS[cls] = tuple(contexts)
        return cls

    return decorator


def required_contexts(instance: object) -> tuple[Context[Any], ...]:
    """Return the contexts declared as required for ``instance``."""
    declared: list[Context[Any]] = []
    for klass in type(instance).__mro__:
        for context in _REQUIRED_CONTEXTS.get(klass, ()):
            if not any(context is seen for seen in declared):
                declared.append(context)
    if declared:
        return tuple(declared)

    attribute = getattr(instance, "required_contexts", None)
    if isinstance(attribute, (list, tuple)):
        _validate_contexts(attribute, source=f"{type(instance).__name__}.required_contexts")
        return tuple(attribute)
    return ()


def _validate_contexts(contexts: Iterable[object], *, source: str) -> None:
    for context in contexts:
        if not isinstance(context, Context):
            msg = f"{source} accepts Context keys only, got {context!r}."
            raise ContextTreeConfigurationError(msg)


def check_required(
    instance: object,
    *,
    policy: MissingContextsPolicy | None = None,
) -> tuple[Context[Any], ...]:
    """Verify that every required context resolves from ``instance``.

    Resolution starts at ``instance`` itself, so the instance must already be
    attached to its parents (``instance.context``) when this is called.

    Args:
        instance: Node whose declared required contexts are checked.
        policy: How to report missing contexts. Defaults to
            ``get_settings().missing_required_policy``.

    Returns:
        The missing contexts in declaration order; empty when all resolve.

    Raises:
        MissingRequiredContextsError: Under ``MissingContextsPolicy.RAISE`` when any
            context is missing.
        ContextTreeConfigurationError: If a ``required_contexts`` attribute holds
            something other than ``Context`` keys.

    """
    missing = tuple(
        context
        for context in required_contexts(instance)
        if context.find_resolver(instance) is None
    )
    if not missing:
        return missing

    policy = MissingContextsPolicy(
        get_settings().missing_required_policy if policy is None else policy,
    )

    owner_name = type(instance).__name__
    if policy is MissingContextsPolicy.LOG:
        logger.warning("%s", format_missing_message(owner_name, missing))
        return missing

    raise MissingRequiredContextsError(owner_name, missing)


__all__ = ["check_required", "required_contexts", "requires"]

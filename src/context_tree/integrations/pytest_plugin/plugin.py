from __future__ import annotations

from collections.abc import Iterator

import pytest

from context_tree.node import Node
from context_tree.resolvers import ContextResolvers
from context_tree.settings import ContextTreeSettings, get_settings


@pytest.fixture()
def context_root() -> Node:
    """Create a per-test root node with an empty resolver table.

    Tests attach their nodes under this root and register resolvers on
    ``context_root.context_resolvers``. The fixture is function-scoped, so
    registrations are isolated between tests.

    Returns:
        A new parentless ``Node``.

    """
    return Node(context_resolvers=ContextResolvers())


@pytest.fixture()
def context_tree_settings() -> Iterator[ContextTreeSettings]:
    """Provide settings freshly loaded from the environment.

    The settings cache is cleared before and after the test, so values set
    with ``monkeypatch.setenv`` before requesting this fixture take effect and
    do not leak into later tests.

    Yields:
        The ``ContextTreeSettings`` instance ``get_settings`` returns during the test.

    """
    get_settings.cache_clear()
    try:
        yield get_settings()
    finally:
        get_settings.cache_clear()

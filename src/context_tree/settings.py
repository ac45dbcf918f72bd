from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from context_tree.policies import MissingContextsPolicy


class ContextTreeSettings(BaseSettings):
    """Library-wide defaults read from ``CONTEXT_TREE_*`` environment variables.

    Examples:
        .. code-block:: shell

            CONTEXT_TREE_MISSING_REQUIRED_POLICY=log python -m app

    """

    model_config = SettingsConfigDict(env_prefix="CONTEXT_TREE_", extra="ignore")

    missing_required_policy: MissingContextsPolicy = Field(
        default=MissingContextsPolicy.RAISE,
        description="Default policy used by check_required when none is passed.",
    )


@lru_cache(maxsize=1)
def get_settings() -> ContextTreeSettings:
    """Return the process-wide settings, loaded once from the environment.

    Call ``get_settings.cache_clear()`` after changing the environment to reload.
    """
    return ContextTreeSettings()


__all__ = ["ContextTreeSettings", "get_settings"]

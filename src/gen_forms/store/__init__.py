"""
Form storage for Gen-Forms.

Provides the store interface, a SQL implementation and a local-only
in-memory implementation. ``create_store`` picks one from configuration.
"""

from gen_forms.config import GenFormsConfig, get_config
from gen_forms.store.base import FormStore
from gen_forms.store.memory import InMemoryFormStore
from gen_forms.store.sql import SqlFormStore


def create_store(config: GenFormsConfig | None = None) -> FormStore:
    """Build the store selected by ``config.store_backend``."""
    config = config or get_config()
    if config.store_backend == "memory":
        return InMemoryFormStore()
    if config.store_backend == "sql":
        return SqlFormStore.from_url(config.database_url, echo=config.echo_sql)
    raise ValueError(f"Unknown store backend: {config.store_backend}. Use 'sql' or 'memory'.")


__all__ = [
    "FormStore",
    "InMemoryFormStore",
    "SqlFormStore",
    "create_store",
]

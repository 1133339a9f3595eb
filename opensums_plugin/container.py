"""Dependency injection container."""
from dependency_injector import containers, providers

from opensums_plugin.plugins.config_store import ConfigStore
from opensums_plugin.plugins.json_option_store import JsonFileOptionStore
from opensums_plugin.plugins.option_store import MemoryOptionStore
from opensums_plugin.repositories.option_repository import OptionRepository


class Container(containers.DeclarativeContainer):
    """
    Application dependency injection container.

    Usage:
        container = Container()
        container.config.from_dict({
            "options": {"backend": "memory", "dir": "var"},
            "plugin": {"name": "my-plugin", "version": "1.0.0"},
        })
        container.db_session.override(db.session)

        config_store = container.config_store()
    """

    # Configuration
    config = providers.Configuration()

    # Database session - must be overridden with actual db.session
    db_session = providers.Dependency()

    # ==================
    # Option stores
    # ==================

    option_store = providers.Selector(
        config.options.backend,
        database=providers.Singleton(
            OptionRepository,
            session=db_session
        ),
        json=providers.Singleton(
            JsonFileOptionStore,
            options_dir=config.options.dir
        ),
        memory=providers.Singleton(
            MemoryOptionStore
        ),
    )

    # ==================
    # Plugin configuration
    # ==================

    # ConfigStore.instance() keeps one object per process; arguments only
    # take effect on the first call.
    config_store = providers.Callable(
        ConfigStore.instance,
        name=config.plugin.name,
        version=config.plugin.version,
        option_store=option_store,
    )

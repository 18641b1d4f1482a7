"""
Dependency Injection Container.

Holds the process-wide marker registry. Tests and embedding applications
can build their own ``Container`` or ``MarkerRegistry`` instead of sharing
the global one.
"""

from dependency_injector import containers, providers

from nominal.core.config import get_settings
from nominal.core.registry import MarkerRegistry


class Container(containers.DeclarativeContainer):
    """
    Library DI container.

    The registry is a singleton: every interface bound through the
    module-level API lives in the same registry for the process lifetime.
    """

    # Configuration
    config = providers.Configuration()

    # Registry - Singleton
    registry = providers.Singleton(
        MarkerRegistry,
        tag_attribute=config.tagging.attribute,
    )


def build_container() -> Container:
    """Create a container configured from the environment settings."""
    instance = Container()
    instance.config.from_dict(get_settings().model_dump())
    return instance


# Global container instance
container = build_container()


def get_container() -> Container:
    """Get the global container instance."""
    return container


def get_registry() -> MarkerRegistry:
    """Get the process-wide marker registry."""
    return container.registry()


def reset_container():
    """
    Reset container for testing.

    Drops the registry singleton. Interfaces bound before the reset keep
    checking against the registry they were bound in.
    """
    container.reset_singletons()

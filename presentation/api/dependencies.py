"""FastAPI dependency injection — bridges the DI container to Depends().

The container lives on ``app.state``; it is attached by create_app()
rather than kept in a module-level global.
"""

import logging

from fastapi import Depends, Request

from shared.container import Container

logger = logging.getLogger(__name__)


def get_container(request: Request) -> Container:
    """Get the DI container attached to the running app."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("DI container not attached. Build the app with create_app().")
    return container


def get_auth_service(container: Container = Depends(get_container)):
    """Get AuthService from container."""
    return container.auth_service()


def get_user_service(container: Container = Depends(get_container)):
    """Get UserService from container."""
    return container.user_service()


def get_favorites_service(container: Container = Depends(get_container)):
    """Get FavoritesService from container."""
    return container.favorites_service()


def get_catalog_service(container: Container = Depends(get_container)):
    """Get CatalogService from container."""
    return container.catalog_service()

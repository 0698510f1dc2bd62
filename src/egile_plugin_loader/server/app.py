"""FastAPI application factory for Egile Plugin Loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from egile_plugin_loader.server.routes import create_router

if TYPE_CHECKING:
    from egile_plugin_loader.plugins.base import LoadedPlugins


class PluginServer:
    """
    FastAPI runtime for inspecting loaded plugins.

    Example:
        ```python
        from egile_plugin_loader.plugins import PluginLoader
        from egile_plugin_loader.server import PluginServer

        plugins = PluginLoader().initialize()
        server = PluginServer(plugins)
        server.serve(host="0.0.0.0", port=8000)
        ```
    """

    def __init__(
        self,
        plugins: LoadedPlugins,
        title: str = "Egile Plugin Server",
        description: str = "Read-only view of loaded commands and middlewares",
        version: str = "0.1.0",
        cors_origins: list[str] | None = None,
    ):
        """
        Initialize the PluginServer.

        Args:
            plugins: Registries produced by the plugin loader.
            title: API title for OpenAPI docs.
            description: API description for OpenAPI docs.
            version: API version for OpenAPI docs.
            cors_origins: List of allowed CORS origins. Defaults to ["*"].
        """
        self.plugins = plugins
        self.title = title
        self.description = description
        self.version = version
        self.cors_origins = cors_origins or ["*"]
        self._app: FastAPI | None = None

    def get_app(self) -> FastAPI:
        """
        Get or create the FastAPI application.

        Returns:
            The configured FastAPI application.
        """
        if self._app is None:
            self._app = self._create_app()
        return self._app

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self.title,
            description=self.description,
            version=self.version,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

        app.include_router(create_router(self.plugins), prefix="/v1")

        # Health check endpoint
        @app.get("/health")
        async def health_check() -> dict[str, str]:
            return {"status": "healthy"}

        # Root endpoint
        @app.get("/")
        async def root() -> dict[str, str]:
            return {
                "name": self.title,
                "version": self.version,
                "docs": "/docs",
            }

        return app

    def serve(
        self,
        host: str = "0.0.0.0",
        port: int = 8000,
        reload: bool = False,
        log_level: str = "info",
    ) -> None:
        """
        Start the server using uvicorn.

        Args:
            host: Host to bind to.
            port: Port to bind to.
            reload: Enable auto-reload for development.
            log_level: Uvicorn log level.
        """
        import uvicorn

        uvicorn.run(
            self.get_app(),
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
        )


def create_app(plugins: LoadedPlugins, **kwargs) -> FastAPI:
    """Build the inspection app for an already loaded set of plugins."""
    return PluginServer(plugins, **kwargs).get_app()

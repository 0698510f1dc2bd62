"""API routes for inspecting loaded plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

if TYPE_CHECKING:
    from egile_plugin_loader.plugins.base import (
        CommandFrame,
        LoadedPlugins,
        MiddlewareFrame,
    )


class CommandInfo(BaseModel):
    """Command information response."""

    name: str
    entry_point: str
    settings: dict[str, Any]
    localizations: list[str]


class MiddlewareInfo(BaseModel):
    """Middleware information response."""

    name: str
    entry_point: str
    settings: dict[str, Any]


class CommandListResponse(BaseModel):
    """Response for listing commands."""

    commands: list[CommandInfo]


class MiddlewareListResponse(BaseModel):
    """Response for listing middlewares."""

    middlewares: list[MiddlewareInfo]


def _command_info(name: str, frame: CommandFrame) -> CommandInfo:
    return CommandInfo(
        name=name,
        entry_point=str(frame.entry_point_path),
        settings=frame.settings,
        localizations=sorted(frame.localized_strings),
    )


def _middleware_info(name: str, frame: MiddlewareFrame) -> MiddlewareInfo:
    return MiddlewareInfo(
        name=name, entry_point=str(frame.entry_point_path), settings=frame.settings
    )


def create_router(plugins: LoadedPlugins) -> APIRouter:
    """
    Create the API router with plugin inspection endpoints.

    Args:
        plugins: The registries produced by the loader.

    Returns:
        Configured APIRouter.
    """
    router = APIRouter(tags=["plugins"])

    @router.get("/commands", response_model=CommandListResponse)
    async def list_commands() -> CommandListResponse:
        """List all loaded commands."""
        return CommandListResponse(
            commands=[
                _command_info(name, plugins.commands[name])
                for name in plugins.commands.names()
            ]
        )

    @router.get("/commands/{command_name}", response_model=CommandInfo)
    async def get_command(command_name: str) -> CommandInfo:
        """Get details for a specific command."""
        frame = plugins.commands.get(command_name)
        if frame is None:
            raise HTTPException(
                status_code=404, detail=f"Command '{command_name}' not found"
            )
        return _command_info(command_name, frame)

    @router.get("/middlewares", response_model=MiddlewareListResponse)
    async def list_middlewares() -> MiddlewareListResponse:
        """List all loaded middlewares."""
        return MiddlewareListResponse(
            middlewares=[
                _middleware_info(name, plugins.middlewares[name])
                for name in plugins.middlewares.names()
            ]
        )

    @router.get("/middlewares/{middleware_name}", response_model=MiddlewareInfo)
    async def get_middleware(middleware_name: str) -> MiddlewareInfo:
        """Get details for a specific middleware."""
        frame = plugins.middlewares.get(middleware_name)
        if frame is None:
            raise HTTPException(
                status_code=404, detail=f"Middleware '{middleware_name}' not found"
            )
        return _middleware_info(middleware_name, frame)

    return router

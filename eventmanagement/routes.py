"""Commands exposed by the event management module and the permission each one declares.

Nothing in this package enforces these permissions. Callers are expected to
authorize a command before invoking it.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List

MODULE_NAME = "EventManagement"


class PermissionType(IntEnum):
    NONE = 1
    READ = 2
    CREATE = 4
    MODIFY = 8
    DELETE = 16
    PERMISSION = 32


class PermissionState(IntEnum):
    EVENT = 1


@dataclass(frozen=True)
class Permission:
    module: str
    type: PermissionType
    state: PermissionState

    def __str__(self) -> str:
        return f"{self.module}:{self.type.name}:{self.state.name}"


@dataclass(frozen=True)
class Route:
    command: str
    description: str
    permission: Permission


ROUTES: List[Route] = [
    Route(
        command="list",
        description="List the newest events",
        permission=Permission(MODULE_NAME, PermissionType.READ, PermissionState.EVENT),
    ),
    Route(
        command="create",
        description="Create a new event",
        permission=Permission(MODULE_NAME, PermissionType.CREATE, PermissionState.EVENT),
    ),
    Route(
        command="profile",
        description="Show a single event",
        permission=Permission(MODULE_NAME, PermissionType.READ, PermissionState.EVENT),
    ),
]


def routes_by_command() -> Dict[str, Route]:
    return {route.command: route for route in ROUTES}

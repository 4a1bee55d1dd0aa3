"""
Route table for the directory gateway

Every endpoint is declared once here; build_router turns the table into an APIRouter.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from fastapi import APIRouter, Depends, status

from directory_gateway.models.directory import ErrorResponse, Record, RecordList
from directory_gateway.routes import groups, members, users, user_profiles
from directory_gateway.utils.dependencies import get_current_user


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    auth_required: bool = False
    status_code: int = status.HTTP_200_OK
    response_model: Optional[Any] = None
    tag: str = ""


ROUTES: List[Route] = [
    Route("GET", "/groups", groups.list_groups, response_model=RecordList, tag="Groups"),
    Route("GET", "/groups/{group_id}", groups.get_group, response_model=Record, tag="Groups"),

    Route("GET", "/members", members.list_members, response_model=RecordList, tag="Members"),
    Route("POST", "/members", members.create_member,
          status_code=status.HTTP_201_CREATED, response_model=Record, tag="Members"),
    Route("PUT", "/members/{member_id}", members.update_member, response_model=Record, tag="Members"),
    Route("DELETE", "/members/{member_id}", members.delete_member,
          status_code=status.HTTP_204_NO_CONTENT, tag="Members"),

    # Declared before /users/{user_id} so "profiles" is never read as an id
    Route("GET", "/users/profiles", users.list_users_with_profiles,
          auth_required=True, response_model=RecordList, tag="Users"),
    Route("GET", "/users", users.list_users, response_model=RecordList, tag="Users"),
    Route("POST", "/users", users.create_user,
          status_code=status.HTTP_201_CREATED, response_model=Record, tag="Users"),
    Route("PUT", "/users/{user_id}", users.update_user, response_model=Record, tag="Users"),
    Route("DELETE", "/users/{user_id}", users.delete_user,
          status_code=status.HTTP_204_NO_CONTENT, tag="Users"),

    Route("GET", "/user_profiles", user_profiles.list_profiles, response_model=RecordList, tag="User Profiles"),
    Route("POST", "/user_profiles", user_profiles.create_profile,
          status_code=status.HTTP_201_CREATED, response_model=Record, tag="User Profiles"),
]


def build_router(routes: List[Route] = ROUTES) -> APIRouter:
    """Register every route of the table on a fresh router"""
    router = APIRouter(responses={500: {"model": ErrorResponse}})

    for route in routes:
        dependencies = [Depends(get_current_user)] if route.auth_required else None
        responses = {401: {"model": ErrorResponse}} if route.auth_required else None
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            dependencies=dependencies,
            responses=responses,
            tags=[route.tag] if route.tag else None,
        )

    return router

import pytest

from dactyl_oas.metadata.base import ArgsType, HttpMethod
from dactyl_oas.metadata.registry import ControllerBuilder


@pytest.fixture
def users_controller():
    return (
        ControllerBuilder("/users", name="UserController")
        .route("list_users", "", HttpMethod.GET, description="List all users")
        .route("get_user", "/:id", HttpMethod.GET)
        .route("create_user", "", HttpMethod.POST)
        .arg("list_users", ArgsType.QUERY, "limit")
        .arg("get_user", ArgsType.PARAM, "id")
        .arg("create_user", ArgsType.BODY, "payload")
        .arg_types("list_users", ["number"])
        .arg_types("get_user", ["string"])
        .build()
    )

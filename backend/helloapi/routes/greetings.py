"""
HelloAPI - Greeting Route Handlers
===================================

What:  GET / (static hello) and GET /user/{name} (path parameter echo).
"""

from fastapi import APIRouter

from helloapi.schemas.demo import HelloResponse, UserGreeting

router = APIRouter(tags=["Greetings"])


@router.get(
    "/",
    response_model=HelloResponse,
    summary="Hello, World!",
)
async def hello() -> HelloResponse:
    return HelloResponse()


@router.get(
    "/user/{name}",
    response_model=UserGreeting,
    summary="Greet a user by name",
    description="Echoes the `name` path segment inside a greeting.",
)
async def greet_user(name: str) -> UserGreeting:
    """
    Greet the user named in the path.

    Args:
        name: Exactly one path segment, already percent-decoded by the
              framework (`/user/john%20doe` gives "john doe").
    """
    return UserGreeting.for_name(name)

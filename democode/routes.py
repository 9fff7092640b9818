from typing import Callable, Literal

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    handler: Callable[[], str]
    method: Literal["GET"] = "GET"

    @property
    def name(self) -> str:
        return self.handler.__name__


def greetings() -> str:
    return "Welcome to the Home page...."


def after_auth() -> str:
    return "Authenticated"


ROUTES: tuple[Route, ...] = (
    Route(path="/", handler=greetings),
    Route(path="/afterauth", handler=after_auth),
)


def build_router(routes: tuple[Route, ...]) -> APIRouter:
    """One plain text endpoint per route in the table"""
    router = APIRouter(include_in_schema=False)

    for route in routes:
        router.add_api_route(
            route.path,
            route.handler,
            methods=[route.method],
            response_class=PlainTextResponse,
            name=route.name,
        )

    return router

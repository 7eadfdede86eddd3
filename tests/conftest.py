from types import SimpleNamespace
from typing import Any

import pytest


class Layer:
    """Recording middleware used to inspect how the chain was built."""

    def __init__(self, app: Any, *args: Any, **kwargs: Any) -> None:
        self.app = app
        self.args = args
        self.kwargs = kwargs

    def __call__(self, request: Any) -> Any:
        return self.app(request)


class Outer(Layer):
    pass


class Middle(Layer):
    pass


class Inner(Layer):
    pass


def endpoint(request: Any) -> str:
    return f"handled {request}"


def other_endpoint(request: Any) -> str:
    return f"other {request}"


@pytest.fixture
def server() -> SimpleNamespace:
    """Server object handing test doubles to scripts through ``server()``."""
    return SimpleNamespace(
        Outer=Outer,
        Middle=Middle,
        Inner=Inner,
        endpoint=endpoint,
        other_endpoint=other_endpoint,
        calls=[],
    )

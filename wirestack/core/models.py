"""Domain models for pipeline declarations and the assembled result."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

type Handler = Callable[..., Any]
type PreHook = Callable[[Any, Any], Any]
type PostHook = Callable[[Any], Any]
type WarmupCallback = Callable[[Handler], Any]
type MiddlewareFactory = Callable[..., Handler]


def describe(obj: Any) -> str:
    """Best-effort display name for a handler, hook or factory."""
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if isinstance(name, str):
        return name
    return type(obj).__name__


@dataclass(frozen=True, slots=True, kw_only=True)
class MiddlewareDeclaration:
    """One ``use(...)`` statement, recorded but not yet constructed."""

    factory: MiddlewareFactory
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    callback: Callable[..., Any] | None = None

    def build(self, inner: Handler) -> Handler:
        """Construct the middleware around *inner*.

        The callback, when present, is passed as the last positional argument.
        """
        args = self.args if self.callback is None else (*self.args, self.callback)
        return self.factory(inner, *args, **self.kwargs)

    @property
    def name(self) -> str:
        return describe(self.factory)


@dataclass(frozen=True, slots=True, kw_only=True)
class AssembledPipeline:
    """Finished pipeline handed to the server.

    Attributes:
        pre_hooks: Callables run as ``(request, response)`` before the root
            handler, in declaration order.
        root_handler: The application wrapped by every declared middleware.
        post_hooks: Callables run as ``(request)`` once the response has
            completed, in reverse declaration order.
        layers: Display names from the outermost middleware down to the
            application.

    Iterating yields ``(pre_hooks, root_handler, post_hooks)`` so the result
    unpacks like a three-item tuple.
    """

    pre_hooks: tuple[PreHook, ...]
    root_handler: Handler
    post_hooks: tuple[PostHook, ...]
    layers: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        yield self.pre_hooks
        yield self.root_handler
        yield self.post_hooks

    def __repr__(self) -> str:
        chain = " → ".join(self.layers) if self.layers else describe(self.root_handler)
        return (
            f"AssembledPipeline(pre={len(self.pre_hooks)}, "
            f"chain={chain}, post={len(self.post_hooks)})"
        )

"""Evaluation context for pipeline scripts.

A pipeline script is plain Python executed against a private namespace whose
only non-builtin names are the builder vocabulary::

    from myapp import App, Logging, Sessions

    use(Logging)
    use(Sessions, "secret", max_age=3600)
    run_before(open_db)
    run(App())

    @warmup
    def prime(app):
        app.preload()

Statements only record intent.  Middleware is constructed and the warmup
callback invoked later, by :func:`wirestack.builder.assembler.assemble`.
"""

from __future__ import annotations

import builtins
import inspect
from collections.abc import Callable
from typing import Any

from loguru import logger

from wirestack.core.errors import BuilderStateError, InvalidCallableError
from wirestack.core.models import (
    Handler,
    MiddlewareDeclaration,
    MiddlewareFactory,
    PostHook,
    PreHook,
    WarmupCallback,
    describe,
)

VOCABULARY = ("server", "run", "run_before", "run_after", "use", "warmup")

# Default for the decorator forms; an explicit None is validated like any other value.
_MISSING: Any = object()


def accepts_positional(obj: Any, count: int) -> bool:
    """Return whether *obj* can be called with *count* positional arguments.

    Objects whose signature cannot be introspected are given the benefit of
    the doubt as long as they are callable.
    """
    if not callable(obj):
        return False
    try:
        signature = inspect.signature(obj)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


class Builder:
    """Per-script declaration context exposing the builder DSL."""

    def __init__(self, server: Any = None, *, post_hooks: bool = False) -> None:
        self._server = server
        self._route_after_to_post = post_hooks
        self._application: Handler | None = None
        self._declarations: list[MiddlewareDeclaration] = []
        self._pre_hooks: list[PreHook] = []
        self._post_hooks: list[PostHook] = []
        self._warmup: WarmupCallback | None = None
        self._filename: str | None = None
        self._evaluated = False
        self._sealed = False

    # ── Script evaluation ────────────────────────────────────────────

    def namespace(self, filename: str = "<script>") -> dict[str, Any]:
        """Build the globals dict a script runs in."""
        ns: dict[str, Any] = {
            "__name__": "__wirestack_script__",
            "__file__": filename,
            "__builtins__": builtins,
        }
        for name in VOCABULARY:
            ns[name] = getattr(self, name)
        return ns

    def evaluate(self, script: str, filename: str = "<script>") -> Builder:
        """Compile and run *script* against this builder.

        Any exception raised by the script, including ``SyntaxError``,
        propagates unchanged.
        """
        if self._evaluated:
            raise BuilderStateError("builder already evaluated a script; create a new Builder per script")
        self._ensure_open()
        self._evaluated = True
        self._filename = filename
        code = compile(script, filename, "exec")
        exec(code, self.namespace(filename))
        logger.debug(
            "evaluated {}: {} middleware, {} pre-hooks, {} post-hooks",
            filename,
            len(self._declarations),
            len(self._pre_hooks),
            len(self._post_hooks),
        )
        return self

    # ── DSL vocabulary ───────────────────────────────────────────────

    def server(self) -> Any:
        """Return the server object that is loading this script."""
        return self._server

    def run(self, application: Handler) -> Builder:
        """Set the terminal application. A later call replaces an earlier one."""
        self._ensure_open()
        if self._application is not None:
            logger.debug(
                "application {} replaced by {}", describe(self._application), describe(application)
            )
        self._application = application
        return self

    def run_before(self, hook: PreHook = _MISSING) -> Any:
        """Register ``hook(request, response)`` to run before the application.

        Used for pre-request logic such as authentication or checking out a
        database connection.  ``run_before()`` with no argument returns a
        decorator.
        """
        if hook is _MISSING:
            return self._hook_decorator(self.run_before)
        self._require(hook, 2, "run_before", "(request, response)")
        self._ensure_open()
        self._pre_hooks.append(hook)
        return self

    def run_after(self, hook: PostHook = _MISSING) -> Any:
        """Register a hook meant to run after the response has completed.

        For streamed responses that is when streaming ends.  Used for cleanup
        such as releasing database connections or logging.

        By default the hook is validated against ``(request, response)`` and
        recorded with the pre-request hooks, matching the established
        behaviour of this DSL.  Builders created with ``post_hooks=True``
        record it as a post-request hook called with ``(request)``.
        """
        if hook is _MISSING:
            return self._hook_decorator(self.run_after)
        if self._route_after_to_post:
            self._require(hook, 1, "run_after", "(request)")
            self._ensure_open()
            self._post_hooks.append(hook)
        else:
            self._require(hook, 2, "run_after", "(request, response)")
            self._ensure_open()
            self._pre_hooks.append(hook)
        return self

    def use(
        self,
        middleware: MiddlewareFactory,
        *args: Any,
        callback: Callable[..., Any] | None = None,
        **kwargs: Any,
    ) -> Builder:
        """Declare a middleware layer.

        ``middleware(inner, *args, [callback,] **kwargs)`` is called at
        assembly time.  Earlier declarations wrap later ones.
        """
        self._ensure_open()
        self._declarations.append(
            MiddlewareDeclaration(factory=middleware, args=args, kwargs=kwargs, callback=callback)
        )
        return self

    def warmup(self, callback: WarmupCallback = _MISSING) -> Any:
        """Register a one-time callback receiving the assembled root handler.

        Only the first registration is kept.  Returns the registered callback,
        so it doubles as a decorator; ``warmup()`` returns a decorator too.
        Because the kept callback is returned, a second ``@warmup`` rebinds
        the decorated name to the first callback, not to the new function.
        """
        if callback is _MISSING:
            return self._hook_decorator(self.warmup)
        self._require(callback, 1, "warmup", "(app)")
        self._ensure_open()
        if self._warmup is None:
            self._warmup = callback
        else:
            logger.debug("ignoring warmup {}: {} already registered", describe(callback), describe(self._warmup))
        return self._warmup

    # ── Read side, used by the assembler ─────────────────────────────

    @property
    def application(self) -> Handler | None:
        return self._application

    @property
    def declarations(self) -> tuple[MiddlewareDeclaration, ...]:
        return tuple(self._declarations)

    @property
    def pre_hooks(self) -> tuple[PreHook, ...]:
        return tuple(self._pre_hooks)

    @property
    def post_hooks(self) -> tuple[PostHook, ...]:
        return tuple(self._post_hooks)

    @property
    def warmup_callback(self) -> WarmupCallback | None:
        return self._warmup

    @property
    def filename(self) -> str | None:
        return self._filename

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Mark the builder as assembled. Only one assembly is allowed."""
        if self._sealed:
            raise BuilderStateError("builder was already assembled")
        self._sealed = True

    # ── Internals ────────────────────────────────────────────────────

    def _ensure_open(self) -> None:
        if self._sealed:
            raise BuilderStateError("builder was already assembled; declarations are closed")

    @staticmethod
    def _require(obj: Any, count: int, method: str, shape: str) -> None:
        if not accepts_positional(obj, count):
            raise InvalidCallableError(f"{method} requires an object callable as `{shape}`, got {obj!r}")

    @staticmethod
    def _hook_decorator(register: Callable[[Any], Any]) -> Callable[[Any], Any]:
        def decorator(fn: Any) -> Any:
            register(fn)
            return fn

        return decorator

    def __repr__(self) -> str:
        return (
            f"Builder(application={describe(self._application) if self._application else None}, "
            f"middleware={len(self._declarations)}, pre={len(self._pre_hooks)}, "
            f"post={len(self._post_hooks)})"
        )

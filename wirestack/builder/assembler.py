"""Pipeline assembly: turn a builder's declarations into the served pipeline."""

from __future__ import annotations

from loguru import logger

from wirestack.builder.context import Builder
from wirestack.core.errors import MissingApplicationError
from wirestack.core.models import AssembledPipeline, describe


def assemble(builder: Builder) -> AssembledPipeline:
    """Construct the middleware chain and return the finished pipeline.

    Middleware is folded from the last declaration to the first, each layer
    wrapping the handler built so far, so the first ``use`` ends up outermost
    and the last sits directly around the application.  Post-hooks are
    reversed.  The warmup callback, if any, is called once with the root
    handler before returning.

    Errors raised by middleware factories or the warmup callback propagate
    unchanged.  A builder can only be assembled once.
    """
    application = builder.application
    if application is None:
        raise MissingApplicationError(builder.filename)
    builder.seal()

    declarations = builder.declarations
    handler = application
    for declaration in reversed(declarations):
        handler = declaration.build(handler)

    post_hooks = tuple(reversed(builder.post_hooks))
    pipeline = AssembledPipeline(
        pre_hooks=builder.pre_hooks,
        root_handler=handler,
        post_hooks=post_hooks,
        layers=(*(d.name for d in declarations), describe(application)),
    )

    warmup = builder.warmup_callback
    if warmup is not None:
        logger.debug("running warmup {}", describe(warmup))
        warmup(handler)

    logger.debug("assembled {}", pipeline)
    return pipeline

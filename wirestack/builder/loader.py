"""Pipeline script loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger

from wirestack.builder.assembler import assemble
from wirestack.builder.context import Builder
from wirestack.config.schema import LoaderSettings
from wirestack.core.models import AssembledPipeline

UTF8_BOM = "\ufeff"


def strip_bom(script: str) -> str:
    """Drop a leading UTF-8 byte-order mark, if present."""
    if script.startswith(UTF8_BOM):
        return script[len(UTF8_BOM):]
    return script


def read_script(path: Path) -> str | None:
    """Read a pipeline script from disk. Returns ``None`` when it cannot be read.

    Only I/O failures count as unreadable.  Bytes that are not valid UTF-8
    raise ``UnicodeDecodeError`` like any other broken script.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning(f"pipeline script not readable: {path}: {e}")
        return None
    return strip_bom(raw.decode("utf-8"))


def evaluate(
    server: Any,
    script: str,
    filename: str = "<script>",
    *,
    settings: LoaderSettings | None = None,
) -> AssembledPipeline:
    """Evaluate *script* for *server* and assemble the resulting pipeline.

    Args:
        server: Object exposed to the script through ``server()``.
        script: Script source text.
        filename: Name used in tracebacks raised from the script.
        settings: Loader settings. Uses environment-derived defaults if not provided.

    Returns:
        The assembled pipeline.  Unpacks as ``pre_hooks, app, post_hooks``.
    """
    settings = settings or LoaderSettings()
    builder = Builder(server, post_hooks=settings.post_hooks)
    builder.evaluate(strip_bom(script), filename)
    return assemble(builder)


def load(
    server: Any,
    path: Path | str | None = None,
    *,
    settings: LoaderSettings | None = None,
) -> AssembledPipeline | None:
    """
    Load a pipeline script from disk and assemble it.

    Use::

        pipeline = load(server, "config.ws")
        if pipeline is None:
            raise SystemExit("couldn't find config.ws")
        pre_hooks, app, post_hooks = pipeline

    Args:
        server: Object exposed to the script through ``server()``.
        path: Script path. Defaults to ``settings.script_path``.
        settings: Loader settings. Uses environment-derived defaults if not provided.

    Returns:
        The assembled pipeline, or ``None`` if the script could not be read.
        Exceptions raised while evaluating or assembling the script propagate.
    """
    settings = settings or LoaderSettings()
    script_path = Path(path) if path is not None else settings.script_path
    script = read_script(script_path)
    if script is None:
        return None
    logger.info(f"loading pipeline script {script_path}")
    return evaluate(server, script, str(script_path), settings=settings)

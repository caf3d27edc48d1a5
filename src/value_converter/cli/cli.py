#!/usr/bin/env python3
"""
value_converter.cli.app

Typer-based CLI for parsing and formatting integers through pluggable
converter back-ends.

Examples
--------
Parse hexadecimal text, substituting -1 for failures:

    value-convert parse --base hex --default -1 " 5" 0XF "not an int"

Render integers padded to five characters:

    value-convert format --converter strtol --width 5 --fill '*' 12
"""

from __future__ import annotations

import logging
import sys
import traceback
from typing import Any

import typer

from value_converter.errors import BadAccess, ValueConverterError
from value_converter.types import Adjustment, Base

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="value-convert",
    help="Convert between text and integers with configurable formatting.",
    no_args_is_help=True,
)

CONVERTER_HELP = "Converter back-end name (see the 'converters' command)."
CONVERTER_ENVVAR = "VALUE_CONVERT_CONVERTER"
OPTION_HELP = "Extra converter option KEY=VALUE (repeatable)."
PLUGIN_MODULE_HELP = "Plugin module import path or file path (repeatable)."


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(debug: bool) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _coerce_option_value(raw: str) -> object:
    """Best-effort coercion for CLI key/value options."""
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_converter_options(option_items: list[str] | None) -> dict[str, object]:
    """Parse repeatable KEY=VALUE converter options."""
    parsed: dict[str, object] = {}
    for item in option_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid option entry '{item}'. Use KEY=VALUE format."
            )
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("Option key cannot be empty.")
        parsed[key] = _coerce_option_value(raw_value)
    return parsed


def _create_converter(
    name: str,
    options: dict[str, object],
    plugin_modules: list[str] | None,
) -> Any:
    """Resolve ``name`` in the default registry and build the converter."""
    from value_converter.plugins.registry import create_default_registry

    registry = create_default_registry(extra_modules=plugin_modules)
    return registry.create(name, options)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging on error."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    _configure_logging(debug)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    texts: list[str] = typer.Argument(..., help="Texts to parse as integers."),
    converter: str = typer.Option(
        "stream", "--converter", "-c", envvar=CONVERTER_ENVVAR, help=CONVERTER_HELP
    ),
    base: Base | None = typer.Option(None, "--base", help="Numeric base of the input."),
    skip_ws: bool | None = typer.Option(
        None,
        "--skip-ws/--no-skip-ws",
        help="Skip or reject leading whitespace (stream converter).",
    ),
    default: int | None = typer.Option(
        None,
        "--default",
        help="Value printed for unparsable texts. Without it, the first failure aborts.",
    ),
    option: list[str] | None = typer.Option(None, "--option", help=OPTION_HELP),
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """Parse texts into integers, one result per line.

    Notes
    -----
    - Without ``--default`` the command prints every integer converted before
      the first failure and exits with a non-zero status.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    options = _parse_converter_options(option)
    if base is not None:
        options["base"] = base
    if skip_ws is not None:
        options["skip_whitespace"] = skip_ws

    try:
        from value_converter.application.use_cases import conversion

        cnv = _create_converter(converter, options, plugin_module)
        extract = (
            conversion(cnv, int).value()
            if default is None
            else conversion(cnv, int).value_or(default)
        )
        for text in texts:
            typer.echo(str(extract(text)))
    except BadAccess as exc:
        logger.debug("parse aborted on first failure", exc_info=True)
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except ValueConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("format")
def format_cmd(
    ctx: typer.Context,
    values: list[int] = typer.Argument(..., help="Integers to render."),
    converter: str = typer.Option(
        "stream", "--converter", "-c", envvar=CONVERTER_ENVVAR, help=CONVERTER_HELP
    ),
    base: Base | None = typer.Option(None, "--base", help="Numeric base of the output."),
    width: int | None = typer.Option(None, "--width", min=0, help="Minimum output width."),
    fill: str | None = typer.Option(None, "--fill", help="Padding character."),
    adjust: Adjustment | None = typer.Option(None, "--adjust", help="Padding side."),
    uppercase: bool = typer.Option(
        False, "--uppercase", help="Upper-case hex digits and prefix (stream converter)."
    ),
    show_base: bool = typer.Option(
        False, "--show-base", help="Emit the base prefix (stream converter)."
    ),
    verify: bool = typer.Option(
        False, "--verify", help="Parse every rendered text back and compare."
    ),
    option: list[str] | None = typer.Option(None, "--option", help=OPTION_HELP),
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """Render integers as text, one result per line."""
    debug: bool = bool(ctx.obj.get("debug", False))

    options = _parse_converter_options(option)
    flags: dict[str, Any] = {
        "base": base,
        "width": width,
        "fill": fill,
        "adjustment": adjust,
        "uppercase": uppercase or None,
        "show_base": show_base or None,
    }
    options.update({key: value for key, value in flags.items() if value is not None})

    try:
        from value_converter.api import format_integers

        rendered = format_integers(
            values,
            converter=converter,
            verify=verify,
            plugin_modules=plugin_module,
            **options,
        )
        for text in rendered:
            typer.echo(text)
    except ValueConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("converters")
def converters_cmd(
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """Print registered converters and installed toolchain versions."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ["value-converter", "pydantic", "typer"]:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    from value_converter.plugins.registry import create_default_registry

    try:
        registry = create_default_registry(extra_modules=plugin_module)
    except ValueConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug=False))
    typer.echo(f"converters: {', '.join(registry.names())}")


if __name__ == "__main__":
    app()

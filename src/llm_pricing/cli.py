"""Typer CLI for llm-pricing — list and calc commands."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from result import Err
from typer.core import TyperGroup

from llm_pricing.config import (
    DEFAULT_CACHE_TTL_MINUTES,
    DEFAULT_TIMEOUT_SECONDS,
    OPENROUTER_MODELS_URL,
    Config,
)
from llm_pricing.data.client import CatalogClient
from llm_pricing.models.costs import CacheRequestParams
from llm_pricing.services.pricing_service import PricingService
from llm_pricing.ui.views import render_cost_table, render_model_table, render_verbose

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
NO_MATCH_MESSAGE = "No models found matching the filter"

FiltersArg = Annotated[
    list[str] | None,
    typer.Argument(
        help=(
            "Filter models by name (e.g. 'anthropic/', 'sonnet'). "
            "To filter by 'list' or 'calc', name the command first: 'llm-pricing list calc'"
        ),
        show_default=False,
    ),
]


class DefaultCommandGroup(TyperGroup):
    """Command group that runs ``list`` when no subcommand is named."""

    default_command = "list"

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        flag_opts: set[str] = set()
        value_opts: set[str] = set()
        for param in self.get_params(ctx):
            # typer may vendor its own click, so match options by kind not class
            if getattr(param, "param_type_name", "") != "option":
                continue
            names = {*param.opts, *param.secondary_opts}
            if getattr(param, "is_flag", False) or getattr(param, "count", False):
                flag_opts |= names
            else:
                value_opts |= names

        # Skip the group's own options to find where the command name belongs
        index = 0
        while index < len(args):
            token = args[index]
            if token in flag_opts:
                index += 1
            elif token in value_opts:
                index += 2
            elif token.split("=", 1)[0] in value_opts:
                index += 1
            else:
                break

        rest = args[index:]
        if not rest or rest[0] not in self.commands:
            args = [*args[:index], self.default_command, *rest]
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="llm-pricing",
    help="Show OpenRouter model pricing and estimate request costs.",
    cls=DefaultCommandGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    api_url: Annotated[
        str, typer.Option("--api-url", help="Model catalog endpoint")
    ] = OPENROUTER_MODELS_URL,
    timeout: Annotated[
        float, typer.Option("--timeout", min=0.1, help="Request timeout in seconds")
    ] = DEFAULT_TIMEOUT_SECONDS,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging")] = False,
) -> None:
    """Show OpenRouter model pricing and estimate request costs."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("llm_pricing").setLevel(level)
    ctx.obj = Config(api_url=api_url, timeout=timeout)


def _config(ctx: typer.Context) -> Config:
    return ctx.obj if isinstance(ctx.obj, Config) else Config()


@app.command("list")
def list_models(
    ctx: typer.Context,
    filters: FiltersArg = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show all model information")
    ] = False,
) -> None:
    """List models with pricing (default)."""
    config = _config(ctx)
    with CatalogClient(config) as client:
        result = PricingService(client, config).list_models(filters or [])

    if isinstance(result, Err):
        typer.echo(result.err_value, err=True)
        raise typer.Exit(code=1)

    models = result.ok_value
    if not models:
        typer.echo(NO_MATCH_MESSAGE, err=True)
        return
    typer.echo(render_verbose(models) if verbose else render_model_table(models))


@app.command()
def calc(
    ctx: typer.Context,
    input_tokens: Annotated[
        int, typer.Argument(metavar="INPUT", min=0, help="Number of input tokens")
    ],
    output_tokens: Annotated[
        int, typer.Argument(metavar="OUTPUT", min=0, help="Number of output tokens")
    ],
    filters: FiltersArg = None,
    cached: Annotated[
        int | None,
        typer.Option(
            "--cached",
            "-c",
            min=0,
            help="Number of cached input tokens; enables cache pricing even when 0",
        ),
    ] = None,
    ttl: Annotated[
        int, typer.Option("--ttl", "-t", min=0, help="Cache TTL in minutes")
    ] = DEFAULT_CACHE_TTL_MINUTES,
) -> None:
    """Calculate cost for a specific request."""
    config = _config(ctx)
    params = CacheRequestParams(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cached_tokens=cached,
        ttl_minutes=ttl,
    )
    with CatalogClient(config) as client:
        result = PricingService(client, config).calculate(params, filters or [])

    if isinstance(result, Err):
        typer.echo(result.err_value, err=True)
        raise typer.Exit(code=1)

    breakdowns = result.ok_value
    if not breakdowns:
        typer.echo(NO_MATCH_MESSAGE, err=True)
        typer.echo("Use 'llm-pricing list' to see available models", err=True)
        return
    typer.echo(render_cost_table(breakdowns, params))

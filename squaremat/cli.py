"""Typer-powered command-line interface for square uint32 matrices."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_NTHREADS, DEFAULT_ORDER, MatrixContext
from .display import format_matrix
from .engine import Matrix, MatrixEngine
from .errors import MatrixError

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Build, combine and summarise square uint32 matrices.")
console = Console()


class MatrixKind(str, Enum):
    zero = "zero"
    identity = "identity"
    random = "random"
    uniform = "uniform"
    sequence = "sequence"


class PowerMethod(str, Enum):
    squaring = "squaring"
    linear = "linear"


def _engine(ctx: typer.Context) -> MatrixEngine:
    engine = ctx.obj
    if not isinstance(engine, MatrixEngine):
        raise typer.BadParameter("engine was not configured")
    return engine


def _build(engine: MatrixEngine, kind: MatrixKind, seed: int, value: int, start: int, step: int) -> Matrix:
    LOGGER.info("Building %s matrix (%s)", kind.value, engine.context.describe())
    try:
        if kind is MatrixKind.zero:
            return engine.zero()
        if kind is MatrixKind.identity:
            return engine.identity()
        if kind is MatrixKind.random:
            return engine.random(seed)
        if kind is MatrixKind.uniform:
            return engine.uniform(value)
        return engine.sequence(start, step)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


SEED_OPTION = typer.Option(0, "--seed", help="Generator seed used by the 'random' kind.", rich_help_panel="Construction")
VALUE_OPTION = typer.Option(0, "--value", help="Fill value used by the 'uniform' kind.", rich_help_panel="Construction")
START_OPTION = typer.Option(0, "--start", help="First value used by the 'sequence' kind.", rich_help_panel="Construction")
STEP_OPTION = typer.Option(1, "--step", help="Increment used by the 'sequence' kind.", rich_help_panel="Construction")


@app.callback()
def configure(
    ctx: typer.Context,
    order: int = typer.Option(DEFAULT_ORDER, "--order", help="Side length of every matrix."),
    nthreads: int = typer.Option(
        DEFAULT_NTHREADS, "--nthreads", help="Worker threads used by matrix multiplication."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    """Configure the matrix order and thread count shared by every command."""

    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))
    try:
        ctx.obj = MatrixEngine(MatrixContext(order=order, nthreads=nthreads))
    except MatrixError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("show")
def show(
    ctx: typer.Context,
    kind: MatrixKind = typer.Argument(..., help="Kind of matrix to build."),
    seed: int = SEED_OPTION,
    value: int = VALUE_OPTION,
    start: int = START_OPTION,
    step: int = STEP_OPTION,
) -> None:
    """Print a freshly built matrix, one row per line."""

    engine = _engine(ctx)
    matrix = _build(engine, kind, seed, value, start, step)
    typer.echo(format_matrix(matrix, engine.context), nl=False)


@app.command("power")
def power(
    ctx: typer.Context,
    kind: MatrixKind = typer.Argument(..., help="Kind of matrix to build."),
    exponent: int = typer.Option(..., "--exponent", "-e", help="Non-negative power to raise the matrix to."),
    method: PowerMethod = typer.Option(PowerMethod.squaring, "--method", help="Exponentiation strategy."),
    seed: int = SEED_OPTION,
    value: int = VALUE_OPTION,
    start: int = START_OPTION,
    step: int = STEP_OPTION,
) -> None:
    """Print a built matrix raised to ``--exponent``."""

    engine = _engine(ctx)
    matrix = _build(engine, kind, seed, value, start, step)
    try:
        result = engine.matrix_pow(matrix, exponent, method=method.value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(format_matrix(result, engine.context), nl=False)


@app.command("stats")
def stats(
    ctx: typer.Context,
    kind: MatrixKind = typer.Argument(..., help="Kind of matrix to build."),
    frequency_of: Optional[int] = typer.Option(
        None, "--frequency-of", help="Also count how often this value occurs."
    ),
    seed: int = SEED_OPTION,
    value: int = VALUE_OPTION,
    start: int = START_OPTION,
    step: int = STEP_OPTION,
) -> None:
    """Summarise a built matrix in a table."""

    engine = _engine(ctx)
    matrix = _build(engine, kind, seed, value, start, step)

    table = Table(title=f"{kind.value} matrix ({engine.context.describe()})")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    table.add_row("sum", str(engine.sum(matrix)))
    table.add_row("trace", str(engine.trace(matrix)))
    table.add_row("minimum", str(engine.minimum(matrix)))
    table.add_row("maximum", str(engine.maximum(matrix)))
    if frequency_of is not None:
        try:
            count = engine.frequency(matrix, frequency_of)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        table.add_row(f"frequency({frequency_of})", str(count))
    console.print(table)


def main() -> None:
    """Entry point for the ``squaremat`` console script."""

    app()


if __name__ == "__main__":
    main()

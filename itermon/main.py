from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import AppConfig, load_config
from .core.diffs import ConvergenceMonitor
from .errors import ItermonError
from .utils.logging import if_verbose, setup_logging


app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)

# Samples such as -0.5 look like short options to click
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _prepare(
    config: Optional[Path],
    capacity: Optional[int],
    default: Optional[float],
    log_level: Optional[str],
) -> tuple[AppConfig, ConvergenceMonitor]:
    try:
        cfg = load_config(config)
    except ItermonError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    setup_logging(log_level or cfg.env.LOG_LEVEL)

    mcfg = cfg.runtime.monitor
    if capacity is not None:
        mcfg.capacity = capacity
    if default is not None:
        mcfg.default = default
    try:
        monitor = ConvergenceMonitor(mcfg.capacity, mcfg.default)
    except ItermonError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    return cfg, monitor


@app.command(context_settings=NUMERIC_ARGS)
def trace(
    samples: List[float] = typer.Argument(..., help="Differences to push, in order"),
    capacity: Optional[int] = typer.Option(None, help="Window capacity"),
    default: Optional[float] = typer.Option(None, help="Value reported while filling"),
    config: Optional[Path] = typer.Option(None, help="YAML config file"),
    log_level: Optional[str] = typer.Option(None),
) -> None:
    """Push SAMPLES one by one and print the window maximum after each push."""
    cfg, monitor = _prepare(config, capacity, default, log_level)
    for i, x in enumerate(samples, start=1):
        monitor.push(x)
        typer.echo(f"{i}\t{x!r}\t{monitor.max_diff()!r}")
    if_verbose(cfg.runtime.verbose, 1, f"pushed {len(samples)} samples, {monitor.rescans} rescans", logger)


@app.command(context_settings=NUMERIC_ARGS)
def check(
    samples: List[float] = typer.Argument(..., help="Differences to push, in order"),
    tolerance: Optional[float] = typer.Option(None, help="Converged when max diff < this"),
    capacity: Optional[int] = typer.Option(None, help="Window capacity"),
    default: Optional[float] = typer.Option(None, help="Value reported while filling"),
    config: Optional[Path] = typer.Option(None, help="YAML config file"),
    log_level: Optional[str] = typer.Option(None),
) -> None:
    """Exit 0 if the trailing window of SAMPLES is below TOLERANCE, 1 otherwise."""
    cfg, monitor = _prepare(config, capacity, default, log_level)
    tol = tolerance if tolerance is not None else cfg.runtime.monitor.tolerance
    for x in samples:
        monitor.push(x)
    if monitor.converged(tol):
        typer.echo(f"converged: max diff {monitor.max_diff()!r} < {tol!r}")
        return
    typer.echo(f"not converged: max diff {monitor.max_diff()!r} >= {tol!r}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

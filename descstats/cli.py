"""Command line interface: print descriptive summaries of a CSV file or reference dataset."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .data import Dataset, load_iris, load_pima
from .engine import OPERATIONS, DescriptiveSummaryEngine
from .errors import SummaryError
from .utils.config import DisplayConfig, SummaryConfig
from .utils.logging_utils import setup_logger


app = typer.Typer(add_completion=False, help="Descriptive statistics for tabular datasets.")

_REFERENCE_LOADERS = {
    "iris": load_iris,
    "pima": load_pima,
}


def load_source(source: str) -> Dataset:
    """Resolve a reference dataset name or a CSV path into a dataset.

    Raises:
        typer.BadParameter: If ``source`` is neither a known name nor an existing file.
    """
    if source in _REFERENCE_LOADERS:
        return _REFERENCE_LOADERS[source]()
    path = Path(source)
    if not path.is_file():
        raise typer.BadParameter(f"'{source}' is not a reference dataset ({', '.join(_REFERENCE_LOADERS)}) or a file")
    return Dataset.from_csv(path)


@app.command()
def summarize(
    source: str = typer.Argument(..., help="Reference dataset name (iris, pima) or CSV path"),
    op: list[str] = typer.Option([], "--op", "-o", help=f"Operation(s) to run: {', '.join(OPERATIONS)}. Default: all"),
    label: Optional[str] = typer.Option(None, "--label", "-l", help="Categorical column for class_distribution"),
    n: int = typer.Option(6, "--n", help="Rows shown by peek"),
    skew_type: int = typer.Option(3, "--skew-type", help="Skewness convention (1, 2 or 3)"),
    precision: int = typer.Option(4, "--precision", help="Decimals in printed numbers"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """
    Print one or more descriptive summaries.

    Without --op every summary is printed; a summary that fails is reported and the rest
    still run. With --op, the first failing summary exits with code 1.
    """
    setup_logger(level=log_level)
    display = DisplayConfig(precision=precision)
    try:
        config = SummaryConfig(peek_rows=n, skewness_type=skew_type)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    engine = DescriptiveSummaryEngine(load_source(source), config=config)

    if not op:
        typer.echo(engine.describe(label_col=label).to_string(display))
        return

    for name in op:
        if name not in OPERATIONS:
            raise typer.BadParameter(f"Unknown operation '{name}'. Use one of {', '.join(OPERATIONS)}.")
        kwargs: dict[str, object] = {}
        if name == "class_distribution":
            if label is None:
                raise typer.BadParameter("class_distribution needs --label")
            kwargs["label_col"] = label
        try:
            result = engine.run(name, **kwargs)
        except SummaryError as exc:
            typer.echo(f"{name}: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(f"== {name} ==\n{result.to_string(display)}\n")


@app.command()
def schema(
    source: str = typer.Argument(..., help="Reference dataset name (iris, pima) or CSV path"),
) -> None:
    """Print the attribute schema (position, name, kind)."""
    dataset = load_source(source)
    for attr in dataset.schema:
        typer.echo(f"{attr.position}\t{attr.name}\t{attr.kind}")

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import typer
from typer.main import get_command

from .common import build_map, format_pair, validate_axis

app = typer.Typer(add_completion=False, no_args_is_help=True, rich_markup_mode="rich")

_PAIRS_HELP = "CSV file of key,value pairs."
_CONFIG_HELP = "YAML file with KDMap settings (seed, reject_duplicate_keys, log_build_stats)."


@app.command("dump")
def cli_dump(
    pairs_csv: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help=_PAIRS_HELP),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True, help=_CONFIG_HELP
    ),
    seed: int | None = typer.Option(None, "--seed"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Print every stored pair."""
    kd = build_map(pairs_csv, config=config, seed=seed, header=header)
    for p in kd.all_pairs():
        typer.echo(format_pair(p.key, p.value))


@app.command("get")
def cli_get(
    pairs_csv: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help=_PAIRS_HELP),
    key: str = typer.Argument(...),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True, help=_CONFIG_HELP
    ),
    seed: int | None = typer.Option(None, "--seed"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Print the value stored under KEY; exit 1 when the key is absent."""
    kd = build_map(pairs_csv, config=config, seed=seed, header=header)
    value = kd.get(key)
    if value is None:
        typer.echo(f"Key not found: {key!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(value))


@app.command("range", context_settings={"ignore_unknown_options": True})
def cli_range(
    pairs_csv: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help=_PAIRS_HELP),
    key_start: str = typer.Argument(...),
    value_start: int = typer.Argument(...),
    key_end: str = typer.Argument(...),
    value_end: int = typer.Argument(...),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True, help=_CONFIG_HELP
    ),
    seed: int | None = typer.Option(None, "--seed"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Print pairs in [KEY_START, KEY_END) x [VALUE_START, VALUE_END)."""
    kd = build_map(pairs_csv, config=config, seed=seed, header=header)
    for p in kd.range((key_start, value_start), (key_end, value_end)):
        typer.echo(format_pair(p.key, p.value))


@app.command("splits")
def cli_splits(
    pairs_csv: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help=_PAIRS_HELP),
    axis: str = typer.Option("both", "--axis", help="key, value or both."),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True, help=_CONFIG_HELP
    ),
    seed: int | None = typer.Option(None, "--seed"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Print the pivots used by split nodes."""
    ax = validate_axis(axis)
    kd = build_map(pairs_csv, config=config, seed=seed, header=header)
    if ax in ("key", "both"):
        for k in kd.key_splits():
            typer.echo(f"key {k}")
    if ax in ("value", "both"):
        for v in kd.value_splits():
            typer.echo(f"value {v}")


def run(argv: Sequence[str] | None = None, *, prog_name: str | None = None) -> None:
    cmd = get_command(app)
    cmd.main(args=None if argv is None else list(argv), prog_name=prog_name)


def main(argv: list[str] | None = None) -> None:
    run(argv, prog_name="kdmap")


if __name__ == "__main__":
    main()

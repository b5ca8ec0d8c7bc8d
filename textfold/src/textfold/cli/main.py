"""Typer-based command line interface for textfold."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import structlog
import typer
import yaml

from ..config import AppConfig, dump_default_config, load_config
from ..encoding import mode
from ..exceptions import InvalidInputError
from ..logging import configure_logging
from ..paths import default_config_path
from ..scanner import seems_utf8
from ..sequences import flatten as flatten_items
from ..transliterate import remove_accents

app = typer.Typer(help="textfold command line interface")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    ctx.obj = load_config(config)
    configure_logging(ctx.obj.logging.normalized_level())
    mode.configure(ctx.obj.encoding)


@app.command()
def check(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    """Report whether a file looks like UTF-8 (exit 0) or legacy text (exit 1)."""
    if seems_utf8(path.read_bytes()):
        typer.echo("utf-8")
        return
    typer.echo("legacy")
    raise typer.Exit(code=1)


@app.command()
def fold(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write folded output here"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Enable locale digraphs (de_DE, da_DK, ca)"),
) -> None:
    """Replace accented characters with ASCII equivalents."""
    config: AppConfig = ctx.obj
    locale = locale or config.transliteration.locale
    folded = remove_accents(path.read_bytes(), locale=locale)
    if output is None:
        typer.echo(folded, nl=False)
        return
    output.write_bytes(folded)
    logger.info("fold.written", path=str(output), size=len(folded), locale=locale)
    typer.echo(f"Folded output written to {output}")


def _load_nested(path: Path) -> List[Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidInputError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, list):
        raise InvalidInputError(f"Expected a list at the top of {path}")
    return data


@app.command()
def flatten(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=1, help="Reject deeper nesting"),
) -> None:
    """Flatten a nested JSON/YAML list and print it as JSON."""
    config: AppConfig = ctx.obj
    try:
        items = _load_nested(path)
        flat = flatten_items(items, [], max_depth=max_depth or config.flatten.max_depth)
    except InvalidInputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(json.dumps(flat, ensure_ascii=False))


@app.command("config-init")
def config_init(
    target: Path = typer.Argument(default_config_path(), help="Where to write the default config"),
) -> None:
    dump_default_config(target)
    typer.echo(f"Default config written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()

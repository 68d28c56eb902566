from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from media_preview.config import AppConfig
from media_preview.errors import NotFoundServiceError
from media_preview.logging import setup_logging
from media_preview.pipeline.runner import find_preview_media
from media_preview.scan.media_info import supported_media_types

app = typer.Typer(help="Find previewable media in a folder tree")


def _build_config(
    album_cap: Optional[int] = None,
    max_depth: Optional[int] = None,
    mime_types: Optional[List[str]] = None,
    allow_svg: bool = False,
) -> AppConfig:
    config = AppConfig()
    if album_cap is not None:
        config.discovery.album_cap = album_cap
    if max_depth is not None:
        config.discovery.max_depth = max_depth
    if mime_types:
        config.media_types.extra_types = list(mime_types)
    config.media_types.allow_svg = allow_svg
    return config


@app.callback()
def init_app(log_level: str = typer.Option("INFO", "--log-level")) -> None:
    config = AppConfig(log_level=log_level)
    config.ensure_dirs()
    setup_logging(config.log_dir, config.log_level)


@app.command()
def scan(
    input_dir: Path,
    album_cap: Optional[int] = typer.Option(None, min=1, help="Pictures to collect per sub-folder"),
    max_depth: Optional[int] = typer.Option(None, min=0, help="Do not descend below this depth"),
    mime_types: Optional[List[str]] = typer.Option(None, "--mime-type", help="Extra media type to accept"),
    allow_svg: bool = typer.Option(False, "--allow-svg"),
    as_json: bool = typer.Option(False, "--json"),
) -> None:
    config = _build_config(album_cap, max_depth, mime_types, allow_svg)
    try:
        records = find_preview_media(config, input_dir)
    except NotFoundServiceError as exc:
        print(f"[red]Not found:[/red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([record.to_dict() for record in records], indent=2))
        return
    table = Table("Path", "File ID", "Mime type", "Modified")
    for record in records:
        modified = datetime.fromtimestamp(record.mtime).isoformat(timespec="seconds")
        table.add_row(record.path, str(record.file_id), record.mimetype, modified)
    print(table)
    print(f"{len(records)} media files")


@app.command("types")
def list_types(
    mime_types: Optional[List[str]] = typer.Option(None, "--mime-type"),
    allow_svg: bool = typer.Option(False, "--allow-svg"),
) -> None:
    config = _build_config(mime_types=mime_types, allow_svg=allow_svg)
    for mimetype in sorted(supported_media_types(config)):
        typer.echo(mimetype)

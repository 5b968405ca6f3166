import json
from pathlib import Path
from typing import Any, Dict

import typer
from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILE = ".reqlayer.json"


class ClientConfig(BaseModel):
    server: str = ""
    timeout: float = Field(60, gt=0)
    raise_for_status: bool = Field(True, alias="raiseForStatus")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def load_config() -> Dict[str, Any]:
    """Read the raw settings dict; unreadable or non-object files count as empty."""
    path = Path(CONFIG_FILE)
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        typer.echo(f"Warning: Could not load config file: {e}")
        return {}
    if not isinstance(raw, dict):
        typer.echo("Warning: Config file does not hold a JSON object, ignoring it")
        return {}
    return raw


def save_config(cfg: Dict[str, Any]) -> None:
    path = Path(CONFIG_FILE)
    try:
        path.write_text(json.dumps(cfg, indent=2))
    except OSError as e:
        typer.echo(f"Error: Could not write {path}: {e}")
        raise typer.Exit(code=1)

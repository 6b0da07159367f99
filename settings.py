import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

ENV_VARS = {
    "spreadsheet_id": "SHEET_JSON_SPREADSHEET_ID",
    "output_dir": "SHEET_JSON_OUTPUT_DIR",
    "service_account_file": "GOOGLE_SERVICE_ACCOUNT_FILE",
    "credentials_file": "GOOGLE_CREDENTIALS_FILE",
    "token_file": "GOOGLE_TOKEN_FILE",
}


@dataclass
class ExportSettings:
    """Everything one export run needs, passed explicitly to run_export()."""

    spreadsheet_id: str = ""
    data_ranges: List[str] = field(default_factory=list)
    file_names: List[str] = field(default_factory=list)
    header_counts: List[int] = field(default_factory=list)
    output_dir: str = "output"
    service_account_file: Optional[str] = None
    credentials_file: str = "credentials.json"
    token_file: str = "token.json"
    log_file: str = "logs/export_sheet_to_json.log"
    debug: bool = False
    keep_open: bool = False

    def header_depth(self, index: int) -> int:
        """Header depth for the range at `index`; ranges without one use 1."""
        if index < len(self.header_counts):
            return self.header_counts[index]
        return 1


def default_values() -> Dict[str, Any]:
    return {f.name: getattr(ExportSettings(), f.name) for f in fields(ExportSettings)}


def load_settings(path: Optional[str], defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Load a JSON settings file and merge its known keys over defaults."""
    if not path:
        return dict(defaults)
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        return dict(defaults)
    except Exception:
        return dict(defaults)
    if not isinstance(data, dict):
        return dict(defaults)
    merged = dict(defaults)
    merged.update({k: v for k, v in data.items() if k in defaults})
    return merged


def settings_from_env() -> Dict[str, Any]:
    """Read overrides from the environment (and a .env file, if present)."""
    load_dotenv()
    values = {}
    for key, var in ENV_VARS.items():
        value = os.getenv(var)
        if value:
            values[key] = value
    return values


def build_settings(
    config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> ExportSettings:
    """
    Assemble ExportSettings from, lowest to highest precedence: built-in
    defaults, the JSON config file, environment variables, and `overrides`
    (command-line flags; None values are ignored).
    """
    values = load_settings(config_file, default_values())
    values.update(settings_from_env())
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return ExportSettings(**values)

import logging
import os
import time
from typing import Any, Callable, List, Optional, Tuple

import gspread
from gspread.exceptions import APIError

RangeValues = Tuple[str, List[List[Any]]]


def _retry_gspread_call(
    func: Callable, *args: Any, max_attempts: int = 5, **kwargs: Any
) -> Any:
    """Retry a gspread API call with exponential backoff."""
    for attempt in range(max_attempts):
        try:
            return func(*args, **kwargs)
        except APIError as e:
            delay = 2**attempt
            logging.warning(
                f"Google Sheets APIError: {e}; retrying in {delay}s (attempt {attempt + 1}/{max_attempts})"
            )
            time.sleep(delay)
    raise RuntimeError(f"Google Sheets API call failed after {max_attempts} attempts.")


def authenticate(
    service_account_file: Optional[str] = None,
    credentials_file: str = "credentials.json",
    token_file: str = "token.json",
) -> gspread.client.Client:
    """
    Authenticate to Google Sheets with read-only access.

    A service account file wins when given. Otherwise the installed-app OAuth
    flow runs with `credentials_file` (client secrets); the authorized user
    token is cached in `token_file` and reused on later runs.
    """
    if service_account_file:
        return gspread.service_account(
            filename=service_account_file, scopes=gspread.auth.READONLY_SCOPES
        )
    logging.info("Accessing google login token...")
    token_dir = os.path.dirname(os.path.abspath(token_file))
    os.makedirs(token_dir, exist_ok=True)
    client = gspread.oauth(
        scopes=gspread.auth.READONLY_SCOPES,
        credentials_filename=credentials_file,
        authorized_user_filename=token_file,
    )
    logging.info("Credential file saved to: %s", token_file)
    return client


def fetch_ranges(
    spreadsheet_id: str,
    ranges: List[str],
    service_account_file: Optional[str] = None,
    credentials_file: str = "credentials.json",
    token_file: str = "token.json",
) -> List[RangeValues]:
    """Fetch several A1 ranges in one batch request.

    Returns (range name, rows) pairs in request order; the API omits
    `values` for empty ranges, which come back as [].
    """
    gc = authenticate(service_account_file, credentials_file, token_file)
    sh = _retry_gspread_call(gc.open_by_key, spreadsheet_id)
    response = _retry_gspread_call(sh.values_batch_get, ranges)

    results = []
    value_ranges = response.get("valueRanges") or []
    for i, requested in enumerate(ranges):
        value_range = value_ranges[i] if i < len(value_ranges) else {}
        name = value_range.get("range", requested)
        results.append((name, value_range.get("values", [])))
    logging.info("Fetched %d range(s) from %s", len(results), spreadsheet_id)
    return results

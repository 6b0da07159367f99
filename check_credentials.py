import argparse
import logging
import os
from typing import Optional

from google_sheet_read import authenticate
from settings import build_settings


def check_google(
    spreadsheet_id: str,
    service_account_file: Optional[str] = None,
    credentials_file: str = "credentials.json",
    token_file: str = "token.json",
) -> str:
    """Check that the configured Google credentials can open the spreadsheet."""
    if service_account_file:
        if not os.path.isfile(service_account_file):
            return "Missing"
    elif not os.path.isfile(credentials_file) and not os.path.isfile(token_file):
        return "Missing"
    try:
        gc = authenticate(service_account_file, credentials_file, token_file)
        gc.open_by_key(spreadsheet_id)
        return "Valid"
    except Exception:
        return "Invalid"


def main():
    """Report whether the exporter's Google credentials work."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    p = argparse.ArgumentParser(description="Health check for sheet exporter credentials")
    p.add_argument("--spreadsheet-id", help="Google spreadsheet key")
    p.add_argument("--service-account-file", help="Google Sheets service-account JSON")
    p.add_argument("--credentials-file", help="OAuth client secrets file")
    p.add_argument("--token-file", help="Cached OAuth token file")
    p.add_argument("--config", help="JSON settings file")
    args = p.parse_args()

    overrides = vars(args)
    settings = build_settings(overrides.pop("config"), overrides)
    status = check_google(
        settings.spreadsheet_id,
        settings.service_account_file,
        settings.credentials_file,
        settings.token_file,
    )

    logging.info("\nCredential Health Check Summary:")
    logging.info(f"  {'Google Sheets':<20}: {status}")

    if status != "Valid":
        exit(1)


if __name__ == "__main__":
    main()

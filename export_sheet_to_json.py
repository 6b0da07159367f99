#!/usr/bin/env python3
import os
import json
import argparse
import logging
from typing import Any, List, Optional

from common import setup_logging
from google_sheet_read import RangeValues, fetch_ranges
from progress import ProgressBar
from settings import ExportSettings, build_settings
from tree_builder import convert


def output_path(output_dir: str, file_name: str) -> str:
    return os.path.join(output_dir, file_name) + '.json'


def write_json(data: Any, output: str) -> None:
    """Write one converted range as indented UTF-8 JSON."""
    out_dir = os.path.dirname(output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def convert_ranges(ranges: List[RangeValues], settings: ExportSettings) -> List[list]:
    """Convert every fetched range, in order, into its JSON array."""
    results = []
    with ProgressBar('Ranges: ') as range_bar:
        for i, (name, rows) in enumerate(ranges):
            logging.info('Parsing sheet: (%s)...', name)
            with ProgressBar(name + ' ') as sheet_bar:
                data = convert(rows, settings.header_depth(i), on_progress=sheet_bar.report)
            logging.info('Done parsing sheet: (%s)!', name)
            results.append(data)
            range_bar.report((i + 1) / len(ranges))
    return results


def validate_settings(settings: ExportSettings) -> Optional[str]:
    """Return an error message for unusable settings, or None."""
    if not settings.spreadsheet_id:
        return 'No spreadsheet id given'
    if not settings.data_ranges:
        return 'No data ranges given'
    if len(settings.data_ranges) != len(settings.file_names):
        return 'Number of data-ranges given and number of given file-names are not equal!'
    bad_depths = [d for d in settings.header_counts if d < 1]
    if bad_depths:
        return f'Header counts must be positive integers, got: {bad_depths}'
    return None


def run_export(settings: ExportSettings) -> bool:
    """
    Fetch the configured ranges, convert them and write one JSON file per range.

    Returns False (after logging) on invalid settings or any upstream failure.
    """
    error = validate_settings(settings)
    if error:
        logging.error(error)
        return False

    try:
        ranges = fetch_ranges(
            settings.spreadsheet_id,
            settings.data_ranges,
            service_account_file=settings.service_account_file,
            credentials_file=settings.credentials_file,
            token_file=settings.token_file,
        )
    except Exception as e:
        if settings.debug:
            logging.exception('Fetching sheet data failed')
        else:
            logging.error('Fetching sheet data failed: %s', e)
        return False

    try:
        results = convert_ranges(ranges, settings)
        for file_name, data in zip(settings.file_names, results):
            output = output_path(settings.output_dir, file_name)
            write_json(data, output)
            logging.info('Wrote %d entries to %s', len(data), output)
    except Exception as e:
        if settings.debug:
            logging.exception('Export failed')
        else:
            logging.error('Export failed: %s', e)
        return False

    logging.info('Successfully exported sheet json data...')
    return True


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='Export Google Sheet ranges to nested JSON files')
    p.add_argument('-i', '--spreadsheet-id', help='The id of the Google spreadsheet')
    p.add_argument('-o', '--output-dir', help='Directory for the JSON files (default: output)')
    p.add_argument('-f', '--file-names', nargs='+',
                   help='Names to give the range json files. Example: -f database database1')
    p.add_argument('-r', '--data-ranges', nargs='+',
                   help='Ranges in the sheet. Example: -r Tab!A1:E5 "Tab 2!A1:E5"')
    p.add_argument('-c', '--header-count', dest='header_counts', nargs='*', type=int,
                   help='Header rows per range, in data-range order; missing entries default to 1')
    p.add_argument('-k', '--keep-open', action='store_true', default=None,
                   help='Wait for Enter before exiting')
    p.add_argument('-d', '--debug', action='store_true', default=None,
                   help='Verbose logging with tracebacks')
    p.add_argument('--service-account-file', help='Path to Google service account JSON')
    p.add_argument('--credentials-file', help='OAuth client secrets (default: credentials.json)')
    p.add_argument('--token-file', help='Cached OAuth token (default: token.json)')
    p.add_argument('--log-file', help='Log file (default: logs/export_sheet_to_json.log)')
    p.add_argument('--config', help='JSON settings file')
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    overrides = vars(args)
    config_file = overrides.pop('config')
    settings = build_settings(config_file, overrides)
    setup_logging(None, settings.log_file, debug=settings.debug)

    error = validate_settings(settings)
    if error:
        logging.error(error)
        code = 1
    else:
        code = 0 if run_export(settings) else 2

    if settings.keep_open:
        input('Press Enter to close...')
    return code


if __name__ == '__main__':
    exit(main())

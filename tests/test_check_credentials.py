import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import gspread
import pytest

from check_credentials import check_google


class DummyGC:
    def __init__(self, ok):
        self.ok = ok

    def open_by_key(self, key):
        if not self.ok:
            raise gspread.exceptions.SpreadsheetNotFound
        return object()


@pytest.fixture
def sa_file(tmp_path):
    path = tmp_path / "sa.json"
    path.write_text("{}", encoding="utf-8")
    return str(path)


def test_missing_files(tmp_path):
    assert check_google("KEY", service_account_file=str(tmp_path / "nope.json")) == "Missing"
    assert check_google(
        "KEY",
        credentials_file=str(tmp_path / "c.json"),
        token_file=str(tmp_path / "t.json"),
    ) == "Missing"


def test_valid(monkeypatch, sa_file):
    monkeypatch.setattr(gspread, "service_account", lambda filename=None, scopes=None: DummyGC(True))
    assert check_google("KEY", service_account_file=sa_file) == "Valid"


def test_invalid(monkeypatch, sa_file):
    monkeypatch.setattr(gspread, "service_account", lambda filename=None, scopes=None: DummyGC(False))
    assert check_google("KEY", service_account_file=sa_file) == "Invalid"

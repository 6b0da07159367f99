import pathlib


def pytest_ignore_collect(collection_path, config):
    # Accept both py.path.local (pytest<9) and pathlib.Path (pytest>=9)
    p = pathlib.Path(str(collection_path))
    # Ignore generated output and virtualenvs
    for part in p.parts:
        if part in {".venv", "dist", "output", "logs"}:
            return True
    return False

import pytest

from tools import source_locator


@pytest.fixture
def tracked_open(monkeypatch):
    """Record every handle the extractors open so tests can check none leak."""
    handles = []
    real_open = open

    def tracking_open(*args, **kwargs):
        handle = real_open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(source_locator, "open", tracking_open, raising=False)
    return handles


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_bytes(text.encode("utf-8"))
        return str(p)
    return _write

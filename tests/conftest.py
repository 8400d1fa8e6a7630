import os

import pytest

# keep rich from wrapping long tmp paths in captured output
os.environ["COLUMNS"] = "1000"


def read_utf16(path) -> str:
    raw = open(path, "rb").read()
    assert raw[:2] == b"\xff\xfe"
    return raw[2:].decode("utf-16-le")


@pytest.fixture
def source_tree(tmp_path):
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_bytes(b"hello")
    (src / "sub" / "b.txt").write_bytes(b"world")
    return src


@pytest.fixture
def out_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out

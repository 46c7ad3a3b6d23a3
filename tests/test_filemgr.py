import os

import pytest

from heistkit.filemgr import FileManager


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "cat.png").write_text("cat-in-images")
    (tmp_path / "dog.png").write_text("dog-at-root")
    (tmp_path / "images" / "dog.png").write_text("dog-in-images")
    return tmp_path


def _base(tmp_path):
    return str(tmp_path) + os.sep


def _read(path):
    with open(path) as fh:
        return fh.read()


def test_percent_is_replaced_by_base_dir(tree):
    base = _base(tree)
    mgr = FileManager("%;%images" + os.sep, _read, base_dir=base)
    assert mgr.search_dirs == [base, base + "images" + os.sep]
    assert mgr.path == "%;%images" + os.sep


def test_trailing_semicolon_not_duplicated(tree):
    base = _base(tree)
    mgr = FileManager("%;", _read, base_dir=base)
    assert mgr.search_dirs == [base]


def test_find_path_scans_in_order(tree):
    base = _base(tree)
    images = base + "images" + os.sep
    mgr = FileManager("%;%images" + os.sep, _read, base_dir=base)
    assert mgr.find_path("dog.png") == base + "dog.png"
    assert mgr.find_path("cat.png") == images + "cat.png"

    reordered = FileManager("%images" + os.sep + ";%", _read, base_dir=base)
    assert reordered.find_path("dog.png") == images + "dog.png"


def test_find_path_missing_returns_name(tree):
    mgr = FileManager("%;%images" + os.sep, _read, base_dir=_base(tree))
    assert mgr.find_path("missing.png") == "missing.png"


def test_find_path_with_directory_is_unchanged(tree):
    mgr = FileManager("%", _read, base_dir=_base(tree))
    name = os.path.join("images", "cat.png")
    assert mgr.find_path(name) == name


def test_path_setter_recomputes(tree):
    base = _base(tree)
    mgr = FileManager("%", _read, base_dir=base)
    assert mgr.find_path("cat.png") == "cat.png"
    mgr.path = "%images" + os.sep
    assert mgr.find_path("cat.png") == base + "images" + os.sep + "cat.png"


def test_load_uses_loader_and_caches(tree):
    calls = []

    def loader(path):
        calls.append(path)
        return _read(path)

    mgr = FileManager("%;%images" + os.sep, loader, base_dir=_base(tree))
    assert mgr.load("cat.png") == "cat-in-images"
    assert mgr.load("cat.png") == "cat-in-images"
    assert len(calls) == 1


def test_close_calls_deleter_for_each_cached_item(tree):
    deleted = []
    mgr = FileManager("%;%images" + os.sep, _read, deleted.append, base_dir=_base(tree))
    mgr.load("cat.png")
    mgr.load("dog.png")
    mgr.close()
    assert sorted(deleted) == ["cat-in-images", "dog-at-root"]
    mgr.close()
    assert len(deleted) == 2


def test_context_manager_releases_cache(tree):
    deleted = []
    with FileManager("%", _read, deleted.append, base_dir=_base(tree)) as mgr:
        assert mgr.load("dog.png") == "dog-at-root"
    assert deleted == ["dog-at-root"]


def test_loader_errors_propagate(tree):
    mgr = FileManager("%", _read, base_dir=_base(tree))
    with pytest.raises(FileNotFoundError):
        mgr.load("missing.png")
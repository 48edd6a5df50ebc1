"""Build-cleanup use case: find stale artifacts with walk + glob and remove them."""
import os

from cwdfs import compile_glob
from tests.helpers.tree import make_tree, snapshot


def test_remove_artifacts_across_tree(fs):
    make_tree(
        fs.resolve("project"),
        {
            "main.c": b"int main;",
            "main.o": b"\x00",
            "lib/util.c": b"util",
            "lib/util.o": b"\x01",
            "lib/.cache/x.o": b"\x02",
            "build/": b"",
        },
    )
    artifact = compile_glob("*.{o,a}")
    removed = []
    for root, _dirs, files in fs.walk("project"):
        for name in files:
            if artifact.match(name):
                removed.append(fs.delete(os.path.join(root, name)))

    assert sorted(os.path.basename(p) for p in removed) == ["main.o", "util.o", "x.o"]
    assert snapshot(fs.resolve("project")) == {"main.c": b"int main;", "lib/util.c": b"util"}


def test_find_first_stops_early(fs):
    make_tree(fs.resolve("big"), {f"d{i}/f.txt": b"" for i in range(20)})
    visited = 0
    found = None
    for root, _dirs, files in fs.walk("big"):
        visited += 1
        if "f.txt" in files:
            found = root
            break
    assert found is not None
    assert visited == 2


def test_clear_build_directory_then_recreate(fs):
    make_tree(fs.resolve("build"), {"out/a.bin": b"a", "out/b/": b"", "log.txt": b"l"})
    fs.delete_dir("build")
    fs.mkdirs("build/out")
    assert list(fs.walk("build")) == [
        (fs.resolve("build"), {"out"}, set()),
        (os.path.join(fs.resolve("build"), "out"), set(), set()),
    ]

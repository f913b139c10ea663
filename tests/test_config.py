from pathlib import Path

from draca import config


def test_defaults():
    roots = config.get_stdlib_roots()
    assert len(roots) == 1
    assert roots[0].name == "stdlib"
    assert (roots[0] / "math.dr").is_file()
    assert config.unqualified_fallback_enabled() is False
    assert config.get_recursion_limit() == 10_000
    assert config.get_log_level() == "WARNING"


def test_stdlib_path_splits_on_pathsep(monkeypatch):
    monkeypatch.setenv("DRACA_STDLIB_PATH", f"/a{config.os.pathsep}/b")
    assert config.get_stdlib_roots() == [Path("/a"), Path("/b")]


def test_flags(monkeypatch):
    for raw, expected in [("1", True), ("yes", True), ("TRUE", True), ("0", False), ("off", False)]:
        monkeypatch.setenv("DRACA_UNQUALIFIED_FALLBACK", raw)
        assert config.unqualified_fallback_enabled() is expected


def test_recursion_limit(monkeypatch):
    monkeypatch.setenv("DRACA_RECURSION_LIMIT", "50000")
    assert config.get_recursion_limit() == 50_000
    monkeypatch.setenv("DRACA_RECURSION_LIMIT", "10")
    assert config.get_recursion_limit() == 1000
    monkeypatch.setenv("DRACA_RECURSION_LIMIT", "lots")
    assert config.get_recursion_limit() == 10_000


def test_log_level(monkeypatch):
    monkeypatch.setenv("DRACA_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"

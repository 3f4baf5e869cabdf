# tests/core/config/test_resources.py
"""
Testes do LocalResourceChecker e das regras de prefixo de location.

Os testes usam apenas `tmp_path` como filesystem e raízes de classpath
explícitas, sem depender de sys.path nem do diretório corrente.
"""
from pathlib import Path

import pytest

try:
    from atlas_migrations.core.config.resources import (
        LocalResourceChecker,
        Location,
        LocationKind,
        ResourceChecker,
        parse_location,
    )
except Exception as e:  # noqa: BLE001
    LocalResourceChecker = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing resources module. Implement:\n"
            "- src/atlas_migrations/core/config/resources.py (LocalResourceChecker, parse_location)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("classpath:neo4j/migrations", ("classpath", "neo4j/migrations")),
        ("file:/opt/migrations", ("file", "/opt/migrations")),
        ("neo4j/migrations", ("classpath", "neo4j/migrations")),
        ("http://example.com/x", ("classpath", "http://example.com/x")),
    ],
)
def test_parse_location(raw, expected):
    _require_imports()
    parsed = parse_location(raw)
    assert (parsed.kind.value, parsed.path) == expected


def test_parse_location_rejects_non_strings():
    _require_imports()
    with pytest.raises(TypeError):
        parse_location(None)


def test_local_checker_satisfies_protocol():
    _require_imports()
    assert isinstance(LocalResourceChecker(classpath_roots=[]), ResourceChecker)


def test_file_locations(tmp_path: Path):
    _require_imports()
    (tmp_path / "migrations").mkdir()
    checker = LocalResourceChecker(classpath_roots=[])

    assert checker.exists(f"file:{tmp_path / 'migrations'}") is True
    assert checker.exists(f"file:{tmp_path / 'missing'}") is False


def test_relative_file_locations_use_base_dir(tmp_path: Path):
    _require_imports()
    (tmp_path / "db").mkdir()
    checker = LocalResourceChecker(classpath_roots=[], base_dir=tmp_path)

    assert checker.exists("file:db") is True
    assert checker.resolve("file:db") == tmp_path / "db"


def test_classpath_locations_search_roots_in_order(tmp_path: Path):
    _require_imports()
    first = tmp_path / "first"
    second = tmp_path / "second"
    (second / "neo4j" / "migrations").mkdir(parents=True)
    first.mkdir()

    checker = LocalResourceChecker(classpath_roots=[first, second])

    assert checker.exists("classpath:neo4j/migrations") is True
    assert checker.exists("classpath:/neo4j/migrations") is True
    assert checker.exists("neo4j/migrations") is True
    assert checker.resolve("neo4j/migrations") == second / "neo4j" / "migrations"
    assert checker.exists("classpath:other") is False


def test_classpath_location_never_falls_back_to_filesystem(tmp_path: Path):
    _require_imports()
    (tmp_path / "abs").mkdir()
    checker = LocalResourceChecker(classpath_roots=[tmp_path / "nowhere"])

    assert checker.exists(f"classpath:{tmp_path / 'abs'}") is False
    assert parse_location("file:x") == Location(kind=LocationKind.FILESYSTEM, path="x")

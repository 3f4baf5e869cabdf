# tests/core/test_prepare.py
"""
Testes da preparação de configuração (`prepare_migrations_config`).

Cenários cobertos:
- configuração padrão é criada quando habilitada
- `enabled=False` desliga a preparação sem erro
- locations vazias falham com mensagem literal
- modo leniente aceita locations vazias
- settings completos resultam na configuração correspondente
"""
from pathlib import Path

import pytest

try:
    from atlas_migrations.core.prepare import prepare_migrations_config
    from atlas_migrations.core.config.properties import MigrationsSettings, settings_from_mapping
    from atlas_migrations.core.config.model import ResolvedConfig, TransactionMode
    from atlas_migrations.core.config.resources import LocalResourceChecker
    from atlas_migrations.core.exceptions import MigrationsConfigError
except Exception as e:  # noqa: BLE001
    prepare_migrations_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing prepare module. Implement:\n"
            "- src/atlas_migrations/core/prepare.py (prepare_migrations_config)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_default_settings_with_existing_default_location(identity, RecordingChecker, events):
    _require_imports()
    checker = RecordingChecker({"classpath:neo4j/migrations": True})

    cfg = prepare_migrations_config(
        MigrationsSettings(), resource_checker=checker, identity_provider=identity, events=events
    )

    assert isinstance(cfg, ResolvedConfig)
    assert cfg.installed_by == "pytest-user"
    assert checker.checked == ["classpath:neo4j/migrations"]

    resolved = events.find(component="prepare", message="config resolved")
    assert len(resolved) == 1
    assert len(resolved[0]["config_hash"]) == 64


def test_disabled_returns_none(identity, RecordingChecker, events):
    _require_imports()
    checker = RecordingChecker()

    cfg = prepare_migrations_config(
        settings_from_mapping({"migrations": {"enabled": False, "locations_to_scan": ""}}),
        resource_checker=checker,
        identity_provider=identity,
        events=events,
    )

    assert cfg is None
    assert checker.checked == []
    assert events.find(message="migrations disabled")


def test_fails_on_empty_locations(identity, RecordingChecker):
    _require_imports()
    settings = settings_from_mapping({"migrations": {"locations_to_scan": ""}})

    with pytest.raises(MigrationsConfigError) as exc_info:
        prepare_migrations_config(settings, resource_checker=RecordingChecker(), identity_provider=identity)

    assert str(exc_info.value) == "Neither locations nor packages to scan are configured."


def test_fails_when_no_location_exists(identity, RecordingChecker):
    _require_imports()
    with pytest.raises(MigrationsConfigError) as exc_info:
        prepare_migrations_config(resource_checker=RecordingChecker(), identity_provider=identity)

    assert str(exc_info.value) == (
        "No package to scan is configured and none of the configured locations exists."
    )
    assert exc_info.value.details == {"checked_locations": ["classpath:neo4j/migrations"]}


def test_lenient_if_configured_to_be(identity, RecordingChecker):
    _require_imports()
    settings = settings_from_mapping({"migrations": {"locations_to_scan": "", "check_location": False}})

    cfg = prepare_migrations_config(settings, resource_checker=RecordingChecker(), identity_provider=identity)

    assert cfg is not None
    assert cfg.locations_to_scan == ()


def test_creates_correct_configuration(identity, RecordingChecker):
    _require_imports()
    settings = settings_from_mapping(
        {
            "migrations": {
                "locations_to_scan": "classpath:i/dont/care,file:/neither/do/i",
                "packages_to_scan": "i.dont.exists,me.neither",
                "transaction_mode": "PER_STATEMENT",
                "database": "anAwesomeDatabase",
                "installed_by": "James Bond",
                "check_location": False,
            }
        }
    )

    cfg = prepare_migrations_config(settings, resource_checker=RecordingChecker(), identity_provider=identity)

    assert cfg.locations_to_scan == ("classpath:i/dont/care", "file:/neither/do/i")
    assert cfg.packages_to_scan == ("i.dont.exists", "me.neither")
    assert cfg.transaction_mode is TransactionMode.PER_STATEMENT
    assert cfg.database == "anAwesomeDatabase"
    assert cfg.installed_by == "James Bond"


def test_default_checker_uses_filesystem(tmp_path: Path, identity):
    _require_imports()
    (tmp_path / "migrations").mkdir()
    settings = settings_from_mapping({"migrations": {"locations_to_scan": f"file:{tmp_path / 'migrations'}"}})

    cfg = prepare_migrations_config(settings, identity_provider=identity)

    assert cfg.locations_to_scan == (f"file:{tmp_path / 'migrations'}",)


def test_explicit_local_checker(tmp_path: Path, identity):
    _require_imports()
    (tmp_path / "neo4j" / "migrations").mkdir(parents=True)

    cfg = prepare_migrations_config(
        resource_checker=LocalResourceChecker(classpath_roots=[tmp_path]),
        identity_provider=identity,
    )

    assert cfg.locations_to_scan == ("classpath:neo4j/migrations",)

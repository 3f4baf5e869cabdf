"""
Fixtures compartilhados para testes do Atlas Migrations.

Este módulo define fixtures reutilizáveis que fornecem:
- identidade fixa e determinística para `installed_by`
- um ResourceChecker falso que registra a ordem das consultas
- conteúdos YAML de settings semelhantes ao uso real
- um EventLog isolado por teste

Decisões arquiteturais:
    - Fixtures não realizam I/O (arquivos são criados nos próprios testes via tmp_path)
    - Respostas de existência são declaradas explicitamente por location
    - Imports do core são lazy para falhar com mensagens claras

Invariantes:
    - Nenhuma fixture depende do usuário real do sistema operacional
    - Nenhuma fixture depende de sys.path ou do diretório corrente
"""
import pytest


TEST_IDENTITY = "pytest-user"


@pytest.fixture
def identity():
    """Provider de identidade fixo (`TEST_IDENTITY`)."""
    from atlas_migrations.core.config.identity import fixed_identity
    return fixed_identity(TEST_IDENTITY)


@pytest.fixture
def RecordingChecker():
    """
    Fixture factory de um ResourceChecker falso.

    A classe retornada recebe um mapa `location -> bool` e registra, em
    `checked`, cada location consultada na ordem das chamadas. Locations
    ausentes do mapa são tratadas como inexistentes.

    Usado por:
        - Testes de ordenação e curto-circuito do validador
        - Testes do setup sem acesso a filesystem
    """

    class _RecordingChecker:
        def __init__(self, answers=None):
            self.answers = dict(answers or {})
            self.checked = []

        def exists(self, location):
            self.checked.append(location)
            return self.answers.get(location, False)

    return _RecordingChecker


@pytest.fixture
def events():
    from atlas_migrations.core.events import EventLog
    return EventLog()


@pytest.fixture
def settings_defaults_yaml() -> str:
    """
    YAML de settings base (defaults) semelhante ao uso real.

    Returns:
        str: Conteúdo de um `migrations.defaults.yaml`.
    """
    return """\
migrations:
  enabled: true
  check_location: true
  locations_to_scan:
    - classpath:neo4j/migrations
  transaction_mode: PER_MIGRATION
"""


@pytest.fixture
def settings_local_yaml() -> str:
    """
    YAML de override local.

    Substitui a lista de locations, muda o modo transacional e define
    database e identidade.
    """
    return """\
migrations:
  locations_to_scan:
    - file:/opt/migrations
    - classpath:db/migrations
  transaction_mode: per_statement
  database: movies
  installed_by: deploy-bot
"""

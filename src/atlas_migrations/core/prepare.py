# src/atlas_migrations/core/prepare.py
"""
Preparação da configuração de migrações.

Este módulo encadeia, em uma única passagem, o que precisa acontecer
antes de qualquer trabalho de migração começar:

    MigrationsSettings → ConfigBuilder.build() → validate_locations → ResolvedConfig

Decisões arquiteturais:
    - `enabled=False` não é erro: a preparação retorna None
    - Falhas de validação viram `MigrationsConfigError` (terminal)
    - Todos os passos registram eventos no EventLog informado
"""

from __future__ import annotations

from typing import Optional

from atlas_migrations.core.config.builder import ConfigBuilder
from atlas_migrations.core.config.hashing import compute_config_hash
from atlas_migrations.core.config.identity import IdentityProvider, os_user_identity
from atlas_migrations.core.config.model import ResolvedConfig
from atlas_migrations.core.config.properties import MigrationsSettings
from atlas_migrations.core.config.resources import LocalResourceChecker, ResourceChecker
from atlas_migrations.core.config.validation import require_valid, validate_locations
from atlas_migrations.core.events import EventLog


COMPONENT = "prepare"


def prepare_migrations_config(
    settings: Optional[MigrationsSettings] = None,
    *,
    resource_checker: Optional[ResourceChecker] = None,
    identity_provider: IdentityProvider = os_user_identity,
    events: Optional[EventLog] = None,
) -> Optional[ResolvedConfig]:
    """
    Produz a configuração validada de uma execução de migrações.

    Args:
        settings: Settings do operador; None usa `MigrationsSettings()`.
        resource_checker: Colaborador de existência; None usa `LocalResourceChecker()`.
        identity_provider: Fonte da identidade padrão de `installed_by`.
        events: Destino opcional dos eventos estruturados.

    Returns:
        Optional[ResolvedConfig]: Configuração validada, ou None quando
        as migrações estão desabilitadas.

    Raises:
        MigrationsConfigError: Se nenhuma migração puder ser descoberta.
    """
    if settings is None:
        settings = MigrationsSettings()
    log = events if events is not None else EventLog()

    if not settings.enabled:
        log.log(component=COMPONENT, level="INFO", message="migrations disabled")
        return None

    config = ConfigBuilder(settings.options, identity_provider=identity_provider).build()
    log.log(
        component=COMPONENT,
        level="INFO",
        message="config resolved",
        config=config.to_dict(),
        config_hash=compute_config_hash(config),
    )

    checker = resource_checker if resource_checker is not None else LocalResourceChecker()
    outcome = validate_locations(config, checker, settings.check_location, events=log)
    return require_valid(outcome)

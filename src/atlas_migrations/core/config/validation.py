# src/atlas_migrations/core/config/validation.py
"""
Validação de locations de migração.

Este módulo decide, a partir de uma `ResolvedConfig`, se ao menos um
caminho de descoberta de migrações é viável. A decisão é síncrona,
determinística e curto-circuitada; a única interação externa é a
consulta de existência de locations, delegada a um `ResourceChecker`.

Algoritmo (`validate_locations`):
    1. check_location=False → Valid (modo leniente, nenhuma verificação)
    2. sem pacotes e sem locations → Invalid(NO_SCAN_TARGETS_MESSAGE),
       antes de qualquer consulta de existência
    3. ao menos um pacote → Valid, locations não são consultadas
    4. locations consultadas em ordem; a primeira existente encerra a
       busca com Valid; nenhuma existente → Invalid(NO_EXISTING_LOCATION_MESSAGE)

Decisões arquiteturais:
    - O modo leniente aceita inclusive configuração vazia, silenciosamente
    - Uma location inexistente isolada não é erro; apenas o agregado
    - Locations restantes nunca são consultadas após um acerto
    - Falhas são terminais e não são re-tentadas

Limites explícitos:
    - Não resolve prefixos (contrato do ResourceChecker)
    - Não paraleliza consultas
    - Não aplica timeout
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from atlas_migrations.core.errors import (
    NO_EXISTING_LOCATION_MESSAGE,
    NO_SCAN_TARGETS_MESSAGE,
    MigrationsErrorPayload,
    config_no_existing_location,
    config_no_scan_targets,
)
from atlas_migrations.core.events import EventLog
from atlas_migrations.core.exceptions import MigrationsConfigError

from .model import ResolvedConfig
from .resources import ResourceChecker


COMPONENT = "config.validation"


@dataclass(frozen=True)
class Valid:
    """Configuração utilizável."""

    config: ResolvedConfig

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Configuração inutilizável, com motivo literal voltado ao operador."""

    reason: str
    config: Optional[ResolvedConfig] = field(default=None, compare=False)

    @property
    def is_valid(self) -> bool:
        return False

    def to_payload(self) -> MigrationsErrorPayload:
        if self.reason == NO_SCAN_TARGETS_MESSAGE:
            return config_no_scan_targets()
        locations = list(self.config.locations_to_scan) if self.config is not None else []
        return config_no_existing_location(checked_locations=locations)


ValidationOutcome = Union[Valid, Invalid]


def validate_locations(
    config: ResolvedConfig,
    resource_checker: Optional[ResourceChecker],
    check_location: bool = True,
    *,
    events: Optional[EventLog] = None,
) -> ValidationOutcome:
    """
    Decide se a configuração permite descobrir ao menos uma migração.

    Args:
        config (ResolvedConfig): Configuração já resolvida.
        resource_checker (Optional[ResourceChecker]): Colaborador consultado
            apenas no passo 4; pode ser None quando o chamador sabe que a
            consulta não ocorrerá (modo leniente ou pacotes configurados).
        check_location (bool): False ativa o modo leniente.
        events (Optional[EventLog]): Destino opcional dos eventos estruturados.

    Returns:
        ValidationOutcome: `Valid(config)` ou `Invalid(reason)`.

    Raises:
        TypeError: Se o passo 4 for alcançado sem `resource_checker`.
    """
    log = events if events is not None else EventLog()

    if not check_location:
        log.log(component=COMPONENT, level="INFO", message="location check disabled")
        return Valid(config)

    if not config.has_places_to_look_for_migrations():
        log.log(component=COMPONENT, level="ERROR", message=NO_SCAN_TARGETS_MESSAGE)
        return Invalid(NO_SCAN_TARGETS_MESSAGE, config)

    if config.packages_to_scan:
        log.log(
            component=COMPONENT,
            level="INFO",
            message="packages configured, locations not checked",
            packages_to_scan=list(config.packages_to_scan),
        )
        return Valid(config)

    if resource_checker is None:
        raise TypeError("resource_checker é obrigatório para verificar locations")

    checked: List[str] = []
    for location in config.locations_to_scan:
        found = bool(resource_checker.exists(location))
        checked.append(location)
        log.log(component=COMPONENT, level="DEBUG", message="location checked", location=location, exists=found)
        if found:
            return Valid(config)
        log.add_warning(component=COMPONENT, message=f"location does not exist: {location}")

    log.log(
        component=COMPONENT,
        level="ERROR",
        message=NO_EXISTING_LOCATION_MESSAGE,
        checked_locations=checked,
    )
    return Invalid(NO_EXISTING_LOCATION_MESSAGE, config)


def require_valid(outcome: ValidationOutcome) -> ResolvedConfig:
    """
    Retorna a configuração de um `Valid` ou levanta `MigrationsConfigError`.

    A exceção carrega a mensagem literal do `Invalid`, além de details
    e hint do payload canônico correspondente.
    """
    if isinstance(outcome, Valid):
        return outcome.config

    payload = outcome.to_payload()
    raise MigrationsConfigError(
        message=outcome.reason,
        details=dict(payload.details),
        hint=payload.hint,
    )

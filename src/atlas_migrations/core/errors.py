"""
Atlas Migrations — Canonical Error Structures (v1)

Este módulo define o payload canônico de erros do Atlas Migrations.
Falhas de configuração fazem parte do contrato operacional do sistema e
devem ser:

- explícitas
- serializáveis
- acionáveis pelo operador

As mensagens das duas falhas de validação de locations são literais
estáveis: consumidores podem compará-las por igualdade.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MigrationsErrorPayload:
    """
    Payload canônico de erro do Atlas Migrations.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - retryable: sempre False para falhas de configuração; reprocessar a
      mesma configuração estática não muda o resultado
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    retryable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIG_NO_SCAN_TARGETS = "CONFIG_NO_SCAN_TARGETS"
CONFIG_NO_EXISTING_LOCATION = "CONFIG_NO_EXISTING_LOCATION"

# Mensagens literais (contrato)
NO_SCAN_TARGETS_MESSAGE = "Neither locations nor packages to scan are configured."
NO_EXISTING_LOCATION_MESSAGE = (
    "No package to scan is configured and none of the configured locations exists."
)


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_no_scan_targets(
    *,
    hint: str = "Configure ao menos um pacote (packages_to_scan) ou uma location (locations_to_scan).",
) -> MigrationsErrorPayload:
    return MigrationsErrorPayload(
        type=CONFIG_NO_SCAN_TARGETS,
        message=NO_SCAN_TARGETS_MESSAGE,
        details={"packages_to_scan": [], "locations_to_scan": []},
        hint=hint,
    )


def config_no_existing_location(
    *,
    checked_locations: List[str],
    hint: str = "Crie ao menos uma das locations configuradas, configure um pacote ou desabilite check_location.",
) -> MigrationsErrorPayload:
    return MigrationsErrorPayload(
        type=CONFIG_NO_EXISTING_LOCATION,
        message=NO_EXISTING_LOCATION_MESSAGE,
        details={"checked_locations": list(checked_locations)},
        hint=hint,
    )


_PAYLOAD_BY_MESSAGE = {
    NO_SCAN_TARGETS_MESSAGE: CONFIG_NO_SCAN_TARGETS,
    NO_EXISTING_LOCATION_MESSAGE: CONFIG_NO_EXISTING_LOCATION,
}


def error_type_for(message: str) -> Optional[str]:
    """Código estável correspondente a uma mensagem de validação literal, se houver."""
    return _PAYLOAD_BY_MESSAGE.get(message)


"""
Atlas Migrations — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Atlas Migrations.

Objetivo:
- Permitir que a preparação de migrações levante falhas semânticas tipadas
- Facilitar o mapeamento determinístico para MigrationsErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails de configuração

Regras:
- Exceções carregam apenas dados estruturados (serializáveis).
- Falhas de configuração são terminais: nenhuma retentativa interna.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import MigrationsErrorPayload, error_type_for


@dataclass(frozen=True)
class MigrationsException(Exception):
    """Base class para exceções internas do Atlas Migrations.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message

    def to_payload(self) -> MigrationsErrorPayload:
        return MigrationsErrorPayload(
            type=self.__class__.__name__,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


@dataclass(frozen=True)
class MigrationsConfigError(MigrationsException):
    """Configuração construível, porém inutilizável (nenhuma migração descobrível)."""

    def to_payload(self) -> MigrationsErrorPayload:
        return MigrationsErrorPayload(
            type=error_type_for(self.message) or self.__class__.__name__,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )

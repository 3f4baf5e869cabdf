# src/atlas_migrations/core/events.py
"""
EventLog — log estruturado da preparação de migrações.

O Atlas Migrations não mantém logger global: cada preparação de execução
recebe (ou cria) um `EventLog`, onde componentes registram eventos
estruturados e warnings não fatais. O chamador decide o destino final
dos eventos (console, arquivo, manifest).

Formato de evento:
    {
        "component": "config.validation",
        "level": "INFO",
        "message": "location checked",
        "timestamp": "2026-01-16T00:00:00+00:00",
        ...campos extras livres
    }

Invariantes:
    - Eventos são registrados na ordem em que ocorrem
    - Todo evento possui `component`, `level`, `message` e `timestamp` UTC
    - Warnings são agrupados por `component`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class EventLog:
    """Coletor de eventos estruturados e warnings de uma preparação."""

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    def log(self, *, component: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "component": component,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, component: str, message: str) -> None:
        if component not in self.warnings:
            self.warnings[component] = []
        self.warnings[component].append(message)

    def find(self, *, component: Optional[str] = None, message: Optional[str] = None) -> List[Dict[str, Any]]:
        """Filtra eventos por componente e/ou mensagem exata."""
        return [
            e for e in self.events
            if (component is None or e["component"] == component)
            and (message is None or e["message"] == message)
        ]

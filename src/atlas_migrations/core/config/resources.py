# src/atlas_migrations/core/config/resources.py
"""
Resolução de existência de locations de migração.

O validador de locations não sabe como uma location é resolvida: ele
consulta um colaborador externo que expõe uma única operação,
`exists(location) -> bool`. Este módulo define esse protocolo e uma
implementação local padrão.

Regras de prefixo (`parse_location`):
    - `file:<path>`       → caminho no filesystem
    - `classpath:<path>`  → caminho relativo às raízes de busca
    - sem prefixo         → tratado como `classpath:`

Na implementação local, "classpath" corresponde às raízes de busca de
módulos Python: por padrão, os diretórios presentes em `sys.path`.

Limites explícitos:
    - Não lista nem lê arquivos de migração
    - Não aplica timeout (política do chamador)
    - Não mantém cache: cada chamada consulta o filesystem
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union, runtime_checkable

from .model import PREFIX_CLASSPATH, PREFIX_FILESYSTEM


@runtime_checkable
class ResourceChecker(Protocol):
    """Colaborador que decide se uma location existe."""

    def exists(self, location: str) -> bool:
        ...


class LocationKind(str, Enum):
    CLASSPATH = PREFIX_CLASSPATH
    FILESYSTEM = PREFIX_FILESYSTEM


@dataclass(frozen=True)
class Location:
    """Location decomposta em tipo e caminho (sem prefixo)."""

    kind: LocationKind
    path: str


def parse_location(location: str) -> Location:
    """
    Decompõe uma string de location em tipo e caminho.

    Apenas os prefixos `classpath:` e `file:` são reconhecidos; qualquer
    outra string (inclusive com ':' no meio) é tratada como caminho
    relativo ao classpath, preservada integralmente.
    """
    if not isinstance(location, str):
        raise TypeError(f"Location deve ser str, recebido: {type(location).__name__}")

    for kind in (LocationKind.FILESYSTEM, LocationKind.CLASSPATH):
        prefix = f"{kind.value}:"
        if location.startswith(prefix):
            return Location(kind=kind, path=location[len(prefix):])

    return Location(kind=LocationKind.CLASSPATH, path=location)


def _default_classpath_roots() -> List[Path]:
    roots = []
    for entry in sys.path:
        # "" representa o diretório corrente
        root = Path(entry or ".")
        if root.is_dir():
            roots.append(root)
    return roots


class LocalResourceChecker:
    """
    Implementação local de `ResourceChecker`.

    Args:
        classpath_roots: diretórios usados para resolver locations de
            classpath; None usa os diretórios de `sys.path` no momento
            de cada consulta.
        base_dir: diretório base para caminhos `file:` relativos; None
            usa o diretório corrente.
    """

    def __init__(
        self,
        *,
        classpath_roots: Optional[Iterable[Union[str, Path]]] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self.classpath_roots: Optional[List[Path]] = (
            None if classpath_roots is None else [Path(r) for r in classpath_roots]
        )
        self.base_dir: Optional[Path] = None if base_dir is None else Path(base_dir)

    def _roots(self) -> List[Path]:
        if self.classpath_roots is None:
            return _default_classpath_roots()
        return list(self.classpath_roots)

    def resolve(self, location: str) -> Optional[Path]:
        """Primeiro caminho existente para a location, ou None."""
        parsed = parse_location(location)

        if parsed.kind is LocationKind.FILESYSTEM:
            candidate = Path(parsed.path)
            if not candidate.is_absolute() and self.base_dir is not None:
                candidate = self.base_dir / candidate
            return candidate if candidate.exists() else None

        relative = parsed.path.lstrip("/")
        for root in self._roots():
            candidate = root / relative
            if candidate.exists():
                return candidate
        return None

    def exists(self, location: str) -> bool:
        return self.resolve(location) is not None

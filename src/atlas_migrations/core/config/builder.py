# src/atlas_migrations/core/config/builder.py
"""
Builder fluente de configuração de migrações.

O `ConfigBuilder` é uma fachada fina sobre `ConfigOptions`: cada operação
`with_*` substitui um campo do registro de opções e retorna o próprio
builder, permitindo montagem encadeada. `build()` delega a aplicação de
defaults para `resolve_config`, que permanece a fonte única dos defaults.

Exemplo:
    config = (
        ConfigBuilder()
        .with_locations_to_scan("classpath:db/migrations", "file:/opt/migrations")
        .with_transaction_mode(TransactionMode.PER_STATEMENT)
        .with_database("movies")
        .build()
    )

Limites explícitos:
    - Não verifica existência de locations (responsabilidade do validador)
    - Não valida sintaxe de nomes de pacote
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple, Union

from .errors import InvalidSettingError
from .identity import IdentityProvider, os_user_identity
from .model import ConfigOptions, ResolvedConfig, TransactionMode, parse_transaction_mode, resolve_config


def _scan_values(key: str, values: Tuple[Optional[str], ...]) -> Optional[Tuple[str, ...]]:
    # um único None equivale a "não informado"
    if values == (None,):
        return None
    for item in values:
        if not isinstance(item, str):
            raise InvalidSettingError(
                f"{key} deve conter apenas strings, recebido: {type(item).__name__}"
            )
    return tuple(values)


class ConfigBuilder:
    """Acumula opções de configuração e produz uma `ResolvedConfig`."""

    def __init__(
        self,
        options: Optional[ConfigOptions] = None,
        *,
        identity_provider: IdentityProvider = os_user_identity,
    ):
        self._options: ConfigOptions = options if options is not None else ConfigOptions()
        self._identity_provider: IdentityProvider = identity_provider

    def with_packages_to_scan(self, *packages: Optional[str]) -> "ConfigBuilder":
        """
        Substitui a lista de pacotes.

        Sem argumentos: lista vazia explícita. Um único None volta ao
        default (nenhum pacote).
        """
        self._options = replace(self._options, packages_to_scan=_scan_values("packages_to_scan", packages))
        return self

    def with_locations_to_scan(self, *locations: Optional[str]) -> "ConfigBuilder":
        """
        Substitui a lista de locations.

        Locations podem começar com `classpath:` ou `file:`; entradas sem
        prefixo são tratadas como recursos do classpath. Chamar sem
        argumentos configura uma lista vazia explícita, descartando o
        default `classpath:neo4j/migrations`; um único None volta ao default.
        """
        self._options = replace(self._options, locations_to_scan=_scan_values("locations_to_scan", locations))
        return self

    def with_transaction_mode(self, mode: Union[TransactionMode, str, None]) -> "ConfigBuilder":
        """
        Define a granularidade transacional.

        Aceita o enum `TransactionMode`, o nome do modo (case-insensitive)
        ou None, que volta ao default PER_MIGRATION.

        Raises:
            InvalidSettingError: Se o nome não corresponder a um modo conhecido.
        """
        self._options = replace(self._options, transaction_mode=parse_transaction_mode(mode))
        return self

    def with_database(self, database: Optional[str]) -> "ConfigBuilder":
        """None significa database padrão."""
        self._options = replace(self._options, database=database)
        return self

    def with_installed_by(self, installed_by: Optional[str]) -> "ConfigBuilder":
        """None adia para a identidade do provider (usuário do SO)."""
        self._options = replace(self._options, installed_by=installed_by)
        return self

    def options(self) -> ConfigOptions:
        """Snapshot imutável das opções acumuladas até aqui."""
        return self._options

    def build(self) -> ResolvedConfig:
        """Produz a configuração imutável. Nunca falha."""
        return resolve_config(self._options, identity_provider=self._identity_provider)

# src/atlas_migrations/core/config/model.py
"""
Modelo canônico de configuração de migrações.

Este módulo define os tipos que descrevem *onde* scripts de migração
podem ser encontrados e *sob qual política* eles são aplicados, além da
única função responsável por aplicar defaults.

Componentes principais:
    - TransactionMode → granularidade de commit (por migração ou por statement)
    - ConfigOptions   → registro de opções, todas opcionais (None = não informado)
    - ResolvedConfig  → configuração final, imutável e com semântica de valor
    - resolve_config  → função pura de defaulting (fonte única dos defaults)

Defaults documentados:
    - packages_to_scan  → () (nenhum pacote)
    - locations_to_scan → ("classpath:neo4j/migrations",)
    - transaction_mode  → TransactionMode.PER_MIGRATION
    - database          → None (database padrão do servidor)
    - installed_by      → identidade do provider (usuário do SO)

Invariantes:
    - Sequências de packages/locations nunca são None em ResolvedConfig
    - A ordem de inserção das sequências é preservada
    - Duas ResolvedConfig são iguais se, e somente se, os cinco campos são iguais
    - Resolver nunca falha: usabilidade é decidida pelo validador de locations

Limites explícitos:
    - Não valida sintaxe de nomes de pacote ou de locations
    - Não verifica existência de locations
    - Não conversa com banco de dados
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .errors import InvalidSettingError
from .identity import IdentityProvider, os_user_identity


PREFIX_CLASSPATH = "classpath"
PREFIX_FILESYSTEM = "file"

DEFAULT_PACKAGES_TO_SCAN: Tuple[str, ...] = ()
DEFAULT_LOCATIONS_TO_SCAN: Tuple[str, ...] = (f"{PREFIX_CLASSPATH}:neo4j/migrations",)


class TransactionMode(str, Enum):
    """
    Granularidade transacional na aplicação de migrações.

    Modos definidos:
        - PER_MIGRATION: todos os statements de uma migração em uma única
          transação. Pode exigir mais memória, mas a migração é aplicada
          por inteiro ou não é aplicada.
        - PER_STATEMENT: cada statement em sua própria transação. Pode deixar
          o banco em estado inconsistente se um statement falhar.
    """
    PER_MIGRATION = "PER_MIGRATION"
    PER_STATEMENT = "PER_STATEMENT"


DEFAULT_TRANSACTION_MODE = TransactionMode.PER_MIGRATION


def parse_transaction_mode(value: Union[TransactionMode, str, None]) -> Optional[TransactionMode]:
    """
    Converte um valor bruto em `TransactionMode`.

    Aceita o próprio enum, o nome do modo (case-insensitive, com espaços
    nas bordas ignorados) ou None, que significa "não informado".

    Raises:
        InvalidSettingError: Se o nome não corresponder a um modo conhecido
            ou se o tipo não for suportado.
    """
    if value is None or isinstance(value, TransactionMode):
        return value

    if not isinstance(value, str):
        raise InvalidSettingError(
            f"transaction_mode deve ser str, recebido: {type(value).__name__}"
        )

    name = value.strip().upper()
    try:
        return TransactionMode[name]
    except KeyError:
        allowed = ", ".join(m.value for m in TransactionMode)
        raise InvalidSettingError(
            f"transaction_mode desconhecido: {value!r} (permitidos: {allowed})"
        ) from None


def _as_tuple(values: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    # uma string isolada é um único item, não uma sequência de caracteres
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class ConfigOptions:
    """
    Opções brutas de configuração, antes da aplicação de defaults.

    Cada campo é opcional: None significa "não informado" e será
    substituído pelo default documentado em `resolve_config`. Uma
    sequência vazia é um valor explícito (ex.: "nenhuma location") e
    **não** é substituída pelo default.
    """

    packages_to_scan: Optional[Tuple[str, ...]] = None
    locations_to_scan: Optional[Tuple[str, ...]] = None
    transaction_mode: Optional[TransactionMode] = None
    database: Optional[str] = None
    installed_by: Optional[str] = None

    def __post_init__(self) -> None:
        if self.packages_to_scan is not None:
            object.__setattr__(self, "packages_to_scan", _as_tuple(self.packages_to_scan))
        if self.locations_to_scan is not None:
            object.__setattr__(self, "locations_to_scan", _as_tuple(self.locations_to_scan))
        object.__setattr__(self, "transaction_mode", parse_transaction_mode(self.transaction_mode))


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Configuração de migrações totalmente resolvida.

    Construída uma vez por preparação de execução e compartilhada, somente
    leitura, por todos os consumidores (runner de migrações, inicializador).
    Uma nova execução exige uma nova instância.

    Campos:
        - packages_to_scan: pacotes onde migrações baseadas em código são procuradas
        - locations_to_scan: raízes de scripts; prefixo `classpath:` ou `file:`,
          entradas sem prefixo são relativas ao classpath
        - transaction_mode: granularidade transacional
        - database: database alvo; None indica o database padrão
        - installed_by: identidade registrada como responsável pela aplicação

    Decisões arquiteturais:
        - frozen=True: nenhum setter existe após a construção
        - Sequências são normalizadas para tuplas (imutáveis e comparáveis)
        - Igualdade é por valor, campo a campo
    """

    packages_to_scan: Tuple[str, ...] = DEFAULT_PACKAGES_TO_SCAN
    locations_to_scan: Tuple[str, ...] = DEFAULT_LOCATIONS_TO_SCAN
    transaction_mode: TransactionMode = DEFAULT_TRANSACTION_MODE
    database: Optional[str] = None
    installed_by: str = field(default_factory=os_user_identity)

    def __post_init__(self) -> None:
        # None nunca é um valor válido para as sequências
        packages = () if self.packages_to_scan is None else _as_tuple(self.packages_to_scan)
        locations = () if self.locations_to_scan is None else _as_tuple(self.locations_to_scan)
        object.__setattr__(self, "packages_to_scan", packages)
        object.__setattr__(self, "locations_to_scan", locations)
        object.__setattr__(
            self,
            "transaction_mode",
            parse_transaction_mode(self.transaction_mode) or DEFAULT_TRANSACTION_MODE,
        )

    def has_places_to_look_for_migrations(self) -> bool:
        """Indica se ao menos um pacote ou uma location está configurado."""
        return len(self.packages_to_scan) > 0 or len(self.locations_to_scan) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Representação serializável (JSON) da configuração."""
        return {
            "packages_to_scan": list(self.packages_to_scan),
            "locations_to_scan": list(self.locations_to_scan),
            "transaction_mode": self.transaction_mode.value,
            "database": self.database,
            "installed_by": self.installed_by,
        }


def resolve_config(
    options: Optional[ConfigOptions] = None,
    *,
    identity_provider: IdentityProvider = os_user_identity,
) -> ResolvedConfig:
    """
    Aplica os defaults documentados sobre um conjunto de opções.

    Esta função é a fonte única de verdade para defaults: qualquer campo
    não informado (None) recebe o valor padrão, campos informados são
    preservados exatamente como vieram, inclusive sequências vazias.

    Decisões arquiteturais:
        - Função pura: nenhum estado global é lido ou escrito
        - O identity provider só é consultado quando `installed_by`
          não foi informado
        - Nunca falha por conteúdo: uma configuração sem pacotes nem
          locations é construída normalmente e rejeitada depois, pelo
          validador, com mensagem específica

    Args:
        options (Optional[ConfigOptions]): Opções brutas; None equivale a
            `ConfigOptions()`.
        identity_provider (IdentityProvider): Fonte da identidade padrão.

    Returns:
        ResolvedConfig: Configuração imutável com todos os campos preenchidos.
    """
    if options is None:
        options = ConfigOptions()

    packages = options.packages_to_scan
    locations = options.locations_to_scan
    installed_by = options.installed_by
    if installed_by is None:
        installed_by = identity_provider()

    return ResolvedConfig(
        packages_to_scan=DEFAULT_PACKAGES_TO_SCAN if packages is None else packages,
        locations_to_scan=DEFAULT_LOCATIONS_TO_SCAN if locations is None else locations,
        transaction_mode=options.transaction_mode or DEFAULT_TRANSACTION_MODE,
        database=options.database,
        installed_by=installed_by,
    )


def default_config(*, identity_provider: IdentityProvider = os_user_identity) -> ResolvedConfig:
    """Configuração padrão: nenhuma opção informada."""
    return resolve_config(ConfigOptions(), identity_provider=identity_provider)

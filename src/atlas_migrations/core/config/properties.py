# src/atlas_migrations/core/config/properties.py
"""
Settings de operador para a preparação de migrações.

Este módulo converte um mapa chave-valor já carregado (YAML/JSON) em
`MigrationsSettings`: as cinco opções lógicas de `ConfigOptions` mais
os dois interruptores de operação, `enabled` e `check_location`.

Formato aceito (seção `migrations` ou a própria raiz):

    migrations:
      enabled: true
      check_location: true
      packages_to_scan: [com.example.migrations]
      locations_to_scan: classpath:neo4j/migrations, file:/opt/migrations
      transaction_mode: PER_STATEMENT
      database: movies
      installed_by: deploy-bot

Regras de binding:
    - chaves com hífen são equivalentes às com underscore (`check-location`)
    - listas de scan aceitam lista YAML ou string separada por vírgulas
    - itens em branco são descartados, na lista ou na string
    - string vazia produz lista vazia explícita (não o default)
    - null ou chave ausente mantém o default do modelo
    - chaves desconhecidas e tipos incompatíveis são rejeitados
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidConfigRootTypeError, InvalidSettingError
from .model import ConfigOptions, parse_transaction_mode


SECTION_KEY = "migrations"

_OPTION_KEYS = {
    "packages_to_scan",
    "locations_to_scan",
    "transaction_mode",
    "database",
    "installed_by",
}
_SWITCH_KEYS = {"enabled", "check_location"}


@dataclass(frozen=True)
class MigrationsSettings:
    """
    Settings efetivos de uma preparação de migrações.

    Campos:
        - enabled: False desliga a preparação por completo
        - check_location: False ativa o modo leniente do validador
        - options: opções brutas da configuração (defaults ainda não aplicados)
    """

    enabled: bool = True
    check_location: bool = True
    options: ConfigOptions = field(default_factory=ConfigOptions)


def _bool_setting(key: str, value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise InvalidSettingError(f"{key} deve ser booleano, recebido: {value!r}")


def _scan_list_setting(key: str, value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            if not isinstance(item, str):
                raise InvalidSettingError(
                    f"{key} deve conter apenas strings, recebido: {type(item).__name__}"
                )
            if item.strip():
                items.append(item.strip())
        return tuple(items)
    raise InvalidSettingError(
        f"{key} deve ser lista ou string separada por vírgulas, recebido: {type(value).__name__}"
    )


def _str_setting(key: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise InvalidSettingError(f"{key} deve ser str, recebido: {type(value).__name__}")


def _section(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    if not isinstance(mapping, Mapping):
        raise InvalidConfigRootTypeError(
            f"Settings root deve ser dict, recebido: {type(mapping).__name__}"
        )

    section = mapping[SECTION_KEY] if SECTION_KEY in mapping else mapping
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise InvalidConfigRootTypeError(
            f"Seção '{SECTION_KEY}' deve ser dict, recebido: {type(section).__name__}"
        )

    normalized: Dict[str, Any] = {}
    for key, value in section.items():
        name = str(key).replace("-", "_")
        if name not in _OPTION_KEYS and name not in _SWITCH_KEYS:
            raise InvalidSettingError(f"Setting desconhecido: {key!r}")
        normalized[name] = value
    return normalized


def settings_from_mapping(mapping: Mapping[str, Any]) -> MigrationsSettings:
    """
    Faz o binding de um mapa de settings para `MigrationsSettings`.

    Raises:
        InvalidConfigRootTypeError: Se a raiz ou a seção não forem dicts.
        InvalidSettingError: Para chaves desconhecidas ou valores mal tipados.
    """
    values = _section(mapping)

    options = ConfigOptions(
        packages_to_scan=_scan_list_setting("packages_to_scan", values.get("packages_to_scan")),
        locations_to_scan=_scan_list_setting("locations_to_scan", values.get("locations_to_scan")),
        transaction_mode=parse_transaction_mode(values.get("transaction_mode")),
        database=_str_setting("database", values.get("database")),
        installed_by=_str_setting("installed_by", values.get("installed_by")),
    )

    return MigrationsSettings(
        enabled=_bool_setting("enabled", values.get("enabled"), True),
        check_location=_bool_setting("check_location", values.get("check_location"), True),
        options=options,
    )

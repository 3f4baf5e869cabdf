# src/atlas_migrations/core/config/loader.py
"""
Loader de settings de migração.

Este módulo carrega arquivos de settings do operador, resolve o override
local sobre o arquivo base via deep-merge e faz o binding do resultado
para `MigrationsSettings`.

Fontes:
    - arquivo base (defaults), opcional; se informado, deve existir
    - arquivo local de override, opcional; ausência é tolerada
    - sem arquivos: defaults do modelo (`MigrationsSettings()`)

Formatos suportados (v1):
    - YAML (.yaml, .yml), via PyYAML `safe_load`
    - JSON (.json)

Invariantes:
    - Arquivos vazios equivalem a dicionários vazios
    - O override local nunca muta o conteúdo base
    - A mesma entrada sempre produz os mesmos settings

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não verifica existência de locations
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .errors import (
    InvalidConfigRootTypeError,
    SettingsNotFoundError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .properties import MigrationsSettings, settings_from_mapping


def read_settings_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de settings e valida que a raiz é um dicionário.

    Raises:
        SettingsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for dict.
    """
    if not path.exists():
        raise SettingsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> MigrationsSettings:
    """
    Carrega e resolve os settings efetivos de migração.

    Política de resolução:
        - `defaults_path`, quando informado, é obrigatório
        - `local_path` é aplicado por cima via `deep_merge` se existir
        - sem nenhum arquivo, retorna `MigrationsSettings()`

    Raises:
        SettingsNotFoundError: Se `defaults_path` não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se a raiz não for dict.
        ConfigTypeConflictError: Em conflito estrutural durante o merge.
        InvalidSettingError: Em chaves desconhecidas ou valores inválidos.
    """
    effective: Dict[str, Any] = {}

    if defaults_path is not None:
        effective = read_settings_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, read_settings_file(local_file))

    return settings_from_mapping(effective)

# src/atlas_migrations/core/config/merge.py
"""
Deep-merge de arquivos de settings (defaults + override local).

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (a lista de locations do override substitui
      a dos defaults, sem merge elemento a elemento)
    - None → no override, volta o campo ao default do modelo; na base,
      aceita qualquer valor do override
    - string sobre bool → sobrescrita (o binding interpreta "true"/"false")
    - escalar → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
    - Conflitos estruturais interrompem o merge sem resultado parcial
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _merge_into(result: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]) -> None:
    for key, value in override.items():
        key_path = path + (str(key),)

        if key not in result or value is None or result[key] is None:
            result[key] = deepcopy(value)
            continue

        current = result[key]

        if isinstance(current, dict) and isinstance(value, dict):
            _merge_into(current, value, key_path)
            continue

        # scan lists aceitam lista ou string separada por vírgulas
        if isinstance(value, (list, str)) and isinstance(current, (list, str)):
            result[key] = deepcopy(value)
            continue

        # interruptores aceitam "true"/"false"; o binding valida o texto
        if isinstance(value, str) and isinstance(current, bool):
            result[key] = value
            continue

        if type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{'.'.join(key_path)}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )

        result[key] = deepcopy(value)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina settings base com overrides explícitos, sem mutar os inputs.

    Raises:
        ConfigTypeConflictError: Se algum dos lados não for dict ou se uma
            mesma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)
    _merge_into(result, override, ())
    return result

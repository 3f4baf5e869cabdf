# src/atlas_migrations/core/config/hashing.py
"""
Identidade estrutural de uma configuração de migrações.

O hash de uma `ResolvedConfig` permite correlacionar eventos de
preparação com a configuração efetivamente usada, e detectar entre
execuções se a configuração mudou.

Política de hashing (v1):
    - Serialização JSON canônica de `ResolvedConfig.to_dict()`
    - Chaves ordenadas, separadores compactos, UTF-8
    - SHA-256, resultado hexadecimal de 64 caracteres

A ordem de packages e locations **participa** do hash: ela define a
ordem de consulta das locations e, portanto, o comportamento.
"""

import hashlib
import json
from typing import Any, Dict, Union

from .model import ResolvedConfig


def compute_config_hash(config: Union[ResolvedConfig, Dict[str, Any]]) -> str:
    """
    Gera o hash SHA-256 do JSON canônico da configuração.

    Args:
        config: `ResolvedConfig` ou sua representação em dict.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto não for `ResolvedConfig` nem dict.
    """
    if isinstance(config, ResolvedConfig):
        data = config.to_dict()
    elif isinstance(config, dict):
        data = config
    else:
        raise TypeError(
            f"Config para hashing deve ser ResolvedConfig ou dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

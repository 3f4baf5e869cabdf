# src/atlas_migrations/core/config/identity.py
"""
Provedores de identidade para o campo `installed_by`.

A identidade registrada como responsável pela aplicação das migrações
é, por padrão, o usuário do sistema operacional que executa o processo.
Em vez de uma leitura global escondida dentro do builder, a identidade
é obtida por um *provider* injetável: uma função sem argumentos que
retorna uma string.

Isso permite que testes substituam a identidade por um valor fixo e
determinístico.

Limites explícitos:
    - Não autentica usuários
    - Não persiste a identidade
"""

from __future__ import annotations

import getpass
from typing import Callable


IdentityProvider = Callable[[], str]

# Valor usado quando o sistema operacional não expõe um nome de usuário
UNKNOWN_IDENTITY = "unknown"


def os_user_identity() -> str:
    """
    Retorna o nome do usuário do sistema operacional.

    Consulta as variáveis de ambiente usuais (LOGNAME, USER, LNAME,
    USERNAME) e, na ausência delas, a base de usuários do sistema.
    Processos sem usuário resolvível (ex.: containers com UID arbitrário)
    recebem `UNKNOWN_IDENTITY`, mantendo `build()` livre de falhas.
    """
    try:
        name = getpass.getuser()
    except (KeyError, OSError):
        return UNKNOWN_IDENTITY
    return name or UNKNOWN_IDENTITY


def fixed_identity(name: str) -> IdentityProvider:
    """Cria um provider que sempre retorna `name`."""
    if not isinstance(name, str):
        raise TypeError(f"Identidade deve ser str, recebido: {type(name).__name__}")

    def _provider() -> str:
        return name

    return _provider

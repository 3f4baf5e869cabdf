# src/atlas_migrations/__init__.py
"""
Atlas Migrations — resolução e validação da configuração de migrações.

Este pacote decide, antes de qualquer migração ser executada, onde
scripts de migração podem ser encontrados e sob qual política serão
aplicados.

Arquitetura em alto nível:
    - core.config  → modelo, builder, settings de operador e validação de locations
    - core.prepare → preparação em uma passagem (settings → config validada)
    - core.events  → log estruturado da preparação

Limites explícitos:
    - Não executa migrações
    - Não conversa com banco de dados
    - Não descobre nem lê arquivos de migração
"""
# src/atlas_migrations/__init__.py
from .core.config.builder import ConfigBuilder
from .core.config.model import ConfigOptions, ResolvedConfig, TransactionMode, default_config, resolve_config
from .core.config.validation import Invalid, Valid, require_valid, validate_locations
from .core.exceptions import MigrationsConfigError
from .core.prepare import prepare_migrations_config

__all__ = [
    "ConfigBuilder",
    "ConfigOptions",
    "ResolvedConfig",
    "TransactionMode",
    "default_config",
    "resolve_config",
    "Valid",
    "Invalid",
    "validate_locations",
    "require_valid",
    "MigrationsConfigError",
    "prepare_migrations_config",
]

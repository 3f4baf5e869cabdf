# src/atlas_migrations/core/config/__init__.py

"""
Camada de configuração do Atlas Migrations.

Responsabilidades do pacote:
    - Modelo imutável da configuração resolvida (`model`)
    - Montagem fluente de opções (`builder`)
    - Identidade padrão de `installed_by` (`identity`)
    - Carregamento, merge e binding de settings de operador (`loader`,
      `merge`, `properties`)
    - Hash canônico da configuração (`hashing`)
    - Existência de locations (`resources`) e validação (`validation`)

Invariantes:
    - `ResolvedConfig` nunca é mutada após construída
    - Defaults vivem apenas em `resolve_config`
    - Erros de settings herdam de `ConfigError`; falhas de usabilidade
      são `MigrationsConfigError`
"""

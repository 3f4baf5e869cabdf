# src/atlas_migrations/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Migrations.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento de arquivos de settings, o merge de overrides e o binding
dos valores para as opções de migração.

As exceções aqui definidas representam **erros de entrada do operador**
(arquivos ausentes, formatos inválidos, valores mal tipados), e não a
falha de usabilidade da configuração. Essa última é decidida pelo
validador de locations e expressa por `MigrationsConfigError`.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção daqui é levantada por `ConfigBuilder.build()`

Limites explícitos:
    - Não verifica existência de locations
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento e binding de settings.

    Permite captura genérica de falhas estruturais de configuração,
    distinguindo-as das falhas de validação de locations.
    """


class SettingsNotFoundError(ConfigError):
    """
    Arquivo de settings informado explicitamente não existe.

    Apenas o arquivo base (defaults) é obrigatório quando informado;
    a ausência do arquivo local de override é tolerada.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de settings não suportado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo (ou da seção `migrations`) não é um dict."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge de defaults e override.

    Exemplo de conflito:
        - base:     {"migrations": {"check_location": true}}
        - override: {"migrations": "off"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidSettingError(ConfigError):
    """
    Valor de setting desconhecido ou com tipo incompatível.

    Exemplos:
        - `transaction_mode: PER_BATCH` (modo inexistente)
        - `packages_to_scan: 42` (nem lista nem string)
        - chave não reconhecida dentro da seção `migrations`
    """

# src/atlas_migrations/core/__init__.py
"""
Core do Atlas Migrations.

Componentes principais:
    - config     → modelo imutável, defaulting, builder, settings e validação
    - prepare    → orquestração da preparação (build + validate)
    - events     → EventLog estruturado
    - errors     → payload canônico e catálogo de tipos de erro
    - exceptions → exceções tipadas

Princípios fundamentais:
    - Construir nunca falha; usabilidade é decidida separadamente
    - Nenhum estado global: identidade e existência de recursos são injetadas
    - Mesma entrada, mesmas respostas de existência → mesmo resultado
"""

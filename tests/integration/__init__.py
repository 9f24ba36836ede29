"""
Integration tests package.

Tests de integración que verifican el funcionamiento correcto de:
- Repositorios SQL sobre SQLite (aiosqlite): claves únicas y updates condicionales
- Health Checks

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""

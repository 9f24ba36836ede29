"""
Capa de Aplicación - Servicio de Solicitudes de Arriendo.

Esta capa contiene los casos de uso, el gate de validación e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema
- interfaces/: Puertos (repositorios, servicios remotos, reloj, transacciones)
- validation_gate.py: Reglas previas a la creación de una solicitud
- presenters.py: Conversión de entidades a respuestas de la API
"""

from app.application.interfaces import (
    ApplicationRepo,
    Clock,
    DocumentGateway,
    FakeClock,
    LeaseRepo,
    LookupResult,
    LookupStatus,
    PropertyGateway,
    SystemClock,
    TransactionManager,
    UserGateway,
)

__all__ = [
    # Interfaces - Repositories
    "ApplicationRepo",
    "LeaseRepo",
    # Interfaces - Gateways
    "UserGateway",
    "PropertyGateway",
    "DocumentGateway",
    "LookupResult",
    "LookupStatus",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]

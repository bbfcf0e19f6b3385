"""Dependency injection containers.

The application container receives its ``Settings`` explicitly; nothing here
reads configuration at import time.
"""
from dependency_injector import containers, providers

from core.settings import Settings, get_settings
from infra.resources import DatabaseResource


class InfrastructureContainer(containers.DeclarativeContainer):
    settings = providers.Dependency(instance_of=Settings)

    # Database
    database = providers.Resource(
        DatabaseResource,
        database_url=settings.provided.DATABASE.DATABASE_URL,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Application services - depends on infrastructure."""

    settings = providers.Dependency(instance_of=Settings)
    infrastructure = providers.DependenciesContainer()

    password_hasher = providers.Factory(
        "api.features.auth.hasher.PasswordHasher",
        n=settings.provided.AUTH.SCRYPT_N,
        r=settings.provided.AUTH.SCRYPT_R,
        p=settings.provided.AUTH.SCRYPT_P,
        key_length=settings.provided.AUTH.SCRYPT_KEY_LENGTH,
        salt_bytes=settings.provided.AUTH.SALT_BYTES,
    )

    auth_service = providers.Factory(
        "api.features.auth.service.AuthService",
        password_hasher=password_hasher,
    )

    exchange_rate_service = providers.Factory(
        "api.features.rates.service.ExchangeRateService",
        api_key=settings.provided.EXCHANGE_RATE.EXCHANGE_RATE_API_KEY,
        base_url=settings.provided.EXCHANGE_RATE.EXCHANGE_RATE_API_URL,
    )

    conversion_service = providers.Factory(
        "api.features.conversions.service.ConversionService",
    )


class ControllerContainer(containers.DeclarativeContainer):
    """Controller-specific dependencies."""

    services = providers.DependenciesContainer()

    auth_controller = providers.Factory(
        "api.features.auth.controller.AuthController",
        auth_service=services.auth_service,
    )

    exchange_rate_controller = providers.Factory(
        "api.features.rates.controller.ExchangeRateController",
        exchange_rate_service=services.exchange_rate_service,
    )

    conversion_controller = providers.Factory(
        "api.features.conversions.controller.ConversionController",
        conversion_service=services.conversion_service,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Main application container composing all sub-containers."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "api.shared.db",
            "api.features.auth.router",
            "api.features.rates.router",
            "api.features.conversions.router",
        ]
    )

    # Overridden by create_fastapi_app(settings); env-derived settings otherwise
    settings = providers.Callable(get_settings)

    infrastructure = providers.Container(InfrastructureContainer, settings=settings)
    services = providers.Container(
        ServiceContainer, settings=settings, infrastructure=infrastructure
    )
    controllers = providers.Container(ControllerContainer, services=services)

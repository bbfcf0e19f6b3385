"""Entity registry to ensure SQLAlchemy loads all table metadata.

Import all entity modules here so Alembic autogenerate and schema creation can
discover them.
"""
# Import base first to expose BaseEntity.metadata
from api.shared.entities.base import BaseEntity  # noqa: F401

# Feature: Auth
from api.features.auth.entities.user import User  # noqa: F401

# Feature: Conversions
from api.features.conversions.entities.conversion import Conversion  # noqa: F401

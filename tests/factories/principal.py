"""Factory for Principal values."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from postguard.core.permissions import Principal, Role


class PrincipalFactory(ModelFactory[Principal]):
    """Factory for generating Principal test data."""

    __model__ = Principal

    @classmethod
    def id(cls) -> str:
        """Generate a unique principal ID."""
        return f"user-{uuid4().hex[:8]}"

    @classmethod
    def roles(cls) -> tuple[Role, ...]:
        """Default to a plain user."""
        return (Role.USER,)

    @classmethod
    def full_name(cls) -> str:
        """Generate a full name."""
        return cls.__faker__.name()

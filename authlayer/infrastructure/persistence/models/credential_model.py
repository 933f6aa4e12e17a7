"""Credential ORM model - infrastructure layer SQLAlchemy mapping."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from authlayer.domain.entities.credential import MAX_LOGIN_LENGTH, Credential
from authlayer.infrastructure.persistence.database import Base


class CredentialModel(Base):
    """
    SQLAlchemy ORM model for the user login table.

    The domain layer never imports this class.
    """

    __tablename__ = "user_logins"

    login: Mapped[str] = mapped_column(String(MAX_LOGIN_LENGTH), primary_key=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation without the stored password."""
        return f"CredentialModel(login={self.login!r})"

    def to_entity(self) -> Credential:
        """Convert ORM model to domain entity."""
        return Credential(login=self.login, password_hash=self.password_hash)

    @staticmethod
    def from_entity(credential: Credential) -> "CredentialModel":
        """Create ORM model from domain entity."""
        return CredentialModel(
            login=credential.login,
            password_hash=credential.password_hash,
        )

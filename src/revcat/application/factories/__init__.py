"""Application factories for repository access."""

from revcat.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]

"""
Unit tests for the DI container and providers.
"""
import pytest

from users_api.application.use_cases.user import CreateUserUseCase, DeleteUserUseCase
from users_api.di.base_container import BaseContainer, DependencyNotRegisteredError
from users_api.di.container import DIContainer
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises(self):
        with pytest.raises(DependencyNotRegisteredError):
            BaseContainer().get("missing")


class TestDIContainer:
    """Tests for the composed container"""

    def test_repository_is_shared_in_memory_store(self):
        container = DIContainer()
        repo = container.get(UserRepository)
        assert isinstance(repo, InMemoryUserRepository)
        assert container.get(UserRepository) is repo

    def test_use_cases_share_the_repository(self):
        container = DIContainer()
        create = container.get(CreateUserUseCase)
        delete = container.get(DeleteUserUseCase)
        assert isinstance(create, CreateUserUseCase)
        assert isinstance(delete, DeleteUserUseCase)
        assert create.user_repository is delete.user_repository

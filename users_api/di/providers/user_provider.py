from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user CRUD use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            CreateUserUseCase,
            ListUsersUseCase,
            GetUserUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    user_repository=container.get(UserRepository)
                )
            )

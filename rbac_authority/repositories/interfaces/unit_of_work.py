from abc import ABC, abstractmethod

from .role import IRoleRepository
from .permission import IPermissionRepository
from .role_permission import IRolePermissionRepository
from .user_role import IUserRoleRepository

class IUnitOfWork(ABC):
    """
    하나의 트랜잭션에 묶인 리포지토리 집합입니다.

    네 개의 리포지토리는 모두 같은 트랜잭션을 공유하며,
    commit() 또는 rollback()이 호출될 때까지 변경사항이 확정되지 않습니다.
    """
    roles: IRoleRepository
    permissions: IPermissionRepository
    role_permissions: IRolePermissionRepository
    user_roles: IUserRoleRepository

    @abstractmethod
    def commit(self) -> None:
        """지금까지의 모든 변경사항을 확정합니다."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """지금까지의 모든 변경사항을 취소합니다."""
        pass

    @abstractmethod
    def close(self) -> None:
        """트랜잭션에 사용된 연결을 반환합니다."""
        pass

from abc import ABC, abstractmethod
from typing import List, Optional
from rbac_authority.database.models.permission import PermissionMixin

class IPermissionRepository(ABC):
    @abstractmethod
    def create(self, name: str, slug: str) -> PermissionMixin:
        """새로운 권한을 생성하고, id가 할당된 모델을 반환합니다."""
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[PermissionMixin]:
        """slug로 특정 권한을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, permission_ids: List[int]) -> List[PermissionMixin]:
        """주어진 ID 목록에 해당하는 권한들을 조회합니다. 빈 목록이면 빈 리스트를 반환합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[PermissionMixin]:
        """저장된 모든 권한을 조회합니다."""
        pass

    @abstractmethod
    def delete(self, permission: PermissionMixin) -> bool:
        """특정 권한을 삭제합니다."""
        pass

from abc import ABC, abstractmethod
from typing import List, Optional
from rbac_authority.database.models.role import RoleMixin

class IRoleRepository(ABC):
    @abstractmethod
    def create(self, name: str, slug: str) -> RoleMixin:
        """새로운 역할을 생성하고, id가 할당된 모델을 반환합니다."""
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[RoleMixin]:
        """slug로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, role_ids: List[int]) -> List[RoleMixin]:
        """주어진 ID 목록에 해당하는 역할들을 조회합니다. 빈 목록이면 빈 리스트를 반환합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[RoleMixin]:
        """저장된 모든 역할을 조회합니다."""
        pass

    @abstractmethod
    def delete(self, role: RoleMixin) -> bool:
        """특정 역할을 삭제합니다."""
        pass

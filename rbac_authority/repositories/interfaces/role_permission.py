from abc import ABC, abstractmethod
from typing import List

class IRolePermissionRepository(ABC):
    @abstractmethod
    def create(self, role_id: int, permission_id: int) -> None:
        """역할에 권한을 연결하는 행을 추가합니다."""
        pass

    @abstractmethod
    def exists(self, role_id: int, permission_id: int) -> bool:
        """(role_id, permission_id) 연결이 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def exists_for_any_role(self, role_ids: List[int], permission_id: int) -> bool:
        """주어진 역할들 중 하나라도 해당 권한에 연결되어 있는지 확인합니다."""
        pass

    @abstractmethod
    def list_permission_ids(self, role_id: int) -> List[int]:
        """역할에 연결된 모든 권한의 ID를 조회합니다."""
        pass

    @abstractmethod
    def count_by_permission_id(self, permission_id: int) -> int:
        """해당 권한을 참조하는 연결 행의 개수를 조회합니다."""
        pass

    @abstractmethod
    def delete(self, role_id: int, permission_id: int) -> int:
        """
        (role_id, permission_id) 연결을 삭제합니다.

        Returns:
            삭제된 행의 개수. 연결이 없었다면 0.
        """
        pass

    @abstractmethod
    def delete_by_role_id(self, role_id: int) -> int:
        """역할에 연결된 모든 권한 연결을 삭제하고, 삭제된 행의 개수를 반환합니다."""
        pass

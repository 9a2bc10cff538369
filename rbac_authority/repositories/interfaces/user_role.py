from abc import ABC, abstractmethod
from typing import List

class IUserRoleRepository(ABC):
    @abstractmethod
    def create(self, user_id: str, role_id: int) -> None:
        """사용자에게 역할을 연결하는 행을 추가합니다."""
        pass

    @abstractmethod
    def exists(self, user_id: str, role_id: int) -> bool:
        """(user_id, role_id) 연결이 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def list_role_ids(self, user_id: str) -> List[int]:
        """사용자에게 연결된 모든 역할의 ID를 조회합니다."""
        pass

    @abstractmethod
    def count_by_role_id(self, role_id: int) -> int:
        """해당 역할을 가진 사용자 연결 행의 개수를 조회합니다."""
        pass

    @abstractmethod
    def delete(self, user_id: str, role_id: int) -> int:
        """
        (user_id, role_id) 연결을 삭제합니다.

        Returns:
            삭제된 행의 개수. 연결이 없었다면 0.
        """
        pass

from typing import List
from sqlalchemy.orm import Session
from rbac_authority.database.models import ModelSet
from rbac_authority.repositories.interfaces import IUserRoleRepository

class SqlalchemyUserRoleRepository(IUserRoleRepository):
    def __init__(self, db_session: Session, models: ModelSet):
        self.db = db_session
        self.UserRole = models.UserRole

    def create(self, user_id: str, role_id: int) -> None:
        self.db.add(self.UserRole(user_id=user_id, role_id=role_id))
        self.db.flush()

    def exists(self, user_id: str, role_id: int) -> bool:
        return self.db.query(self.UserRole).filter(
            self.UserRole.user_id == user_id,
            self.UserRole.role_id == role_id
        ).first() is not None

    def list_role_ids(self, user_id: str) -> List[int]:
        rows = self.db.query(self.UserRole.role_id).filter(self.UserRole.user_id == user_id).all()
        return [row[0] for row in rows]

    def count_by_role_id(self, role_id: int) -> int:
        return self.db.query(self.UserRole).filter(self.UserRole.role_id == role_id).count()

    def delete(self, user_id: str, role_id: int) -> int:
        return self.db.query(self.UserRole).filter(
            self.UserRole.user_id == user_id,
            self.UserRole.role_id == role_id
        ).delete(synchronize_session=False)

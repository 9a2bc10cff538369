from typing import List
from sqlalchemy.orm import Session
from rbac_authority.database.models import ModelSet
from rbac_authority.repositories.interfaces import IRolePermissionRepository

class SqlalchemyRolePermissionRepository(IRolePermissionRepository):
    def __init__(self, db_session: Session, models: ModelSet):
        self.db = db_session
        self.RolePermission = models.RolePermission

    def create(self, role_id: int, permission_id: int) -> None:
        self.db.add(self.RolePermission(role_id=role_id, permission_id=permission_id))
        self.db.flush()

    def exists(self, role_id: int, permission_id: int) -> bool:
        return self.db.query(self.RolePermission).filter(
            self.RolePermission.role_id == role_id,
            self.RolePermission.permission_id == permission_id
        ).first() is not None

    def exists_for_any_role(self, role_ids: List[int], permission_id: int) -> bool:
        if not role_ids:
            return False
        return self.db.query(self.RolePermission).filter(
            self.RolePermission.role_id.in_(role_ids),
            self.RolePermission.permission_id == permission_id
        ).first() is not None

    def list_permission_ids(self, role_id: int) -> List[int]:
        rows = self.db.query(self.RolePermission.permission_id).filter(
            self.RolePermission.role_id == role_id
        ).all()
        return [row[0] for row in rows]

    def count_by_permission_id(self, permission_id: int) -> int:
        return self.db.query(self.RolePermission).filter(self.RolePermission.permission_id == permission_id).count()

    def delete(self, role_id: int, permission_id: int) -> int:
        return self.db.query(self.RolePermission).filter(
            self.RolePermission.role_id == role_id,
            self.RolePermission.permission_id == permission_id
        ).delete(synchronize_session=False)

    def delete_by_role_id(self, role_id: int) -> int:
        return self.db.query(self.RolePermission).filter(
            self.RolePermission.role_id == role_id
        ).delete(synchronize_session=False)

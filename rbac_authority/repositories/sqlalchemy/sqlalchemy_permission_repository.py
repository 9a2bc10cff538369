from typing import List, Optional
from sqlalchemy.orm import Session
from rbac_authority.database.models import ModelSet
from rbac_authority.database.models.permission import PermissionMixin
from rbac_authority.repositories.interfaces import IPermissionRepository

class SqlalchemyPermissionRepository(IPermissionRepository):
    def __init__(self, db_session: Session, models: ModelSet):
        self.db = db_session
        self.Permission = models.Permission

    def create(self, name: str, slug: str) -> PermissionMixin:
        permission = self.Permission(name=name, slug=slug)
        self.db.add(permission)
        self.db.flush()
        return permission

    def find_by_slug(self, slug: str) -> Optional[PermissionMixin]:
        return self.db.query(self.Permission).filter(self.Permission.slug == slug).first()

    def find_by_ids(self, permission_ids: List[int]) -> List[PermissionMixin]:
        if not permission_ids:
            return []
        return self.db.query(self.Permission).filter(
            self.Permission.id.in_(permission_ids)
        ).order_by(self.Permission.id.asc()).all()

    def list_all(self) -> List[PermissionMixin]:
        return self.db.query(self.Permission).order_by(self.Permission.id.asc()).all()

    def delete(self, permission: PermissionMixin) -> bool:
        if permission:
            self.db.delete(permission)
            self.db.flush()
            return True
        return False

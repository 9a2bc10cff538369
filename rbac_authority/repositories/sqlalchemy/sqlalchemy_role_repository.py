from typing import List, Optional
from sqlalchemy.orm import Session
from rbac_authority.database.models import ModelSet
from rbac_authority.database.models.role import RoleMixin
from rbac_authority.repositories.interfaces import IRoleRepository

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session, models: ModelSet):
        self.db = db_session
        self.Role = models.Role

    def create(self, name: str, slug: str) -> RoleMixin:
        role = self.Role(name=name, slug=slug)
        self.db.add(role)
        self.db.flush()
        return role

    def find_by_slug(self, slug: str) -> Optional[RoleMixin]:
        return self.db.query(self.Role).filter(self.Role.slug == slug).first()

    def find_by_ids(self, role_ids: List[int]) -> List[RoleMixin]:
        if not role_ids:
            return []
        return self.db.query(self.Role).filter(self.Role.id.in_(role_ids)).order_by(self.Role.id.asc()).all()

    def list_all(self) -> List[RoleMixin]:
        return self.db.query(self.Role).order_by(self.Role.id.asc()).all()

    def delete(self, role: RoleMixin) -> bool:
        if role:
            self.db.delete(role)
            self.db.flush()
            return True
        return False

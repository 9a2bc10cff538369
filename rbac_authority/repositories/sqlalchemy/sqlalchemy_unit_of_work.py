import logging
from sqlalchemy.orm import Session
from rbac_authority.database.models import ModelSet
from rbac_authority.repositories.interfaces import IUnitOfWork
from .sqlalchemy_role_repository import SqlalchemyRoleRepository
from .sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from .sqlalchemy_role_permission_repository import SqlalchemyRolePermissionRepository
from .sqlalchemy_user_role_repository import SqlalchemyUserRoleRepository

logger = logging.getLogger(__name__)

class SqlalchemyUnitOfWork(IUnitOfWork):
    """하나의 SQLAlchemy 세션(= 하나의 트랜잭션)에 네 리포지토리를 묶습니다."""
    def __init__(self, db_session: Session, models: ModelSet):
        self.db = db_session
        self.roles = SqlalchemyRoleRepository(db_session, models)
        self.permissions = SqlalchemyPermissionRepository(db_session, models)
        self.role_permissions = SqlalchemyRolePermissionRepository(db_session, models)
        self.user_roles = SqlalchemyUserRoleRepository(db_session, models)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        logger.debug("Rolling back session %r", self.db)
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

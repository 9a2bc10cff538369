from .sqlalchemy_role_repository import SqlalchemyRoleRepository
from .sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from .sqlalchemy_role_permission_repository import SqlalchemyRolePermissionRepository
from .sqlalchemy_user_role_repository import SqlalchemyUserRoleRepository
from .sqlalchemy_unit_of_work import SqlalchemyUnitOfWork

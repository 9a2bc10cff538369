from functools import lru_cache
from typing import NamedTuple, Type

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

from .role import RoleMixin
from .permission import PermissionMixin
from .association import RolePermissionMixin, UserRoleMixin


class ModelSet(NamedTuple):
    """하나의 테이블 접두사(prefix)에 묶인 모델 클래스들의 집합입니다."""
    metadata: MetaData
    Role: Type
    Permission: Type
    RolePermission: Type
    UserRole: Type


@lru_cache(maxsize=None)
def build_models(tables_prefix: str = "") -> ModelSet:
    """
    주어진 테이블 접두사로 네 개의 모델 클래스를 생성합니다.

    접두사마다 별도의 Base(MetaData)를 사용하므로, 같은 프로세스에서
    서로 다른 접두사를 가진 Authority를 함께 사용할 수 있습니다.
    같은 접두사로 다시 호출하면 캐시된 모델을 반환합니다.
    """
    Base = declarative_base()

    class Role(RoleMixin, Base):
        __tables_prefix__ = tables_prefix
        __tablename__ = f"{tables_prefix}roles"

    class Permission(PermissionMixin, Base):
        __tables_prefix__ = tables_prefix
        __tablename__ = f"{tables_prefix}permissions"

    class RolePermission(RolePermissionMixin, Base):
        __tables_prefix__ = tables_prefix
        __tablename__ = f"{tables_prefix}role_permissions"

    class UserRole(UserRoleMixin, Base):
        __tables_prefix__ = tables_prefix
        __tablename__ = f"{tables_prefix}user_roles"

    return ModelSet(
        metadata=Base.metadata,
        Role=Role,
        Permission=Permission,
        RolePermission=RolePermission,
        UserRole=UserRole,
    )


def to_dict(entity) -> dict:
    """Role 또는 Permission 모델을 호출자에게 돌려줄 딕셔너리로 변환합니다."""
    return {"id": entity.id, "name": entity.name, "slug": entity.slug}

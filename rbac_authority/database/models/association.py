from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import declared_attr


class RolePermissionMixin:
    """
    역할(Role)과 권한(Permission) 사이의 다대다(many-to-many) 관계를
    연결하는 연관 테이블 모델입니다.
    (role_id, permission_id) 쌍은 한 번만 존재할 수 있습니다.
    """
    id = Column(Integer, primary_key=True, index=True)

    @declared_attr
    def role_id(cls):
        return Column(Integer, ForeignKey(f"{cls.__tables_prefix__}roles.id"), nullable=False, index=True)

    @declared_attr
    def permission_id(cls):
        return Column(Integer, ForeignKey(f"{cls.__tables_prefix__}permissions.id"), nullable=False, index=True)

    @declared_attr
    def __table_args__(cls):
        return (
            UniqueConstraint("role_id", "permission_id", name=f"uq_{cls.__tablename__}_role_permission"),
        )


class UserRoleMixin:
    """
    외부 사용자 식별자(user_id)와 역할(Role)을 연결하는 연관 테이블 모델입니다.
    사용자는 여러 역할을 가질 수 있지만, 같은 역할을 두 번 가질 수는 없습니다.
    user_id는 외부 시스템의 식별자이므로 문자열로 정규화하여 저장합니다.
    """
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)

    @declared_attr
    def role_id(cls):
        return Column(Integer, ForeignKey(f"{cls.__tables_prefix__}roles.id"), nullable=False, index=True)

    @declared_attr
    def __table_args__(cls):
        return (
            UniqueConstraint("user_id", "role_id", name=f"uq_{cls.__tablename__}_user_role"),
        )

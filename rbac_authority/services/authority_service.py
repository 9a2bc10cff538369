import logging
import math
import numbers
import uuid
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Union

from rbac_authority.database.models import to_dict
from rbac_authority.repositories.interfaces import IUnitOfWork
from rbac_authority.services.exceptions import (
    RoleNotFoundError, PermissionNotFoundError,
    RoleAlreadyExistsError, PermissionAlreadyExistsError,
    RoleAlreadyAssignedError, PermissionAlreadyAssignedError,
    RoleInUseError, PermissionInUseError, InvalidUserIdError, AuthorityError
)

logger = logging.getLogger(__name__)

# 외부 사용자 식별자: 정수, 문자열 또는 UUID, 저장 시 문자열로 정규화
UserID = Union[int, str, uuid.UUID]


def normalize_user_id(user_id: UserID) -> str:
    """
    사용자 식별자를 비교 가능한 문자열 키로 정규화합니다.
    42, "42", 42.0, Decimal("42"), numpy.int64(42)는 모두 같은 사용자 "42"로 취급됩니다.
    UUID는 표준 문자열 형태로 저장됩니다.

    Raises:
        InvalidUserIdError: bool, None, 정수가 아닌 실수, 지원하지 않는 타입이거나 빈 문자열일 때.
    """
    if isinstance(user_id, bool) or user_id is None:
        raise InvalidUserIdError(f"User id must not be {user_id!r}.")
    if isinstance(user_id, str):
        key = user_id
    elif isinstance(user_id, numbers.Integral):
        key = str(int(user_id))
    elif isinstance(user_id, uuid.UUID):
        key = str(user_id)
    elif isinstance(user_id, float):
        if not math.isfinite(user_id) or not user_id.is_integer():
            raise InvalidUserIdError(f"User id {user_id!r} is not an integral number.")
        key = str(int(user_id))
    elif isinstance(user_id, Decimal):
        if not user_id.is_finite() or user_id != user_id.to_integral_value():
            raise InvalidUserIdError(f"User id {user_id!r} is not an integral number.")
        key = str(int(user_id))
    else:
        raise InvalidUserIdError(f"Unsupported user id type: {type(user_id).__name__}.")
    if not key.strip():
        raise InvalidUserIdError("User id must not be empty.")
    return key


def _validate_name_and_slug(name: str, slug: str):
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Name must be a non-empty string.")
    if not isinstance(slug, str) or not slug:
        raise ValueError("Slug must be a non-empty string.")
    if any(ch.isspace() for ch in slug):
        raise ValueError(f"Slug '{slug}' must not contain whitespace.")


class Authority:
    """역할, 권한, 사용자-역할 할당 등 RBAC 데이터를 관리하는 서비스를 제공합니다."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        """
        Authority를 초기화합니다.

        Args:
            uow_factory: 호출할 때마다 새 트랜잭션에 묶인 IUnitOfWork를 반환하는 팩토리.
                각 연산은 자신만의 unit of work를 열고, 성공하면 commit, 실패하면 rollback합니다.
        """
        self.uow_factory = uow_factory

    @contextmanager
    def _unit_of_work(self) -> Iterator[IUnitOfWork]:
        uow = self.uow_factory()
        try:
            yield uow
            uow.commit()
        except AuthorityError as e:
            logger.debug("Rolling back authority operation: %s", e)
            uow.rollback()
            raise
        except Exception as e:
            logger.warning("Rolling back authority operation after store failure: %s", e)
            uow.rollback()
            raise
        finally:
            uow.close()

    def begin_tx(self) -> "TransactionScope":
        """
        하나의 트랜잭션에 묶인 새 TransactionScope를 시작합니다.

        반환된 범위를 통해 실행한 모든 변경은 commit() 전까지 확정되지 않으며,
        rollback()을 호출하면 begin_tx() 이전 상태로 돌아갑니다.
        각 범위는 자신만의 세션을 가지므로 서로 독립적입니다.
        """
        from rbac_authority.services.transaction_scope import TransactionScope
        logger.debug("Beginning transaction scope")
        return TransactionScope(self.uow_factory())

    # ------------------------------------------------------------------
    # 조회 헬퍼
    # ------------------------------------------------------------------

    @staticmethod
    def _get_role(uow: IUnitOfWork, slug: str):
        role = uow.roles.find_by_slug(slug)
        if not role:
            raise RoleNotFoundError(f"Role '{slug}' not found.")
        return role

    @staticmethod
    def _get_permission(uow: IUnitOfWork, slug: str):
        permission = uow.permissions.find_by_slug(slug)
        if not permission:
            raise PermissionNotFoundError(f"Permission '{slug}' not found.")
        return permission

    # ------------------------------------------------------------------
    # 역할 / 권한 생명주기
    # ------------------------------------------------------------------

    def create_role(self, name: str, slug: str) -> Dict[str, Any]:
        """
        새로운 역할을 생성합니다.

        Args:
            name: 사람이 읽을 수 있는 역할 이름.
            slug: 역할의 고유 식별자. 공백을 포함할 수 없습니다.

        Returns:
            생성된 역할의 id, name, slug를 담은 딕셔너리.

        Raises:
            ValueError: name 또는 slug가 올바르지 않을 때.
            RoleAlreadyExistsError: 동일한 slug의 역할이 이미 존재할 때.
        """
        _validate_name_and_slug(name, slug)
        with self._unit_of_work() as uow:
            if uow.roles.find_by_slug(slug):
                raise RoleAlreadyExistsError(f"Role '{slug}' already exists.")
            role = uow.roles.create(name, slug)
            created = to_dict(role)
        logger.info("Created role '%s'", slug)
        return created

    def create_permission(self, name: str, slug: str) -> Dict[str, Any]:
        """
        새로운 권한을 생성합니다.

        Raises:
            ValueError: name 또는 slug가 올바르지 않을 때.
            PermissionAlreadyExistsError: 동일한 slug의 권한이 이미 존재할 때.
        """
        _validate_name_and_slug(name, slug)
        with self._unit_of_work() as uow:
            if uow.permissions.find_by_slug(slug):
                raise PermissionAlreadyExistsError(f"Permission '{slug}' already exists.")
            permission = uow.permissions.create(name, slug)
            created = to_dict(permission)
        logger.info("Created permission '%s'", slug)
        return created

    def get_role(self, slug: str) -> Dict[str, Any]:
        """
        slug로 특정 역할을 조회합니다.

        Raises:
            RoleNotFoundError: 해당 slug의 역할을 찾을 수 없을 때.
        """
        with self._unit_of_work() as uow:
            return to_dict(self._get_role(uow, slug))

    def get_permission(self, slug: str) -> Dict[str, Any]:
        """
        slug로 특정 권한을 조회합니다.

        Raises:
            PermissionNotFoundError: 해당 slug의 권한을 찾을 수 없을 때.
        """
        with self._unit_of_work() as uow:
            return to_dict(self._get_permission(uow, slug))

    def get_all_roles(self) -> List[Dict[str, Any]]:
        """저장된 모든 역할의 목록을 조회합니다."""
        with self._unit_of_work() as uow:
            return [to_dict(r) for r in uow.roles.list_all()]

    def get_all_permissions(self) -> List[Dict[str, Any]]:
        """저장된 모든 권한의 목록을 조회합니다."""
        with self._unit_of_work() as uow:
            return [to_dict(p) for p in uow.permissions.list_all()]

    def delete_role(self, slug: str) -> bool:
        """
        역할을 삭제합니다. 역할에 연결된 권한 연결은 같은 트랜잭션에서 먼저 삭제됩니다.
        단, 사용자에게 할당된 역할은 삭제할 수 없습니다.

        Raises:
            RoleNotFoundError: 해당 slug의 역할을 찾을 수 없을 때.
            RoleInUseError: 역할이 한 명 이상의 사용자에게 할당되어 있을 때.
        """
        with self._unit_of_work() as uow:
            role = self._get_role(uow, slug)

            if uow.user_roles.count_by_role_id(role.id) > 0:
                raise RoleInUseError(f"Role '{slug}' is assigned to users and cannot be deleted.")

            removed = uow.role_permissions.delete_by_role_id(role.id)
            uow.roles.delete(role)
        logger.info("Deleted role '%s' (%d permission links removed)", slug, removed)
        return True

    def delete_permission(self, slug: str) -> bool:
        """
        권한을 삭제합니다. 단, 역할에 연결된 권한은 삭제할 수 없습니다.

        Raises:
            PermissionNotFoundError: 해당 slug의 권한을 찾을 수 없을 때.
            PermissionInUseError: 권한이 하나 이상의 역할에 연결되어 있을 때.
        """
        with self._unit_of_work() as uow:
            permission = self._get_permission(uow, slug)

            if uow.role_permissions.count_by_permission_id(permission.id) > 0:
                raise PermissionInUseError(f"Permission '{slug}' is assigned to roles and cannot be deleted.")

            uow.permissions.delete(permission)
        logger.info("Deleted permission '%s'", slug)
        return True

    # ------------------------------------------------------------------
    # 역할 ⇄ 권한
    # ------------------------------------------------------------------

    def assign_permissions_to_role(self, role_slug: str, permission_slugs: List[str]) -> bool:
        """
        여러 권한을 한 번에 역할에 연결합니다.

        모든 slug를 먼저 확인한 뒤 하나의 트랜잭션에서 연결 행을 추가하므로,
        어느 하나라도 실패하면 이번 호출로 추가된 연결은 하나도 남지 않습니다.

        Args:
            role_slug: 권한을 받을 역할의 slug.
            permission_slugs: 연결할 권한 slug의 목록.

        Raises:
            ValueError: permission_slugs가 목록이 아닌 단일 문자열일 때.
            RoleNotFoundError: 역할을 찾을 수 없을 때.
            PermissionNotFoundError: 권한 중 하나라도 찾을 수 없을 때.
            PermissionAlreadyAssignedError: 권한 중 하나라도 이미 역할에 연결되어 있을 때.
                (같은 호출 안에서 slug가 중복된 경우도 포함)
        """
        if isinstance(permission_slugs, str):
            raise ValueError("permission_slugs must be a list of slugs, not a single string.")
        permission_slugs = list(permission_slugs)
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            permissions = [self._get_permission(uow, s) for s in permission_slugs]

            pending = set()
            for permission in permissions:
                if permission.id in pending or uow.role_permissions.exists(role.id, permission.id):
                    raise PermissionAlreadyAssignedError(
                        f"Permission '{permission.slug}' is already assigned to role '{role_slug}'."
                    )
                pending.add(permission.id)

            for permission in permissions:
                uow.role_permissions.create(role.id, permission.id)
        logger.info("Assigned permissions %s to role '%s'", list(permission_slugs), role_slug)
        return True

    def revoke_role_permission(self, role_slug: str, permission_slug: str) -> bool:
        """
        역할에서 권한 연결을 회수합니다. 연결이 없어도 오류가 아닙니다.

        이 역할을 가진 모든 사용자에게서 해당 권한이 사라집니다.

        Raises:
            RoleNotFoundError: 역할을 찾을 수 없을 때.
            PermissionNotFoundError: 권한을 찾을 수 없을 때.
        """
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            permission = self._get_permission(uow, permission_slug)
            removed = uow.role_permissions.delete(role.id, permission.id)
        if removed:
            logger.info("Revoked permission '%s' from role '%s'", permission_slug, role_slug)
        return True

    def check_role_permission(self, role_slug: str, permission_slug: str) -> bool:
        """
        역할에 권한이 연결되어 있는지 확인합니다.

        Raises:
            RoleNotFoundError: 역할을 찾을 수 없을 때.
            PermissionNotFoundError: 권한을 찾을 수 없을 때.
        """
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            permission = self._get_permission(uow, permission_slug)
            return uow.role_permissions.exists(role.id, permission.id)

    def get_role_permissions(self, role_slug: str) -> List[Dict[str, Any]]:
        """
        역할에 연결된 모든 권한을 조회합니다. 연결된 권한이 없으면 빈 리스트를 반환합니다.

        Raises:
            RoleNotFoundError: 역할을 찾을 수 없을 때.
        """
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            permission_ids = uow.role_permissions.list_permission_ids(role.id)
            return [to_dict(p) for p in uow.permissions.find_by_ids(permission_ids)]

    # ------------------------------------------------------------------
    # 사용자 ⇄ 역할
    # ------------------------------------------------------------------

    def assign_role_to_user(self, user_id: UserID, role_slug: str) -> bool:
        """
        사용자에게 역할을 부여합니다. 사용자는 여러 역할을 가질 수 있습니다.

        Raises:
            InvalidUserIdError: user_id가 올바르지 않을 때.
            RoleNotFoundError: 역할을 찾을 수 없을 때.
            RoleAlreadyAssignedError: 사용자가 이미 해당 역할을 가지고 있을 때.
        """
        user_key = normalize_user_id(user_id)
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            if uow.user_roles.exists(user_key, role.id):
                raise RoleAlreadyAssignedError(f"Role '{role_slug}' is already assigned to user '{user_key}'.")
            uow.user_roles.create(user_key, role.id)
        logger.info("Assigned role '%s' to user '%s'", role_slug, user_key)
        return True

    def revoke_user_role(self, user_id: UserID, role_slug: str) -> bool:
        """
        사용자의 역할을 회수합니다. 할당이 없어도 오류가 아닙니다.

        Raises:
            InvalidUserIdError: user_id가 올바르지 않을 때.
            RoleNotFoundError: 역할을 찾을 수 없을 때.
        """
        user_key = normalize_user_id(user_id)
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            removed = uow.user_roles.delete(user_key, role.id)
        if removed:
            logger.info("Revoked role '%s' from user '%s'", role_slug, user_key)
        return True

    def check_user_role(self, user_id: UserID, role_slug: str) -> bool:
        """
        사용자가 역할을 가지고 있는지 확인합니다.

        Raises:
            RoleNotFoundError: 역할을 찾을 수 없을 때.
        """
        user_key = normalize_user_id(user_id)
        with self._unit_of_work() as uow:
            role = self._get_role(uow, role_slug)
            return uow.user_roles.exists(user_key, role.id)

    def check_user_permission(self, user_id: UserID, permission_slug: str) -> bool:
        """
        사용자가 가진 역할 중 하나라도 권한에 연결되어 있는지 확인합니다.
        (사용자 → 역할 → 권한)

        역할이 하나도 없는 사용자는 오류 없이 False를 반환합니다.

        Raises:
            PermissionNotFoundError: 권한을 찾을 수 없을 때.
        """
        user_key = normalize_user_id(user_id)
        with self._unit_of_work() as uow:
            permission = self._get_permission(uow, permission_slug)
            role_ids = uow.user_roles.list_role_ids(user_key)
            allowed = uow.role_permissions.exists_for_any_role(role_ids, permission.id)
        logger.debug("Permission check user='%s' permission='%s' -> %s", user_key, permission_slug, allowed)
        return allowed

    def get_user_roles(self, user_id: UserID) -> List[Dict[str, Any]]:
        """사용자에게 할당된 모든 역할을 조회합니다. 할당된 역할이 없으면 빈 리스트를 반환합니다."""
        user_key = normalize_user_id(user_id)
        with self._unit_of_work() as uow:
            role_ids = uow.user_roles.list_role_ids(user_key)
            return [to_dict(r) for r in uow.roles.find_by_ids(role_ids)]

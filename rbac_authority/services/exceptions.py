# rbac_authority/services/exceptions.py

class AuthorityError(Exception):
    """Authority가 발생시키는 모든 도메인 예외의 기반 클래스"""
    pass

# --- NotFound ---
class NotFoundError(AuthorityError):
    """slug에 해당하는 역할 또는 권한이 없을 때"""
    pass

class RoleNotFoundError(NotFoundError):
    """역할을 찾을 수 없을 때"""
    pass

class PermissionNotFoundError(NotFoundError):
    """권한을 찾을 수 없을 때"""
    pass

# --- AlreadyExists ---
class AlreadyExistsError(AuthorityError):
    """같은 slug가 이미 존재할 때"""
    pass

class RoleAlreadyExistsError(AlreadyExistsError):
    """역할 slug가 이미 존재할 때"""
    pass

class PermissionAlreadyExistsError(AlreadyExistsError):
    """권한 slug가 이미 존재할 때"""
    pass

# --- AlreadyAssigned ---
class AlreadyAssignedError(AuthorityError):
    """이미 연결된 역할 또는 권한을 다시 연결하려고 할 때"""
    pass

class RoleAlreadyAssignedError(AlreadyAssignedError):
    """사용자가 이미 해당 역할을 가지고 있을 때"""
    pass

class PermissionAlreadyAssignedError(AlreadyAssignedError):
    """역할에 이미 해당 권한이 연결되어 있을 때"""
    pass

# --- InUse ---
class InUseError(AuthorityError):
    """참조 중인 역할 또는 권한을 삭제하려고 할 때"""
    pass

class RoleInUseError(InUseError):
    """사용자에게 할당된 역할을 삭제하려고 할 때"""
    pass

class PermissionInUseError(InUseError):
    """역할에 연결된 권한을 삭제하려고 할 때"""
    pass

# --- Validation ---
class InvalidUserIdError(AuthorityError, ValueError):
    """사용자 식별자가 int 또는 str이 아닐 때"""
    pass

# --- Transaction Scope ---
class TransactionClosedError(AuthorityError):
    """이미 commit 또는 rollback된 트랜잭션 범위를 사용하려고 할 때"""
    pass

class NestedTransactionError(AuthorityError):
    """트랜잭션 범위 안에서 다시 begin_tx()를 호출할 때"""
    pass

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from rbac_authority.repositories.interfaces import IUnitOfWork
from rbac_authority.services.authority_service import Authority
from rbac_authority.services.exceptions import TransactionClosedError, NestedTransactionError

logger = logging.getLogger(__name__)


class TransactionScope(Authority):
    """
    하나의 열린 트랜잭션에 묶인 Authority입니다.

    Authority의 모든 연산을 그대로 제공하지만, 각 연산은 자동으로 commit되지 않고
    같은 트랜잭션 안에서 실행됩니다. 범위 안의 조회는 아직 commit되지 않은
    자신의 변경사항을 볼 수 있습니다. commit() 또는 rollback()을 호출하면 범위가 닫힙니다.

    with 문으로 사용하면 블록이 정상 종료될 때 commit, 예외가 발생하면 rollback합니다.

        with authority.begin_tx() as tx:
            tx.create_role("Editor", "editor")
            tx.assign_permissions_to_role("editor", ["posts.write"])

    연산 도중 DB 오류가 발생하면 세션은 더 이상 사용할 수 없으므로 rollback()을 호출해야 합니다.
    """

    def __init__(self, uow: IUnitOfWork):
        super().__init__(uow_factory=lambda: uow)
        self._uow = uow
        self._lock = threading.RLock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def _unit_of_work(self) -> Iterator[IUnitOfWork]:
        with self._lock:
            self._ensure_open()
            yield self._uow

    def _ensure_open(self):
        if self._closed:
            raise TransactionClosedError("Transaction scope is already committed or rolled back.")

    def begin_tx(self) -> "TransactionScope":
        raise NestedTransactionError("A transaction scope cannot begin another transaction.")

    def commit(self) -> None:
        """범위 안에서 실행한 모든 변경을 확정하고 범위를 닫습니다."""
        with self._lock:
            self._ensure_open()
            try:
                self._uow.commit()
                logger.info("Committed transaction scope")
            except Exception:
                logger.warning("Commit failed, rolling back transaction scope")
                self._uow.rollback()
                raise
            finally:
                self._closed = True
                self._uow.close()

    def rollback(self) -> None:
        """범위 안에서 실행한 모든 변경을 취소하고 범위를 닫습니다."""
        with self._lock:
            self._ensure_open()
            try:
                self._uow.rollback()
                logger.info("Rolled back transaction scope")
            finally:
                self._closed = True
                self._uow.close()

    def __enter__(self) -> "TransactionScope":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._closed:
            return False
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

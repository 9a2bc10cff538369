import logging

from sqlalchemy.engine import Engine

from .models import ModelSet

logger = logging.getLogger(__name__)


def migrate_tables(engine: Engine, models: ModelSet) -> None:
    """
    roles, permissions, role_permissions, user_roles 네 테이블을 생성합니다.
    이미 존재하는 테이블은 건드리지 않습니다.
    """
    logger.info(
        "Creating authority tables: %s",
        ", ".join(table.name for table in models.metadata.sorted_tables),
    )
    models.metadata.create_all(bind=engine)

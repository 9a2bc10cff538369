import logging
from typing import Optional, Union

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from rbac_authority.config import AuthoritySettings
from rbac_authority.database import build_models, create_engine_from_url, make_session_factory, migrate_tables
from rbac_authority.repositories.sqlalchemy import SqlalchemyUnitOfWork
from rbac_authority.services import Authority

logger = logging.getLogger(__name__)


def create_authority(bind: Union[Engine, sessionmaker], tables_prefix: str = "", migrate: bool = True) -> Authority:
    """
    엔진 또는 sessionmaker로 Authority를 생성합니다.

    Args:
        bind: 연결할 SQLAlchemy 엔진, 또는 이미 구성된 sessionmaker.
        tables_prefix: 네 테이블 이름 앞에 붙일 접두사. (예: 'authority_' -> 'authority_roles')
        migrate: True이면 테이블이 없을 때 생성합니다.

    Returns:
        호출마다 새 세션을 여는 Authority 인스턴스.
    """
    models = build_models(tables_prefix)

    if isinstance(bind, sessionmaker):
        session_factory = bind
        engine = bind.kw.get("bind")
    else:
        engine = bind
        session_factory = make_session_factory(engine)

    if migrate:
        if engine is None:
            raise ValueError("Cannot migrate tables: the sessionmaker has no bound engine.")
        migrate_tables(engine, models)

    logger.debug("Authority ready (tables prefix %r)", tables_prefix)
    return Authority(lambda: SqlalchemyUnitOfWork(session_factory(), models))


def create_authority_from_settings(settings: Optional[AuthoritySettings] = None) -> Authority:
    """환경 변수(AUTHORITY_*) 설정으로 엔진을 만들고 Authority를 생성합니다."""
    settings = settings or AuthoritySettings()
    engine = create_engine_from_url(settings.DATABASE_URL, echo=settings.ECHO)
    return create_authority(engine, tables_prefix=settings.TABLES_PREFIX, migrate=settings.AUTO_MIGRATE)

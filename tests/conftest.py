# tests/conftest.py
import pytest

from rbac_authority import create_authority
from rbac_authority.database import build_models, create_engine_from_url, make_session_factory, migrate_tables


@pytest.fixture
def engine(tmp_path):
    """테스트마다 새로운 SQLite 파일 DB에 연결된 엔진을 생성합니다."""
    engine = create_engine_from_url(f"sqlite:///{tmp_path / 'authority.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def models(engine):
    """'test_' 접두사를 가진 모델을 만들고 테이블을 생성합니다."""
    models = build_models("test_")
    migrate_tables(engine, models)
    return models


@pytest.fixture
def db_session(engine, models):
    session = make_session_factory(engine)()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def authority(engine):
    return create_authority(engine, tables_prefix="authority_")

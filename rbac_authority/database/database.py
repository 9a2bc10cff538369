from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

# 기본 연결 문자열 (설정이 주어지지 않으면 SQLite 파일을 사용)
DEFAULT_DATABASE_URL = "sqlite:///authority.db"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 연결마다 FK 검사를 켜야 합니다.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_url(database_url: str = DEFAULT_DATABASE_URL, echo: bool = False) -> Engine:
    """
    연결 문자열로 SQLAlchemy 엔진을 생성합니다.

    connect_args는 SQLite에서만 필요합니다. (thread-safe 설정)
    SQLite 연결에서는 외래 키 제약을 활성화하여, 사용자에게 할당된 역할의 행이
    삭제되지 않도록 DB가 직접 막습니다.
    """
    connect_args = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    """
    세션 생성을 위한 sessionmaker를 만듭니다.
    autocommit=False, autoflush=False로 설정하여, 명시적으로 commit을 호출해야 DB에 반영됩니다.
    """
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

from .database import DEFAULT_DATABASE_URL, create_engine_from_url, make_session_factory
from .db_init import migrate_tables
from .models import ModelSet, build_models, to_dict

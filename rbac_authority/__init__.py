import logging

from .bootstrap import create_authority, create_authority_from_settings
from .config import AuthoritySettings
from .services import Authority, TransactionScope
from .services.exceptions import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

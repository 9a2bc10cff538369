from .authority_service import Authority, UserID, normalize_user_id
from .transaction_scope import TransactionScope
from .exceptions import *

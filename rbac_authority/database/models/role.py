from sqlalchemy import Column, Integer, String


class RoleMixin:
    """
    사용자에게 부여할 수 있는 권한(Permission)의 묶음을 정의합니다.
    (예: 'editor', 'admin').
    slug는 호출자가 지정하는 고유 식별자이며, id는 DB가 할당합니다.
    """
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)

from sqlalchemy import Column, Integer, String


class PermissionMixin:
    """
    역할(Role)을 통해 부여되는 단일 기능 권한을 정의합니다.
    (예: 'posts.write', 'posts.publish').
    역할과는 독립된 slug 네임스페이스를 가집니다.
    """
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)

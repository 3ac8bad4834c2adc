# モジュール読み込み用（Alembicがモデルを見つけるために必要）
# app/models/__init__.py
from .base import Base
from .check_in import CheckIn
from .gym import Gym

__all__ = [
    "Base",
    "Gym",
    "CheckIn",
]

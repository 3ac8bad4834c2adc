# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="gym-check-in",
    version="0.1.0",
    packages=find_namespace_packages(include=["app", "app.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings",
        "SQLAlchemy[asyncio]>=2.0",
        "asyncpg",
        "alembic",
        "psycopg[binary]",
        "structlog",
        "sentry-sdk",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
)

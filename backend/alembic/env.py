from logging.config import fileConfig
from alembic import context
import os, sys
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy import pool

here = os.path.abspath(os.path.dirname(__file__))
backend_dir = os.path.abspath(os.path.join(here, ".."))      # .../backend
if backend_dir not in sys.path:
    sys.path.append(backend_dir)

load_dotenv(os.path.join(backend_dir, ".env"))

# 모델 메타데이터
from app.db.orm_registry import Base, import_all_models  # noqa: E402

import_all_models()

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _url() -> str:
    url = os.getenv("SYNC_DATABASE_URL")
    if not url:
        raise RuntimeError("SYNC_DATABASE_URL not set")
    return url


def run_migrations_offline():
    context.configure(
        url=_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(_url(), poolclass=pool.NullPool, future=True)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool
from club.core.config import settings
from club.db.session import Base

# register tables on Base.metadata
from club.models.user import User
from club.models.topic import Topic
from club.models.comment import Comment
from club.models.user_collect import UserCollect

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
target_metadata = Base.metadata

def _batch_mode(url: str) -> bool:
    # SQLite cannot ALTER most constraints in place.
    return url.startswith("sqlite")

def run_migrations_offline():
    url = settings.DATABASE_URL
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=_batch_mode(url),
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    cfg = config.get_section(config.config_ini_section) or {}
    cfg["sqlalchemy.url"] = settings.DATABASE_URL
    connectable = engine_from_config(cfg, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=_batch_mode(settings.DATABASE_URL),
        )
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

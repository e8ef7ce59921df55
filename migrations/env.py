import os
from logging.config import fileConfig
from pathlib import Path
from typing import Any
from typing import Literal

from alembic import context
from sqlalchemy import engine_from_config
from sqlalchemy import pool
from sqlmodel.sql.sqltypes import AutoString

from voicecmd.config import DATABASE_FILE_ENV_VARIABLE
from voicecmd.database.engine import create_database_url
from voicecmd.database.metadata import SQLModel

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def _resolve_database_url() -> str:
    # `voicecmd.database.migrate` sets the URL explicitly; the CLI falls back to the environment.
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    database_file = os.getenv(DATABASE_FILE_ENV_VARIABLE)
    if database_file is None or not database_file.strip():
        raise RuntimeError(f"Set '{DATABASE_FILE_ENV_VARIABLE}' to run migrations for the command store.")
    url = create_database_url(Path(database_file.strip()))
    config.set_main_option("sqlalchemy.url", url)
    return url


def _render_item(type_: str, obj: object, autogen_context: object | None) -> str | Literal[False]:
    # The text columns of `voicecommand` are SQLModel AutoStrings.
    if type_ == "type" and isinstance(obj, AutoString):
        return "sa.String()"
    return False


def _configure_options() -> dict[str, Any]:
    return {
        "target_metadata": target_metadata,
        "render_item": _render_item,
        # SQLite cannot alter columns in place.
        "render_as_batch": True,
        "compare_type": True,
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL for the command store without connecting to it."""
    context.configure(
        url=_resolve_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    _resolve_database_url()
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

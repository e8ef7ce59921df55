from pathlib import Path
from typing import Final

from alembic import command
from alembic.config import Config

MIGRATIONS_DIRECTORY: Final = Path(__file__).parent.parent.parent.parent / "migrations"


def upgrade_to_head(*, database_url: str) -> None:
    config: Final = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIRECTORY))
    config.set_main_option("sqlalchemy.url", database_url)
    command.upgrade(config, "head")

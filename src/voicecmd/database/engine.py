from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC
from datetime import datetime
from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from sqlalchemy import Engine
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from sqlmodel import col
from sqlmodel import create_engine
from sqlmodel import select

from voicecmd.database.tables import VoiceCommand
from voicecmd.matching.slot_matcher import SlotSpan
from voicecmd.types.command_template import CommandTemplate
from voicecmd.types.stored_command import StoredCommand


def create_database_url(sqlite_db_path: Path) -> str:
    return f"sqlite:///{sqlite_db_path}"


def _as_utc(timestamp: datetime) -> datetime:
    # SQLite does not store offsets, so values come back naive (but are UTC).
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp


def _to_stored_command(command: VoiceCommand) -> StoredCommand:
    assert command.id is not None
    return StoredCommand(
        id=command.id,
        user_id=command.user_id,
        command_name=command.command_name,
        has_parameter=command.has_parameter,
        parameter_name=command.parameter_name,
        workflow_id=command.workflow_id,
        created_at=_as_utc(command.created_at),
    )


@final
class Database:
    def __init__(self, sqlite_db_path: Path, *, echo: bool = False) -> None:
        url: Final = create_database_url(sqlite_db_path)
        self._engine = create_engine(url, echo=echo)

        # Tables are created by the migrations in `migrations/`, not here.

    @property
    def engine(self) -> Engine:
        return self._engine

    def ping(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    @contextmanager
    def _session(self) -> Generator[Session]:
        with Session(self._engine) as session:
            yield session

    def add_command(
        self,
        *,
        user_id: str,
        command_name: str,
        workflow_id: str,
        has_parameter: bool = False,
        parameter_name: Optional[str] = None,
    ) -> StoredCommand:
        if not user_id.strip() or not command_name.strip() or not workflow_id.strip():
            raise ValueError("user_id, command_name, and workflow_id are required")
        if has_parameter:
            if parameter_name is None or not parameter_name.strip():
                raise ValueError(f"Command '{command_name}' has a parameter but no parameter name")
            if SlotSpan.from_template(command_name, parameter_name) is None:
                raise ValueError(f"Parameter '{parameter_name}' does not occur in command '{command_name}'")
        else:
            parameter_name = None

        with self._session() as s:
            obj = VoiceCommand(
                user_id=user_id,
                command_name=command_name,
                has_parameter=has_parameter,
                parameter_name=parameter_name,
                workflow_id=workflow_id,
            )
            s.add(obj)
            s.commit()
            s.refresh(obj)
            return _to_stored_command(obj)

    def get_commands(self, user_id: str) -> list[StoredCommand]:
        with self._session() as s:
            statement: Final = (
                select(VoiceCommand)
                .where(VoiceCommand.user_id == user_id)
                .order_by(col(VoiceCommand.command_name), col(VoiceCommand.id))
            )
            return [_to_stored_command(command) for command in s.exec(statement).all()]

    def get_command_templates(self, user_id: str) -> list[CommandTemplate]:
        """
        Returns the user's commands in resolution order: commands without a parameter
        first, then alphabetically by command name.
        """
        with self._session() as s:
            statement: Final = (
                select(VoiceCommand)
                .where(VoiceCommand.user_id == user_id)
                .order_by(
                    col(VoiceCommand.has_parameter),
                    col(VoiceCommand.command_name),
                    col(VoiceCommand.id),
                )
            )
            return [_to_stored_command(command).to_template() for command in s.exec(statement).all()]

    def remove_command(self, *, id_: int) -> StoredCommand:
        with self._session() as s:
            obj = s.get(VoiceCommand, id_)
            if obj is None:
                raise KeyError(f"VoiceCommand with ID {id_} not found")
            removed: Final = _to_stored_command(obj)
            s.delete(obj)
            s.commit()
            return removed

    def remove_commands_for_workflow(self, *, workflow_id: str, user_id: str) -> list[StoredCommand]:
        with self._session() as s:
            commands: Final = s.exec(
                select(VoiceCommand)
                .where(VoiceCommand.workflow_id == workflow_id)
                .where(VoiceCommand.user_id == user_id)
                .order_by(col(VoiceCommand.id))
            ).all()
            removed: Final = [_to_stored_command(command) for command in commands]
            for command in commands:
                s.delete(command)
            s.commit()
            return removed

"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateMember, ImportMembers).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    ImportMembers,
    UpdateMember,
)

__all__ = [
    "CreateMember",
    "DeleteMember",
    "ImportMembers",
    "UpdateMember",
]

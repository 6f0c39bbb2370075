"""Unit tests for UpdateMemberHandler and DeleteMemberHandler."""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.delete_member_handler import (
    DeleteMemberHandler,
)
from src.application.commands.handlers.update_member_handler import (
    UpdateMemberHandler,
)
from src.application.commands.member_commands import DeleteMember, UpdateMember
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.errors import MemberPersistenceError
from tests.utils.member_doubles import (
    InMemoryMemberRepository,
    MemberStore,
    make_member,
)


@pytest.mark.unit
class TestUpdateMemberHandler:
    """Test partial member edits."""

    @pytest.mark.asyncio
    async def test_update_applies_only_given_fields(self):
        # Arrange
        store = MemberStore()
        member = make_member(name="Old Name", note="keep me")
        store.members[member.id] = member
        handler = UpdateMemberHandler(member_repo=InMemoryMemberRepository(store))

        # Act
        result = await handler.handle(
            UpdateMember(member_id=member.id, name="New Name", subscribed=False)
        )

        # Assert
        assert isinstance(result, Success)
        stored = store.members[member.id]
        assert stored.name == "New Name"
        assert stored.note == "keep me"
        assert stored.subscribed is False
        assert stored.updated_at >= member.updated_at

    @pytest.mark.asyncio
    async def test_update_unknown_member_returns_not_found(self):
        handler = UpdateMemberHandler(
            member_repo=InMemoryMemberRepository(MemberStore())
        )

        result = await handler.handle(UpdateMember(member_id=uuid7(), name="x"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_update_persistence_failure_is_returned(self):
        error = MemberPersistenceError(
            code=ErrorCode.PERSISTENCE_FAILED, message="disk full"
        )
        member_repo = AsyncMock()
        member_repo.find_by_id.return_value = make_member()
        member_repo.update.return_value = Failure(error=error)
        handler = UpdateMemberHandler(member_repo=member_repo)

        result = await handler.handle(UpdateMember(member_id=uuid7(), note="n"))

        assert isinstance(result, Failure)
        assert result.error is error


@pytest.mark.unit
class TestDeleteMemberHandler:
    """Test member removal."""

    @pytest.mark.asyncio
    async def test_delete_removes_member(self):
        # Arrange
        store = MemberStore()
        member = make_member()
        store.members[member.id] = member
        logger = Mock()
        handler = DeleteMemberHandler(
            member_repo=InMemoryMemberRepository(store), logger=logger
        )

        # Act
        result = await handler.handle(DeleteMember(member_id=member.id))

        # Assert
        assert isinstance(result, Success)
        assert store.members == {}
        logger.info.assert_called_once_with(
            "member_deleted", member_id=str(member.id)
        )

    @pytest.mark.asyncio
    async def test_delete_unknown_member_returns_not_found(self):
        handler = DeleteMemberHandler(
            member_repo=InMemoryMemberRepository(MemberStore()), logger=Mock()
        )

        result = await handler.handle(DeleteMember(member_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.MEMBER_NOT_FOUND

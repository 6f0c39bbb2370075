"""API tests for the members resource.

Handlers are wired to an in-memory member store through
app.dependency_overrides, so these tests exercise routing, request
validation, response schemas and RFC 9457 error rendering without a database.
"""

from unittest.mock import MagicMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.commands.handlers.create_member_handler import (
    CreateMemberHandler,
)
from src.application.commands.handlers.delete_member_handler import (
    DeleteMemberHandler,
)
from src.application.commands.handlers.import_members_handler import (
    ImportMembersHandler,
)
from src.application.commands.handlers.update_member_handler import (
    UpdateMemberHandler,
)
from src.application.queries.handlers.export_members_handler import (
    ExportMembersHandler,
)
from src.application.queries.handlers.get_member_handler import GetMemberHandler
from src.application.queries.handlers.list_members_handler import (
    ListMembersHandler,
)
from src.core.config import settings
from src.core.container import (
    get_create_member_handler,
    get_delete_member_handler,
    get_export_members_handler,
    get_get_member_handler,
    get_import_members_handler,
    get_list_members_handler,
    get_update_member_handler,
)
from src.domain.enums import EmailType
from src.infrastructure.imports import CsvRecordSource
from src.main import app
from tests.utils.member_doubles import (
    InMemoryMemberRepository,
    MemberStore,
    RecordingEmailService,
    TrackingCreationScope,
    make_member,
)

MEMBERS_URL = "/api/v1/members"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def store():
    return MemberStore()


@pytest.fixture
def email_service():
    return RecordingEmailService()


@pytest.fixture(autouse=True)
def override_member_handlers(store, email_service):
    """Point every member handler factory at the in-memory store."""

    def repo():
        return InMemoryMemberRepository(store)

    overrides = {
        get_create_member_handler: lambda: CreateMemberHandler(
            member_repo=repo(), email_service=email_service, logger=MagicMock()
        ),
        get_update_member_handler: lambda: UpdateMemberHandler(member_repo=repo()),
        get_delete_member_handler: lambda: DeleteMemberHandler(
            member_repo=repo(), logger=MagicMock()
        ),
        get_get_member_handler: lambda: GetMemberHandler(member_repo=repo()),
        get_list_members_handler: lambda: ListMembersHandler(member_repo=repo()),
        get_export_members_handler: lambda: ExportMembersHandler(
            member_repo=repo(), logger=MagicMock()
        ),
        get_import_members_handler: lambda: ImportMembersHandler(
            record_source=CsvRecordSource(),
            creation_scope=TrackingCreationScope(store, email_service=email_service),
            logger=MagicMock(),
        ),
    }
    app.dependency_overrides.update(overrides)
    yield
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def existing_member(store):
    member = make_member(email="reader@example.com", name="Avid Reader")
    store.members[member.id] = member
    return member


# =============================================================================
# Browse / read
# =============================================================================


@pytest.mark.api
class TestBrowseMembers:
    """GET /api/v1/members"""

    def test_browse_returns_members_with_pagination(self, client, store):
        for i in range(3):
            member = make_member(email=f"user{i}@example.com")
            store.members[member.id] = member

        response = client.get(MEMBERS_URL, params={"limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["members"]) == 2
        assert body["meta"]["pagination"] == {
            "page": 1,
            "limit": 2,
            "pages": 2,
            "total": 3,
            "next": 2,
            "prev": None,
        }

    def test_browse_rejects_limit_above_maximum(self, client):
        response = client.get(MEMBERS_URL, params={"limit": 101})

        assert response.status_code == 422
        body = response.json()
        assert body["status"] == 422
        assert body["errors"][0]["field"] == "query.limit"

    def test_responses_carry_trace_header(self, client):
        response = client.get(MEMBERS_URL)

        assert response.headers.get("X-Trace-Id")


@pytest.mark.api
class TestReadMember:
    """GET /api/v1/members/{id} and /by-email/{email}"""

    def test_read_by_id(self, client, existing_member):
        response = client.get(f"{MEMBERS_URL}/{existing_member.id}")

        assert response.status_code == 200
        member = response.json()["members"][0]
        assert member["email"] == "reader@example.com"
        assert UUID(member["id"]) == existing_member.id

    def test_read_by_email(self, client, existing_member):
        response = client.get(f"{MEMBERS_URL}/by-email/Reader@Example.com")

        assert response.status_code == 200
        assert response.json()["members"][0]["name"] == "Avid Reader"

    def test_read_unknown_member_returns_404_problem(self, client):
        response = client.get(f"{MEMBERS_URL}/{uuid7()}")

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "Member not found"

    def test_read_with_malformed_id_returns_422(self, client):
        response = client.get(f"{MEMBERS_URL}/not-a-uuid")

        assert response.status_code == 422


# =============================================================================
# Add / edit / destroy
# =============================================================================


@pytest.mark.api
class TestAddMember:
    """POST /api/v1/members"""

    def test_add_member_returns_201(self, client, store, email_service):
        response = client.post(
            MEMBERS_URL,
            json={"members": [{"email": "New@Example.com", "name": "New"}]},
        )

        assert response.status_code == 201
        assert response.json()["members"][0]["email"] == "new@example.com"
        assert len(store.members) == 1
        assert email_service.sent == []

    def test_add_member_can_send_email(self, client, email_service):
        response = client.post(
            MEMBERS_URL,
            params={"send_email": "true", "email_type": "subscribe"},
            json={"members": [{"email": "new@example.com"}]},
        )

        assert response.status_code == 201
        assert email_service.sent == [("new@example.com", EmailType.SUBSCRIBE)]

    def test_add_existing_email_returns_409(self, client, existing_member):
        response = client.post(
            MEMBERS_URL,
            json={"members": [{"email": "READER@example.com"}]},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["errors"][0]["field"] == "email"
        assert body["errors"][0]["code"] == "member_already_exists"

    def test_add_invalid_email_returns_400(self, client, store):
        response = client.post(
            MEMBERS_URL,
            json={"members": [{"email": "not-an-email"}]},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_email"
        assert store.members == {}

    def test_add_requires_exactly_one_member(self, client):
        response = client.post(MEMBERS_URL, json={"members": []})

        assert response.status_code == 422


@pytest.mark.api
class TestEditMember:
    """PUT /api/v1/members/{id}"""

    def test_edit_member(self, client, store, existing_member):
        response = client.put(
            f"{MEMBERS_URL}/{existing_member.id}",
            json={"members": [{"subscribed": False}]},
        )

        assert response.status_code == 200
        assert response.json()["members"][0]["subscribed"] is False
        assert store.members[existing_member.id].name == "Avid Reader"

    def test_edit_unknown_member_returns_404(self, client):
        response = client.put(
            f"{MEMBERS_URL}/{uuid7()}",
            json={"members": [{"name": "Nobody"}]},
        )

        assert response.status_code == 404


@pytest.mark.api
class TestDestroyMember:
    """DELETE /api/v1/members/{id}"""

    def test_destroy_member_returns_204(self, client, store, existing_member):
        response = client.delete(f"{MEMBERS_URL}/{existing_member.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert store.members == {}

    def test_destroy_unknown_member_returns_404(self, client):
        response = client.delete(f"{MEMBERS_URL}/{uuid7()}")

        assert response.status_code == 404


# =============================================================================
# CSV export / import
# =============================================================================


@pytest.mark.api
class TestExportMembers:
    """GET /api/v1/members/csv"""

    def test_export_returns_csv_attachment(self, client, existing_member):
        response = client.get(f"{MEMBERS_URL}/csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="members.')
        assert disposition.endswith('.csv"')
        lines = response.text.splitlines()
        assert lines[0] == "id,email,name,note,subscribed,created_at"
        assert "reader@example.com" in lines[1]


@pytest.mark.api
class TestImportMembers:
    """POST /api/v1/members/csv"""

    def _upload(self, client, content: bytes, file_name: str = "members.csv"):
        return client.post(
            f"{MEMBERS_URL}/csv",
            files={"membersfile": (file_name, content, "text/csv")},
        )

    def test_import_returns_stats(self, client, store, email_service):
        content = (
            b"email,name\n"
            b"a@example.com,Ann\n"
            b"a@example.com,Ann\n"
            b",Nameless\n"
            b"b@example.com,Bob\n"
        )

        response = self._upload(client, content)

        assert response.status_code == 201
        assert response.json() == {
            "meta": {"stats": {"imported": 2, "duplicates": 1, "invalid": 1}}
        }
        assert len(store.members) == 2
        assert email_service.sent == []

    def test_import_counts_existing_members_as_duplicates(
        self, client, existing_member
    ):
        response = self._upload(client, b"email\nreader@example.com\n")

        assert response.json()["meta"]["stats"]["duplicates"] == 1

    def test_import_export_round_trip(self, client, store, existing_member):
        exported = client.get(f"{MEMBERS_URL}/csv").content
        store.members.clear()

        response = self._upload(client, exported)

        assert response.json()["meta"]["stats"]["imported"] == 1
        assert [m.name for m in store.members.values()] == ["Avid Reader"]

    def test_unreadable_file_returns_400(self, client, store):
        response = self._upload(client, b"")

        assert response.status_code == 400
        assert response.json()["title"] == "Validation Failed"
        assert store.members == {}

    def test_non_csv_file_returns_400(self, client):
        response = self._upload(client, b"email\na@example.com\n", "members.xlsx")

        assert response.status_code == 400
        assert "Unsupported file type" in response.json()["detail"]

    def test_oversized_file_returns_413(self, client, store, monkeypatch):
        monkeypatch.setattr(settings, "member_import_max_bytes", 16)

        response = self._upload(client, b"email\n" + b"a@example.com\n" * 5)

        assert response.status_code == 413
        assert store.members == {}

    def test_missing_file_returns_422(self, client):
        response = client.post(f"{MEMBERS_URL}/csv")

        assert response.status_code == 422

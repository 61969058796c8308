"""
Tests for the project service.

Projects and activities are kept in in-memory fakes so each test can
check the store, the activity log and the queued emails together.
"""

import itertools
import pytest
from datetime import datetime, timedelta, timezone

from modules.activity.models import Activity
from modules.activity.service import ActivityService
from modules.projects.exceptions import (
    ProjectAccessDeniedError,
    ProjectCompletedError,
    ProjectNotFoundError,
)
from modules.projects.interfaces import IProjectService
from modules.projects.models import Project, ProjectStatus
from modules.projects.service import ProjectService
from shared.models import AuthenticatedUser


class FakeProjectRepository:
    def __init__(self):
        self.rows: dict[str, Project] = {}
        self._ids = itertools.count(1)
        self._now = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now

    def create(self, owner_id, title, description):
        now = self._tick()
        project = Project(
            id=f"project-{next(self._ids)}",
            owner_id=owner_id,
            title=title,
            description=description,
            status=ProjectStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self.rows[project.id] = project
        return project

    def get_by_id(self, project_id):
        return self.rows.get(project_id)

    def list_by_owner(self, owner_id):
        return [p for p in self.rows.values() if p.owner_id == owner_id]

    def count_by_owner(self, owner_id):
        return len(self.list_by_owner(owner_id))

    def update(self, project_id, fields):
        updated = self.rows[project_id].model_copy(
            update={**fields, "updated_at": self._tick()}
        )
        self.rows[project_id] = updated
        return updated

    def delete(self, project_id):
        del self.rows[project_id]


class FakeActivityRepository:
    def __init__(self):
        self.rows: list[Activity] = []
        self._now = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def append(self, user_id, action, title, description):
        self._now += timedelta(seconds=1)
        activity = Activity(
            id=f"activity-{len(self.rows) + 1}",
            user_id=user_id,
            action=action,
            title=title,
            description=description,
            timestamp=self._now,
        )
        self.rows.append(activity)
        return activity

    def list_recent(self, user_id, limit):
        mine = [a for a in self.rows if a.user_id == user_id]
        return sorted(mine, key=lambda a: a.timestamp, reverse=True)[:limit]


ALICE = AuthenticatedUser(id="alice-id", name="alice", email="alice@example.com")
BOB = AuthenticatedUser(id="bob-id", name="bob", email="bob@example.com")


@pytest.fixture
def projects() -> FakeProjectRepository:
    return FakeProjectRepository()


@pytest.fixture
def activity() -> ActivityService:
    return ActivityService(FakeActivityRepository())


@pytest.fixture
def service(projects, activity, notifier) -> ProjectService:
    return ProjectService(
        repository=projects,
        activity=activity,
        notifier=notifier,
        frontend_url="https://app.example.com/",
    )


class TestInterface:
    def test_implements_protocol(self, service):
        assert isinstance(service, IProjectService)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_pending_project(self, service, activity):
        project = await service.create(ALICE, "Launch", "Ship v1")

        assert project.status == ProjectStatus.PENDING
        assert project.owner_id == ALICE.id

        recent = await activity.recent_for_user(ALICE.id)
        assert recent[0].action == "Created project: Launch"
        assert recent[0].title == "Launch"
        assert recent[0].description == "Ship v1"

    @pytest.mark.asyncio
    async def test_create_emails_owner(self, service, notifier):
        await service.create(ALICE, "Launch")

        assert notifier.subjects == ["✅ Project Created Successfully!"]
        assert notifier.messages[0].to == ALICE.email
        assert "https://app.example.com/projects" in notifier.messages[0].html


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_title(self, service, activity):
        project = await service.create(ALICE, "Launch", "Ship v1")

        updated = await service.update(ALICE, project.id, title="Relaunch")

        assert updated.title == "Relaunch"
        assert updated.description == "Ship v1"
        assert updated.updated_at > project.updated_at
        recent = await activity.recent_for_user(ALICE.id)
        assert recent[0].action == "Updated project: Relaunch"

    @pytest.mark.asyncio
    async def test_empty_fields_keep_current_values(self, service):
        project = await service.create(ALICE, "Launch", "Ship v1")

        updated = await service.update(ALICE, project.id, title="", description=None)

        assert updated.title == "Launch"
        assert updated.description == "Ship v1"

    @pytest.mark.asyncio
    async def test_whitespace_fields_keep_current_values(self, service):
        project = await service.create(ALICE, "Launch", "Ship v1")

        updated = await service.update(ALICE, project.id, title="   ", description="\t\n")

        assert updated.title == "Launch"
        assert updated.description == "Ship v1"

    @pytest.mark.asyncio
    async def test_update_trims_values(self, service):
        project = await service.create(ALICE, "Launch", "Ship v1")

        updated = await service.update(ALICE, project.id, title="  Relaunch ", description=" Ship v2 ")

        assert updated.title == "Relaunch"
        assert updated.description == "Ship v2"

    @pytest.mark.asyncio
    async def test_update_emails_link_to_project(self, service, notifier):
        project = await service.create(ALICE, "Launch")

        await service.update(ALICE, project.id, description="More detail")

        assert notifier.subjects[-1] == "🔄 Project Updated"
        assert f"https://app.example.com/projects/{project.id}" in notifier.messages[-1].html

    @pytest.mark.asyncio
    async def test_update_completed_project_rejected(self, service, projects, activity, notifier):
        project = await service.create(ALICE, "Launch")
        await service.complete(ALICE, project.id)
        activity_count = len(await activity.recent_for_user(ALICE.id, limit=50))
        email_count = len(notifier.messages)

        with pytest.raises(ProjectCompletedError) as exc_info:
            await service.update(ALICE, project.id, title="Too late")

        assert exc_info.value.status_code == 403
        assert projects.get_by_id(project.id).title == "Launch"
        assert len(await activity.recent_for_user(ALICE.id, limit=50)) == activity_count
        assert len(notifier.messages) == email_count

    @pytest.mark.asyncio
    async def test_update_other_users_project(self, service, projects):
        project = await service.create(ALICE, "Launch")

        with pytest.raises(ProjectAccessDeniedError):
            await service.update(BOB, project.id, title="Mine now")

        assert projects.get_by_id(project.id).title == "Launch"

    @pytest.mark.asyncio
    async def test_update_missing_project(self, service):
        with pytest.raises(ProjectNotFoundError):
            await service.update(ALICE, "missing", title="x")


class TestGet:
    @pytest.mark.asyncio
    async def test_get_own_project(self, service):
        project = await service.create(ALICE, "Launch")

        assert (await service.get(ALICE, project.id)).id == project.id

    @pytest.mark.asyncio
    async def test_get_other_users_project(self, service):
        project = await service.create(ALICE, "Launch")

        with pytest.raises(ProjectAccessDeniedError) as exc_info:
            await service.get(BOB, project.id)

        assert exc_info.value.message == "Not authorized to access this project"

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(ProjectNotFoundError) as exc_info:
            await service.get(ALICE, "missing")

        assert exc_info.value.status_code == 404


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_own_project(self, service, projects, activity, notifier):
        project = await service.create(ALICE, "Launch", "Ship v1")

        await service.delete(ALICE, project.id)

        assert projects.get_by_id(project.id) is None
        recent = await activity.recent_for_user(ALICE.id)
        assert recent[0].action == "Deleted project: Launch"
        assert recent[0].description == "Ship v1"
        assert notifier.subjects[-1] == "🗑️ Project Deleted"

    @pytest.mark.asyncio
    async def test_delete_other_users_project(self, service, projects, notifier):
        project = await service.create(ALICE, "Launch")

        with pytest.raises(ProjectAccessDeniedError):
            await service.delete(BOB, project.id)

        assert projects.get_by_id(project.id) is not None
        assert len(notifier.messages) == 1

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(ProjectNotFoundError):
            await service.delete(ALICE, "missing")


class TestComplete:
    @pytest.mark.asyncio
    async def test_complete_pending_project(self, service, activity, notifier):
        project = await service.create(ALICE, "Launch")

        completed, already = await service.complete(ALICE, project.id)

        assert already is False
        assert completed.status == ProjectStatus.COMPLETED
        recent = await activity.recent_for_user(ALICE.id)
        assert recent[0].action == "Marked project as completed: Launch"
        assert notifier.subjects[-1] == "✅ Project Completed"

    @pytest.mark.asyncio
    async def test_complete_is_idempotent(self, service, activity, notifier):
        project = await service.create(ALICE, "Launch")
        await service.complete(ALICE, project.id)
        activity_count = len(await activity.recent_for_user(ALICE.id, limit=50))
        email_count = len(notifier.messages)

        again, already = await service.complete(ALICE, project.id)

        assert already is True
        assert again.status == ProjectStatus.COMPLETED
        assert len(await activity.recent_for_user(ALICE.id, limit=50)) == activity_count
        assert len(notifier.messages) == email_count

    @pytest.mark.asyncio
    async def test_complete_other_users_project(self, service, projects):
        project = await service.create(ALICE, "Launch")

        with pytest.raises(ProjectAccessDeniedError):
            await service.complete(BOB, project.id)

        assert projects.get_by_id(project.id).status == ProjectStatus.PENDING


class TestListAndStats:
    @pytest.mark.asyncio
    async def test_list_only_own_projects(self, service):
        await service.create(ALICE, "A1")
        await service.create(ALICE, "A2")
        await service.create(BOB, "B1")

        titles = {p.title for p in await service.list_for_owner(ALICE)}

        assert titles == {"A1", "A2"}

    @pytest.mark.asyncio
    async def test_list_empty(self, service):
        assert await service.list_for_owner(ALICE) == []

    @pytest.mark.asyncio
    async def test_count_and_revenue(self, service):
        for title in ("A", "B", "C"):
            await service.create(ALICE, title)

        stats = await service.count_and_revenue(ALICE)

        assert stats.project_count == 3
        assert stats.revenue == "$150"

    @pytest.mark.asyncio
    async def test_count_and_revenue_empty(self, service):
        stats = await service.count_and_revenue(ALICE)

        assert stats.project_count == 0
        assert stats.revenue == "$0"

    @pytest.mark.asyncio
    async def test_revenue_is_configurable(self, projects, activity, notifier):
        service = ProjectService(
            projects, activity, notifier, revenue_per_project=75, currency_symbol="₹"
        )
        await service.create(ALICE, "A")
        await service.create(ALICE, "B")

        stats = await service.count_and_revenue(ALICE)

        assert stats.revenue == "₹150"


class TestActivityFeed:
    @pytest.mark.asyncio
    async def test_recent_activity_capped_at_five_newest_first(self, service, activity):
        for i in range(7):
            await service.create(ALICE, f"P{i}")

        recent = await activity.recent_for_user(ALICE.id)

        assert [a.title for a in recent] == ["P6", "P5", "P4", "P3", "P2"]

    @pytest.mark.asyncio
    async def test_activity_survives_project_deletion(self, service, activity):
        project = await service.create(ALICE, "Launch")
        await service.delete(ALICE, project.id)

        actions = [a.action for a in await activity.recent_for_user(ALICE.id)]

        assert actions == ["Deleted project: Launch", "Created project: Launch"]

"""Tests for projects: lead hydration, creation and cascading deletion."""

from app.database.store import Store


def test_list_projects_hydrates_lead(store: Store) -> None:
    projects = store.list_projects()
    assert len(projects) == 1
    project = projects[0]
    assert project.id == "p1"
    assert project.key == "PROJ"
    assert project.lead is not None
    assert project.lead.name == "John Doe"
    assert "password" not in project.lead.model_dump()


def test_get_project_missing_returns_none(store: Store) -> None:
    assert store.get_project("p42") is None


def test_create_project_stores_key_as_given(store: Store) -> None:
    project = store.create_project(name="Web", key="web", description="Site", lead_id="u2")
    assert project.id == "p2"
    assert project.key == "web"
    assert project.created_at is not None
    assert store.get_project("p2").lead.id == "u2"


def test_create_project_with_unknown_lead_has_no_lead(store: Store) -> None:
    store.create_project(name="Ghost", key="GH", description="", lead_id="u99")
    project = store.get_project("p2")
    assert project.lead_id == "u99"
    assert project.lead is None


def test_delete_project_cascades_to_issues_and_comments(store: Store) -> None:
    assert store.delete_project("p1") is True
    assert store.get_project("p1") is None
    assert store.list_issues() == []
    for issue_id in ("PROJ-1", "PROJ-2", "PROJ-3", "PROJ-4"):
        assert store.get_issue(issue_id) is None
    assert store.list_comments_for_issue("PROJ-1") == []


def test_delete_project_keeps_other_projects_issues(store: Store) -> None:
    other = store.create_project(name="Other", key="OTH", description="", lead_id="u1")
    issue = store.create_issue({"project_id": other.id, "title": "Keep me", "reporter_id": "u1"})

    store.delete_project("p1")

    assert [i.id for i in store.list_issues()] == [issue.id]


def test_delete_project_missing_returns_false(store: Store) -> None:
    assert store.delete_project("p99") is False


def test_project_ids_are_not_reused_after_delete(store: Store) -> None:
    created = store.create_project(name="Temp", key="TMP", description="", lead_id="u1")
    store.delete_project(created.id)
    assert store.create_project(name="Next", key="NXT", description="", lead_id="u1").id == "p3"


def test_project_stats_count_issues_per_column(store: Store) -> None:
    [stats] = store.project_stats()
    assert stats.id == "p1"
    assert stats.lead.name == "John Doe"
    assert (stats.issue_count, stats.todo_count, stats.in_progress_count, stats.done_count) == (4, 2, 1, 1)


def test_project_stats_for_project_without_issues(store: Store) -> None:
    store.create_project(name="Empty", key="EMP", description="", lead_id="u1")
    stats = {s.key: s for s in store.project_stats()}
    assert stats["EMP"].issue_count == 0
    assert stats["EMP"].done_count == 0

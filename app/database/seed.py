from datetime import datetime, timezone

from app.database.store import Store
from app.enums import IssuePriority, IssueStatus, IssueType
from app.models import Comment, Issue, Project, UserCredentials
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_PASSWORD = "password123"


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def seed_users(store: Store) -> list[UserCredentials]:
    return [
        UserCredentials(id="u1", name="John Doe", email="john@example.com",
                        password=DEMO_PASSWORD, avatar=store.avatar_for("John")),
        UserCredentials(id="u2", name="Jane Smith", email="jane@example.com",
                        password=DEMO_PASSWORD, avatar=store.avatar_for("Jane")),
        UserCredentials(id="u3", name="Bob Johnson", email="bob@example.com",
                        password=DEMO_PASSWORD, avatar=store.avatar_for("Bob")),
    ]


SEED_PROJECTS = [
    Project(
        id="p1",
        key="PROJ",
        name="Main Project",
        description="Our primary product development",
        lead_id="u1",
        created_at=_day(2024, 1, 1),
    ),
]

SEED_ISSUES = [
    Issue(
        id="PROJ-1",
        title="Setup authentication system",
        description="Implement JWT-based authentication for the application",
        status=IssueStatus.IN_PROGRESS,
        priority=IssuePriority.HIGH,
        type=IssueType.FEATURE,
        assignee_id="u1",
        reporter_id="u2",
        project_id="p1",
        labels=["backend", "security"],
        created_at=_day(2024, 1, 15),
        updated_at=_day(2024, 1, 20),
    ),
    Issue(
        id="PROJ-2",
        title="Fix navigation menu on mobile",
        description="The navigation menu is not responsive on mobile devices",
        status=IssueStatus.TODO,
        priority=IssuePriority.MEDIUM,
        type=IssueType.BUG,
        assignee_id="u2",
        reporter_id="u3",
        project_id="p1",
        labels=["frontend", "mobile"],
        created_at=_day(2024, 1, 18),
        updated_at=_day(2024, 1, 18),
    ),
    Issue(
        id="PROJ-3",
        title="Database optimization",
        description="Optimize database queries for better performance",
        status=IssueStatus.DONE,
        priority=IssuePriority.LOW,
        type=IssueType.TASK,
        assignee_id="u3",
        reporter_id="u1",
        project_id="p1",
        labels=["backend", "performance"],
        created_at=_day(2024, 1, 10),
        updated_at=_day(2024, 1, 25),
    ),
    Issue(
        id="PROJ-4",
        title="User Dashboard Redesign",
        description="Complete redesign of the user dashboard with new metrics and visualizations",
        status=IssueStatus.TODO,
        priority=IssuePriority.HIGH,
        type=IssueType.EPIC,
        assignee_id="u1",
        reporter_id="u2",
        project_id="p1",
        labels=["frontend", "ux"],
        created_at=_day(2024, 1, 22),
        updated_at=_day(2024, 1, 22),
    ),
]

SEED_COMMENTS = [
    Comment(
        id="c1",
        issue_id="PROJ-1",
        user_id="u2",
        content="I have started working on the JWT implementation.",
        created_at=_day(2024, 1, 16),
    ),
    Comment(
        id="c2",
        issue_id="PROJ-1",
        user_id="u1",
        content="Great! Let me know if you need any help.",
        created_at=_day(2024, 1, 17),
    ),
]


def seed_store(store: Store) -> Store:
    """
    Load the built-in demo dataset.
    Three users, project PROJ, issues PROJ-1..4 and two comments on PROJ-1.
    """
    logger.info("Seeding store with demo data...")
    store.load(
        users=seed_users(store),
        projects=SEED_PROJECTS,
        issues=SEED_ISSUES,
        comments=SEED_COMMENTS,
    )
    return store

import itertools
import re
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from app.constants import (
    BOARD_COLUMNS,
    COMMENT_ID_PREFIX,
    DEFAULT_AVATAR_BASE_URL,
    PROJECT_ID_PREFIX,
    USER_ID_PREFIX,
)
from app.enums import IssuePriority, IssueStatus, IssueType
from app.exceptions import ProjectNotFoundError
from app.models import (
    Comment,
    CommentDetail,
    Issue,
    IssueDetail,
    Project,
    ProjectDetail,
    ProjectStats,
    User,
    UserCredentials,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Fields a caller may never set through create_issue or update_issue
IMMUTABLE_ISSUE_FIELDS = {"id", "created_at", "updated_at"}

# Both spellings of every issue field (assignee_id and assigneeId) map to the field name
ISSUE_FIELD_NAMES = {
    **{name: name for name in Issue.model_fields},
    **{field.alias: name for name, field in Issue.model_fields.items() if field.alias},
}

_TRAILING_NUMBER = re.compile(r"(\d+)$")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _sequence_of(record_id: str) -> int:
    match = _TRAILING_NUMBER.search(record_id)
    return int(match.group(1)) if match else 0


def _mutable_issue_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rekey ``data`` by field name, accepting snake_case or camelCase keys.
    Unknown keys and the immutable fields are dropped.
    """
    fields = {}
    for key, value in data.items():
        name = ISSUE_FIELD_NAMES.get(key)
        if name and name not in IMMUTABLE_ISSUE_FIELDS:
            fields[name] = value
    return fields


class Store:
    """
    In-memory owner of users, projects, issues and comments.

    Foreign keys (lead_id, assignee_id, reporter_id, project_id, issue_id,
    user_id) are plain ids resolved at read time. Every returned record is a
    copy; mutating it does not touch the store. All public methods hold one
    re-entrant lock, so a single instance can be shared by the request
    worker threads.
    """

    def __init__(self, avatar_base_url: str = DEFAULT_AVATAR_BASE_URL):
        self.avatar_base_url = avatar_base_url.rstrip("/")
        self._lock = threading.RLock()

        self._users: Dict[str, UserCredentials] = {}
        self._projects: Dict[str, Project] = {}
        self._issues: Dict[str, Issue] = {}
        self._comments: Dict[str, Comment] = {}

        self._user_ids = itertools.count(1)
        self._project_ids = itertools.count(1)
        self._comment_ids = itertools.count(1)
        self._issue_sequence = itertools.count(1)

    # --------------------------------------------------
    # LOADING
    # --------------------------------------------------

    def load(
        self,
        users: Iterable[UserCredentials] = (),
        projects: Iterable[Project] = (),
        issues: Iterable[Issue] = (),
        comments: Iterable[Comment] = (),
    ) -> None:
        """
        Insert records with their ids and timestamps as given.
        Every id counter restarts above the largest numeric suffix now
        present, so the next allocated id never collides with a loaded one.
        """
        with self._lock:
            for user in users:
                self._users[user.id] = user.model_copy(deep=True)
            for project in projects:
                self._projects[project.id] = project.model_copy(deep=True)
            for issue in issues:
                self._issues[issue.id] = issue.model_copy(deep=True)
            for comment in comments:
                self._comments[comment.id] = comment.model_copy(deep=True)

            self._user_ids = self._counter_after(self._users)
            self._project_ids = self._counter_after(self._projects)
            self._comment_ids = self._counter_after(self._comments)
            self._issue_sequence = self._counter_after(self._issues)

            logger.info(
                f"Store loaded: {len(self._users)} users, {len(self._projects)} projects, "
                f"{len(self._issues)} issues, {len(self._comments)} comments"
            )

    @staticmethod
    def _counter_after(records: Dict[str, Any]) -> "itertools.count[int]":
        highest = max((_sequence_of(record_id) for record_id in records), default=0)
        return itertools.count(highest + 1)

    # --------------------------------------------------
    # USERS
    # --------------------------------------------------

    def list_users(self) -> List[User]:
        with self._lock:
            return [user.public() for user in self._users.values()]

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.public() if user else None

    def find_user_by_email(self, email: str) -> Optional[UserCredentials]:
        """Includes the credential. Only for authentication."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user.model_copy()
            return None

    def create_user(self, name: str, email: str, password: str) -> User:
        with self._lock:
            user = UserCredentials(
                id=f"{USER_ID_PREFIX}{next(self._user_ids)}",
                name=name,
                email=email,
                password=password,
                avatar=self.avatar_for(name),
            )
            self._users[user.id] = user
            logger.info(f"Created user {user.id} ({user.email})")
            return user.public()

    def authenticate(self, email: str, password: str) -> Optional[User]:
        with self._lock:
            user = self.find_user_by_email(email)
            if user and user.password == password:
                return user.public()
            return None

    def avatar_for(self, name: str) -> str:
        return f"{self.avatar_base_url}?seed={quote(name)}"

    def _public_user(self, user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        user = self._users.get(user_id)
        return user.public() if user else None

    # --------------------------------------------------
    # PROJECTS
    # --------------------------------------------------

    def list_projects(self) -> List[ProjectDetail]:
        with self._lock:
            return [self._hydrate_project(project) for project in self._projects.values()]

    def get_project(self, project_id: str) -> Optional[ProjectDetail]:
        with self._lock:
            project = self._projects.get(project_id)
            return self._hydrate_project(project) if project else None

    def create_project(self, name: str, key: str, description: str, lead_id: str) -> Project:
        with self._lock:
            project = Project(
                id=f"{PROJECT_ID_PREFIX}{next(self._project_ids)}",
                key=key,
                name=name,
                description=description,
                lead_id=lead_id,
                created_at=utcnow(),
            )
            self._projects[project.id] = project
            logger.info(f"Created project {project.id} ({project.key})")
            return project.model_copy(deep=True)

    def delete_project(self, project_id: str) -> bool:
        with self._lock:
            issue_ids = [issue.id for issue in self._issues.values() if issue.project_id == project_id]
            for issue_id in issue_ids:
                self.delete_issue(issue_id)

            existed = self._projects.pop(project_id, None) is not None
            if existed:
                logger.info(f"Deleted project {project_id} with {len(issue_ids)} issues")
            return existed

    def project_stats(self) -> List[ProjectStats]:
        """Every project with its issue total and per-column counts."""
        with self._lock:
            stats = []
            for project in self._projects.values():
                statuses = [i.status for i in self._issues.values() if i.project_id == project.id]
                stats.append(ProjectStats(
                    **self._hydrate_project(project).model_dump(),
                    issue_count=len(statuses),
                    todo_count=statuses.count(IssueStatus.TODO),
                    in_progress_count=statuses.count(IssueStatus.IN_PROGRESS),
                    done_count=statuses.count(IssueStatus.DONE),
                ))
            return stats

    def _hydrate_project(self, project: Project) -> ProjectDetail:
        return ProjectDetail(
            **project.model_dump(),
            lead=self._public_user(project.lead_id),
        )

    # --------------------------------------------------
    # ISSUES
    # --------------------------------------------------

    def list_issues(
        self,
        project_id: Optional[str] = None,
        search: Optional[str] = None,
        status: Optional[IssueStatus] = None,
        priority: Optional[IssuePriority] = None,
        issue_type: Optional[IssueType] = None,
    ) -> List[IssueDetail]:
        """
        Issues in insertion order. Every given filter must match; ``search``
        is a case-insensitive substring of the title, description or id.
        """
        with self._lock:
            issues = list(self._issues.values())
            if project_id:
                issues = [issue for issue in issues if issue.project_id == project_id]
            if search:
                needle = search.lower()
                issues = [
                    issue for issue in issues
                    if needle in issue.title.lower()
                    or needle in issue.description.lower()
                    or needle in issue.id.lower()
                ]
            if status:
                issues = [issue for issue in issues if issue.status == status]
            if priority:
                issues = [issue for issue in issues if issue.priority == priority]
            if issue_type:
                issues = [issue for issue in issues if issue.type == issue_type]
            return [self._hydrate_issue(issue) for issue in issues]

    def get_issue(self, issue_id: str) -> Optional[IssueDetail]:
        with self._lock:
            issue = self._issues.get(issue_id)
            return self._hydrate_issue(issue) if issue else None

    def create_issue(self, issue_data: Dict[str, Any]) -> Issue:
        """
        Create an issue numbered {project key}-{store-wide sequence}.
        Raises ProjectNotFoundError when project_id does not resolve.
        """
        with self._lock:
            data = _mutable_issue_fields(issue_data)
            project = self._projects.get(data.get("project_id"))
            if not project:
                raise ProjectNotFoundError(data.get("project_id"))

            now = utcnow()
            issue = Issue(
                **data,
                id=f"{project.key}-{next(self._issue_sequence)}",
                created_at=now,
                updated_at=now,
            )
            self._issues[issue.id] = issue
            logger.info(f"Created issue {issue.id} in project {project.id}")
            return issue.model_copy(deep=True)

    def update_issue(self, issue_id: str, updates: Dict[str, Any]) -> Optional[IssueDetail]:
        """
        Merge ``updates`` into the issue and refresh updated_at.
        id and created_at are never changed. The merged record is validated,
        so an unknown status, priority or type raises pydantic's ValidationError.
        """
        with self._lock:
            issue = self._issues.get(issue_id)
            if not issue:
                return None

            changes = _mutable_issue_fields(updates)
            merged = Issue.model_validate({
                **issue.model_dump(),
                **changes,
                "updated_at": max(utcnow(), issue.updated_at),
            })
            self._issues[issue_id] = merged
            logger.info(f"Updated issue {issue_id}: {', '.join(sorted(changes)) or 'no fields'}")
            return self._hydrate_issue(merged)

    def delete_issue(self, issue_id: str) -> bool:
        with self._lock:
            comment_ids = [c.id for c in self._comments.values() if c.issue_id == issue_id]
            for comment_id in comment_ids:
                self.delete_comment(comment_id)

            existed = self._issues.pop(issue_id, None) is not None
            if existed:
                logger.info(f"Deleted issue {issue_id} with {len(comment_ids)} comments")
            return existed

    def board(self, project_id: Optional[str] = None) -> Dict[IssueStatus, List[IssueDetail]]:
        """Issues grouped into the board columns, in column order."""
        with self._lock:
            columns: Dict[IssueStatus, List[IssueDetail]] = {status: [] for status in BOARD_COLUMNS}
            for issue in self.list_issues(project_id):
                columns[issue.status].append(issue)
            return columns

    def _hydrate_issue(self, issue: Issue) -> IssueDetail:
        return IssueDetail(
            **issue.model_dump(),
            assignee=self._public_user(issue.assignee_id),
            reporter=self._public_user(issue.reporter_id),
            comments=self.list_comments_for_issue(issue.id),
        )

    # --------------------------------------------------
    # COMMENTS
    # --------------------------------------------------

    def list_comments_for_issue(self, issue_id: str) -> List[CommentDetail]:
        with self._lock:
            comments = [c for c in self._comments.values() if c.issue_id == issue_id]
            # sorted() is stable: equal timestamps keep insertion order
            comments = sorted(comments, key=lambda c: c.created_at)
            return [
                CommentDetail(**c.model_dump(), user=self._public_user(c.user_id))
                for c in comments
            ]

    def create_comment(self, issue_id: str, user_id: str, content: str) -> Comment:
        """
        Attach a comment to an issue and bump the issue's updated_at.
        Neither the issue nor the user has to exist.
        """
        with self._lock:
            now = utcnow()
            comment = Comment(
                id=f"{COMMENT_ID_PREFIX}{next(self._comment_ids)}",
                issue_id=issue_id,
                user_id=user_id,
                content=content,
                created_at=now,
            )
            self._comments[comment.id] = comment

            issue = self._issues.get(issue_id)
            if issue:
                self._issues[issue_id] = issue.model_copy(
                    update={"updated_at": max(now, issue.updated_at)}
                )
            else:
                logger.warning(f"Comment {comment.id} attached to unknown issue {issue_id}")

            logger.info(f"Created comment {comment.id} on {issue_id}")
            return comment.model_copy(deep=True)

    def delete_comment(self, comment_id: str) -> bool:
        with self._lock:
            existed = self._comments.pop(comment_id, None) is not None
            if existed:
                logger.debug(f"Deleted comment {comment_id}")
            return existed

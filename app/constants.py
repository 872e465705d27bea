from app.enums import IssueStatus

# Board columns, left to right
BOARD_COLUMNS = [IssueStatus.TODO, IssueStatus.IN_PROGRESS, IssueStatus.DONE]

DEFAULT_AVATAR_BASE_URL = "https://api.dicebear.com/7.x/avataaars/svg"

# Id prefixes per record kind
USER_ID_PREFIX = "u"
PROJECT_ID_PREFIX = "p"
COMMENT_ID_PREFIX = "c"

class ErrorMessages:
    PROJECT_NOT_FOUND = "Project not found"
    ISSUE_NOT_FOUND = "Issue not found"
    USER_NOT_FOUND = "User not found"
    NOT_FOUND = "Not found"

    # Auth
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_EXISTS = "Email already registered"

    # Failures surfaced as 500
    CREATE_ISSUE_FAILED = "Failed to create issue"
    INTERNAL_ERROR = "Internal server error"
    INVALID_REQUEST = "Invalid request"

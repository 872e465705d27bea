from .common import CamelModel
from .user import User, UserCredentials
from .project import Project, ProjectDetail, ProjectStats
from .comment import Comment, CommentDetail
from .issue import Issue, IssueDetail

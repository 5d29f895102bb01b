"""
SQLModel 模型模块

使用 SQLModel 统一 ORM Model 和 Pydantic Schema；
Create/Update/Request/Response 等 Schema 请从各子模块直接导入
"""
from .base import (
    SQLModelBase, TimestampMixin, SoftDeleteMixin, IDMixin,
    PageRequest, ActorRole, utcnow, as_utc,
)
from .actors import SystemAdmin, HrRecruiter, TechReviewer, Applicant
from .job import JobEmploymentType, JobPostingState, JobPosting
from .application import (
    Resume, Application, ApplicationStatusHistory, ApplicationFeedback,
    ApplicationStatus, TERMINAL_STATUSES,
)
from .interview import Interview, InterviewParticipant, InterviewSchedule, InterviewQuestion
from .coding_test import (
    CodingTest, CodingTestSubmission, CodingTestResult, CodingTestReviewComment,
)
from .notification import (
    NotificationTemplate, Notification, NotificationDelivery, NotificationFailure,
)
from .compliance import (
    AuditTrail, AccessLog, MaskingLog, DataDeletionLog, AuthenticationFailure,
)
from .export import ExportJob, ExportJobDetail, ExportJobFailure
from .system import SystemSetting, ExternalApiCredential, AtsEnum

__all__ = [
    # Base
    "SQLModelBase",
    "TimestampMixin",
    "SoftDeleteMixin",
    "IDMixin",
    "PageRequest",
    "ActorRole",
    "utcnow",
    "as_utc",
    # Actors
    "SystemAdmin",
    "HrRecruiter",
    "TechReviewer",
    "Applicant",
    # Job
    "JobEmploymentType",
    "JobPostingState",
    "JobPosting",
    # Application
    "Resume",
    "Application",
    "ApplicationStatusHistory",
    "ApplicationFeedback",
    "ApplicationStatus",
    "TERMINAL_STATUSES",
    # Interview
    "Interview",
    "InterviewParticipant",
    "InterviewSchedule",
    "InterviewQuestion",
    # Coding test
    "CodingTest",
    "CodingTestSubmission",
    "CodingTestResult",
    "CodingTestReviewComment",
    # Notification
    "NotificationTemplate",
    "Notification",
    "NotificationDelivery",
    "NotificationFailure",
    # Compliance
    "AuditTrail",
    "AccessLog",
    "MaskingLog",
    "DataDeletionLog",
    "AuthenticationFailure",
    # Export
    "ExportJob",
    "ExportJobDetail",
    "ExportJobFailure",
    # System
    "SystemSetting",
    "ExternalApiCredential",
    "AtsEnum",
]

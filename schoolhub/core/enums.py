from enum import Enum


class UserType(str, Enum):
    SUPER_ADMIN = "Super Admin"
    ADMIN = "Admin"
    TEACHER = "Teacher"
    STUDENT = "Student"
    PARENT = "Parent"


class FeePaymentStatus(str, Enum):
    unpaid = "unpaid"
    partial = "partial"
    paid = "paid"


class TrackerPaymentStatus(str, Enum):
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"


class DeviceType(str, Enum):
    MOBILE = "mobile"
    WEB = "web"
    DESKTOP = "desktop"
    TABLET = "tablet"


class QuizSessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    EXPIRED = "expired"
    ABANDONED = "abandoned"

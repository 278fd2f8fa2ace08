from schoolhub.core.models.android_apk import AndroidApk
from schoolhub.core.models.campus import Campus
from schoolhub.core.models.chat_preference import ChatPreference
from schoolhub.core.models.class_fee_structure import ClassFeeStructure
from schoolhub.core.models.fee import Fee
from schoolhub.core.models.fee_template import FeeTemplate
from schoolhub.core.models.leave_policy import LeavePolicy
from schoolhub.core.models.leave_type import LeaveType
from schoolhub.core.models.parent_feed_control import ParentFeedControl
from schoolhub.core.models.payment_tracker import PaymentTracker
from schoolhub.core.models.quiz_session import QuizSession
from schoolhub.core.models.student_record import StudentRecord
from schoolhub.core.models.syllabus import Syllabus
from schoolhub.core.models.user_device import UserDevice

__all__ = [
    "AndroidApk",
    "Campus",
    "ChatPreference",
    "ClassFeeStructure",
    "Fee",
    "FeeTemplate",
    "LeavePolicy",
    "LeaveType",
    "ParentFeedControl",
    "PaymentTracker",
    "QuizSession",
    "StudentRecord",
    "Syllabus",
    "UserDevice",
]

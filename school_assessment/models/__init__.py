from .user import Role, User
from .school import School, DirectorSchool, TeacherSchool
from .event import QuestionType, Event, Question
from .answer import MultipleChoiceOption, Answer, EventSubmission

__all__ = [
    "Role", "User", "School", "DirectorSchool", "TeacherSchool",
    "QuestionType", "Event", "Question",
    "MultipleChoiceOption", "Answer", "EventSubmission",
]

from format_tiles.models.config_plugin import ConfigPlugin
from format_tiles.models.course import Course, CourseSection
from format_tiles.models.course_module import CourseModule, CourseModuleCompletion
from format_tiles.models.module_instances import PageInstance, UrlInstance
from format_tiles.models.stored_file import StoredFile
from format_tiles.models.user import User, UserCapability, UserPreference

__all__ = [
    "ConfigPlugin",
    "Course",
    "CourseSection",
    "CourseModule",
    "CourseModuleCompletion",
    "PageInstance",
    "UrlInstance",
    "StoredFile",
    "User",
    "UserCapability",
    "UserPreference",
]

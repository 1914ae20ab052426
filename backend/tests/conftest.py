"""Pytest fixtures for the tiles helpers.

Builds an in-memory SQLite store seeded with one course, a handful of
modules (page, resource, url, hidden quiz, forum), files, users and plugin
config, so each test starts from the same known state.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from format_tiles.core.constants import CompletionTracking, ResourceDisplay
from format_tiles.db.base import Base
from format_tiles import models  # noqa: F401
from format_tiles.models import (
    ConfigPlugin,
    Course,
    CourseModule,
    CourseSection,
    PageInstance,
    StoredFile,
    UrlInstance,
    User,
    UserCapability,
)
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.useragent import ClientInfo

COURSE_ID = 10
STUDENT_CAPABILITIES = ["mod/page:view", "mod/resource:view", "mod/url:view", "mod/quiz:view"]


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


def _add_config(db, plugin, name, value):
    db.add(ConfigPlugin(plugin=plugin, name=name, value=value))
    db.commit()


@pytest.fixture
def users(db):
    student = User(id=1, username="student", email="student@example.com")
    guest = User(id=2, username="guest", is_guest=True)
    admin = User(id=3, username="admin", is_siteadmin=True)
    outsider = User(id=4, username="outsider")
    inactive = User(id=5, username="inactive", is_active=False)
    db.add_all([student, guest, admin, outsider, inactive])
    db.flush()
    for user in (student, guest):
        for capability in STUDENT_CAPABILITIES:
            db.add(UserCapability(user_id=user.id, course_id=COURSE_ID, capability=capability))
    db.commit()
    return {"student": student, "guest": guest, "admin": admin, "outsider": outsider, "inactive": inactive}


@pytest.fixture
def course(db, users):
    course = Course(id=COURSE_ID, context_id=100, shortname="TILES101", fullname="Tiles 101", enablecompletion=True)
    db.add(course)
    db.add_all(
        [
            CourseSection(id=1, course_id=COURSE_ID, section=0, visible=True),
            CourseSection(id=2, course_id=COURSE_ID, section=1, visible=True),
            CourseSection(id=3, course_id=COURSE_ID, section=2, visible=False),
        ]
    )
    db.add_all(
        [
            PageInstance(
                id=1,
                course_id=COURSE_ID,
                name="Welcome",
                intro='<p>Intro <img src="@@PLUGINFILE@@/banner.png"></p>',
                content='<p>Body <a href="@@PLUGINFILE@@/notes.pdf">notes</a></p>',
                contentformat=1,
                revision=3,
            ),
            UrlInstance(
                id=1,
                course_id=COURSE_ID,
                name="Lecture video",
                externalurl="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                display=ResourceDisplay.EMBED,
            ),
            UrlInstance(
                id=2,
                course_id=COURSE_ID,
                name="Reading",
                externalurl="https://example.org/article",
                display=ResourceDisplay.OPEN,
            ),
        ]
    )
    db.add_all(
        [
            CourseModule(id=101, course_id=COURSE_ID, section_id=2, context_id=1001, modname="page",
                         instance=1, name="Welcome", completion=CompletionTracking.MANUAL),
            CourseModule(id=102, course_id=COURSE_ID, section_id=2, context_id=1002, modname="resource",
                         instance=1, name="Report", completion=CompletionTracking.AUTOMATIC),
            CourseModule(id=103, course_id=COURSE_ID, section_id=2, context_id=1003, modname="url",
                         instance=1, name="Lecture video"),
            CourseModule(id=104, course_id=COURSE_ID, section_id=2, context_id=1004, modname="url",
                         instance=2, name="Reading"),
            CourseModule(id=105, course_id=COURSE_ID, section_id=2, context_id=1005, modname="quiz",
                         instance=1, name="Hidden quiz", visible=False),
            CourseModule(id=106, course_id=COURSE_ID, section_id=1, context_id=1006, modname="forum",
                         instance=1, name="Announcements"),
            CourseModule(id=107, course_id=COURSE_ID, section_id=3, context_id=1007, modname="page",
                         instance=1, name="Page in hidden section"),
        ]
    )
    db.add_all(
        [
            StoredFile(context_id=1002, component="mod_resource", filearea="content", itemid=0,
                       filepath="/", filename=".", filesize=0, mimetype=None),
            StoredFile(context_id=1002, component="mod_resource", filearea="content", itemid=0,
                       filepath="/", filename="report.docx", filesize=2048,
                       mimetype="application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
        ]
    )
    db.commit()
    return course


@pytest.fixture
def tiles_config(db):
    _add_config(db, "format_tiles", "usejavascriptnav", "1")
    _add_config(db, "format_tiles", "fittilestowidth", "1")
    _add_config(db, "format_tiles", "modalresources", "pdf,html,doc")
    _add_config(db, "format_tiles", "modalmodules", "page,url")


@pytest.fixture
def make_env(db):
    def _make_env(user, client=None, session=None, params=None):
        return TilesEnvironment(
            db=db,
            user=user,
            client=client or ClientInfo(),
            session={} if session is None else session,
            params=params or {},
        )

    return _make_env

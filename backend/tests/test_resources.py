import pytest

from format_tiles.core.errors import AuthorizationError, NotFoundError
from format_tiles.models import StoredFile
from format_tiles.modules.tiles.resources import (
    get_mod_resource_file,
    get_mod_resource_icon_name,
    get_visible_resource_icon_name,
    make_pluginfile_url,
    plugin_file_url,
)

CONTEXT_ID = 2001


def add_file(db, filename, mimetype, filesize=100, context_id=CONTEXT_ID, **kwargs):
    stored = StoredFile(
        context_id=context_id,
        component=kwargs.pop("component", "mod_resource"),
        filearea=kwargs.pop("filearea", "content"),
        filename=filename,
        mimetype=mimetype,
        filesize=filesize,
        **kwargs,
    )
    db.add(stored)
    db.commit()
    return stored


@pytest.mark.parametrize(
    "filename,mimetype,expected",
    [
        ("slides.pdf", "application/pdf", "pdf"),
        ("photo.JPG", "image/jpeg", "image"),
        ("diagram.svg", "image/svg+", "image"),
        ("notes.txt", "text/plain", "txt"),
        ("index.html", "text/html", "html"),
        ("report.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document", "doc"),
        ("budget.xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xls"),
        ("budget.ods", "application/vnd.oasis.opendocument.spreadsheet", "xls"),
        ("talk.pptx", "application/vnd.openxmlformats-officedocument.presentationml.presentation", "ppt"),
        ("talk.odp", "application/vnd.oasis.opendocument.presentation", "ppt"),
        ("essay.odf", "application/vnd.oasis.opendocument.formula", "doc"),
        ("bundle.tar", "application/x-tar", "tar"),
        ("README", "application/octet-stream", ""),
    ],
)
def test_icon_name(db, filename, mimetype, expected):
    add_file(db, filename, mimetype)

    assert get_mod_resource_icon_name(db, CONTEXT_ID) == expected


def test_icon_name_none_without_files(db):
    assert get_mod_resource_icon_name(db, CONTEXT_ID) is None


def test_file_lookup_skips_placeholders_and_empty_files(db):
    add_file(db, ".", None, filesize=0)
    add_file(db, "empty.pdf", "application/pdf", filesize=0)
    add_file(db, "unknown.bin", None, filesize=50)
    real = add_file(db, "real.pdf", "application/pdf")

    assert get_mod_resource_file(db, CONTEXT_ID).id == real.id


def test_file_lookup_ignores_other_areas_and_contexts(db):
    add_file(db, "intro.pdf", "application/pdf", filearea="intro")
    add_file(db, "other.pdf", "application/pdf", context_id=CONTEXT_ID + 1)
    add_file(db, "page.pdf", "application/pdf", component="mod_page")

    assert get_mod_resource_file(db, CONTEXT_ID) is None


def test_file_lookup_follows_storage_order(db):
    add_file(db, "b.pdf", "application/pdf", filepath="/")
    add_file(db, "a.pdf", "application/pdf", filepath="/")

    assert get_mod_resource_file(db, CONTEXT_ID).filename == "a.pdf"


def test_plugin_file_url(db):
    add_file(db, "week 1.pdf", "application/pdf", filepath="/slides/")

    url = plugin_file_url(db, CONTEXT_ID, "https://moodle.example.com")

    assert url == "https://moodle.example.com/pluginfile.php/2001/mod_resource/content/0/slides/week%201.pdf"


def test_plugin_file_url_empty_without_file(db):
    assert plugin_file_url(db, CONTEXT_ID, "https://moodle.example.com") == ""


def test_make_pluginfile_url_uses_item_id():
    stored = StoredFile(context_id=5, component="mod_resource", filearea="content", itemid=7,
                        filepath="/", filename="a.pdf")

    assert make_pluginfile_url("http://x", stored) == "http://x/pluginfile.php/5/mod_resource/content/7/a.pdf"


def test_visible_icon_name_for_student(users, course, make_env):
    assert get_visible_resource_icon_name(make_env(users["student"]), 1002) == "doc"


def test_visible_icon_name_without_module_capability(users, course, make_env):
    with pytest.raises(AuthorizationError):
        get_visible_resource_icon_name(make_env(users["outsider"]), 1002)


def test_visible_icon_name_hides_modules_in_hidden_sections(users, course, make_env):
    with pytest.raises(NotFoundError):
        get_visible_resource_icon_name(make_env(users["student"]), 1007)


def test_visible_icon_name_unknown_context(users, course, make_env):
    with pytest.raises(NotFoundError):
        get_visible_resource_icon_name(make_env(users["student"]), 9999)


def test_admin_sees_icon_of_hidden_module(db, users, course, make_env):
    add_file(db, "slides.pdf", "application/pdf", context_id=1007)

    assert get_visible_resource_icon_name(make_env(users["admin"]), 1007) == "pdf"

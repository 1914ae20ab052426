import pytest

from format_tiles.core.constants import DeviceType
from format_tiles.crud.config import set_config
from format_tiles.modules.tiles.modal import allowed_modal_modules
from format_tiles.modules.tiles.useragent import ClientInfo


def test_desktop_reads_allow_lists_from_config(users, tiles_config, make_env):
    allowed = allowed_modal_modules(make_env(users["student"]))

    assert allowed.resources == {"pdf", "html", "doc"}
    assert allowed.modules == {"page", "url"}
    assert allowed.to_payload() == {"resources": ["doc", "html", "pdf"], "modules": ["page", "url"]}


@pytest.mark.parametrize(
    "client",
    [
        ClientInfo(device_type=DeviceType.MOBILE),
        ClientInfo(device_type=DeviceType.TABLET),
        ClientInfo(is_legacy_browser=True),
    ],
)
def test_handheld_and_legacy_clients_get_nothing(users, tiles_config, make_env, client):
    allowed = allowed_modal_modules(make_env(users["student"], client=client))

    assert allowed.to_payload() == {"resources": [], "modules": []}


def test_missing_config_gives_empty_sets(users, make_env):
    allowed = allowed_modal_modules(make_env(users["student"]))

    assert allowed.resources == set()
    assert allowed.modules == set()


def test_tokens_are_trimmed_and_blanks_dropped(db, users, make_env):
    set_config(db, "format_tiles", "modalmodules", " page , ,url,")

    assert allowed_modal_modules(make_env(users["student"])).modules == {"page", "url"}


def test_config_changes_are_seen_on_next_call(db, users, tiles_config, make_env):
    env = make_env(users["student"])
    assert "quiz" not in allowed_modal_modules(env).modules

    set_config(db, "format_tiles", "modalmodules", "page,url,quiz")

    assert "quiz" in allowed_modal_modules(env).modules


def test_allows_by_resource_type_or_module_name(users, tiles_config, make_env):
    allowed = allowed_modal_modules(make_env(users["student"]))

    assert allowed.allows("resource", "pdf")
    assert allowed.allows("page")
    assert not allowed.allows("resource", "zip")
    assert not allowed.allows("forum", "")

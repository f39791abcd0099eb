import socket

import pytest

from yewchat.app import Login, Route, User, main, route_for_path


@pytest.mark.parametrize(
    "path, route",
    [("/", Route.LOGIN), ("/chat", Route.CHAT), ("/404", Route.NOT_FOUND)],
)
def test_known_paths(path, route):
    assert route_for_path(path) is route


def test_unknown_path_is_not_found():
    assert route_for_path("/nowhere") is Route.NOT_FOUND


def test_route_values_round_trip():
    for route in Route:
        assert route_for_path(route.value) is route


def test_user_default_name():
    assert User().username == "initial"


def test_login_starts_disabled():
    login = Login(User())
    assert login.can_submit() is False
    assert login.username == ""


def test_login_enables_after_typing():
    login = Login(User())
    login.set_username("a")
    assert login.can_submit() is True
    login.set_username("")
    assert login.can_submit() is False


def test_submit_stores_name_and_routes_to_chat():
    user = User()
    login = Login(user)
    login.set_username("alice")
    assert login.submit() is Route.CHAT
    assert user.username == "alice"


def test_submit_without_name_raises():
    user = User()
    with pytest.raises(ValueError):
        Login(user).submit()
    assert user.username == "initial"


def test_logins_share_the_user():
    user = User()
    first = Login(user)
    first.set_username("alice")
    first.submit()
    second = Login(user)
    second.set_username("bob")
    second.submit()
    assert user.username == "bob"


def test_main_rejects_empty_username():
    with pytest.raises(SystemExit) as info:
        main(["--username", "   "])
    assert info.value.code == 2


def test_main_reports_unreachable_server(capsys):
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    url = f"ws://127.0.0.1:{port}"
    assert main(["--username", "alice", "--url", url]) == 1
    assert url in capsys.readouterr().err
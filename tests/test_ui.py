import pytest

from hello_face.ui import Screen


def test_screens_in_order():
    assert [Screen(screen.value) for screen in Screen] == [
        Screen.HOME,
        Screen.ENROLLMENT,
        Screen.SETTINGS,
        Screen.MANAGE_FACES,
    ]


def test_screen_navigation():
    current = Screen.HOME
    for target in [Screen.ENROLLMENT, Screen.SETTINGS, Screen.MANAGE_FACES, Screen.HOME]:
        current = Screen(target.value)
        assert current is target


@pytest.mark.parametrize(
    "name, expected",
    [
        ("HOME", Screen.HOME),
        ("SETTINGS", Screen.SETTINGS),
        ("HOME", Screen.HOME),
        ("ENROLLMENT", Screen.ENROLLMENT),
        ("HOME", Screen.HOME),
        ("MANAGE_FACES", Screen.MANAGE_FACES),
        ("HOME", Screen.HOME),
    ],
)
def test_navigation_flow(name, expected):
    assert Screen[name] is expected


def test_screen_lookup_by_value():
    assert Screen("manage_faces") is Screen.MANAGE_FACES


def test_unknown_screen_rejected():
    with pytest.raises(ValueError):
        Screen("about")


def test_screens_are_distinct():
    looked_up = {Screen(screen.value) for screen in Screen}
    assert len(looked_up) == 4
    assert Screen(Screen.HOME.value) is Screen.HOME
    assert Screen(Screen.SETTINGS.value) is Screen.SETTINGS
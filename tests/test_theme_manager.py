import pytest

from termite.themes.manager import StylesUpdatedMsg, ThemeError, ThemeInfo, ThemeManager
from termite.themes.styles import build_styles
from termite.themes.theme import Theme

REQUIRED = (
    "background",
    "surface",
    "primary",
    "text",
    "text_muted",
    "unread_indicator",
    "unread_subject",
    "read_subject",
    "border",
    "border_focus",
    "selection",
    "selection_text",
    "status_bar_bg",
    "status_bar_text",
    "success",
    "warning",
    "danger",
    "info",
)


def theme_toml(name="", value="#102030", omit=(), override=None):
    override = override or {}
    lines = [f'name = "{name}"'] if name else []
    for key in REQUIRED:
        if key in omit:
            continue
        lines.append(f'{key} = "{override.get(key, value)}"')
    return "\n".join(lines) + "\n"


def full_theme(**changes):
    values = {key: "#102030" for key in REQUIRED}
    values.update(changes)
    return Theme(name=values.pop("name", "t"), **values)


@pytest.fixture
def dirs(tmp_path):
    builtin = tmp_path / "builtin"
    user = tmp_path / "user"
    builtin.mkdir()
    (builtin / "dark.toml").write_text(theme_toml("Dark", "#000000"), encoding="utf-8")
    (builtin / "light.toml").write_text(theme_toml("Light", "#ffffff"), encoding="utf-8")
    (builtin / "notes.txt").write_text("not a theme", encoding="utf-8")
    return builtin, user


def test_default_theme_applied(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    assert manager.current().name == "Dark"
    assert manager.current().background == "#000000"
    assert manager.current_styles() == build_styles(manager.current())


def test_user_dir_is_created(dirs):
    builtin, user = dirs
    ThemeManager(builtin, user)
    assert user.is_dir()


def test_missing_default_raises(tmp_path):
    with pytest.raises(ThemeError, match="failed to apply default theme"):
        ThemeManager(tmp_path / "empty", tmp_path / "user")


def test_no_builtin_dir_and_no_user_theme_raises(tmp_path):
    with pytest.raises(ThemeError):
        ThemeManager(None, tmp_path / "user")


def test_discover_lists_sorted_builtins(dirs):
    builtin, user = dirs
    infos = ThemeManager(builtin, user).discover()
    assert infos == [
        ThemeInfo("Dark", "dark", "", True),
        ThemeInfo("Light", "light", "", True),
    ]


def test_user_theme_overrides_builtin_in_discover(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    path = user / "light.toml"
    path.write_text(theme_toml("My Light"), encoding="utf-8")
    (user / "zen.toml").write_text(theme_toml(), encoding="utf-8")
    infos = {info.id: info for info in manager.discover()}
    assert infos["light"] == ThemeInfo("My Light", "light", str(path), False)
    assert infos["zen"].name == "zen"
    assert [info.id for info in manager.discover()] == ["dark", "light", "zen"]


def test_discover_skips_unparsable_files(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    (user / "broken.toml").write_text("name = ", encoding="utf-8")
    assert "broken" not in {info.id for info in manager.discover()}


def test_load_prefers_user_theme(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    (user / "dark.toml").write_text(theme_toml("Custom Dark", "#123456"), encoding="utf-8")
    theme = manager.load("dark")
    assert theme.name == "Custom Dark"
    assert theme.primary == "#123456"


def test_load_falls_back_when_user_theme_broken(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    (user / "dark.toml").write_text("name = ", encoding="utf-8")
    assert manager.load("dark").name == "Dark"


def test_load_unknown_raises(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    with pytest.raises(ThemeError, match='built-in theme "missing" not found'):
        manager.load("missing")


def test_load_uses_id_when_name_missing(dirs):
    builtin, user = dirs
    (builtin / "plain.toml").write_text(theme_toml(), encoding="utf-8")
    assert ThemeManager(builtin, user).load("plain").name == "plain"


def test_load_broken_builtin_raises(dirs):
    builtin, user = dirs
    (builtin / "bad.toml").write_text("name = ", encoding="utf-8")
    with pytest.raises(ThemeError, match="parsing built-in theme"):
        ThemeManager(builtin, user).load("bad")


def test_validate_accepts_full_theme(dirs):
    builtin, user = dirs
    manager = ThemeManager(builtin, user)
    manager.validate(full_theme())
    assert manager.current().name == "Dark"


def test_validate_none_raises(dirs):
    with pytest.raises(ThemeError):
        ThemeManager(*dirs).validate(None)


def test_validate_missing_field(dirs):
    manager = ThemeManager(*dirs)
    with pytest.raises(ThemeError, match='missing required field "info"'):
        manager.validate(full_theme(info=""))


def test_validate_invalid_hex(dirs):
    manager = ThemeManager(*dirs)
    with pytest.raises(ThemeError, match='invalid hex color "#12345"'):
        manager.validate(full_theme(primary="#12345"))


def test_apply_switches_theme(dirs):
    manager = ThemeManager(*dirs)
    manager.apply("light")
    assert manager.current().name == "Light"
    assert manager.current_styles().danger.foreground == "#ffffff"


def test_apply_invalid_keeps_current(dirs):
    builtin, user = dirs
    (builtin / "partial.toml").write_text(theme_toml(omit=("warning",)), encoding="utf-8")
    manager = ThemeManager(builtin, user)
    with pytest.raises(ThemeError, match='validating theme "partial"'):
        manager.apply("partial")
    assert manager.current().name == "Dark"


def test_apply_unknown_raises(dirs):
    manager = ThemeManager(*dirs)
    with pytest.raises(ThemeError, match='loading theme "nope"'):
        manager.apply("nope")


def test_apply_msg_returns_new_styles(dirs):
    manager = ThemeManager(*dirs)
    msg = manager.apply_msg("light")
    assert msg == StylesUpdatedMsg(manager.current_styles())
    assert msg.styles == build_styles(manager.load("light"))


def test_custom_default(dirs):
    builtin, user = dirs
    assert ThemeManager(builtin, user, default="light").current().name == "Light"
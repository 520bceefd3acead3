from pyrte.services.settings_service import SettingsService


def test_settings_roundtrip_geometry(settings_service: SettingsService):
    assert settings_service.get_geometry() is None
    blob = b"\x01\x02\x03"
    settings_service.set_geometry(blob)
    got = settings_service.get_geometry()
    assert isinstance(got, (bytes, bytearray))
    assert bytes(got) == blob


def test_settings_last_dir(settings_service: SettingsService, tmp_path):
    assert settings_service.get_last_dir() is None  # default
    settings_service.set_last_dir(str(tmp_path))
    assert settings_service.get_last_dir() == str(tmp_path)


def test_settings_empty_last_dir_is_none(settings_service: SettingsService):
    settings_service.set_last_dir("")
    assert settings_service.get_last_dir() is None

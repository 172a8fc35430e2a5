from ledger.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LEDGER_DRIVE_FILE_ID", raising=False)
    s = Settings(_env_file=None)
    assert s.drive_file_id == "1Kx_AiOzfwXMLGN-8NgehFecv3dYki0Ma"
    assert s.request_timeout_s == 15.0
    assert s.proxy_base.startswith("https://")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LEDGER_DRIVE_FILE_ID", "abc")
    monkeypatch.setenv("LEDGER_REQUEST_TIMEOUT_S", "3.5")
    s = Settings(_env_file=None)
    assert s.drive_file_id == "abc"
    assert s.request_timeout_s == 3.5

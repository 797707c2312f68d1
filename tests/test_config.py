from roadsafety.config import (
    DISTRICT_NAMES,
    SHEET_TABS,
    SheetsSettings,
    load_sheets_settings,
    unescape_private_key,
)


def test_district_table_is_complete():
    assert len(DISTRICT_NAMES) == 7
    assert len(set(DISTRICT_NAMES)) == 7
    assert set(SHEET_TABS) == set(DISTRICT_NAMES)


def test_unescape_private_key():
    assert unescape_private_key("line1\\nline2\\n") == "line1\nline2\n"
    assert unescape_private_key(None) is None


def test_settings_completeness():
    assert not SheetsSettings().is_complete
    assert SheetsSettings(spreadsheet_id="x").missing() == ["GOOGLE_SERVICE_ACCOUNT_EMAIL", "GOOGLE_PRIVATE_KEY"]
    assert SheetsSettings("x", "y", "z").is_complete


def test_load_sheets_settings_from_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_SHEET_ID", " sheet-123 ")
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_EMAIL", "bot@example.iam.gserviceaccount.com")
    monkeypatch.setenv("GOOGLE_PRIVATE_KEY", "-----BEGIN-----\\nabc\\n-----END-----")

    settings = load_sheets_settings()

    assert settings.spreadsheet_id == "sheet-123"
    assert settings.service_account_email == "bot@example.iam.gserviceaccount.com"
    assert settings.private_key == "-----BEGIN-----\nabc\n-----END-----"
    assert settings.is_complete


def test_blank_env_counts_as_missing(monkeypatch, no_credentials):
    monkeypatch.setenv("GOOGLE_SHEET_ID", "   ")
    monkeypatch.setattr("roadsafety.bootstrap_env.load_dotenv", lambda **kwargs: False)

    settings = load_sheets_settings()

    assert settings.spreadsheet_id is None
    assert not settings.is_complete


def test_service_account_secrets_bridge_to_env(monkeypatch, no_credentials):
    from roadsafety import bootstrap_env

    monkeypatch.setattr(
        bootstrap_env,
        "_secrets_as_dict",
        lambda: {
            "GOOGLE_SHEET_ID": "sheet-from-secrets",
            "gcp_service_account": {"client_email": "bot@example.com", "private_key": "k\\nk"},
        },
    )
    monkeypatch.setattr(bootstrap_env, "load_dotenv", lambda **kwargs: False)
    bridged = (
        "GOOGLE_SHEET_ID",
        "GOOGLE_SERVICE_ACCOUNT_EMAIL",
        "GOOGLE_PRIVATE_KEY",
        "GCP_SERVICE_ACCOUNT_CLIENT_EMAIL",
        "GCP_SERVICE_ACCOUNT_PRIVATE_KEY",
    )
    # Register every bridged name so monkeypatch removes it afterwards
    for name in bridged:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)

    settings = load_sheets_settings()

    assert settings.spreadsheet_id == "sheet-from-secrets"
    assert settings.service_account_email == "bot@example.com"
    assert settings.private_key == "k\nk"

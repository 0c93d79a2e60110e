from unittest.mock import MagicMock

import pytest

from rsvp_bridge.sheets import client as client_module
from rsvp_bridge.sheets.client import SheetError, GoogleSheetsClient, StoreReadError, StoreWriteError, credentials_from_key


@pytest.fixture()
def sheets_service():
    return MagicMock()


@pytest.fixture()
def client(sheets_service):
    return GoogleSheetsClient(spreadsheet_id="sheet-123", credentials=MagicMock(), service=sheets_service)


def values_api(sheets_service):
    return sheets_service.spreadsheets.return_value.values.return_value


def test_read_range_returns_values(client, sheets_service):
    values_api(sheets_service).get.return_value.execute.return_value = {"values": [["id"], ["1"]]}

    assert client.read_range("Gasten!A1:K137") == [["id"], ["1"]]
    values_api(sheets_service).get.assert_called_once_with(spreadsheetId="sheet-123", range="Gasten!A1:K137")


def test_read_range_without_values_is_empty(client, sheets_service):
    values_api(sheets_service).get.return_value.execute.return_value = {"range": "Gasten!A1:K137"}

    assert client.read_range("Gasten!A1:K137") == []


def test_read_range_wraps_provider_errors(client, sheets_service):
    values_api(sheets_service).get.return_value.execute.side_effect = TimeoutError("timed out")

    with pytest.raises(StoreReadError, match="timed out"):
        client.read_range("Gasten!A1:K137")


def test_write_range_uses_user_entered_input(client, sheets_service):
    rows = [["id"], ["1", "Janna"]]

    client.write_range("Gasten!A1:K137", rows)

    values_api(sheets_service).update.assert_called_once_with(
        spreadsheetId="sheet-123",
        range="Gasten!A1:K137",
        valueInputOption="USER_ENTERED",
        body={"values": rows},
    )


def test_write_range_wraps_provider_errors(client, sheets_service):
    values_api(sheets_service).update.return_value.execute.side_effect = RuntimeError("403")

    with pytest.raises(StoreWriteError, match="403"):
        client.write_range("Gasten!A1:K137", [])


def test_credentials_from_key_unescapes_newlines(monkeypatch):
    captured = {}

    def fake_from_info(info, scopes):
        captured.update(info=info, scopes=scopes)
        return "credentials"

    monkeypatch.setattr(
        "rsvp_bridge.sheets.client.service_account.Credentials.from_service_account_info", fake_from_info
    )

    assert credentials_from_key("bot@example.iam.gserviceaccount.com", "-----BEGIN\\nKEY\\n-----END") == "credentials"
    assert captured["info"]["private_key"] == "-----BEGIN\nKEY\n-----END"
    assert captured["info"]["client_email"] == "bot@example.iam.gserviceaccount.com"
    assert captured["scopes"] == ["https://www.googleapis.com/auth/spreadsheets"]


@pytest.fixture()
def transport(monkeypatch):
    """Record every transport the client creates"""
    created = []

    def fake_http(timeout=None):
        http = MagicMock(name="Http")
        http.timeout = timeout
        return http

    def fake_authorized_http(credentials, http):
        authorized = MagicMock(name="AuthorizedHttp")
        authorized.credentials = credentials
        authorized.http = http
        created.append(authorized)
        return authorized

    monkeypatch.setattr(client_module.httplib2, "Http", fake_http)
    monkeypatch.setattr(client_module.google_auth_httplib2, "AuthorizedHttp", fake_authorized_http)
    return created


def test_service_is_built_with_timeout(monkeypatch, transport):
    build = MagicMock(name="build")
    monkeypatch.setattr(client_module, "build", build)
    credentials = MagicMock(name="credentials")

    client = GoogleSheetsClient(spreadsheet_id="sheet-123", credentials=credentials, timeout=12.5)

    assert client.service is build.return_value
    build.assert_called_once_with("sheets", "v4", http=transport[0], cache_discovery=False)
    assert transport[0].credentials is credentials
    assert transport[0].http.timeout == 12.5


def test_failing_build_raises_sheet_error(monkeypatch, transport):
    monkeypatch.setattr(client_module, "build", MagicMock(side_effect=RuntimeError("no discovery")))

    with pytest.raises(SheetError, match="no discovery"):
        GoogleSheetsClient(spreadsheet_id="sheet-123", credentials=MagicMock(), timeout=5)


def test_every_call_gets_its_own_transport(transport, sheets_service):
    client = GoogleSheetsClient(spreadsheet_id="sheet-123", credentials=MagicMock(), timeout=7, service=sheets_service)
    values_api(sheets_service).get.return_value.execute.return_value = {"values": []}

    client.read_range("Gasten!A1:K137")
    client.read_range("Gasten!A1:K137")
    client.write_range("Gasten!A1:K137", [])

    assert len(transport) == 3
    assert len({id(http) for http in transport}) == 3
    assert all(http.http.timeout == 7 for http in transport)
    get_calls = values_api(sheets_service).get.return_value.execute.call_args_list
    assert [call.kwargs["http"] for call in get_calls] == transport[:2]
    values_api(sheets_service).update.return_value.execute.assert_called_once_with(http=transport[2])

"""CLI tests for the request and invoke commands."""

from __future__ import annotations

import json

import core.secrets
import core.service
from cli.config import Settings, load_settings
from cli.main import app as cli_app
from conftest import SAMPLE_RESPONSE, FailingSsm, FakeLkeClient
from core.lke import CredentialBroker


def test_config_defaults_when_missing(tmp_path):
    settings = load_settings(tmp_path / "absent.yml")
    assert settings == Settings()
    assert settings.default_profile == "realtime"


def test_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "lkecred.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    exit_code = cli_app(["--config", str(path), "invoke", "--event", str(tmp_path / "event.json")])
    assert exit_code == 2


def test_request_writes_json(tmp_path, lke_env, fake_client):
    out_path = tmp_path / "credential.json"
    exit_code = cli_app(
        ["--config", str(tmp_path / "none.yml"), "request", "--file-type", "pdf", "--public", "--output", str(out_path)]
    )
    assert exit_code == 0
    assert json.loads(out_path.read_text(encoding="utf-8")) == SAMPLE_RESPONSE
    assert fake_client.requests[0] == {
        "BotBizId": "1739000000000000000",
        "FileType": "pdf",
        "IsPublic": True,
        "TypeKey": "realtime",
    }


def test_request_uses_config_profile_and_table_format(tmp_path, lke_env, fake_client):
    config_path = tmp_path / "lkecred.yml"
    config_path.write_text("default_profile: visibility\ndefault_format: table\n", encoding="utf-8")
    out_path = tmp_path / "credential.txt"
    exit_code = cli_app(["--config", str(config_path), "request", "--output", str(out_path)])
    assert exit_code == 0
    rendered = out_path.read_text(encoding="utf-8")
    assert "lke-realtime-1250000000" in rendered
    assert "tmp-key" not in rendered
    assert fake_client.requests[0]["TypeKey"] == "offline"


def test_request_region_override_from_config(tmp_path, lke_env, monkeypatch):
    seen = []

    def factory(settings):
        seen.append(settings)
        return CredentialBroker(settings, client=FakeLkeClient())

    monkeypatch.setattr(core.service, "build_broker", factory)
    config_path = tmp_path / "lkecred.yml"
    config_path.write_text("region: ap-beijing\n", encoding="utf-8")
    assert cli_app(["--config", str(config_path), "request", "--output", str(tmp_path / "out.json")]) == 0
    assert seen[0].region == "ap-beijing"
    assert seen[0].endpoint == "lke.tencentcloudapi.com"


def test_request_missing_environment_exit_code(tmp_path, empty_env, capsys):
    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "request"])
    assert exit_code == 2
    assert "TENCENT_SECRET_ID" in capsys.readouterr().err


def test_invoke_runs_lambda_handler(tmp_path, lke_env, fake_client):
    event_path = tmp_path / "event.json"
    event_path.write_text(
        json.dumps({"httpMethod": "POST", "path": "/credential", "body": json.dumps({"isPublic": True})}),
        encoding="utf-8",
    )
    out_path = tmp_path / "response.json"
    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "invoke", "--event", str(event_path), "--output", str(out_path)])
    assert exit_code == 0
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["statusCode"] == 200
    assert payload["body"] == SAMPLE_RESPONSE


def test_invoke_reports_handler_errors(tmp_path, empty_env, capsys):
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"httpMethod": "POST", "path": "/credential"}), encoding="utf-8")
    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "invoke", "--event", str(event_path)])
    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["statusCode"] == 500


def test_invoke_missing_event_file(tmp_path):
    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "invoke", "--event", str(tmp_path / "nope.json")])
    assert exit_code == 2


def test_namespace_package_exposes_cli():
    import lkecred
    from lkecred.cli import app

    assert app is cli_app
    assert lkecred.__version__ == "0.1.0"


def test_request_ssm_failure_exit_code(tmp_path, empty_env, monkeypatch, capsys):
    monkeypatch.setenv("TENCENT_SECRET_ID", "AKIDexample")
    monkeypatch.setenv("TENCENT_SECRET_KEY_SSM_PARAM", "/lke/secret-key")
    monkeypatch.setenv("TENCENT_BOT_BIZ_ID", "1739000000000000000")
    monkeypatch.setattr(core.secrets.boto3, "client", lambda service: FailingSsm())

    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "request"])
    assert exit_code == 2
    assert "/lke/secret-key" in capsys.readouterr().err


def test_unexpected_failure_exit_code(tmp_path, lke_env, monkeypatch, capsys):
    def explode(settings):
        raise RuntimeError("socket closed")

    monkeypatch.setattr(core.service, "build_broker", explode)
    exit_code = cli_app(["--config", str(tmp_path / "none.yml"), "request"])
    assert exit_code == 1
    assert "socket closed" in capsys.readouterr().err

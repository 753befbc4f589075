from __future__ import annotations

import json
from pathlib import Path

from specgen_cli.ecosystem import (
    DEFAULT_CWD,
    PLACEHOLDER_OPENAI_API_KEY,
    ecosystem_config,
    main,
)


def test_defaults_use_placeholder_credential_and_default_cwd() -> None:
    config = ecosystem_config({})

    (app,) = config["apps"]
    assert app["name"] == "specgen"
    assert app["script"] == "./server/index.js"
    assert app["cwd"] == DEFAULT_CWD
    assert app["env"]["OPENAI_API_KEY"] == PLACEHOLDER_OPENAI_API_KEY
    assert app["env"]["NODE_ENV"] == "production"
    assert app["env"]["PORT"] == 80
    assert app["exec_mode"] == "fork"
    assert app["max_memory_restart"] == "500M"
    assert app["watch"] is False


def test_environment_overrides_cwd_and_api_key() -> None:
    config = ecosystem_config({"PWD": "/srv/specgen", "OPENAI_API_KEY": "sk-real"})

    (app,) = config["apps"]
    assert app["cwd"] == "/srv/specgen"
    assert app["env"]["OPENAI_API_KEY"] == "sk-real"


def test_cli_prints_json(monkeypatch, capsys) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("PWD", "/opt/specgen")

    assert main([]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["apps"][0]["cwd"] == "/opt/specgen"
    assert parsed["apps"][0]["env"]["OPENAI_API_KEY"] == PLACEHOLDER_OPENAI_API_KEY


def test_cli_writes_output_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    out = tmp_path / "deploy" / "ecosystem.json"

    assert main(["--output", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text)["apps"][0]["env"]["OPENAI_API_KEY"] == "sk-from-env"


def test_cli_rejects_directory_output(tmp_path: Path, capsys) -> None:
    assert main(["--output", str(tmp_path)]) == 2
    assert "is a directory" in capsys.readouterr().err

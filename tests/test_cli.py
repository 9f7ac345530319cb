import re

import pytest

from hexstore.cli import build_parser, load_config, main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_parser_cli_defaults():
    args = build_parser().parse_args(["cli"])
    assert args.command == "cli"
    assert args.action == "enabled"
    assert args.product_id == ""
    assert args.product_name == ""
    assert args.product_price == 0.0


def test_parser_cli_options():
    args = build_parser().parse_args(["cli", "-a", "create", "-n", "Widget", "-p", "2.5"])
    assert (args.action, args.product_name, args.product_price) == ("create", "Widget", 2.5)


def test_parser_http_command():
    args = build_parser().parse_args(["--config", "conf.yaml", "http"])
    assert args.command == "http"
    assert args.config == "conf.yaml"


def test_create_then_get(workdir, capsys):
    assert main(["cli", "-a", "create", "-n", "Widget", "-p", "10"]) == 0
    out = capsys.readouterr().out
    assert "with name Widget has been created" in out
    assert "status DISABLED" in out
    product_id = re.search(r"Product ID (\S+) with", out).group(1)
    assert (workdir / "db.sqlite").is_file()

    assert main(["cli", "-i", product_id]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Product ID: {product_id}\n name Widget\n")
    assert "status DISABLED" in out


def test_create_invalid_prints_error(workdir, capsys):
    assert main(["cli", "-a", "create", "-p", "1"]) == 0
    assert capsys.readouterr().out == "Name: non zero value required\n\n"


def test_enable_zero_price_prints_error(workdir, capsys):
    main(["cli", "-a", "enable", "-n", "Widget"])
    out = capsys.readouterr().out
    assert out == "o preço deve ser maior que 0 para habilitar o produto\n\n"


def test_get_missing_prints_error(workdir, capsys):
    main(["cli", "-i", "missing-id"])
    out = capsys.readouterr().out
    assert "missing-id" in out
    assert out.endswith("\n\n")


def test_no_command_prints_help(workdir, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "cli" in out and "http" in out


def test_load_config_explicit(tmp_path, capsys):
    config = tmp_path / "conf.yaml"
    config.write_text("port: 9000\nname: shop\n", encoding="utf-8")
    assert load_config(str(config)) == {"port": 9000, "name": "shop"}
    assert f"Using config file: {config}" in capsys.readouterr().err


def test_load_config_missing(tmp_path, capsys):
    assert load_config(str(tmp_path / "absent.yaml")) == {}
    assert capsys.readouterr().err == ""


def test_load_config_from_home(workdir):
    (workdir / ".hexstore.yaml").write_text("debug: true\n", encoding="utf-8")
    assert load_config(None) == {"debug": True}
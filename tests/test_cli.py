"""Tests for the command-line interface."""

import json

import pytest

from wine_sieve import Wine
from wine_sieve.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WINE_SIEVE_CATALOG_PATH", "WINE_SIEVE_FUZZY_THRESHOLD", "WINE_SIEVE_ABSENT_PASSES"):
        monkeypatch.delenv(name, raising=False)


def test_search_json(capsys):
    assert main(["--json", "search", "cabernot"]) == 0

    names = [item["wine_name"] for item in json.loads(capsys.readouterr().out)]
    assert "Casillero del Diablo Cabernet Sauvignon" in names


def test_filter_by_country(capsys):
    assert main(["--json", "filter", "--country", "Chile"]) == 0

    names = [item["wine_name"] for item in json.loads(capsys.readouterr().out)]
    assert names == ["Casillero del Diablo Cabernet Sauvignon", "Montes Alpha Carmenere"]


def test_filter_strict_absent_excludes_unrated(capsys):
    assert main(["--json", "filter", "--type", "White", "--tannin", "1", "5", "--strict-absent"]) == 0

    assert json.loads(capsys.readouterr().out) == []


def test_options_narrow_subregions(capsys):
    assert main(["--json", "options", "--country", "Chile"]) == 0

    options = json.loads(capsys.readouterr().out)
    assert options["subregions"] == ["Central Valley", "Colchagua Valley"]
    assert "France" in options["countries"]


def test_inverted_range_is_an_error(capsys):
    assert main(["filter", "--price", "10", "1"]) == 1

    assert "Error:" in capsys.readouterr().err


def test_missing_catalog_is_an_error(tmp_path, capsys):
    assert main(["--catalog", str(tmp_path / "missing.json"), "search", "merlot"]) == 1

    assert "Error:" in capsys.readouterr().err


def test_catalog_path_from_env(monkeypatch, tmp_path, capsys):
    path = tmp_path / "wines.json"
    path.write_text(json.dumps([{"wine_name": "Solo Syrah", "country": "Australia"}]), encoding="utf-8")
    monkeypatch.setenv("WINE_SIEVE_CATALOG_PATH", str(path))

    assert main(["--json", "search", "syrah"]) == 0

    assert [item["wine_name"] for item in json.loads(capsys.readouterr().out)] == ["Solo Syrah"]


def test_formatted_output(mocker, capsys):
    mocker.patch(
        "wine_sieve.cli.load_catalog",
        return_value=(
            Wine(wine_name="Chateau Margaux", country="France", subregion="Bordeaux", price_krw=1200000),
        ),
    )

    assert main(["search", "fance"]) == 0

    out = capsys.readouterr().out
    assert "1 wine(s)" in out
    assert "Chateau Margaux" in out
    assert "France / Bordeaux" in out
    assert "1,200,000 KRW" in out

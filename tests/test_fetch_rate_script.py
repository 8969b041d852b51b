"""Tests for the fetch_rate CLI."""

import pytest

from scripts.fetch_rate import main
from xrate import MockRateClient, RateClient, create_client


class TestCreateClient:
    def test_mock(self):
        assert isinstance(create_client("http://x/", mock=True), MockRateClient)

    def test_key_env(self, monkeypatch):
        monkeypatch.setenv("MY_KEY", "envkey")
        client = create_client("http://x/", key_env="MY_KEY")
        assert type(client) is RateClient
        assert client.access_key == "envkey"

    def test_keys_file(self, tmp_path):
        path = tmp_path / "keys.properties"
        path.write_text("fixer_io=filekey\n")
        assert create_client("http://x/", keys_file=str(path)).access_key == "filekey"


class TestMain:
    def test_rate_against_base(self, capsys):
        assert main(["--mock", "--date", "2021-10-01", "--currency", "USD"]) == 0
        assert float(capsys.readouterr().out) == pytest.approx(1.2)

    def test_rate_between(self, capsys):
        assert main(["--mock", "--date", "2021-10-01", "--currency", "GBP", "--to", "EUR"]) == 0
        assert float(capsys.readouterr().out) == pytest.approx(0.86)

    def test_unknown_currency_exits_nonzero(self, capsys):
        assert main(["--mock", "--date", "2021-10-01", "--currency", "XYZ"]) == 1
        assert capsys.readouterr().out == ""

    def test_bad_date(self):
        assert main(["--mock", "--date", "01/10/2021", "--currency", "USD"]) == 1

    def test_missing_key_file(self, tmp_path):
        missing = tmp_path / "missing.properties"
        assert main(["--date", "2021-10-01", "--currency", "USD", "--keys-file", str(missing)]) == 1

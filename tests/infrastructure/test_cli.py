"""Command-line tests through click's CliRunner."""

from datetime import datetime, timezone

import pytest
from click.testing import CliRunner

from pos.application.create_invoice import CreateInvoiceHandler
from pos.application.dto import LineItemSpec
from pos.infrastructure.bootstrap import document_repository
from pos.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


def _run(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


class TestProductCommands:

    def test_list_seed_catalog(self, data_dir):
        result = _run(data_dir, "product", "list")
        assert result.exit_code == 0
        assert "Wired Earphones" in result.output
        assert "Pouch" in result.output

    def test_add_then_list(self, data_dir):
        result = _run(data_dir, "product", "add", "--name", "Cable", "--image-url", "http://img/c")
        assert result.exit_code == 0
        assert "'Cable' added" in result.output
        assert "Cable" in _run(data_dir, "product", "list").output

    def test_update(self, data_dir):
        result = _run(data_dir, "product", "update", "--id", "5", "--name", "Fast Charger")
        assert result.exit_code == 0
        assert "Fast Charger" in _run(data_dir, "product", "list").output

    def test_update_needs_a_field(self, data_dir):
        result = _run(data_dir, "product", "update", "--id", "5")
        assert result.exit_code != 0
        assert "--name" in result.output

    def test_remove_unknown(self, data_dir):
        result = _run(data_dir, "product", "remove", "--id", "404")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestReportCommands:

    def test_daily(self, data_dir):
        CreateInvoiceHandler(
            document_repository(data_dir),
            clock=lambda: datetime(2024, 5, 1, 12, tzinfo=timezone.utc),
        ).handle([LineItemSpec(product_id="5", product_name="Charger", quantity=2, price="199.50")])

        result = _run(data_dir, "report", "daily", "--date", "2024-05-01")
        assert result.exit_code == 0
        assert "Charger" in result.output
        assert "₹399.00" in result.output

    def test_daily_empty(self, data_dir):
        result = _run(data_dir, "report", "daily", "--date", "2024-05-01")
        assert result.exit_code == 0
        assert "No sales found" in result.output

    def test_monthly_out_of_range(self, data_dir):
        result = _run(data_dir, "report", "monthly", "--year", "2024", "--month", "13")
        assert result.exit_code == 1
        assert "month 1-12" in result.output

    def test_monthly_heading(self, data_dir):
        result = _run(data_dir, "report", "monthly", "--year", "2024", "--month", "5")
        assert result.exit_code == 0
        assert "May 2024" in result.output

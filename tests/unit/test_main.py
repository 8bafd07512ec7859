import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from holdings.extraction.models import DocumentType
from holdings.main import build_parser, main
from holdings.pdf.exceptions import InvalidMetadataError
from holdings.processor.models import StoredTransaction


def _stored() -> StoredTransaction:
    return StoredTransaction(
        id_hash="tx1",
        account_id_hash="acct1",
        requester_hash="req",
        document_type=DocumentType.DRS,
        cusip="123ABC789",
        description="Dividend Reinvestment",
        deduction_type="",
        open_position=Decimal("50.000000"),
        close_position=Decimal("52.500000"),
        amount=Decimal("2.500000"),
        deduction_amount=Decimal("0"),
        net_amount=Decimal("2.500000"),
        price_per_share=Decimal("10.50"),
        total_shares=Decimal("2.500000"),
        date=date(2023, 3, 15),
    )


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORE_BACKEND", "memory")


@pytest.fixture()
def statement_file(tmp_path: Path) -> Path:
    path = tmp_path / "statement.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


class TestParser:
    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_transactions_accepts_cusip_filter(self) -> None:
        args = build_parser().parse_args(["transactions", "--cusip", "123ABC789"])
        assert args.cusip == "123ABC789"


class TestMain:
    def test_parse_prints_record(
        self, statement_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        processor = MagicMock()
        processor.process.return_value = _stored()
        with patch("holdings.main.build_processor", return_value=processor):
            exit_code = main(["parse", str(statement_file)])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["transaction"]["cusip"] == "123ABC789"
        assert payload["transaction"]["close_position"] == "52.500000"

    def test_parse_failure_returns_error_code(self, statement_file: Path) -> None:
        processor = MagicMock()
        processor.process.side_effect = InvalidMetadataError("Invalid creator")
        with patch("holdings.main.build_processor", return_value=processor):
            assert main(["parse", str(statement_file)]) == 1

    def test_ingest_reports_failures(
        self, statement_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        processor = MagicMock()
        processor.process.side_effect = [_stored(), _stored()]
        with patch("holdings.main.build_processor", return_value=processor):
            exit_code = main(["ingest", str(statement_file), str(statement_file)])

        assert exit_code == 1
        assert capsys.readouterr().out.count('"file"') == 1

    def test_totals_on_empty_store(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["totals"]) == 0
        assert json.loads(capsys.readouterr().out) == {}

    def test_migrate_is_noop_for_memory_backend(self) -> None:
        assert main(["migrate"]) == 0

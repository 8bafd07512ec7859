from datetime import date
from decimal import Decimal

from holdings.extraction.models import DocumentType
from holdings.processor.assembler import RecordAssembler, salted_hash
from holdings.processor.models import Transaction


def _transaction() -> Transaction:
    return Transaction(
        document_type=DocumentType.PURCHASE,
        id="TX-000123",
        date=date(2023, 1, 1),
        account_id="C0000000001",
        cusip="123ABC789",
        description="Purchase",
        deduction_type="",
        open_position=Decimal("1000.00"),
        close_position=Decimal("1050.00"),
        amount=Decimal("525.00"),
        deduction_amount=Decimal("0.00"),
        net_amount=Decimal("525.00"),
        price_per_share=Decimal("10.50"),
        total_shares=Decimal("50"),
    )


class TestRecordAssembler:
    def test_hashes_identifiers_with_salts(self) -> None:
        stored = RecordAssembler("tx-salt", "acct-salt").assemble(_transaction(), "req")

        assert stored.id_hash == salted_hash("tx-salt", "TX-000123")
        assert stored.account_id_hash == salted_hash("acct-salt", "C0000000001")
        assert stored.requester_hash == "req"
        assert len(stored.id_hash) == 64

    def test_copies_transaction_values(self) -> None:
        stored = RecordAssembler("a", "b").assemble(_transaction(), "req")

        assert stored.cusip == "123ABC789"
        assert stored.total_shares == Decimal("50")
        assert stored.close_position == Decimal("1050.00")
        assert stored.date == date(2023, 1, 1)
        assert stored.document_type is DocumentType.PURCHASE

    def test_raw_identifiers_are_not_in_output(self) -> None:
        stored = RecordAssembler("a", "b").assemble(_transaction(), "req")
        values = [str(v) for v in vars(stored).values()]
        assert "TX-000123" not in values
        assert "C0000000001" not in values

    def test_is_deterministic(self) -> None:
        assembler = RecordAssembler("a", "b")
        assert assembler.assemble(_transaction(), "req") == assembler.assemble(
            _transaction(), "req"
        )

    def test_transaction_salt_only_changes_id_hash(self) -> None:
        first = RecordAssembler("a", "b").assemble(_transaction(), "req")
        second = RecordAssembler("changed", "b").assemble(_transaction(), "req")

        assert first.id_hash != second.id_hash
        assert first.account_id_hash == second.account_id_hash

    def test_account_salt_only_changes_account_hash(self) -> None:
        first = RecordAssembler("a", "b").assemble(_transaction(), "req")
        second = RecordAssembler("a", "changed").assemble(_transaction(), "req")

        assert first.account_id_hash != second.account_id_hash
        assert first.id_hash == second.id_hash


class TestSaltedHash:
    def test_known_digest(self) -> None:
        # sha256("") is a well known constant.
        assert salted_hash("", "") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

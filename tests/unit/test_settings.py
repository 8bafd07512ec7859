import pytest
from pydantic import ValidationError

from holdings.config.settings import Settings


class TestSettingsDefaults:
    def test_default_store_backend(self) -> None:
        assert Settings(_env_file=None).store_backend == "memory"

    def test_default_pdf_engine(self) -> None:
        assert Settings(_env_file=None).pdf_engine == "pymupdf"

    def test_default_barcode_policy(self) -> None:
        s = Settings(_env_file=None)
        assert s.barcode_symbology == "CODE39"
        assert s.barcode_min_quality == 100

    def test_default_account_number_digits(self) -> None:
        assert Settings(_env_file=None).account_number_digits == 10

    def test_default_metadata_prefixes(self) -> None:
        s = Settings(_env_file=None)
        assert s.expected_creator == "Computershare Communication Services, GPD 3.00"
        assert s.expected_producer == "PDFlib+PDI 7.0.4p1"

    def test_default_size_limit(self) -> None:
        assert Settings(_env_file=None).max_document_bytes == 200 * 1024


class TestSettingsFromEnv:
    def test_loads_salts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSACTION_SALT", "tx")
        monkeypatch.setenv("ACCOUNT_SALT", "acct")
        s = Settings(_env_file=None)
        assert s.transaction_salt == "tx"
        assert s.account_salt == "acct"

    def test_loads_render_dpi(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_DPI", "150")
        assert Settings(_env_file=None).render_dpi == 150

    def test_loads_store_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "postgres")
        assert Settings(_env_file=None).store_backend == "postgres"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_min_quality_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BARCODE_MIN_QUALITY", "high")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

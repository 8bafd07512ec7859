from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "holdings"
    db_username: str = "holdings"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    store_backend: str = "memory"

    pdf_engine: str = "pymupdf"
    render_dpi: int = 300

    tesseract_cmd: str = ""
    tesseract_lang: str = "eng"

    barcode_symbology: str = "CODE39"
    barcode_min_quality: int = 100

    # Suffix width of the "C" account numbers. Ten digits covers every
    # account the generator has issued so far; wider numbers will not match.
    account_number_digits: int = 10

    expected_creator: str = "Computershare Communication Services, GPD 3.00"
    expected_producer: str = "PDFlib+PDI 7.0.4p1"

    transaction_salt: str = ""
    account_salt: str = ""

    max_document_bytes: int = 200 * 1024

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    line_gap_threshold: float = 5.0

    ocr_languages: str = "deu+eng"
    ocr_render_scale: float = 2.0
    tesseract_cmd: str = ""

    min_result_text_length: int = 200
    min_invoice_text_length: int = 100

    rank_sanity_bound: int = 500
    format_scan_lines: int = 20
    default_nation: str = "GER"

    invoice_min_amount: float = 5.0
    invoice_max_amount: float = 500.0

from .dispatcher import Mode, detect_mode, ingest
from .json_ingestor import parse_json
from .text_parser import parse_plain_text

__all__ = ["Mode", "detect_mode", "ingest", "parse_json", "parse_plain_text"]

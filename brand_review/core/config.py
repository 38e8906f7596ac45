import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MB soft cap
ALLOWED_EXTENSIONS = {'.pdf', '.docx', '.txt', '.md'}
MIME_ALLOW = {
    ".pdf": {"application/pdf"},
    ".docx": {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/zip",
    },
    ".txt": {"text/plain"},
    ".md": {"text/plain", "text/markdown", "text/x-markdown"},
}

# Rule set location
RULES_PATH = os.getenv("BRAND_RULES_PATH", str(PACKAGE_DIR / "data" / "rules.json"))
RULES_URL = os.getenv("BRAND_RULES_URL", "")
RULES_FETCH_TIMEOUT = float(os.getenv("RULES_FETCH_TIMEOUT", "10"))

# Analyzer configuration (fixed; not read from the environment)
HISTORY_LIMIT = 50
GREEN_THRESHOLD = 85   # inclusive
YELLOW_THRESHOLD = 70  # inclusive
UNSPECIFIED = "unspecified"

# Defaults used by the HTTP layer when a field is omitted
DEFAULT_PARAMETERS = {
    "businessUnit": "hydraulics",
    "country": "DK",
    "assetType": "email",
    "contentType": "internal",
}

import os
from typing import Optional

import fitz          # PyMuPDF
import docx          # python-docx

ASSET_TYPE_BY_EXT = {
    "ppt": "slide",
    "pptx": "slide",
    "pdf": "doc",
    "doc": "doc",
    "docx": "doc",
    "jpg": "image",
    "jpeg": "image",
    "png": "image",
    "gif": "image",
}


def extract_text(path: str) -> str:
    """
    Return the plain text of a PDF, DOCX or text file, paragraphs separated
    by blank lines. Keeps memory modest by iterating pages/paragraphs.
    """
    ext = os.path.splitext(path)[1].lower()

    if ext in (".txt", ".md"):
        with open(path, "r", encoding="utf-8", errors="replace") as fp:
            return fp.read()

    if ext == ".pdf":
        paras: list[str] = []
        with fitz.open(path) as doc:
            for page in doc:
                # 'blocks' yields tuples; index 4 is the text
                blocks = page.get_text("blocks") or []
                for b in blocks:
                    if isinstance(b, (list, tuple)) and len(b) >= 5:
                        text = (b[4] or "").strip()
                        if text:
                            paras.append(text)
        return "\n\n".join(paras)

    if ext == ".docx":
        d = docx.Document(path)
        return "\n\n".join(p.text.strip() for p in d.paragraphs if p.text and p.text.strip())

    raise ValueError(f"Unsupported extension: {ext}")


def infer_asset_type(ext: str) -> Optional[str]:
    return ASSET_TYPE_BY_EXT.get(ext.lower().lstrip("."))


def infer_content_type(filename: str) -> str:
    lower = filename.lower()
    if "esg" in lower or "sustain" in lower:
        return "esg-report"
    if "proposal" in lower or "offer" in lower or "quote" in lower:
        return "customer-proposal"
    if "datasheet" in lower or "spec" in lower:
        return "datasheet"
    return "internal"

"""Plain-text loading for uploaded documents.

Only text formats are handled here; whatever comes out is passed to the
summarizer unchanged.
"""
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("txt", "md", "rtf")


class ExtractionError(ValueError):
    """The document could not be turned into text."""


def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    # Paragraph marks become line breaks before control words are dropped
    text = re.sub(r'\\par\b ?', '\n', rtf_content)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'[ \t]+', ' ', text)
    text = re.sub(r'\n\s*\n+', '\n\n', text)
    return text.strip()

def extract_markdown_text(md_content: str) -> str:
    """Strip inline Markdown markup.

    Heading ("# ") and list ("- ", "* ") prefixes are kept; the structure
    suggestions look for them.
    """
    # Remove code blocks
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    # Remove images and links
    text = re.sub(r'!\[([^\]]*)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Remove bold and italic (a leading "* " bullet is not emphasis)
    text = re.sub(r'\*\*(.+?)\*\*', r'\1', text)
    text = re.sub(r'(?<![\w*])\*(?=\S)(.+?)(?<=\S)\*', r'\1', text)
    text = re.sub(r'__(.+?)__', r'\1', text)
    text = re.sub(r'(?<!\w)_(?=\S)(.+?)(?<=\S)_(?!\w)', r'\1', text)
    # Remove horizontal rules
    text = re.sub(r'^\s*(?:-{3,}|\*{3,}|_{3,})\s*$', '', text, flags=re.MULTILINE)
    # Clean up extra whitespace
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def human_size(size: int) -> str:
    units = ["B", "KB", "MB", "GB"]
    n = float(size)
    i = 0
    while n >= 1024 and i < len(units) - 1:
        n /= 1024
        i += 1
    return f"{n:.1f} {units[i]}"

def load_text(name: str, data: Union[bytes, str]) -> str:
    """Decode an uploaded document by its file extension."""
    file_extension = name.lower().rsplit('.', 1)[-1] if '.' in name else ''
    if file_extension not in SUPPORTED_EXTENSIONS:
        raise ExtractionError(
            f"Unsupported file type '{file_extension or name}'. "
            f"Please upload one of: {', '.join(SUPPORTED_EXTENSIONS)}."
        )

    if isinstance(data, bytes):
        try:
            content = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ExtractionError(f"Failed to process the file {name}: not valid UTF-8 ({e.reason})") from e
    else:
        content = data

    if file_extension == 'rtf':
        text = extract_rtf_text(content)
    elif file_extension == 'md':
        text = extract_markdown_text(content)
    else:  # txt
        text = content
    logger.debug("Loaded %s: %d characters", name, len(text))
    return text

def load_text_from_file(uploaded_file) -> str:
    """Load text from a Streamlit upload (or any object with .name and .read())."""
    return load_text(uploaded_file.name, uploaded_file.read())

def load_text_from_path(path: Union[str, Path]) -> str:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ExtractionError(f"Failed to read {path}: {e.strerror or e}") from e
    return load_text(path.name, data)

"""
Loading of the name list that a batch validates.

Any failure here is fatal to the batch and surfaces as NameSourceError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from charset_normalizer import from_bytes

from .errors import NameSourceError

UTF8_BOM = b"\xef\xbb\xbf"


def decode_names_bytes(raw: bytes) -> str:
    """
    Decode a names file.

    Rules:
    - UTF-8 (with or without BOM) is tried first.
    - Otherwise use charset-normalizer's best guess.
    - No guess at all is an error; there is no lossy fallback.
    """
    if raw.startswith(UTF8_BOM):
        return raw[len(UTF8_BOM):].decode("utf-8", errors="strict")

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise NameSourceError("Unable to detect the encoding of the names file")
    return str(match)


def load_names(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise NameSourceError(f"Unable to read names file {path}: {exc.strerror or exc}") from exc

    try:
        text = decode_names_bytes(raw)
    except UnicodeDecodeError as exc:
        raise NameSourceError(f"Names file {path} is not valid UTF-8") from exc

    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise NameSourceError(f"Names file {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list) or not all(isinstance(item, str) for item in payload):
        raise NameSourceError(f"Names file {path} must contain a JSON array of strings")

    return payload

# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Reading and writing share documents.

A document maps each share index to its encoding plus a ``keys`` entry
with the share count and threshold::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

``base`` may be given as a string or an integer. YAML files with the same
shape are accepted too.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .codec import encode
from .errors import ShareFormatError
from .models import Share, ThresholdSpec
from .utils.logging import get_logger

log = get_logger("ingest")

KEYS_ENTRY = "keys"
FORMATS = ("auto", "json", "yaml")
_YAML_SUFFIXES = {".yaml", ".yml"}
_INTEGER = re.compile(r"-?[0-9]+")


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ShareFormatError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text, 10)
    raise ShareFormatError(f"{what} must be an integer, got {value!r}")


def _parse_threshold(keys: Any) -> ThresholdSpec:
    if not isinstance(keys, Mapping):
        raise ShareFormatError(f"'{KEYS_ENTRY}' must be a mapping with 'n' and 'k'")
    for field in ("n", "k"):
        if field not in keys:
            raise ShareFormatError(f"'{KEYS_ENTRY}' is missing '{field}'")
    return ThresholdSpec(n=_as_int(keys["n"], "keys.n"), k=_as_int(keys["k"], "keys.k"))


def _parse_share(index: Any, entry: Any) -> Share:
    x = _as_int(index, "share index")
    if not isinstance(entry, Mapping):
        raise ShareFormatError(f"share {index!r} must be a mapping with 'base' and 'value'")
    if "base" not in entry:
        raise ShareFormatError(f"share {index!r} is missing 'base'")
    if "value" not in entry:
        raise ShareFormatError(f"share {index!r} is missing 'value'")
    value = entry["value"]
    if isinstance(value, int) and not isinstance(value, bool):
        # YAML turns unquoted digit strings into ints
        value = str(value)
    if not isinstance(value, str):
        raise ShareFormatError(f"share {index!r} value must be a string, got {value!r}")
    return Share(x=x, base=_as_int(entry["base"], f"share {index!r} base"), raw_value=value.strip())


def parse_document(document: Any) -> tuple[ThresholdSpec, list[Share]]:
    """Split an already-parsed document into its threshold and shares."""
    if not isinstance(document, Mapping):
        raise ShareFormatError("share document must be a mapping")
    if KEYS_ENTRY not in document:
        raise ShareFormatError(f"share document has no '{KEYS_ENTRY}' entry")

    spec = _parse_threshold(document[KEYS_ENTRY])
    shares = [_parse_share(index, entry) for index, entry in document.items() if index != KEYS_ENTRY]
    log.debug("parsed %d shares (n=%d, k=%d)", len(shares), spec.n, spec.k)
    return spec, shares


def _resolve_format(path: Path, fmt: str) -> str:
    if fmt not in FORMATS:
        raise ValueError(f"unknown format {fmt!r}, expected one of {FORMATS}")
    if fmt != "auto":
        return fmt
    return "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"


def load_document(path: str | Path, fmt: str = "auto") -> tuple[ThresholdSpec, list[Share]]:
    """Read and parse the share document stored at ``path``."""
    path = Path(path)
    kind = _resolve_format(path, fmt)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ShareFormatError(f"cannot read {path}: {exc.strerror or exc}") from exc

    try:
        document = yaml.safe_load(text) if kind == "yaml" else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ShareFormatError(f"{path} is not valid {kind}: {exc}") from exc
    return parse_document(document)


def dump_document(spec: ThresholdSpec, shares: Iterable[Share]) -> dict[str, Any]:
    """Build a document mapping for ``spec`` and ``shares``."""
    document: dict[str, Any] = {KEYS_ENTRY: {"n": spec.n, "k": spec.k}}
    for share in shares:
        document[str(share.x)] = {"base": str(share.base), "value": share.raw_value}
    return document


def share_for(x: int, y: int, base: int) -> Share:
    """Encode the point ``(x, y)`` as a :class:`Share` in ``base``."""
    return Share(x=x, base=base, raw_value=encode(y, base))


__all__ = ["FORMATS", "parse_document", "load_document", "dump_document", "share_for"]

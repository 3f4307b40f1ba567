"""Slug generation for catalog records."""

import re
import unicodedata
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase ASCII slug: ``"São Paulo"`` -> ``"sao-paulo"``."""
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_ALNUM.sub("-", ascii_value.lower()).strip("-") or "item"


def unique_slug(session: Session, model: type[Any], value: str) -> str:
    """Slug for ``value`` not yet used by ``model``, suffixed ``-2``, ``-3``... if taken."""
    base = slugify(value)
    candidate = base
    suffix = 2
    while session.execute(
        select(model.id).where(model.slug == candidate)
    ).first() is not None:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate

"""Shared pydantic base for IBAN value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen, hashable value object.

    Grammars, country formats, parsed IBANs and validation reports all derive
    from this model so they can be shared between threads and used as dict
    keys. Unknown fields are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


__all__ = ["DomainModel"]

"""Raw mapping document, exactly as authored in ``mappings.toml``.

Only structural constraints live here: types, required keys, and the
single-character ``character`` field. Range and consistency rules belong
to :mod:`dkmap.domain.parse`. Unknown keys are ignored.

Scalars are strict so ``debounce = "200"`` or ``debounce = true`` is a
shape error rather than a silent coercion.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class GlobalDocument(BaseModel):
    """[global] table."""

    model_config = {"frozen": True}

    debounce: StrictInt | None = None
    combo_window: StrictInt | None = None
    microphone: StrictBool | None = None


class RhythmDocument(BaseModel):
    """One [[freestyle]] entry."""

    model_config = {"frozen": True}

    character: StrictStr = Field(min_length=1, max_length=1)
    beats: list[StrictStr]
    delays: list[StrictInt]


class MappingsDocument(BaseModel):
    """Root of ``mappings.toml``.

    ``global`` is a Python keyword, so the table is exposed as ``global_``.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    global_: GlobalDocument | None = Field(default=None, alias="global")
    freestyle: list[RhythmDocument] | None = None

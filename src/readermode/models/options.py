"""Caller-facing extraction options."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..observability.logger import get_logger

logger = get_logger(__name__)


class ReaderModeOptions(BaseModel):
    """Options accepted by ``extract`` / ``extract_from_url``.

    ``min_word_count`` is accepted for compatibility but the main-block
    threshold stays fixed at ``MIN_WORD_COUNT``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    min_word_count: Optional[int] = Field(default=None, ge=0, alias="minWordCount")
    debug: bool = False


OptionsInput = Union[ReaderModeOptions, Dict[str, Any], None]


def resolve_options(options: OptionsInput) -> ReaderModeOptions:
    """Normalize caller options; values that fail validation are ignored."""
    if options is None:
        return ReaderModeOptions()
    if isinstance(options, ReaderModeOptions):
        return options
    try:
        return ReaderModeOptions.model_validate(options)
    except ValidationError as e:
        invalid = {".".join(str(p) for p in err["loc"]) for err in e.errors()}
        logger.warning("options_ignored", fields=sorted(invalid))
        kept = {k: v for k, v in options.items() if k not in invalid} if isinstance(options, dict) else {}
        try:
            return ReaderModeOptions.model_validate(kept)
        except ValidationError:
            return ReaderModeOptions()

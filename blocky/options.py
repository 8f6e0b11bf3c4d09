"""Generation options.

Options are validated by pydantic before any random draw happens. Every call
builds its own `Options` instance, so a value passed to one call never becomes
the default of the next.
"""
import logging
from typing import Annotated, Any, Mapping, Optional, Tuple

from nacl.utils import random
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from .errors import InvalidOptionsError

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 7
DEFAULT_SCALE = 24
DEFAULT_BG_COLOR = (255, 255, 255)
SEED_BYTES = 8  # 16 hex digits

Channel = Annotated[StrictInt, Field(ge=0, le=255)]
Color = Tuple[Channel, Channel, Channel]

# camelCase names accepted for compatibility with the JavaScript API
ALIASES = {
    "fgColor": "fg_color",
    "bgColor": "bg_color",
    "spotColor": "spot_color",
}


def random_seed() -> str:
    return random(SEED_BYTES).hex()


class Options(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    size: StrictInt = Field(DEFAULT_SIZE, ge=1)  # cells per side
    scale: StrictInt = Field(DEFAULT_SCALE, ge=1)  # pixels per cell
    seed: StrictStr = Field(default_factory=random_seed)
    fg_color: Optional[Color] = Field(None, alias="fgColor")
    bg_color: Color = Field(DEFAULT_BG_COLOR, alias="bgColor")
    spot_color: Optional[Color] = Field(None, alias="spotColor")

    @field_validator("size", mode="before")
    @classmethod
    def _default_size(cls, value: Any) -> Any:
        return DEFAULT_SIZE if value is None else value

    @field_validator("scale", mode="before")
    @classmethod
    def _default_scale(cls, value: Any) -> Any:
        return DEFAULT_SCALE if value is None else value

    @field_validator("seed", mode="before")
    @classmethod
    def _default_seed(cls, value: Any) -> Any:
        return random_seed() if value is None else value

    @field_validator("bg_color", mode="before")
    @classmethod
    def _default_bg_color(cls, value: Any) -> Any:
        return DEFAULT_BG_COLOR if value is None else value

    @property
    def width(self) -> int:
        """Output width (and height) in pixels."""
        return self.size * self.scale


def _normalize(values: Mapping[str, Any]) -> dict:
    return {ALIASES.get(key, key): value for key, value in values.items()}


def resolve_options(options: Any = None, **overrides: Any) -> Options:
    """Build a validated `Options` from an instance, a mapping or nothing.

    Keyword overrides win over values in `options`. Raises
    `InvalidOptionsError` when the result is not a usable configuration.
    """
    if options is None:
        values = {}
    elif isinstance(options, Options):
        values = options.model_dump()
    elif isinstance(options, Mapping):
        values = _normalize(options)
    else:
        raise InvalidOptionsError(f"options must be a mapping or Options, not {type(options).__name__}")

    values.update(_normalize(overrides))
    seed_synthesized = values.get("seed") is None
    try:
        opts = Options.model_validate(values)
    except ValidationError as exc:
        raise InvalidOptionsError(str(exc)) from exc

    logger.debug(
        "Resolved options: size=%d scale=%d seed_synthesized=%s",
        opts.size, opts.scale, seed_synthesized,
    )
    return opts

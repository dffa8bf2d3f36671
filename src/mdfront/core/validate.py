"""Cached validators for extracted document JSON"""

from functools import lru_cache
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, TypeAdapter

from mdfront.core.models import ExtractedDoc
from mdfront.utils.logging import get_logger


logger = get_logger(__name__)


class ValidatorOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    strict: bool = False            # no type coercion when True


@lru_cache(maxsize=None)
def get_validator(options: ValidatorOptions = ValidatorOptions()) -> Callable[[Any], ExtractedDoc]:
    """Return the validator for options, building it once per distinct options value."""
    logger.debug("initializing validator %s", options.model_dump_json())
    adapter = TypeAdapter(ExtractedDoc)

    def validate(data: Any) -> ExtractedDoc:
        if isinstance(data, (str, bytes)):
            return adapter.validate_json(data, strict=options.strict)
        return adapter.validate_python(data, strict=options.strict)

    logger.debug("validator initialized")
    return validate

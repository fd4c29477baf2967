# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extractor seeding a document from an existing raw JSON document.

The merge is additive and one level deep: nested records already on the
target only receive the sub-fields they lack, mappings only receive the keys
they lack, and anything else is copied only when entirely unset.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from specforge.config import GeneratorSettings, get_settings
from specforge.extraction.context import ExtractionContext
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.logging import get_logger
from specforge.schema.models import Swagger

logger = get_logger(__name__)


class SwaggerSchemaExtractor:
    """
    Extractor merging a raw schema document into the target document.

    The source must be a string decoding to a JSON object whose signature
    field carries the expected version.
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def _decode(self, source: Any) -> dict[str, Any] | None:
        if not isinstance(source, (str, bytes)):
            return None
        try:
            data = json.loads(source)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        if str(data.get(self.settings.signature_field)) != self.settings.swagger_version:
            return None
        return data

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        if not isinstance(target, Swagger):
            return False
        return self._decode(source) is not None

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        data = self._decode(source) if isinstance(target, Swagger) else None
        if data is None:
            raise ExtractionImpossibleError(self, source, target)

        try:
            parsed = type(target).model_validate(data)
        except ValidationError as exc:
            raise ExtractionImpossibleError(
                self, source, target, reason=f"invalid document: {exc.error_count()} error(s)"
            ) from exc

        merged = self.merge(parsed, target)
        logger.debug("Merged existing document", fields=merged)

    def merge(self, parsed: BaseModel, target: BaseModel) -> list[str]:
        """
        Merge `parsed` into `target`.

        Returns:
            Names of the top-level fields that received values
        """
        merged: list[str] = []
        for name in type(parsed).model_fields:
            value = getattr(parsed, name)
            if value is None:
                continue

            current = getattr(target, name, None)
            if current is None:
                setattr(target, name, value)
                merged.append(name)
            elif isinstance(current, BaseModel) and isinstance(value, BaseModel):
                if self._fill_record(current, value):
                    merged.append(name)
            elif isinstance(current, dict) and isinstance(value, dict):
                missing = [key for key in value if key not in current]
                for key in missing:
                    current[key] = value[key]
                if missing:
                    merged.append(name)
        return merged

    def _fill_record(self, current: BaseModel, value: BaseModel) -> bool:
        filled = False
        for sub_name in type(value).model_fields:
            sub_value = getattr(value, sub_name)
            if sub_value is not None and getattr(current, sub_name, None) is None:
                setattr(current, sub_name, sub_value)
                filled = True
        return filled

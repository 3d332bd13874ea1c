from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, PlainSerializer, model_validator


def normalize_key(key: str) -> str:
    return str(key).replace("_", "").replace("-", "").lower()


def _lenient_decimal(value: Any) -> Any:
    """Numbers pass through, numeric strings are parsed, anything else is null"""
    if value is None or isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


# Decimals go out as JSON numbers rather than strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
LenientMoney = Annotated[Optional[Money], BeforeValidator(_lenient_decimal)]


class EntityPayload(BaseModel):
    """Request body bound to fields case-insensitively.

    ``cmdId``, ``CmdId`` and ``cmd_id`` all land in ``cmd_id``; unknown keys
    are dropped.
    """

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup = {normalize_key(name): name for name in cls.model_fields}
        matched = {}
        for key, value in data.items():
            field = lookup.get(normalize_key(key))
            if field is not None:
                matched[field] = value
        return matched


class AuditPayload(EntityPayload):
    action_by: Optional[str] = None


class AuditResponse(BaseModel):
    id: int
    action_date: Optional[datetime] = None
    action_by: Optional[str] = None
    action: Optional[str] = None
    is_deleted: Optional[bool] = None

    class Config:
        from_attributes = True

"""Response payloads serialized with Marshmallow."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from marshmallow import Schema, fields, post_dump


@dataclass
class VisitResponse:
    message: str = ""
    visits: int = 0
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: Exception) -> "VisitResponse":
        return cls(error=str(error))


class VisitResponseSchema(Schema):
    """Schema for the JSON body returned by the root endpoint.

    Failed responses carry only `error`; successful ones only
    `message` and `visits`.
    """

    message = fields.Str()
    visits = fields.Int()
    error = fields.Str(allow_none=True)

    @post_dump(pass_original=True)
    def shape_by_outcome(self, data: Dict[str, Any], original: VisitResponse, **kwargs) -> Dict[str, Any]:
        if original.error is not None:
            return {'error': data['error']}
        data.pop('error', None)
        return data


visit_response_schema = VisitResponseSchema()

"""Turn multipart, urlencoded or JSON request bodies into a plain ``Submission``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from starlette.datastructures import UploadFile
from starlette.requests import Request

from ..errors import ValidationError
from ..storage import IncomingFile

_FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@dataclass(slots=True)
class Submission:
    """Text fields plus optional binary attachments, independent of the transport."""

    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, IncomingFile] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        return self.fields.get(name)

    def file(self, name: str) -> IncomingFile | None:
        upload = self.files.get(name)
        if upload is None or upload.is_empty:
            return None
        return upload


def _coerce_json_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


async def read_submission(request: Request) -> Submission:
    """Parse the request body according to its content type."""
    content_type = request.headers.get("content-type", "").lower()
    submission = Submission()

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError("Malformed JSON body.") from exc
        if not isinstance(payload, dict):
            raise ValidationError("JSON body must be an object.")
        for key, value in payload.items():
            if value is not None:
                submission.fields[key] = _coerce_json_value(value)
        return submission

    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        try:
            for key, value in form.multi_items():
                if isinstance(value, UploadFile):
                    submission.files[key] = IncomingFile(
                        filename=value.filename or "",
                        content=await value.read(),
                        content_type=value.content_type,
                    )
                else:
                    submission.fields[key] = value
        finally:
            await form.close()

    return submission


__all__ = ["Submission", "read_submission"]

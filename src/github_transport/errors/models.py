"""GitHub client error payload models.

See: https://docs.github.com/en/rest/using-the-rest-api/troubleshooting-the-rest-api
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """One entry of the ``errors`` list in a 422 response."""

    resource: str | None = None
    field: str | None = None
    code: str | None = None  # missing, missing_field, invalid, already_exists, unprocessable, custom
    message: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "FieldError":
        # GitHub occasionally sends bare strings in the errors list
        if isinstance(data, str):
            return cls(message=data)
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object for a field error, got {type(data).__name__}")
        return cls(
            resource=_optional_str(data, "resource"),
            field=_optional_str(data, "field"),
            code=_optional_str(data, "code"),
            message=_optional_str(data, "message"),
        )

    def describe(self) -> str:
        if self.code == "custom" or self.resource is None:
            return self.message or self.code or "unknown error"
        text = f"{self.resource}.{self.field}: {self.code}"
        return f"{text} ({self.message})" if self.message else text


@dataclass(frozen=True)
class ClientError:
    """Error body returned by the GitHub API for non-2xx responses.

    All fields are optional; ``ClientError()`` is the empty value used when a
    body cannot be parsed.
    """

    message: str | None = None
    documentation_url: str | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.message is None and self.documentation_url is None and not self.errors

    @classmethod
    def from_json(cls, data: Any) -> "ClientError":
        """Build from decoded JSON.

        Raises:
            TypeError: If the value does not match the error schema.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        raw_errors = data.get("errors") or []
        if not isinstance(raw_errors, list):
            raise TypeError("'errors' must be a list")
        return cls(
            message=_optional_str(data, "message"),
            documentation_url=_optional_str(data, "documentation_url"),
            errors=tuple(FieldError.from_json(item) for item in raw_errors),
        )

    def to_exception_message(self) -> str:
        lines = [self.message or "Unknown API error"]
        if self.documentation_url:
            lines.append(f"See: {self.documentation_url}")
        for error in self.errors:
            lines.append(f"  - {error.describe()}")
        return "\n".join(lines)


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")

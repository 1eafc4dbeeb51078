"""
Models for asset uploader.

Immutable dataclasses describing one run and one upload request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class UploadInputs:
    """Immutable inputs for one upload run."""
    upload_url: str
    asset_path: str
    token: str

    @classmethod
    def read(cls, source) -> "UploadInputs":
        """Read the three named inputs from a ``get(name)`` source."""
        return cls(
            upload_url=source.get("upload_url"),
            asset_path=source.get("asset_path"),
            token=source.get("token"),
        )


@dataclass(frozen=True)
class UploadRequest:
    """Immutable description of a single asset upload."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    method: str = "POST"

    @classmethod
    def for_asset(cls, url: str, size: int, token: str, body: Any) -> "UploadRequest":
        return cls(
            url=url,
            headers={
                "content-length": str(size),
                "content-type": OCTET_STREAM,
                "authorization": f"token {token}",
            },
            body=body,
        )

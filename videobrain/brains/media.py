"""
User-provided images as the pipeline sees them.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from videobrain.core.constants import ImageType
from videobrain.core.exceptions import RequestValidationError


@dataclass(frozen=True)
class ProvidedImage:
    """
    An image supplied with the request.

    `reference` is an opaque payload (URL or base64 data). The pipeline only
    forwards it to the execution stage and never inspects it.
    """
    id: str
    type: ImageType = ImageType.UNKNOWN
    description: Optional[str] = None
    reference: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise RequestValidationError("providedImages.id", "image id must be a non-empty string")
        if not isinstance(self.type, ImageType):
            raise RequestValidationError("providedImages.type", f"unknown image type: {self.type!r}")

    def metadata(self) -> 'ProvidedImage':
        """Copy without the reference payload."""
        return replace(self, reference=None)

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "type": self.type.value}
        if self.description is not None:
            data["description"] = self.description
        if self.reference is not None:
            data["reference"] = self.reference
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'ProvidedImage':
        try:
            image_type = ImageType(data.get('type', ImageType.UNKNOWN.value))
        except ValueError:
            raise RequestValidationError("providedImages.type", f"unknown image type: {data.get('type')!r}")
        return cls(
            id=data.get('id', ""),
            type=image_type,
            description=data.get('description'),
            reference=data.get('reference')
        )

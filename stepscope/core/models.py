"""Domain models for the stepscope reporting adapter.

The report vocabulary (statuses, severities, label and link types,
attachment types) is the one defined by allure-python-commons; this
module only adds the small value objects the core passes around.
"""

from dataclasses import dataclass

from allure_commons.types import AttachmentType

# Label names used by the facade that allure_commons.types.LabelType lacks.
OWNER = "owner"
LEAD = "lead"


def content_type_value(content_type: AttachmentType | str) -> str:
    """Normalise an attachment type to its MIME string.

    Unrecognised strings are passed through verbatim.
    """
    if isinstance(content_type, AttachmentType):
        return content_type.mime_type
    return content_type


def validate_label_name(name: str) -> None:
    if not name or not name.strip():
        raise ValueError("label name must be a non-empty string")


@dataclass(frozen=True)
class Label:
    """A name/value metadata pair destined for a test."""

    name: str
    value: str
    index: int | None = None  # call-site ordering hint, not sent to the model

    def __post_init__(self) -> None:
        """Validate label invariants on creation."""
        validate_label_name(self.name)


@dataclass(frozen=True)
class Link:
    """A named URL of a given allure_commons.types.LinkType."""

    url: str
    name: str
    type: str

    @classmethod
    def from_base(cls, base_url: str, name: str, link_type: str) -> "Link":
        """Build a link by appending an identifier to a base URL.

        An empty base URL leaves the identifier as the whole URL.
        """
        return cls(url=f"{base_url}{name}", name=name, type=link_type)


@dataclass(frozen=True)
class Attachment:
    """A named, typed blob of evidence waiting to be written."""

    name: str
    content: bytes | str
    type: AttachmentType | str = AttachmentType.TEXT

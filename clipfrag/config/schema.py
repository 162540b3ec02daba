"""Pydantic models for clipfrag configuration validation."""

from string import Formatter
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clipfrag.core.constants import DEFAULT_MAX_UNITS
from clipfrag.document.types import UnitKind
from clipfrag.fragment.types import OversizePolicy

# Supported unit names (UnitKind values)
UnitName = Literal["chars", "bytes"]

OversizePolicyName = Literal["force", "stall"]

TEMPLATE_FIELDS = frozenset({"source"})


def _check_template(template: str) -> str:
    """Reject templates that use placeholders other than {source}."""
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise ValueError(f"Malformed template {template!r}: {e}") from e
    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        if field_name not in TEMPLATE_FIELDS:
            raise ValueError(
                f"Unknown placeholder {{{field_name}}} in {template!r}; "
                f"allowed: {', '.join('{' + f + '}' for f in sorted(TEMPLATE_FIELDS))}"
            )
    return template


class MessagesConfig(BaseModel):
    """Text delivered around the document when it comes from a file.

    Example in config.json:
        "messages": {
            "header_template": "Below is {source}:\\n---\\n",
            "footer_template": "End of {source}.\\n"
        }
    """

    model_config = ConfigDict(extra="forbid")

    send_header: bool = True
    """Deliver the header before the first fragment."""

    header_template: str = "The following is the content of file: {source}\n---\n"
    """Header text; {source} is replaced by the input path."""

    footer_template: str = "That is the end of file: {source}\n"
    """Footer text offered after the last fragment."""

    generic_footer: str = "That is the end of the input data.\n"
    """Footer text used when there is no source name."""

    @field_validator("header_template", "footer_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        return _check_template(v)

    def header_for(self, source: str) -> str:
        return self.header_template.format(source=source)

    def footer_for(self, source: str | None) -> str:
        if source is None:
            return self.generic_footer
        return self.footer_template.format(source=source)


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "unit": "bytes",
            "max_units": 20000,
            "oversize_policy": "force",
            "messages": {"send_header": false}
        }
    """

    model_config = ConfigDict(extra="forbid")

    unit: UnitName = "chars"
    """Default unit when neither -c nor -b is given."""

    max_units: int = Field(default=DEFAULT_MAX_UNITS, gt=0)
    """Default fragment budget, in `unit`."""

    oversize_policy: OversizePolicyName = "force"
    """Handling of a single line larger than the budget (force or stall)."""

    messages: MessagesConfig = MessagesConfig()

    @property
    def unit_kind(self) -> UnitKind:
        return UnitKind(self.unit)

    @property
    def policy(self) -> OversizePolicy:
        return OversizePolicy(self.oversize_policy)

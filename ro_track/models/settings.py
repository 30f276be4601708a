"""Application settings model."""

from dataclasses import dataclass

PAYMENT_LINK_PLACEHOLDER = "[Your Payment Link - Please configure in Settings]"


@dataclass
class AppSettings:
    """User-level settings persisted next to the customer list."""

    payment_link: str | None = None

    @property
    def resolved_payment_link(self) -> str:
        """Payment link to render into messages."""
        return self.payment_link or PAYMENT_LINK_PLACEHOLDER

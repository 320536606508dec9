"""Services — channel-independent template operations."""

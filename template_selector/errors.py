"""Error kinds raised at the engine's call boundary.

"No fit" is never an error: it shows up as a low score, an empty
recommendation list or a ``None`` selection. Only call-contract
violations are raised.
"""


class TemplateSelectionError(Exception):
    """Base class for all template selection errors."""


class InvalidInput(TemplateSelectionError, ValueError):
    """Raised when the content item list cannot be analyzed (e.g. it is empty)."""


class UnknownBlockType(TemplateSelectionError, ValueError):
    def __init__(self, block_type):
        self.block_type = block_type
        super().__init__(f"Unknown block type: {block_type!r}")


class ManifestError(TemplateSelectionError):
    """Raised when a manifest or items document cannot be read or validated."""

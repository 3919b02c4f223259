"""
Exception classes for HCL Core.

Every error the package raises derives from HCLCoreError. Decode failures
carry the breadcrumb path of the node being decoded when they occurred, so
the first failure of a call can be reported without further context.
"""


class HCLCoreError(Exception):
    """Base class for all HCL Core errors."""


class ParseError(HCLCoreError):
    """Configuration text could not be turned into a tree."""


class DecodeError(HCLCoreError):
    """
    A tree node could not be decoded into its output slot.

    Params:
        path: Breadcrumb of the failing node, e.g. ``root.servers.0``
        message: Description of the failure
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ShapeMismatch(DecodeError):
    """The output's declared shape cannot accept the node's shape."""


class LiteralTypeMismatch(DecodeError):
    """A literal's type disagrees with the requested scalar type."""


class UnsupportedOutputShape(DecodeError):
    """The output's declared shape is not one the decoder handles."""


class InvalidMapKeyShape(DecodeError):
    """A mapping output is declared with non-string keys."""


class UnrecognizedNodeShape(DecodeError):
    """A node is none of the shapes the tree model defines."""

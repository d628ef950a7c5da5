"""Binary search over sorted sequences; see the ``binary`` module."""

__version__ = "0.1.0"
__all__ = ["binary"]
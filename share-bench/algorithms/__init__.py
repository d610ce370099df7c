"""
Copy phases for the share speed test.
"""

from .copy_phase import CopyPhase, WritePhase, ReadPhase

__all__ = ['CopyPhase', 'WritePhase', 'ReadPhase']

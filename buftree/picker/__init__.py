"""Public picker exports: the view state and its controller."""

from .controller import BufferPicker, BufferPickerDeps, CANNOT_DELETE_CURRENT, find_file_row_index
from .state import PickerState

__all__ = [
    "BufferPicker",
    "BufferPickerDeps",
    "CANNOT_DELETE_CURRENT",
    "PickerState",
    "find_file_row_index",
]

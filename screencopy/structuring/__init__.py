from screencopy.structuring.base import BaseCopyStructurer
from screencopy.structuring.factory import StructurerFactory
from screencopy.structuring.structurer import CopyStructurer

__all__ = ["BaseCopyStructurer", "CopyStructurer", "StructurerFactory"]

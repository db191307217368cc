from abc import ABC, abstractmethod

from screencopy.structuring.models import StructuringRequest


class BaseStructuringClient(ABC):
    """Provider seam for the structuring stage: one request in, raw JSON text out."""

    @abstractmethod
    def complete(self, request: StructuringRequest) -> str:
        """Send the request and return the provider's reply body.

        Raises:
            StructuringNetworkError: if the provider cannot be reached.
            StructuringError: if the provider replies without content.
        """

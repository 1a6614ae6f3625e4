from abc import ABC, abstractmethod


class CompletionBackend(ABC):
    """
    Abstract completion boundary.
    The message router must depend ONLY on this interface.
    """

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """
        Return the assistant's reply text for a prompt.

        Raises:
            CompletionError: any failure of the call
        """
        raise NotImplementedError

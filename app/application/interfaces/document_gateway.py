from abc import ABC, abstractmethod


class DocumentGateway(ABC):
    @abstractmethod
    async def has_approved_documents(self, user_id: int) -> bool:
        """
        True only when the Document Service confirms every required document
        of the user is approved. Any failure counts as not approved.
        """
        pass

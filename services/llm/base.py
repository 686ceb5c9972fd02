from abc import ABC, abstractmethod


class AdvisorError(Exception):
    """The advisory text generator could not produce an answer."""
    pass


class AdvisorClient(ABC):
    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> str: ...

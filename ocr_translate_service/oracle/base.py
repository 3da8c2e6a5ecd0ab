from abc import ABC, abstractmethod

from ocr_translate_service.dto.oracle_query import ImagePayload, OracleQuery


class VisionOracle(ABC):
    """Capability interface for the external multimodal model.

    Implementations take a prompt and an image and return the model's free
    text answer. They may raise anything, the orchestrator collapses all
    failures into a single `OracleError`.
    """

    @abstractmethod
    def evaluate(self, prompt: str, image: ImagePayload) -> str:
        ...

    def ask(self, query: OracleQuery) -> str:
        return self.evaluate(query.prompt, query.image)

"""Job base class.

Jobs are scheduled units of work. They take the context they run in and do
their work in ``run()``; failures of individual items are logged, never
returned.
"""

from abc import ABC, abstractmethod

from shared.context import Context


class Job(ABC):
    name: str = ""
    description: str = ""

    def __init__(self, context: Context):
        self.context = context

    def get_name(self) -> str:
        """Translated name of the job."""
        return self.context.translate("controller/jobs", self.name)

    def get_description(self) -> str:
        """Translated description of the job."""
        return self.context.translate("controller/jobs", self.description)

    @abstractmethod
    def run(self) -> None: ...

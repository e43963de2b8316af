"""
Agent base class
Common run() contract for the agents wrapping the domain engines.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Agent base class

    Each agent wraps one domain engine behind the same run() call:
    - input and output are checked before and after the engine runs
    - log lines name what the agent worked on (entry id or catalogue size)
    - errors are logged with that subject and re-raised
    """

    name: str = "BaseAgent"

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        Runs the agent.

        Args:
            input_data: agent input

        Returns:
            agent output
        """
        subject = self._describe(input_data)
        try:
            self._validate_input(input_data)
            self.logger.debug(f"{self.name} start: {subject}")

            result = self._process(input_data)

            self._validate_output(result)
            return result

        except Exception as e:
            self.logger.error(f"{self.name} failed on {subject}: {e}")
            raise

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """Engine call, implemented by subclasses"""

    def _describe(self, input_data: InputT) -> str:
        """Short label of the input for log lines"""
        if input_data is None:
            return "no input"
        entry_id = getattr(input_data, "id", None)
        if entry_id is not None:
            return f"entry {entry_id}"
        if isinstance(input_data, (list, tuple)):
            return f"{len(input_data)} entries"
        return type(input_data).__name__

    def _validate_input(self, input_data: InputT) -> None:
        if input_data is None:
            raise ValueError(f"{self.name}: input is None.")

    def _validate_output(self, output_data: OutputT) -> None:
        if output_data is None:
            raise ValueError(f"{self.name}: output is None.")

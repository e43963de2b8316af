"""
Query Agent
Filters, searches and sorts the catalogue.
"""

from typing import Sequence

from .base import BaseAgent
from euroalt.schemas.alternative import Alternative
from euroalt.schemas.criteria import SearchCriteria
from euroalt.domain.query import QueryEngine


class QueryInput:
    """Query Agent input"""
    def __init__(self, catalogue: Sequence[Alternative], criteria: SearchCriteria):
        self.catalogue = catalogue
        self.criteria = criteria


class QueryAgent(BaseAgent[QueryInput, list[Alternative]]):
    """
    Query agent

    Runs the rule-based QueryEngine over the catalogue.
    """

    name = "QueryAgent"

    def __init__(self, engine: QueryEngine | None = None):
        super().__init__()
        self.engine = engine or QueryEngine()

    def _describe(self, input_data: QueryInput) -> str:
        if input_data is None:
            return "no input"
        sort_by = getattr(input_data.criteria, "sort_by", None)
        return f"{len(input_data.catalogue)} entries, sort={sort_by}"

    def _validate_input(self, input_data: QueryInput) -> None:
        super()._validate_input(input_data)
        if input_data.criteria is None:
            raise ValueError(f"{self.name}: criteria is None.")

    def _process(self, input_data: QueryInput) -> list[Alternative]:
        """Query execution"""
        return self.engine.query(
            catalogue=input_data.catalogue,
            criteria=input_data.criteria,
        )

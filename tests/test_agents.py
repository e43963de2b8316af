"""
EuroAlt tests - Agents
"""

import pytest
from loguru import logger

from euroalt.agents import QueryAgent, QueryInput, TrustScoreAgent, ValidationAgent
from euroalt.schemas.criteria import SearchCriteria

from factories import build_alternative


class TestAgents:

    def test_trust_score_agent(self):
        result = TrustScoreAgent().run(build_alternative(trust_score=6))

        assert result.score == 6
        assert result.source == "curated"

    def test_query_agent(self):
        catalogue = [build_alternative(id="a", pricing="paid"), build_alternative(id="b")]

        result = QueryAgent().run(
            QueryInput(catalogue=catalogue, criteria=SearchCriteria(pricing=["free"]))
        )

        assert [a.id for a in result] == ["b"]

    def test_query_agent_requires_criteria(self):
        with pytest.raises(ValueError, match="criteria is None"):
            QueryAgent().run(QueryInput(catalogue=[], criteria=None))

    def test_agent_rejects_missing_input(self):
        with pytest.raises(ValueError, match="input is None"):
            TrustScoreAgent().run(None)

    def test_validation_agent(self):
        report = ValidationAgent().run([build_alternative(id="x", replaces_us=["Zoom"])])

        assert not report.passed
        assert report.alternative_count == 1

    def test_failure_log_names_the_entry(self):
        class BrokenEngine:
            def resolve(self, alternative):
                raise RuntimeError("engine down")

        messages = []
        sink_id = logger.add(messages.append, level="ERROR", format="{message}")
        try:
            with pytest.raises(RuntimeError):
                TrustScoreAgent(engine=BrokenEngine()).run(build_alternative(id="tuta"))
        finally:
            logger.remove(sink_id)

        assert any("failed on entry tuta: engine down" in m for m in messages)

    def test_query_agent_describes_catalogue(self):
        agent = QueryAgent()
        data = QueryInput(catalogue=[build_alternative()], criteria=SearchCriteria(sort_by="name"))

        assert agent._describe(data) == "1 entries, sort=name"

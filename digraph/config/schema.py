"""Configuration schema definitions using Pydantic for validation."""

from pydantic import BaseModel, field_validator


class GraphConfig(BaseModel):
    """Configuration for creating a graph.

    Attributes:
        graph_id: Display label used in logs and summaries.
        synchronized: Whether ``digraph.new`` wraps the graph in a
            SynchronizedGraph.
    """

    graph_id: str = "default"
    synchronized: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("graph_id")
    @classmethod
    def validate_graph_id(cls, v: str) -> str:
        """Strip the label and reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError("graph_id must not be blank")
        return v

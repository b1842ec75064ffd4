"""City Connector library initialization."""

from .structures import DisjointSet
from .edges import DISCONNECTED
from .kruskal import minimum_cost_kruskal
from .prim import minimum_cost_prim
from .labels import CityIndex, index_cities, normalize_city
from .pipeline import ConnectionPlanner, PlannerConfig, PlannerResult, PlannerStats
from .runner import plan_file

__all__ = [
    "DisjointSet",
    "DISCONNECTED",
    "minimum_cost_kruskal",
    "minimum_cost_prim",
    "CityIndex",
    "index_cities",
    "normalize_city",
    "ConnectionPlanner",
    "PlannerConfig",
    "PlannerResult",
    "PlannerStats",
    "plan_file",
]

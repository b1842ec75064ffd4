"""Core pipeline for the City Connector library."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .edges import DISCONNECTED, Connection, validate_connections
from .kruskal import minimum_cost_kruskal
from .labels import CityIndex
from .prim import minimum_cost_prim

ALGORITHMS: Dict[str, Callable[[int, Sequence[Connection]], int]] = {
    "kruskal": minimum_cost_kruskal,
    "prim": minimum_cost_prim,
}

DEFAULT_NETWORK = "network"


@dataclass
class PlannerStats:
    """Summary metrics for a City Connector run."""

    total_networks: int
    connected_networks: int
    disconnected_networks: int
    total_connections: int
    self_loops_ignored: int
    total_cost: int
    runtime_seconds: float


@dataclass
class PlannerResult:
    """Result bundle returned by :class:ConnectionPlanner."""

    dataframe: pd.DataFrame
    costs: Dict[str, int]
    stats: PlannerStats


@dataclass
class PlannerConfig:
    """Configuration parameters for :class:ConnectionPlanner."""

    source_column: str = "city1"
    target_column: str = "city2"
    cost_column: str = "cost"
    network_column: str | None = None
    verify: bool = True
    algorithm: str = "kruskal"
    use_tqdm: bool = True
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm '{self.algorithm}', expected one of {sorted(ALGORITHMS)}")


class ConnectionPlanner:
    """Find the cheapest way to connect every city of one or more networks."""

    def __init__(self, config: PlannerConfig | None = None) -> None:
        self.config = config or PlannerConfig()

    def plan_network(self, n: int, connections: Sequence[Connection]) -> int:
        """Validate a single graph and return its minimum connection cost, or -1."""

        validate_connections(n, connections)
        return self._solve(n, connections)

    def plan(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> PlannerResult:
        """Solve every network in `dataframe`, optionally save the cost table, and return it."""

        required = [self.config.source_column, self.config.target_column, self.config.cost_column]
        if self.config.network_column is not None:
            required.append(self.config.network_column)
        for column in required:
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- City Connector Process Started ---")
            print("\n1. Grouping connections by network...")

        t0 = time.time()
        networks = self._split_networks(dataframe)
        if verbose:
            print(f"   Found {len(networks)} network(s) in {len(dataframe)} rows. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            mode = "kruskal + prim cross-check" if self.config.verify else self.config.algorithm
            print(f"2. Computing minimum spanning tree costs ({mode})...")

        iterator: Iterable[Tuple[str, pd.DataFrame]] = networks
        if networks and self.config.use_tqdm:
            iterator = tqdm(networks, desc="   Solving Networks", unit="network")

        rows: List[Dict[str, object]] = []
        for name, frame in iterator:
            rows.append(self._plan_frame(name, frame))
        table = pd.DataFrame(
            rows,
            columns=["network", "cities", "connections", "self_loops", "total_cost", "connected"],
        )
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        connected = int(table["connected"].sum()) if len(table) else 0
        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Networks processed: {len(table)}")
            print(f"   - Fully connectable: {connected}")
            for row in table.itertuples(index=False):
                outcome = row.total_cost if row.connected else "cannot be connected"
                print(f"     - {row.network} ({row.cities} cities): {outcome}")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(table, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = PlannerStats(
            total_networks=len(table),
            connected_networks=connected,
            disconnected_networks=len(table) - connected,
            total_connections=int(table["connections"].sum()) if len(table) else 0,
            self_loops_ignored=int(table["self_loops"].sum()) if len(table) else 0,
            total_cost=int(table.loc[table["connected"], "total_cost"].sum()) if len(table) else 0,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- City Connector Process Finished in {elapsed:.2f} seconds ---")

        costs = {str(name): int(cost) for name, cost in zip(table["network"], table["total_cost"])}
        return PlannerResult(dataframe=table, costs=costs, stats=summary)

    def _solve(self, n: int, connections: Sequence[Connection]) -> int:
        if not self.config.verify:
            return ALGORITHMS[self.config.algorithm](n, connections)
        kruskal_cost = minimum_cost_kruskal(n, connections)
        prim_cost = minimum_cost_prim(n, connections)
        if kruskal_cost != prim_cost:
            raise RuntimeError(
                f"Kruskal and Prim disagree on a {n}-city network: {kruskal_cost} != {prim_cost}"
            )
        return kruskal_cost

    def _split_networks(self, dataframe: pd.DataFrame) -> List[Tuple[str, pd.DataFrame]]:
        column = self.config.network_column
        if column is None:
            return [(DEFAULT_NETWORK, dataframe)]
        grouped = dataframe.groupby(column, sort=False, dropna=False)
        return [(str(name), frame) for name, frame in grouped]

    def _plan_frame(self, name: str, frame: pd.DataFrame) -> Dict[str, object]:
        cities = CityIndex()
        connections: List[Tuple[int, int, object]] = []
        sources = frame[self.config.source_column].tolist()
        targets = frame[self.config.target_column].tolist()
        costs = frame[self.config.cost_column].tolist()

        for source, target, cost in zip(sources, targets, costs):
            if _is_blank(source):
                raise ValueError(f"Network '{name}' has a row without a city in '{self.config.source_column}'")
            if _is_blank(target):
                # A row with no destination declares a city with no connections.
                cities.add(source)
                continue
            connections.append((cities.add(source), cities.add(target), cost))

        edges = _coerce_costs(name, connections)
        self_loops = sum(1 for source, target, _ in edges if source == target)
        total = self.plan_network(len(cities), edges)
        return {
            "network": name,
            "cities": len(cities),
            "connections": len(edges),
            "self_loops": self_loops,
            "total_cost": total,
            "connected": total != DISCONNECTED,
        }

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


def _is_blank(value: object) -> bool:
    if pd.isna(value):
        return True
    return isinstance(value, str) and not value.strip()


def _coerce_costs(name: str, connections: List[Tuple[int, int, object]]) -> List[Tuple[int, int, int]]:
    if not connections:
        return []
    raw = pd.to_numeric(pd.Series([cost for _, _, cost in connections], dtype=object), errors="coerce")
    if raw.isna().any():
        raise ValueError(f"Network '{name}' has a missing or non-numeric cost")
    if not pd.api.types.is_integer_dtype(raw):
        if (np.mod(raw.to_numpy(dtype=np.float64), 1) != 0).any():
            raise ValueError(f"Network '{name}' has a non-integer cost")
        raw = raw.astype(np.int64)
    return [(source, target, int(cost)) for (source, target, _), cost in zip(connections, raw.tolist())]


__all__ = [
    "ALGORITHMS",
    "ConnectionPlanner",
    "PlannerConfig",
    "PlannerResult",
    "PlannerStats",
]

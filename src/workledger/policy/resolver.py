"""Ledger policy — loads ledger_params.json and exposes every runtime
constant of the mock ledger as a typed method call.

No magic. No defaults. If a value is missing from the config, it fails loud.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

BUNDLED_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@dataclass(frozen=True)
class ContractLayout:
    """Storage created for a contract when it is deployed."""
    contract_name: str
    maps: tuple[str, ...]
    variables: tuple[str, ...]

    def variable_key(self, variable: str) -> str:
        """Namespaced variable name, e.g. ``skill-certification.admin``."""
        return f"{self.contract_name}.{variable}"


class LedgerPolicy:
    """Loads and resolves the mock ledger configuration.

    Usage:
        policy = LedgerPolicy.from_config_dir(Path("config"))
        low, high = policy.certification_level_bounds()
        layout = policy.contract_layout("skill-certification")
    """

    def __init__(self, params: dict[str, Any]) -> None:
        self._params = params
        self._validate()

    @classmethod
    def from_config_dir(cls, config_dir: Path) -> LedgerPolicy:
        """Load from a config directory holding ledger_params.json."""
        return cls(_load_json(config_dir / "ledger_params.json"))

    @classmethod
    def default(cls) -> LedgerPolicy:
        """Load the configuration bundled with the package."""
        return cls.from_config_dir(BUNDLED_CONFIG_DIR)

    def _validate(self) -> None:
        if "version" not in self._params:
            raise ValueError("ledger_params.json missing version")
        for section in ("clock", "certification", "contracts"):
            if section not in self._params:
                raise ValueError(f"ledger_params.json missing section: {section}")
        low, high = self.certification_level_bounds()
        if low > high:
            raise ValueError(
                f"Certification level bounds inverted: min {low} > max {high}"
            )

    @property
    def version(self) -> str:
        return self._params["version"]

    # ------------------------------------------------------------------
    # Logical clock
    # ------------------------------------------------------------------

    def initial_block_height(self) -> int:
        """Return the block height a fresh or reset ledger starts at."""
        return self._params["clock"]["initial_block_height"]

    # ------------------------------------------------------------------
    # Skill certification
    # ------------------------------------------------------------------

    def certification_level_bounds(self) -> tuple[int, int]:
        """Return (min_level, max_level), both inclusive."""
        c = self._params["certification"]
        return c["min_level"], c["max_level"]

    # ------------------------------------------------------------------
    # Contract storage layouts
    # ------------------------------------------------------------------

    def known_contracts(self) -> list[str]:
        """Return the names of all contracts that have a storage layout."""
        return sorted(self._params["contracts"])

    def contract_layout(self, contract_name: str) -> ContractLayout:
        """Get the maps and variables initialised on deployment."""
        raw = self._params["contracts"].get(contract_name)
        if raw is None:
            raise ValueError(f"Unknown contract: {contract_name}")
        return ContractLayout(
            contract_name=contract_name,
            maps=tuple(raw["maps"]),
            variables=tuple(raw["variables"]),
        )


def _load_json(path: Path) -> dict[str, Any]:
    """Load a JSON file or raise with clear path."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)

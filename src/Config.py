#!/usr/bin/env python3
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Hashable, Optional, Tuple
import yaml

from utils import FrequencyTableError, Table, normalize_table

# =================================================================================================================

DEFAULT_TABLE: Table = (("a", 5), ("b", 9), ("c", 12), ("d", 13), ("e", 16), ("f", 45))
DEFAULT_PRECISION = 4
MAX_PRECISION = 12

# =================================================================================================================

class ConfigError(ValueError):
    pass

@dataclass
class Config:
    table: Table = DEFAULT_TABLE
    precision: int = DEFAULT_PRECISION
    verbose: bool = False
    # None -> символы в порядке таблицы
    sequence: Optional[Tuple[Hashable, ...]] = field(default=None)

    # ---- loading & validation ----
    @staticmethod
    def load(path: str | Path) -> "Config":
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Top-level YAML must be a mapping/object.")

        cfg = Config(
            table=Config._parse_table(data.get("table")),
            precision=Config._parse_precision(data.get("precision", DEFAULT_PRECISION)),
            verbose=Config._parse_verbose(data.get("verbose", False)),
            sequence=Config._parse_sequence(data.get("sequence")),
        )
        cfg._validate()
        return cfg

    @staticmethod
    def _parse_table(d: Any) -> Table:
        if d is None:
            return DEFAULT_TABLE

        # mapping {a: 5} или список пар [[a, 5], ...]
        if isinstance(d, dict):
            pairs = list(d.items())
        elif isinstance(d, list):
            pairs = []
            for item in d:
                if not isinstance(item, (list, tuple)) or len(item) != 2:
                    raise ConfigError(f"table entries must be [symbol, frequency] pairs, got {item!r}")
                pairs.append(tuple(item))
        else:
            raise ConfigError("table must be a mapping or a list of [symbol, frequency] pairs.")

        # YAML может прочитать символ как число или bool: ключи приводятся к строкам
        pairs = [(str(sym), freq) for sym, freq in pairs]
        try:
            return normalize_table(pairs)
        except FrequencyTableError as e:
            raise ConfigError(f"table: {e}") from e

    @staticmethod
    def _parse_precision(v: Any) -> int:
        # bool - подкласс int, 2.9 не должно молча стать 2
        if isinstance(v, bool) or not isinstance(v, int):
            raise ConfigError(f"precision must be an integer, got {v!r}")
        return v

    @staticmethod
    def _parse_verbose(v: Any) -> bool:
        if not isinstance(v, bool):
            raise ConfigError(f"verbose must be true or false, got {v!r}")
        return v

    @staticmethod
    def _parse_sequence(v: Any) -> Optional[Tuple[Hashable, ...]]:
        if v is None:
            return None
        if isinstance(v, str):
            return tuple(v)
        if isinstance(v, list):
            return tuple(str(s) for s in v)
        raise ConfigError("sequence must be a string or a list of symbols.")

    def _validate(self) -> None:
        if not (0 <= self.precision <= MAX_PRECISION):
            raise ConfigError(f"precision must be in [0, {MAX_PRECISION}].")

    # ---- helpers used by cli ----
    def display_sequence(self) -> Tuple[Hashable, ...]:
        if self.sequence is not None:
            return self.sequence
        return tuple(sym for sym, _ in self.table)

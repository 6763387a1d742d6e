"""
Configuration for the calbuild.io module.

Defines FrameSettings, a frozen dataclass carrying runtime configuration for batch
resolution of polars DataFrames.

Source of truth
- calbuild.core.chrono registry for chronology ids ("ISO", "iso8601", ...).
- calbuild.core.resolve for the resolution kinds.

Import DAG discipline
- Depends only on stdlib and calbuild.core.
- Loaded settings are plain values; nothing here touches DataFrames.

Notes
- Precedence: environment > TOML > defaults.
- TOML search: ./calbuild.toml (top-level [io] table or direct keys), then
  ./pyproject.toml under [tool.calbuild.io].
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any, Literal, get_args

from calbuild.core.chrono import Chronology, chronology_of
from calbuild.core.errors import UnresolvableError

from .errors import IoConfigError

logger = logging.getLogger(__name__)

ResolveKind = Literal["date", "time", "datetime", "chrono_date"]
_KINDS: frozenset[str] = frozenset(get_args(ResolveKind))


@dataclass(frozen=True)
class FrameSettings:
    """
    Runtime settings for calbuild.io.frames.

    Attributes:
        chronology (str): Registered chronology id or calendar type used by the
            "chrono_date" kind.
        seed (str | None): ISO YYYY-MM-DD seed for the chronology fold; None means today.
        kind (Literal["date","time","datetime","chrono_date"]): What each row resolves to.
        output_column (str): Name of the appended result column.
        drop_fields (bool): Drop the consumed field columns from the output frame.

    Examples:
        >>> from calbuild.io import FrameSettings
        >>> FrameSettings(kind="datetime").kind
        'datetime'
    """

    chronology: str = "ISO"
    seed: str | None = None
    kind: ResolveKind = "date"
    output_column: str = "resolved"
    drop_fields: bool = False

    def chronology_impl(self) -> Chronology:
        """
        Look up the configured chronology.

        Raises:
            IoConfigError: If no chronology is registered under `chronology`.
        """
        try:
            return chronology_of(self.chronology)
        except UnresolvableError as exc:
            raise IoConfigError(str(exc)) from exc

    def seed_date(self) -> date | None:
        """
        Parse the configured seed.

        Raises:
            IoConfigError: If `seed` is set but not an ISO date.
        """
        if self.seed is None:
            return None
        try:
            return date.fromisoformat(self.seed)
        except ValueError as exc:
            raise IoConfigError(f"seed must be ISO YYYY-MM-DD, got {self.seed!r}") from exc

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: FrameSettings, cfg: dict[str, Any] | None) -> FrameSettings:
        """Apply a loose config mapping onto FrameSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "chronology" in cfg and isinstance(cfg["chronology"], str):
            s = replace(s, chronology=cfg["chronology"].strip())

        if "seed" in cfg:
            seed = cfg["seed"]
            if isinstance(seed, date):
                s = replace(s, seed=seed.isoformat())
            elif isinstance(seed, str):
                seed = seed.strip()
                s = replace(s, seed=None if seed.lower() in {"", "today", "now"} else seed)

        if "kind" in cfg and isinstance(cfg["kind"], str):
            kind = cfg["kind"].strip().lower()
            if kind in _KINDS:
                s = replace(s, kind=kind)  # type: ignore[arg-type]
            else:
                logger.warning("ignoring unknown resolve kind %r", cfg["kind"])

        if "output_column" in cfg and isinstance(cfg["output_column"], str):
            s = replace(s, output_column=cfg["output_column"])

        if "drop_fields" in cfg:
            s = replace(s, drop_fields=_bool(cfg["drop_fields"]))

        return s

    @classmethod
    def from_env(
        cls, base: FrameSettings | None = None, prefix: str = "CALBUILD_IO_"
    ) -> FrameSettings:
        """
        Build FrameSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - CALBUILD_IO_CHRONOLOGY
            - CALBUILD_IO_SEED ("today" clears it)
            - CALBUILD_IO_KIND ("date" | "time" | "datetime" | "chrono_date")
            - CALBUILD_IO_OUTPUT_COLUMN
            - CALBUILD_IO_DROP_FIELDS (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("chronology", "seed", "kind", "output_column", "drop_fields"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Build FrameSettings from a TOML file.

        Search order when `path` is None:
            1) ./calbuild.toml (with either top-level [io] or direct keys)
            2) ./pyproject.toml under [tool.calbuild.io]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any]:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise IoConfigError(f"invalid TOML in {p}: {exc}") from exc

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "calbuild.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("calbuild", {}).get("io", {}) if isinstance(tool, dict) else None
            elif "io" in data and isinstance(data["io"], dict):
                cfg = data["io"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded frame settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Load FrameSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (calbuild.toml,
                pyproject.toml).
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)

"""Configuration helpers for the fixed-size vector types."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

LOGGER = logging.getLogger(__name__)

INDEX_POLICIES = ("clamp", "raise")


# //1.- Resolve any accepted scalar spelling into a numeric numpy dtype.
def resolve_scalar(scalar) -> np.dtype:
    try:
        dtype = np.dtype(scalar)
    except TypeError as exc:
        raise TypeError(f"Unsupported scalar kind: {scalar!r}") from exc
    if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
        raise TypeError(f"Scalar kind must be an integer or floating type, got {dtype.name}")
    return dtype


# //2.- Define dataclass capturing the defaults every specialised vector inherits.
@dataclass(frozen=True)
class VectorSettings:
    """Defaults applied when a vector class is built without explicit options."""

    default_scalar: str = "float32"
    index_policy: str = "clamp"

    def __post_init__(self) -> None:
        if self.index_policy not in INDEX_POLICIES:
            raise ValueError(
                f"index_policy must be one of {', '.join(INDEX_POLICIES)}, got {self.index_policy!r}"
            )
        try:
            resolve_scalar(self.default_scalar)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def scalar_dtype(self) -> np.dtype:
        return resolve_scalar(self.default_scalar)

    # //3.- Build settings from a plain mapping, keeping defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, str]] = None) -> "VectorSettings":
        if not payload:
            return cls()
        return cls(
            default_scalar=str(payload.get("default_scalar", "float32")).strip(),
            index_policy=str(payload.get("index_policy", "clamp")).strip().lower(),
        )

    # //4.- Allow overriding defaults through environment variables.
    @classmethod
    def from_environment(cls, prefix: str = "FIXEDVEC") -> "VectorSettings":
        scalar = os.getenv(f"{prefix}_DEFAULT_SCALAR")
        policy = os.getenv(f"{prefix}_INDEX_POLICY")
        mapping: Dict[str, str] = {}
        if scalar is not None:
            mapping["default_scalar"] = scalar
        if policy is not None:
            mapping["index_policy"] = policy
        return cls.from_mapping(mapping)


# //5.- Canonical accessor used when the package is imported.
def load_vector_settings(
    mapping: Optional[Dict[str, str]] = None,
    *,
    env_prefix: str = "FIXEDVEC",
) -> VectorSettings:
    if mapping is not None:
        settings = VectorSettings.from_mapping(mapping)
    else:
        settings = VectorSettings.from_environment(prefix=env_prefix)
    LOGGER.debug(
        "Loaded vector settings: default_scalar=%s index_policy=%s",
        settings.default_scalar,
        settings.index_policy,
    )
    return settings

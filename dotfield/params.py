"""Parameter model shared by the field, the sampler and the renderers."""

from dataclasses import asdict, dataclass, fields
from dataclasses import field as dc_field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Canvas:
    width: float = 1.0
    height: float = 1.0


@dataclass(frozen=True)
class Singularity:
    cx: float = 0.5
    cy: float = 0.5
    falloff: float = 14.0  # bigger => tighter core
    strength: float = 1.0


@dataclass(frozen=True)
class Field:
    singularity: Singularity = dc_field(default_factory=Singularity)
    warp_amount: float = 0.05
    warp_frequency: float = 6.0


@dataclass(frozen=True)
class Distribution:
    dot_count: int = 35_000
    density_pow: float = 1.4  # bigger => stronger contrast between dense/sparse
    jitter: float = 0.002
    min_radius: float = 0.0011
    max_radius: float = 0.0028
    fixed_radius: Optional[float] = None


@dataclass(frozen=True)
class Render:
    """Hints for renderers only; the sampler never reads these."""

    invert: bool = False
    threshold: Optional[float] = None


@dataclass(frozen=True)
class Params:
    seed: int = 1
    canvas: Canvas = dc_field(default_factory=Canvas)
    field: Field = dc_field(default_factory=Field)
    distribution: Distribution = dc_field(default_factory=Distribution)
    render: Render = dc_field(default_factory=Render)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Params":
        """
        Build Params from a nested mapping (e.g. a TOML table).
        Missing keys keep their defaults; unknown keys raise ValueError.
        """
        return _build(cls, data, "params")


_NESTED = {
    (Params, "canvas"): Canvas,
    (Params, "field"): Field,
    (Params, "distribution"): Distribution,
    (Params, "render"): Render,
    (Field, "singularity"): Singularity,
}

_OPTIONAL = {"fixed_radius", "threshold"}


def _build(cls, data: Mapping[str, Any], path: str):
    if not isinstance(data, Mapping):
        raise TypeError(f"[{path}] must be a table, got {type(data).__name__}")

    known = {f.name for f in fields(cls)}
    unknown = set(data.keys()) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in [{path}]: {sorted(unknown)}. Expected: {sorted(known)}"
        )

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        nested = _NESTED.get((cls, f.name))
        if nested is not None:
            kwargs[f.name] = _build(nested, value, f"{path}.{f.name}")
        else:
            kwargs[f.name] = _coerce(f.name, value, path)
    return cls(**kwargs)


def _coerce(name: str, value: Any, path: str) -> Any:
    if value is None:
        if name in _OPTIONAL:
            return None
        raise ValueError(f"[{path}].{name} must not be empty")
    if name in ("seed", "dot_count"):
        return int(value)
    if name == "invert":
        if not isinstance(value, bool):
            raise TypeError(f"[{path}].invert must be a boolean")
        return value
    return float(value)

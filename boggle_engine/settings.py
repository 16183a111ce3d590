import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0
    PRUNE: bool = True

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    elif isinstance(current, int):
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return int(value)
    elif isinstance(current, float):
        return float(value)
    elif isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed while the service runs
EDITABLE_FIELDS = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "PRUNE": bool,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``; return errors keyed by field name.

    Valid fields are applied even when others in the same call fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "field is not editable"
            else:
                errors[name] = "unknown field"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
            continue
        if name == "MIN_WORD_LENGTH" and coerced < 1:
            errors[name] = "must be >= 1"
            continue
        if name == "MAX_RESULTS" and coerced < 0:
            errors[name] = "must be >= 0"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()

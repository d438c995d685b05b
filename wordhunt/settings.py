import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 50

    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _convert(env_val, type(getattr(self, fld))))


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}


def _convert(value, target: type):
    if issubclass(target, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        raise ValueError(f"cannot interpret {value!r} as bool")
    if issubclass(target, Path):
        return Path(value)
    if issubclass(target, int):
        if isinstance(value, bool):
            raise ValueError(f"cannot interpret {value!r} as int")
        return int(value)
    if issubclass(target, float):
        return float(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply runtime updates to editable fields.

    Valid fields are applied even when others fail; returns a mapping of
    field name to error message for the ones that were rejected.
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
            converted = _convert(value, EDITABLE_FIELDS[name])
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if isinstance(converted, int) and not isinstance(converted, bool) and converted < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, converted)
    return errors


settings = Settings()

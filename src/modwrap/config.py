import os

from pydantic import BaseModel, field_validator

from modwrap.core.conventions import AMD, normalize_convention

STDOUT = "stdout"

_DEFAULT_EXTENSIONS = ".js"


class Settings(BaseModel):
    default_convention: str = AMD
    source_suffixes: tuple[str, ...] = (_DEFAULT_EXTENSIONS,)

    @field_validator("default_convention")
    @classmethod
    def _check_convention(cls, value: str) -> str:
        return normalize_convention(value)

    @field_validator("source_suffixes", mode="before")
    @classmethod
    def _normalize_suffixes(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list | tuple):
            suffixes = [str(s).strip().lower() for s in value if str(s).strip()]
            return tuple(s if s.startswith(".") else f".{s}" for s in suffixes) or (_DEFAULT_EXTENSIONS,)
        return value


class CompileOptions(BaseModel):
    """Selectable configuration of one compile run."""

    input: str | None = None
    output: str = STDOUT
    type: str = AMD
    code: str | None = None

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        return normalize_convention(value)


def get_settings() -> Settings:
    return Settings(
        default_convention=os.getenv("MODWRAP_TYPE", AMD),
        source_suffixes=os.getenv("MODWRAP_EXTENSIONS", _DEFAULT_EXTENSIONS),
    )

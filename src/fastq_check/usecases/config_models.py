from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; unknown keys fail fast.


class QualityConfig(BaseModel):
    # Strict mode enables the quality code range rule (Phred+33 by default).
    model_config = ConfigDict(extra="forbid")
    strict: bool = False
    min_code: int = Field(default=33, ge=0, le=255, validation_alias=AliasChoices("min", "min_code"))
    max_code: int = Field(default=126, ge=0, le=255, validation_alias=AliasChoices("max", "max_code"))

    @model_validator(mode="after")
    def _ordered_range(self) -> QualityConfig:
        if self.min_code > self.max_code:
            raise ValueError("quality.min must not exceed quality.max")
        return self


class InputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    encoding: str = "utf-8"
    decode_errors: Literal["strict", "replace"] = "strict"


class OutputConfig(BaseModel):
    # file_path defaults to "<input>.errors.txt" when left unset.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file_path", "file"))
    encoding: str = "utf-8"


class ParallelConfig(BaseModel):
    # workers == 1 selects the sequential driver.
    model_config = ConfigDict(extra="forbid")
    workers: int = Field(default=1, ge=1)
    partition_records: int = Field(default=10_000, ge=1)
    queue_depth: int = Field(default=4, ge=1)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True
    level: Literal["debug", "info", "warning", "error"] = "warning"
    sink: Literal["stderr", "jsonl"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    quality: QualityConfig = Field(default_factory=QualityConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

"""
Чтение config.yaml → строго типизированные dataclass-ы.
Сторонние слои получают уже проверенные значения, никакого dict-фри-стайла.
Отсутствующие секции и поля берут значения по умолчанию модели.
"""

from dataclasses import dataclass, field
from pathlib import Path
from datetime import datetime
from typing import Dict, Any
import yaml
from dateutil.parser import isoparse

from ..domain import (CapacityParams, InvalidConfiguration, PRESETS, Schedule,
                      parse_schedule)


DEFAULT_START_DATE = "2026-01-05T09:00:00"


# ── dataclass-ы низкого уровня ────────────────────────────────────────────────
@dataclass(frozen=True)
class WorkerConfig:
    id: str = "validator-worker"
    params: CapacityParams = field(default_factory=CapacityParams)


@dataclass(frozen=True)
class ValidationConfig:
    time_steps: int = 1000
    delta_time: float = 1.0
    mae_threshold: float = 0.001
    schedule: Schedule = PRESETS["validation_day"]


@dataclass(frozen=True)
class OutputConfig:
    log_dir: Path = Path("simlog")
    errors_csv: Path = Path("validation_errors.csv")
    batch_size: int = 5000


# ── конфиг верхнего уровня ────────────────────────────────────────────────────
@dataclass(frozen=True)
class SimulationConfig:
    start_date: datetime
    worker: WorkerConfig
    validation: ValidationConfig
    output: OutputConfig


# ── loader ────────────────────────────────────────────────────────────────────
def _subdict(src: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = src.get(key) or {}
    if not isinstance(section, dict):
        raise InvalidConfiguration(f"'{key}' section in config.yaml must be a mapping")
    return dict(section)


def _worker(raw: Dict[str, Any]) -> WorkerConfig:
    sub = _subdict(raw, "worker")
    worker_id = str(sub.pop("id", WorkerConfig.id))
    return WorkerConfig(id=worker_id, params=CapacityParams(**sub))


def _validation(raw: Dict[str, Any]) -> ValidationConfig:
    sub = _subdict(raw, "validation")
    if "schedule" in sub:
        sub["schedule"] = parse_schedule(sub["schedule"] or ())
    return ValidationConfig(**sub)


def _output(raw: Dict[str, Any]) -> OutputConfig:
    sub = _subdict(raw, "output")
    for key in ("log_dir", "errors_csv"):
        if key in sub:
            sub[key] = Path(sub[key])
    return OutputConfig(**sub)


def load_conf(raw: Dict[str, Any] | str | Path) -> SimulationConfig:
    """
    Принимает либо уже-считанный dict, либо путь/yaml-строку.
    Возвращает SimulationConfig c проверенными типами.
    """
    if isinstance(raw, (str, Path)):
        raw = yaml.safe_load(Path(raw).read_text() if isinstance(raw, Path) else raw)
    raw = raw or {}
    if not isinstance(raw, dict):
        raise InvalidConfiguration("config.yaml must contain a mapping at top level")

    start = raw.get("start_date", DEFAULT_START_DATE)
    cfg = SimulationConfig(
        start_date=start if isinstance(start, datetime) else isoparse(str(start)),
        worker=_worker(raw),
        validation=_validation(raw),
        output=_output(raw),
    )
    _validate(cfg)
    return cfg


# ── валидация прогона (параметры модели проверяет сам CapacityParams) ─────────
def _validate(cfg: SimulationConfig) -> None:
    v = cfg.validation
    if v.time_steps <= 0:
        raise InvalidConfiguration("time_steps must be > 0")
    if v.delta_time <= 0:
        raise InvalidConfiguration("delta_time must be > 0")
    if v.mae_threshold <= 0:
        raise InvalidConfiguration("mae_threshold must be > 0")
    if not v.schedule:
        raise InvalidConfiguration("validation schedule must not be empty")
    if cfg.output.batch_size <= 0:
        raise InvalidConfiguration("batch_size must be > 0")

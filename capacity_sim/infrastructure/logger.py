"""
Неблокирующий Parquet-логер: SimPy-процесс читает снимки тиков из Store
и пакетами пишет на диск.  Для прогонов <10^6 строк хватит и памяти,
но лучше писать ин-крементно.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Dict, Any

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ..domain import StateSnapshot


# ── единый формат записи ──────────────────────────────────────────────────────
@dataclass
class TickRow:
    sim_time: float            # минуты от T0, конец тика
    worker_id: str
    capacity: float
    fatigue: float
    performance: float
    state: str                 # optimal / degraded / critical / shutdown
    is_working: bool
    session: int
    session_time: float
    time_in_critical_zone: float
    emergency_shutdowns: int

    @classmethod
    def from_snapshot(cls, snap: StateSnapshot) -> "TickRow":
        return cls(
            sim_time=snap.time,
            worker_id=snap.worker_id,
            capacity=snap.capacity,
            fatigue=snap.fatigue,
            performance=snap.performance_multiplier,
            state=snap.state.value,
            is_working=snap.is_working,
            session=snap.current_session,
            session_time=snap.session_time,
            time_in_critical_zone=snap.time_in_critical_zone,
            emergency_shutdowns=snap.emergency_shutdowns,
        )


class ParquetLogger:
    """
    Фоновый процесс SimPy::  done_q → batch → parquet.
    Путь <root>/events-000.parquet, 001, 002, …
    """

    def __init__(self, root: Path, batch_size: int = 5000) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.batch_size = batch_size
        self._buffer: List[Dict[str, Any]] = []
        self._file_no = 0
        self._schema = pa.schema([
            ("sim_time", pa.float64()),
            ("worker_id", pa.string()),
            ("capacity", pa.float64()),
            ("fatigue", pa.float64()),
            ("performance", pa.float64()),
            ("state", pa.string()),
            ("is_working", pa.bool_()),
            ("session", pa.int32()),
            ("session_time", pa.float64()),
            ("time_in_critical_zone", pa.float64()),
            ("emergency_shutdowns", pa.int32()),
        ])

    # SimPy process — запускается из simulation.shift.run_schedule
    def collect(self, done_q, trace: List[StateSnapshot] | None = None):
        """Coroutine: получает снимки, складывает, пишет партиями."""
        while True:
            snap: StateSnapshot = yield done_q.get()
            if trace is not None:
                trace.append(snap)
            self.record(snap)

    def record(self, snap: StateSnapshot) -> None:
        self._buffer.append(asdict(TickRow.from_snapshot(snap)))
        if len(self._buffer) >= self.batch_size:
            self._flush()

    # ── API для пост-анализа ───────────────────────────────────────────────────
    def to_dataframe(self) -> pd.DataFrame:
        """Читает все parquet-файлы + хвостовой buffer → pandas DF."""
        self._flush()  # финальный дроп

        frames = [
            pq.read_table(path).to_pandas()
            for path in sorted(self.root.glob("events-*.parquet"))
        ]
        return pd.concat(frames, ignore_index=True) if frames else pd.DataFrame()

    # ── внутреннее ────────────────────────────────────────────────────────────
    def _flush(self) -> None:
        if not self._buffer:
            return
        batch = pa.Table.from_pylist(self._buffer, schema=self._schema)
        fname = self.root / f"events-{self._file_no:03d}.parquet"
        pq.write_table(batch, fname, compression="zstd")
        self._file_no += 1
        self._buffer.clear()


# ── табличные выгрузки ────────────────────────────────────────────────────────
def history_frame(snapshots: Iterable[StateSnapshot],
                  start_date: datetime | None = None) -> pd.DataFrame:
    """История тиков → DataFrame; с start_date добавляет колонку datetime."""
    df = pd.DataFrame([s.to_row() for s in snapshots])
    if start_date is not None and not df.empty:
        df["datetime"] = start_date + pd.to_timedelta(df["time"], unit="m")
    return df


def write_error_report(errors: pd.DataFrame, path: Path) -> Path:
    """Поточечные ошибки валидатора → CSV (8 знаков после запятой)."""
    path = Path(path)
    errors.to_csv(path, index=False, float_format="%.8f")
    return path

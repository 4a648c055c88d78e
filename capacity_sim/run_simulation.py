#!/usr/bin/env python
"""
Запуск симуляции смены.

Алгоритм:
1. Конфиг → dataclass (infrastructure.config)
2. CapacityModel по параметрам worker
3. SimPy-раннер ведёт работника по расписанию
4. ParquetLogger – сохраняет тики
5. После run() → сводка + сравнение готовых смен
"""

import sys
from pathlib import Path

from .infrastructure.config import load_conf
from .infrastructure.logger import ParquetLogger
from .simulation import run_schedule, compare_schedules
from .domain import CapacityModel, PRESETS


def main(cfg_path: str | Path = "config.yaml") -> None:
    conf = load_conf(Path(cfg_path))

    # 1. Доменный актор
    worker = CapacityModel(conf.worker.params, worker_id=conf.worker.id)

    # 2. Logger на краю
    logger = ParquetLogger(conf.output.log_dir, batch_size=conf.output.batch_size)

    # 3. Run!
    schedule = conf.validation.schedule
    print(f"⏳  Running {len(schedule)} segments for worker {worker.worker_id}…")
    run_schedule(worker, schedule, conf.validation.delta_time,
                 logger=logger, start_date=conf.start_date)
    print("✅  Simulation finished.")

    # 4. Post-processing
    df = logger.to_dataframe()
    if df.empty:
        print("❗  Empty log — что-то пошло не так.")
        return

    s = worker.summary()
    print(f"Average capacity:      {s.avg_capacity:.3f}")
    print(f"Average performance:   {s.avg_performance:.3f}")
    print(f"Minimum capacity:      {s.min_capacity:.3f}")
    print(f"Maximum fatigue:       {s.max_fatigue:.3f}")
    print(f"Time in critical zone: {s.time_in_critical_zone:g}")
    print(f"Emergency shutdowns:   {s.emergency_shutdowns}")
    print(f"Safety violation:      {'YES' if s.violated_min_capacity else 'NO'}")
    print(df.groupby("state")["sim_time"].count().rename("ticks").to_string())

    shifts = {k: PRESETS[k] for k in ("shift_8h", "shift_6h", "sprint_4h")}
    table = compare_schedules(conf.worker.params, shifts)
    print(table[["avg_capacity", "min_capacity", "time_in_critical_zone",
                 "violated_min_capacity"]].to_string(float_format="%.3f"))


if __name__ == "__main__":
    main(*sys.argv[1:2])

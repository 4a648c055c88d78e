#!/usr/bin/env python
"""
Проверка модели против чистой математики.

1. Golden data из замкнутых формул
2. Live-прогон CapacityModel по тому же расписанию
3. MAE / RMSE / max error → вердикт, гистограмма, CSV ошибок
Код выхода 1, если MAE ≥ порога.
"""

import sys
from pathlib import Path

from .infrastructure.config import load_conf
from .infrastructure.logger import write_error_report
from .validation import (run_validation, error_distribution, errors_frame,
                         sample_comparisons)


def main(cfg_path: str | Path = "config.yaml") -> int:
    conf = load_conf(Path(cfg_path))
    v = conf.validation

    print(f"🔬  Validating {v.time_steps:,} ticks "
          f"(λ={conf.worker.params.fatigue_rate}, μ={conf.worker.params.recovery_rate})…")
    result = run_validation(conf.worker.params, v, worker_id=conf.worker.id)
    st = result.stats

    print(f"Data points:            {st.data_points:,}")
    print(f"Mean absolute error:    {st.mae:.6f} (threshold: {result.threshold})")
    print(f"Root mean square error: {st.rmse:.6f}")
    print(f"Maximum error:          {st.max_error:.6f} at tick {st.max_error_tick}")
    print(f"Golden {result.golden_ms:.1f} ms, live {result.live_ms:.1f} ms")
    print("✅  VALIDATION PASSED" if result.passed else "❌  VALIDATION FAILED")

    print(sample_comparisons(result.golden, result.live).to_string(index=False))
    for b in error_distribution(st):
        print(f"{b.label:<18} | {b.count} ({b.share:.1%})")

    path = write_error_report(errors_frame(st), conf.output.errors_csv)
    print(f"📁  Error analysis exported to: {path}")
    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
